# Services package init
"""
BookStore API — Services Layer
===============================

Service Inventory:
    - RecordService: generic list/get/add/update/delete bound to one Resource

Services receive the request's database session on every call and raise
BookstoreAPIError subclasses; they know nothing about HTTP.
"""
