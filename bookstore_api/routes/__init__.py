# Routes package init
"""
BookStore API — API Routes Package
===================================

Route Inventory:
    - records.py: build_router(resource) → five CRUD routes per record kind,
                  mounted at /api/bookstores and /api/documents
    - health.py:  GET /health (service and database status)

Routes are THIN: they read the path and body, call RecordService and return
its result. Failure responses come from the exception handlers in main.py.
"""
