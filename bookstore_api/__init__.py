"""
BookStore API — Application Package
====================================

A thin HTTP CRUD API over two record collections, bookstores and documents.

Architecture:

    ┌─────────────────────────────────────┐
    │   Routes (one router per Resource)  │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   RecordService (generic CRUD)      │  ← messages, not-found, errors
    ├─────────────────────────────────────┤
    │   Models & Schemas                  │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │   Database (async engine handle)    │  ← opened at startup, disposed at shutdown
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
