"""
BookStore API — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the two failure kinds a request can hit.
Why:   Services raise them; global handlers in main.py turn them into the
       JSON string bodies clients expect ("Error: ...").
Who:   Raised by RecordService; caught by handlers registered in main.py.

Exception Hierarchy:
    BookstoreAPIError (base)
    ├── PersistenceError      → 400 Bad Request  ("Error: <original error>")
    └── RecordNotFoundError   → 404 Not Found    ("Error: <Resource> not found")
"""

from typing import Any, Dict, Optional


class BookstoreAPIError(Exception):
    """
    Base exception for all BookStore API errors.

    Attributes:
        message:  Text placed after "Error: " in the response body
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)

    @property
    def body(self) -> str:
        """Response body: the message prefixed the way clients pattern-match it."""
        return f"Error: {self.message}"


class PersistenceError(BookstoreAPIError):
    """
    Raised when the persistence layer rejects an operation.

    When:    Malformed identifier, record validation failure (missing or
             uncastable field), integrity error, lost connection.
    HTTP:    400 Bad Request

    The message is the string form of the original error, unchanged, so the
    client sees exactly what the database layer reported.
    """

    def __init__(
        self,
        original: BaseException,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["error_type"] = type(original).__name__
        super().__init__(message=str(original), context=ctx)
        self.original = original


class RecordNotFoundError(BookstoreAPIError):
    """
    Raised by update and delete when the identifier matches no record.

    HTTP:    404 Not Found

    Plain get-by-id does NOT raise this; it answers 200 with null.
    """

    def __init__(
        self,
        resource: str,
        record_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if record_id:
            ctx["record_id"] = record_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource
