"""
BookStore API — Record Model Base
==================================

What:  Shared identity column and field-casting rules for every record model.
Why:   Required fields and type casting are enforced by the persistence layer,
       never by route handlers. SQLAlchemy `@validates` hooks run on every
       attribute assignment (construction and update alike), so a record can
       not reach the database with a missing or uncastable field.
How:   Models declare `FIELDS` (wire name → attribute name) and call
       `cast_text` / `cast_integer` from their validators. Failures raise
       RecordValidationError, which the record service reports as a 400.
"""

import uuid
from typing import Any, ClassVar, Dict

from sqlalchemy import Uuid
from sqlalchemy.orm import Mapped, mapped_column


class RecordValidationError(ValueError):
    """A field was missing or could not be cast to its declared type."""

    def __init__(self, record_name: str, path: str, reason: str):
        self.record_name = record_name
        self.path = path
        self.reason = reason
        super().__init__(f"{record_name} validation failed: {path}: {reason}")


class RecordMixin:
    """
    Identity plus field metadata shared by BookStore and Document.

    Class attributes set by each model:
        RECORD_NAME: Display name used in messages ("BookStore")
        FIELDS:      Ordered mapping of wire field name → ORM attribute name
    """

    RECORD_NAME: ClassVar[str] = "Record"
    FIELDS: ClassVar[Dict[str, str]] = {}

    # Database-assigned identity, exposed to clients as "_id"
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    @classmethod
    def field_path(cls, attribute: str) -> str:
        """Wire name for an ORM attribute, used in validation messages."""
        for path, attr in cls.FIELDS.items():
            if attr == attribute:
                return path
        return attribute

    def _required(self, key: str) -> RecordValidationError:
        path = self.field_path(key)
        return RecordValidationError(self.RECORD_NAME, path, f"Path `{path}` is required.")

    def _cast_failed(self, key: str, type_name: str, value: Any) -> RecordValidationError:
        path = self.field_path(key)
        return RecordValidationError(
            self.RECORD_NAME,
            path,
            f'Cast to {type_name} failed for value "{value}" '
            f'(type {type(value).__name__}) at path "{path}"',
        )

    def cast_text(self, key: str, value: Any) -> str:
        """Required text: strings pass, scalars are stringified, empty is missing."""
        if value is None:
            raise self._required(key)
        if isinstance(value, bool):
            value = "true" if value else "false"
        elif isinstance(value, (int, float)):
            value = str(value)
        elif not isinstance(value, str):
            raise self._cast_failed(key, "String", value)
        if value == "":
            raise self._required(key)
        return value

    def cast_integer(self, key: str, value: Any) -> int:
        """Required integer: ints pass, integral floats and numeric strings are cast."""
        if value is None or value == "":
            raise self._required(key)
        if isinstance(value, bool):
            raise self._cast_failed(key, "Integer", value)
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            if value.is_integer():
                return int(value)
            raise self._cast_failed(key, "Integer", value)
        if isinstance(value, str):
            try:
                number = float(value.strip())
            except ValueError:
                raise self._cast_failed(key, "Integer", value)
            if number.is_integer():
                return int(number)
        raise self._cast_failed(key, "Integer", value)
