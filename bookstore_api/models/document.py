"""
BookStore API — Document SQLAlchemy Model
==========================================

What:  ORM model representing the `documents` table.

Table Design:
    - UUID primary key (from RecordMixin), exposed as "_id"
    - text: required, unbounded TEXT
    - created_at / updated_at: maintained automatically (UTC), exposed as
      createdAt / updatedAt. updated_at is refreshed by SQLAlchemy's
      `onupdate` whenever an UPDATE is emitted for the row.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Text, func
from sqlalchemy.orm import Mapped, mapped_column, validates

from bookstore_api.database import Base
from bookstore_api.models.record import RecordMixin


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Document(RecordMixin, Base):
    """A free-text document with creation and modification timestamps."""

    __tablename__ = "documents"

    RECORD_NAME = "Document"
    FIELDS = {"text": "text"}

    text: Mapped[str] = mapped_column(Text, nullable=False)

    # ── Timestamps ────────────────────────────────────────────────────────
    # Stored with time zone; all values are UTC
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=func.now(),
    )

    @validates("text")
    def _validate_text(self, key, value):
        return self.cast_text(key, value)

    def __repr__(self) -> str:
        return f"<Document(id={self.id}, updated_at='{self.updated_at}')>"
