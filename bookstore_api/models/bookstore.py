"""
BookStore API — BookStore SQLAlchemy Model
===========================================

What:  ORM model representing the `bookstores` table.
How:   Columns keep the wire names (Title, Author, Pages) so the table reads
       the same as the JSON the API exchanges.

Table Design:
    - UUID primary key (from RecordMixin), exposed as "_id"
    - Title, Author: required text
    - Pages: required integer
    No timestamps, no relationships.
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column, validates

from bookstore_api.database import Base
from bookstore_api.models.record import RecordMixin


class BookStore(RecordMixin, Base):
    """A book entry: title, author and page count."""

    __tablename__ = "bookstores"

    RECORD_NAME = "BookStore"
    FIELDS = {"Title": "title", "Author": "author", "Pages": "pages"}

    title: Mapped[str] = mapped_column("Title", Text, nullable=False)
    author: Mapped[str] = mapped_column("Author", Text, nullable=False)
    pages: Mapped[int] = mapped_column("Pages", Integer, nullable=False)

    @validates("title", "author")
    def _validate_text(self, key, value):
        return self.cast_text(key, value)

    @validates("pages")
    def _validate_pages(self, key, value):
        return self.cast_integer(key, value)

    def __repr__(self) -> str:
        return f"<BookStore(id={self.id}, Title='{self.title}')>"
