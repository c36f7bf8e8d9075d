"""
BookStore API — Resource Descriptors
=====================================

What:  One descriptor per record kind, naming everything the generic CRUD
       service and router need to know about it.
Why:   BookStore and Document expose the same five operations and differ only
       in shape. Each gets its own descriptor instead of its own route code.
"""

from dataclasses import dataclass
from typing import Dict, Tuple, Type

from pydantic import BaseModel

from bookstore_api.database import Base
from bookstore_api.models.bookstore import BookStore
from bookstore_api.models.document import Document
from bookstore_api.schemas.records import BookStoreResponse, DocumentResponse


@dataclass(frozen=True)
class Resource:
    """
    Record-shape descriptor.

    Attributes:
        name:     Display name used in confirmation and error messages
        prefix:   URL prefix the resource's router is mounted at
        model:    ORM model class (must define FIELDS)
        schema:   Pydantic response model for a single record
        tag:      OpenAPI tag
    """

    name: str
    prefix: str
    model: Type[Base]
    schema: Type[BaseModel]
    tag: str

    @property
    def fields(self) -> Dict[str, str]:
        """Wire field name → ORM attribute name, in declaration order."""
        return self.model.FIELDS

    def message(self, action: str) -> str:
        """Confirmation text, e.g. "BookStore added!" or "Document deleted."."""
        return {
            "added": f"{self.name} added!",
            "updated": f"{self.name} updated!",
            "deleted": f"{self.name} deleted.",
        }[action]


BOOKSTORES = Resource(
    name="BookStore",
    prefix="/api/bookstores",
    model=BookStore,
    schema=BookStoreResponse,
    tag="BookStores",
)

DOCUMENTS = Resource(
    name="Document",
    prefix="/api/documents",
    model=Document,
    schema=DocumentResponse,
    tag="Documents",
)

RESOURCES: Tuple[Resource, ...] = (BOOKSTORES, DOCUMENTS)
