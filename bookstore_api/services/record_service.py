"""
BookStore API — Record Service (generic CRUD)
==============================================

What:  The five CRUD operations, written once and bound to a Resource descriptor.
Why:   BookStore and Document differ only in shape; the operations, messages
       and failure handling are identical.
How:   Each operation takes the request's AsyncSession, performs one read or
       one write, and commits explicitly. Any persistence fault is rolled
       back and re-raised as PersistenceError (→ 400). Update and delete raise
       RecordNotFoundError (→ 404) for unknown identifiers; get does not.

Operation summary:
    list_records    SELECT all                          → [record, ...]
    get_record      SELECT by id                        → record | None
    add_record      INSERT from body fields             → "<Name> added!"
    update_record   SELECT by id, overwrite, UPDATE     → "<Name> updated!"
    delete_record   SELECT by id, DELETE                → "<Name> deleted."

Concurrency:
    update_record is read-modify-write without locking. Two concurrent updates
    of the same record both succeed; the last commit wins.
"""

import logging
import uuid
from typing import Any, List, Mapping, NoReturn, Optional

from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore_api.exceptions import (
    BookstoreAPIError,
    PersistenceError,
    RecordNotFoundError,
)
from bookstore_api.resources import Resource

logger = logging.getLogger(__name__)


class IdentifierCastError(ValueError):
    """The path identifier is not a valid record identifier."""

    def __init__(self, value: Any, record_name: str):
        super().__init__(
            f'Cast to UUID failed for value "{value}" (type {type(value).__name__}) '
            f'at path "_id" for model "{record_name}"'
        )


class RecordService:
    """
    CRUD operations for one resource kind.

    Stateless apart from its descriptor; the session is passed into every
    call so each request keeps its own transaction.
    """

    def __init__(self, resource: Resource):
        self.resource = resource

    # ── Helpers ───────────────────────────────────────────────────────────

    def parse_id(self, record_id: str) -> uuid.UUID:
        """
        Converts the opaque path identifier into the database key.

        Raises:
            PersistenceError: Malformed identifier (→ 400)
        """
        try:
            return uuid.UUID(record_id)
        except (TypeError, ValueError, AttributeError):
            raise PersistenceError(
                IdentifierCastError(record_id, self.resource.name),
                context={"record_id": record_id},
            )

    def extract_fields(self, payload: Optional[Mapping[str, Any]]) -> dict:
        """
        Reads every declared field from the body, absent keys as None.

        Only declared fields are read; anything else in the body is ignored.
        """
        payload = payload or {}
        return {attr: payload.get(path) for path, attr in self.resource.fields.items()}

    def to_response(self, record) -> BaseModel:
        return self.resource.schema.model_validate(record)

    async def _fail(self, db: AsyncSession, error: Exception, operation: str) -> NoReturn:
        """Rolls the session back and re-raises the fault as PersistenceError."""
        try:
            await db.rollback()
        except Exception:
            logger.error("Rollback failed after %s %s", operation, self.resource.name)
        logger.warning(
            "%s %s failed: %s: %s",
            operation, self.resource.name, type(error).__name__, str(error),
        )
        raise PersistenceError(error, context={"operation": operation}) from error

    # ── Operations ────────────────────────────────────────────────────────

    async def list_records(self, db: AsyncSession) -> List[BaseModel]:
        """Returns every record of this kind; no partial results on failure."""
        try:
            result = await db.execute(select(self.resource.model))
            records = result.scalars().all()
            return [self.to_response(record) for record in records]
        except Exception as e:
            await self._fail(db, e, "list")

    async def get_record(self, db: AsyncSession, record_id: str) -> Optional[BaseModel]:
        """
        Returns the record, or None when no record has this identifier.

        An unknown identifier is not an error here; the route answers 200 null.
        """
        key = self.parse_id(record_id)
        try:
            record = await db.get(self.resource.model, key)
            if record is None:
                return None
            return self.to_response(record)
        except Exception as e:
            await self._fail(db, e, "get")

    async def add_record(self, db: AsyncSession, payload: Optional[Mapping[str, Any]]) -> str:
        """
        Persists a new record built verbatim from the body.

        Missing or uncastable fields are rejected by the model validators
        and surface as PersistenceError.
        """
        values = self.extract_fields(payload)
        try:
            record = self.resource.model(**values)
            db.add(record)
            await db.commit()
        except Exception as e:
            await self._fail(db, e, "add")
        logger.info("%s %s created", self.resource.name, record.id)
        return self.resource.message("added")

    async def update_record(
        self,
        db: AsyncSession,
        record_id: str,
        payload: Optional[Mapping[str, Any]],
    ) -> str:
        """
        Overwrites every field of an existing record from the body.

        Full overwrite, not merge: a key missing from the body is assigned
        None, which the model rejects for required fields.

        Raises:
            RecordNotFoundError: No record with this identifier (→ 404)
            PersistenceError:    Malformed id or rejected values (→ 400)
        """
        key = self.parse_id(record_id)
        values = self.extract_fields(payload)
        try:
            record = await db.get(self.resource.model, key)
            if record is None:
                raise RecordNotFoundError(self.resource.name, record_id)

            for attr, value in values.items():
                setattr(record, attr, value)
            await db.commit()
        except BookstoreAPIError:
            raise
        except Exception as e:
            await self._fail(db, e, "update")
        logger.info("%s %s updated", self.resource.name, record_id)
        return self.resource.message("updated")

    async def delete_record(self, db: AsyncSession, record_id: str) -> str:
        """
        Removes a record.

        Raises:
            RecordNotFoundError: No record with this identifier (→ 404)
            PersistenceError:    Malformed id or database fault (→ 400)
        """
        key = self.parse_id(record_id)
        try:
            record = await db.get(self.resource.model, key)
            if record is None:
                raise RecordNotFoundError(self.resource.name, record_id)

            await db.delete(record)
            await db.commit()
        except BookstoreAPIError:
            raise
        except Exception as e:
            await self._fail(db, e, "delete")
        logger.info("%s %s deleted", self.resource.name, record_id)
        return self.resource.message("deleted")
