"""
BookStore API — Pydantic Response Schemas
==========================================

What:  Pydantic models defining what the API returns for each record kind.
Why:   Records keep the wire shape clients already consume: the identifier is
       "_id" and Document timestamps are camelCase.
How:   Built from ORM objects (`from_attributes`); FastAPI serializes them by
       alias, so `id` goes out as "_id".

Request bodies are deliberately NOT modelled here: add/update read the raw
JSON object and leave required-field and type checks to the ORM models.
"""

import uuid
from datetime import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class BookStoreResponse(BaseModel):
    """
    What:  One BookStore record.
    Who:   GET /api/bookstores/ (array items) and GET /api/bookstores/{id}.
    """
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="_id",
        description="Record identifier",
    )
    Title: str = Field(validation_alias=AliasChoices("Title", "title"))
    Author: str = Field(validation_alias=AliasChoices("Author", "author"))
    Pages: int = Field(validation_alias=AliasChoices("Pages", "pages"))


class DocumentResponse(BaseModel):
    """
    What:  One Document record with its automatic timestamps.
    Who:   GET /api/documents/ (array items) and GET /api/documents/{id}.
    """
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID = Field(
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="_id",
        description="Record identifier",
    )
    text: str
    created_at: datetime = Field(
        validation_alias=AliasChoices("createdAt", "created_at"),
        serialization_alias="createdAt",
    )
    updated_at: datetime = Field(
        validation_alias=AliasChoices("updatedAt", "updated_at"),
        serialization_alias="updatedAt",
    )


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and container probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
