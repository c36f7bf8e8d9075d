"""
BookStore API — Record Route Handlers
======================================

What:  Builds the five CRUD routes for one Resource descriptor.
How:   `build_router(resource)` returns an APIRouter mounted at the resource's
       prefix. Handlers stay thin: read path and body, call RecordService,
       return its result. Errors are raised by the service and rendered by the
       global exception handlers registered in main.py.

Routes per resource (shown for /api/bookstores):
    GET    /api/bookstores/              list
    GET    /api/bookstores/{id}          get (200 null when absent)
    POST   /api/bookstores/add           add
    PUT    /api/bookstores/update/{id}   update (404 when absent)
    DELETE /api/bookstores/delete/{id}   delete (404 when absent)

Each call of build_router() creates an independent router; no routing state
is shared between resources.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore_api.database import get_db_session
from bookstore_api.resources import Resource
from bookstore_api.services.record_service import RecordService

# Error bodies are plain JSON strings ("Error: ...")
_ERROR_RESPONSES = {
    400: {"description": "Persistence error: \"Error: <details>\""},
}
_NOT_FOUND_RESPONSES = {
    **_ERROR_RESPONSES,
    404: {"description": "Record not found: \"Error: <Name> not found\""},
}


def build_router(resource: Resource) -> APIRouter:
    """Creates the CRUD router for one record kind."""
    router = APIRouter(prefix=resource.prefix, tags=[resource.tag])
    service = RecordService(resource)
    name = resource.name

    async def list_records(db: AsyncSession = Depends(get_db_session)):
        return await service.list_records(db)

    async def get_record(record_id: str, db: AsyncSession = Depends(get_db_session)):
        return await service.get_record(db, record_id)

    async def add_record(
        payload: Optional[Dict[str, Any]] = Body(default=None),
        db: AsyncSession = Depends(get_db_session),
    ) -> str:
        return await service.add_record(db, payload)

    async def update_record(
        record_id: str,
        payload: Optional[Dict[str, Any]] = Body(default=None),
        db: AsyncSession = Depends(get_db_session),
    ) -> str:
        return await service.update_record(db, record_id, payload)

    async def delete_record(record_id: str, db: AsyncSession = Depends(get_db_session)) -> str:
        return await service.delete_record(db, record_id)

    router.add_api_route(
        "/",
        list_records,
        methods=["GET"],
        response_model=List[resource.schema],
        responses=_ERROR_RESPONSES,
        summary=f"List all {name} records",
        name=f"list_{resource.tag.lower()}",
    )
    router.add_api_route(
        "/{record_id}",
        get_record,
        methods=["GET"],
        response_model=Optional[resource.schema],
        responses=_ERROR_RESPONSES,
        summary=f"Get a {name} by id (null when absent)",
        name=f"get_{resource.tag.lower()}",
    )
    router.add_api_route(
        "/add",
        add_record,
        methods=["POST"],
        response_model=str,
        responses=_ERROR_RESPONSES,
        summary=f"Add a {name}",
        name=f"add_{resource.tag.lower()}",
    )
    router.add_api_route(
        "/update/{record_id}",
        update_record,
        methods=["PUT"],
        response_model=str,
        responses=_NOT_FOUND_RESPONSES,
        summary=f"Overwrite every field of a {name}",
        name=f"update_{resource.tag.lower()}",
    )
    router.add_api_route(
        "/delete/{record_id}",
        delete_record,
        methods=["DELETE"],
        response_model=str,
        responses=_NOT_FOUND_RESPONSES,
        summary=f"Delete a {name}",
        name=f"delete_{resource.tag.lower()}",
    )
    return router
