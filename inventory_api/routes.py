"""
Route table for the resource endpoints.

Every resource gets the same five routes under ``/api/<name>``, all behind
the bearer token gate:

    POST   /api/<name>        Create a record
    GET    /api/<name>        List all records
    GET    /api/<name>/{id}   Get a single record
    PUT    /api/<name>/{id}   Replace a record
    DELETE /api/<name>/{id}   Delete a record
"""
from typing import Any, List
from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from . import auth, schemas
from .database import get_db
from .handlers import ResourceHandler
from .resources import RESOURCES, Resource

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"description": "Invalid payload or store rejected the write"},
    status.HTTP_401_UNAUTHORIZED: {"description": "Missing or invalid bearer token"},
    status.HTTP_404_NOT_FOUND: {"model": schemas.Message, "description": "Record not found"},
}


def build_router(resource: Resource) -> APIRouter:
    """
    Build the CRUD router for one resource.

    Args:
        resource: Descriptor of the resource to serve

    Returns:
        APIRouter mounted at ``/api/<resource.name>``
    """
    handler = ResourceHandler(resource)
    router = APIRouter(
        prefix=f"/api/{resource.name}",
        tags=[resource.name],
        dependencies=[Depends(auth.get_current_client)],
        responses=ERROR_RESPONSES,
    )

    @router.post("", response_model=resource.read_schema, status_code=status.HTTP_201_CREATED)
    def create_record(payload: Any = Body(None), db: Session = Depends(get_db)):
        return handler.create(db, payload)

    @router.get("", response_model=List[resource.read_schema])
    def list_records(db: Session = Depends(get_db)):
        return handler.list(db)

    @router.get("/{record_id}", response_model=resource.read_schema)
    def get_record(record_id: str, db: Session = Depends(get_db)):
        return handler.get(db, record_id)

    @router.put("/{record_id}", response_model=resource.read_schema)
    def update_record(record_id: str, payload: Any = Body(None), db: Session = Depends(get_db)):
        return handler.update(db, record_id, payload)

    @router.delete("/{record_id}", response_model=schemas.Message)
    def delete_record(record_id: str, db: Session = Depends(get_db)):
        return handler.delete(db, record_id)

    return router


def build_routers() -> List[APIRouter]:
    return [build_router(resource) for resource in RESOURCES]
