"""
Generic request handling shared by every resource.

A ``ResourceHandler`` runs validation, calls the resource gateway and raises
the domain error matching each failure; the registered exception handlers
render those errors as HTTP responses.
"""
from typing import Any, Dict, List
from fastapi import status
from sqlalchemy.orm import Session

from .crud import DocumentGateway
from .errors import NotFoundError, PersistenceError
from .resources import Resource
from .validators import validate_payload


class ResourceHandler:
    """
    CRUD request handler bound to one resource descriptor.

    Store failures are reported as 400 on create and update and as 500 on
    list, read and delete.
    """

    def __init__(self, resource: Resource):
        self.resource = resource

    def gateway(self, db: Session) -> DocumentGateway:
        return DocumentGateway(db, self.resource)

    def _write_failed(self, exc: PersistenceError) -> PersistenceError:
        return PersistenceError(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    def create(self, db: Session, payload: Any) -> Dict[str, Any]:
        value = validate_payload(self.resource.schema, payload)
        try:
            return self.gateway(db).create(value)
        except PersistenceError as exc:
            raise self._write_failed(exc) from exc

    def list(self, db: Session) -> List[Dict[str, Any]]:
        return self.gateway(db).find_all()

    def get(self, db: Session, document_id: str) -> Dict[str, Any]:
        record = self.gateway(db).find_by_id(document_id)
        if record is None:
            raise NotFoundError(self.resource.label)
        return record

    def update(self, db: Session, document_id: str, payload: Any) -> Dict[str, Any]:
        value = validate_payload(self.resource.schema, payload)
        try:
            record = self.gateway(db).update_by_id(document_id, value)
        except PersistenceError as exc:
            raise self._write_failed(exc) from exc
        if record is None:
            raise NotFoundError(self.resource.label)
        return record

    def delete(self, db: Session, document_id: str) -> Dict[str, str]:
        if not self.gateway(db).delete_by_id(document_id):
            raise NotFoundError(self.resource.label)
        return {"message": f"{self.resource.label} deleted successfully"}
