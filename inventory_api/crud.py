"""
CRUD (Create, Read, Update, Delete) operations for the Inventory API.

This module contains all database operations. A gateway is bound to one
resource collection; records are keyed by a generated hex UUID.
"""
import logging
import uuid
from datetime import datetime
from typing import Any, Dict, List, NoReturn, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from . import models
from .errors import PersistenceError
from .resources import Resource

logger = logging.getLogger(__name__)

# Keys assigned by the store; never taken from a payload
RESERVED_KEYS = ("id", "createdAt", "updatedAt")


def strip_reserved(value: Dict[str, Any]) -> Dict[str, Any]:
    return {key: item for key, item in value.items() if key not in RESERVED_KEYS}


def new_id() -> str:
    """Generate a fresh document identifier."""
    return uuid.uuid4().hex


def is_valid_id(document_id: str) -> bool:
    """Return True if ``document_id`` has the shape of a generated identifier."""
    if not isinstance(document_id, str) or len(document_id) != 32:
        return False
    try:
        return uuid.UUID(hex=document_id).hex == document_id
    except ValueError:
        return False


class DocumentGateway:
    """
    Persistence gateway for one resource collection.

    Args:
        db: Database session
        resource: Descriptor of the resource stored in the collection
    """

    def __init__(self, db: Session, resource: Resource):
        self.db = db
        self.resource = resource

    def _query(self):
        return self.db.query(models.Document).filter(models.Document.collection == self.resource.collection)

    def _get(self, document_id: str) -> Optional[models.Document]:
        if not is_valid_id(document_id):
            return None
        return self._query().filter(models.Document.id == document_id).first()

    def _fail(self, action: str, exc: SQLAlchemyError) -> NoReturn:
        self.db.rollback()
        logger.error(f"Failed to {action} {self.resource.collection} document: {exc}")
        raise PersistenceError(str(exc)) from exc

    def create(self, value: Dict[str, Any]) -> Dict[str, Any]:
        """
        Store a new record.

        Args:
            value: Normalized value produced by the resource validator

        Returns:
            Stored record, including its identifier and timestamps

        Raises:
            PersistenceError: if the store rejects the write
        """
        body = strip_reserved(value)
        for key, default in self.resource.defaults.items():
            if body.get(key) is None:
                body[key] = default()

        document = models.Document(id=new_id(), collection=self.resource.collection, body=body)
        try:
            self.db.add(document)
            self.db.commit()
            self.db.refresh(document)
        except SQLAlchemyError as exc:
            self._fail("create", exc)
        logger.info(f"Created {self.resource.collection} document {document.id}")
        return document.to_record()

    def find_all(self) -> List[Dict[str, Any]]:
        """Return every record of the collection in insertion order."""
        try:
            documents = self._query().order_by(models.Document.seq).all()
        except SQLAlchemyError as exc:
            self._fail("list", exc)
        return [document.to_record() for document in documents]

    def find_by_id(self, document_id: str) -> Optional[Dict[str, Any]]:
        """
        Retrieve a single record by identifier.

        Returns:
            The record, or None if no record has that identifier or the
            identifier is malformed
        """
        try:
            document = self._get(document_id)
        except SQLAlchemyError as exc:
            self._fail("read", exc)
        return document.to_record() if document is not None else None

    def update_by_id(self, document_id: str, value: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Replace the declared fields of an existing record.

        Fields absent from ``value`` keep their stored value. The identifier
        is never changed.

        Returns:
            Updated record or None if not found
        """
        try:
            document = self._get(document_id)
            if document is None:
                return None
            document.body = {**strip_reserved(document.body), **strip_reserved(value)}
            document.updated_at = datetime.utcnow()
            self.db.commit()
            self.db.refresh(document)
        except SQLAlchemyError as exc:
            self._fail("update", exc)
        logger.info(f"Updated {self.resource.collection} document {document_id}")
        return document.to_record()

    def delete_by_id(self, document_id: str) -> bool:
        """
        Delete a record.

        Returns:
            True if the record was deleted, False if not found
        """
        try:
            document = self._get(document_id)
            if document is None:
                return False
            self.db.delete(document)
            self.db.commit()
        except SQLAlchemyError as exc:
            self._fail("delete", exc)
        logger.info(f"Deleted {self.resource.collection} document {document_id}")
        return True
