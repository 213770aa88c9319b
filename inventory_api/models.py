"""
SQLAlchemy ORM models for the Inventory API.

Every resource is stored as a document in a single table, partitioned by
collection name. The document body holds the validated resource fields.
"""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, JSON
from sqlalchemy.dialects.postgresql import JSONB
from .database import Base


class Document(Base):
    """
    Stored record of any resource collection.

    Attributes:
        seq (int): Primary key, insertion order of the document
        id (str): Public identifier, a 32 character hex UUID4 assigned on creation
        collection (str): Collection the document belongs to (e.g. "supplier")
        body (dict): Resource fields as validated by the resource schema
        created_at (datetime): Timestamp when the document was created
        updated_at (datetime): Timestamp of the last update
    """
    __tablename__ = "documents"

    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(32), unique=True, index=True, nullable=False)
    collection = Column(String(64), index=True, nullable=False)
    body = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False, default=dict)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    def to_record(self) -> dict:
        """Return the public representation of the document."""
        return {
            **self.body,
            "id": self.id,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
        }
