"""
Resource descriptors.

Each descriptor carries everything the generic handler, gateway and router
need to serve one resource: its URL name, collection, label used in messages,
payload and read schemas, and the defaults the store assigns on creation.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, Type
from pydantic import BaseModel

from . import schemas


def utcnow_iso() -> str:
    return datetime.utcnow().isoformat()


@dataclass(frozen=True)
class Resource:
    name: str
    label: str
    schema: Type[BaseModel]
    read_schema: Type[BaseModel]
    defaults: Dict[str, Callable[[], Any]] = field(default_factory=dict)

    @property
    def collection(self) -> str:
        return self.name


INVENTORY = Resource(
    name="inventory",
    label="Item",
    schema=schemas.InventoryItemBase,
    read_schema=schemas.InventoryItem,
)

SUPPLIER = Resource(
    name="supplier",
    label="Supplier",
    schema=schemas.SupplierBase,
    read_schema=schemas.Supplier,
)

SHIPMENT = Resource(
    name="shipment",
    label="Shipment",
    schema=schemas.ShipmentBase,
    read_schema=schemas.Shipment,
    defaults={"shipmentDate": utcnow_iso},
)

TRANSACTION = Resource(
    name="transaction",
    label="Transaction",
    schema=schemas.TransactionBase,
    read_schema=schemas.Transaction,
    defaults={"transactionDate": utcnow_iso},
)

RESOURCES = (INVENTORY, SUPPLIER, SHIPMENT, TRANSACTION)
