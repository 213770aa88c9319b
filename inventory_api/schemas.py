"""
Pydantic schemas for request/response validation in the Inventory API.

The ``*Base`` schemas are the field rules applied to incoming payloads; the
read schemas add the store-assigned attributes returned in responses.
"""
from datetime import datetime
from typing import Literal, Optional
from pydantic import BaseModel, Field

ShipmentStatus = Literal["pending", "shipped", "in transit", "delivered", "cancelled"]
TransactionType = Literal["purchase", "sale"]


class StoredRecord(BaseModel):
    """Attributes assigned by the document store."""
    id: str
    createdAt: datetime
    updatedAt: datetime


class InventoryItemBase(BaseModel):
    """Schema for creating or replacing an inventory item."""
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=500)
    price: float = Field(..., ge=0, strict=True, allow_inf_nan=False, description="Unit price")
    stockQuantity: int = Field(..., ge=0, strict=True, description="Units currently in stock")
    categoryId: str = Field(..., min_length=1, description="Category identifier")
    supplierId: str = Field(..., min_length=1, description="Supplier identifier")


class InventoryItem(InventoryItemBase, StoredRecord):
    pass


class SupplierBase(BaseModel):
    """Schema for creating or replacing a supplier."""
    supplierID: str = Field(..., min_length=1, description="Business key of the supplier")
    supplierName: str = Field(..., min_length=1, max_length=100)
    contactInfo: str = Field(..., min_length=1, max_length=100)
    address: str = Field(..., min_length=1, max_length=200)


class Supplier(SupplierBase, StoredRecord):
    pass


class ShipmentBase(BaseModel):
    """
    Schema for creating or replacing a shipment.

    ``shipmentDate`` defaults to the creation time when omitted. ``status``
    can be set to any allowed value on update; transitions are not checked.
    """
    shipmentId: str = Field(..., min_length=1)
    orderId: str = Field(..., min_length=1, description="Order identifier")
    shipmentDate: Optional[datetime] = None
    shipmentMethod: str = Field(..., min_length=1)
    trackingNumber: str = Field(..., min_length=1)
    status: ShipmentStatus = "pending"


class Shipment(ShipmentBase, StoredRecord):
    pass


class TransactionBase(BaseModel):
    """
    Schema for creating or replacing a transaction.

    Product, inventory and order references are plain identifiers and are not
    checked against the other collections. ``transactionDate`` defaults to the
    creation time when omitted.
    """
    transactionID: str = Field(..., min_length=1)
    productID: str = Field(..., min_length=1, description="Product identifier")
    inventoryID: str = Field(..., min_length=1, description="Inventory item identifier")
    orderID: str = Field(..., min_length=1, description="Order identifier")
    transactionType: TransactionType
    transactionDate: Optional[datetime] = None
    quantity: int = Field(..., ge=1, strict=True)
    payment: float = Field(..., strict=True, allow_inf_nan=False)


class Transaction(TransactionBase, StoredRecord):
    pass


class TokenRequest(BaseModel):
    """Schema for requesting an access token."""
    username: str
    password: str


class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"


class Message(BaseModel):
    """Envelope used for confirmations and errors."""
    message: str
