import pytest
from fastapi.testclient import TestClient

from inventory_api.auth import create_access_token
from inventory_api.database import Database
from inventory_api.main import create_app


@pytest.fixture
def client():
    app = create_app(database_url="sqlite://")
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers():
    token = create_access_token({"sub": "test-client"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def db():
    database = Database("sqlite://")
    database.create_all()
    session = database.session()
    try:
        yield session
    finally:
        session.close()
        database.dispose()


@pytest.fixture
def supplier_payload():
    return {
        "supplierID": "SUP1",
        "supplierName": "A",
        "contactInfo": "x@y.com",
        "address": "1 St",
    }


@pytest.fixture
def transaction_payload():
    return {
        "transactionID": "TX1",
        "productID": "prod-1",
        "inventoryID": "inv-1",
        "orderID": "ord-1",
        "transactionType": "sale",
        "quantity": 2,
        "payment": 19.98,
    }


@pytest.fixture
def shipment_payload():
    return {
        "shipmentId": "SH1",
        "orderId": "ord-1",
        "shipmentMethod": "ground",
        "trackingNumber": "TRK123",
    }


@pytest.fixture
def inventory_payload():
    return {
        "name": "Widget",
        "description": "A small widget",
        "price": 9.99,
        "stockQuantity": 10,
        "categoryId": "cat-1",
        "supplierId": "sup-1",
    }
