import pytest

from inventory_api import schemas
from inventory_api.errors import ValidationError
from inventory_api.validators import validate_payload


def test_valid_supplier_keeps_declared_fields_only(supplier_payload):
    value = validate_payload(schemas.SupplierBase, {**supplier_payload, "extra": "dropped", "id": "x"})
    assert value == supplier_payload


def test_missing_fields_are_all_reported():
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schemas.SupplierBase, {"supplierID": "SUP1"})
    assert exc_info.value.messages == [
        '"supplierName" is required',
        '"contactInfo" is required',
        '"address" is required',
    ]


def test_string_max_length(supplier_payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schemas.SupplierBase, {**supplier_payload, "address": "x" * 201})
    assert exc_info.value.messages == ['"address" length must be less than or equal to 200 characters long']


def test_empty_string_rejected(supplier_payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schemas.SupplierBase, {**supplier_payload, "supplierName": ""})
    assert exc_info.value.messages == ['"supplierName" is not allowed to be empty']


def test_wrong_primitive_type(supplier_payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schemas.SupplierBase, {**supplier_payload, "supplierID": 42})
    assert exc_info.value.messages == ['"supplierID" must be a string']


def test_transaction_quantity_minimum(transaction_payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schemas.TransactionBase, {**transaction_payload, "quantity": 0})
    assert exc_info.value.messages == ['"quantity" must be greater than or equal to 1']


def test_transaction_type_enum(transaction_payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schemas.TransactionBase, {**transaction_payload, "transactionType": "refund"})
    assert exc_info.value.messages == ['"transactionType" must be one of [purchase, sale]']


def test_transaction_payment_must_be_number(transaction_payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schemas.TransactionBase, {**transaction_payload, "payment": "lots"})
    assert exc_info.value.messages == ['"payment" must be a number']


def test_transaction_date_is_left_to_store_default(transaction_payload):
    value = validate_payload(schemas.TransactionBase, transaction_payload)
    assert "transactionDate" not in value
    assert value["quantity"] == 2


def test_shipment_status_defaults_to_pending(shipment_payload):
    value = validate_payload(schemas.ShipmentBase, shipment_payload)
    assert value["status"] == "pending"
    assert "shipmentDate" not in value


def test_shipment_status_enum(shipment_payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schemas.ShipmentBase, {**shipment_payload, "status": "lost"})
    assert exc_info.value.messages == [
        '"status" must be one of [pending, shipped, in transit, delivered, cancelled]'
    ]


def test_inventory_collects_every_violation(inventory_payload):
    payload = {**inventory_payload, "price": -1, "stockQuantity": "many"}
    del payload["name"]
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schemas.InventoryItemBase, payload)
    assert exc_info.value.messages == [
        '"name" is required',
        '"price" must be greater than or equal to 0',
        '"stockQuantity" must be an integer',
    ]


@pytest.mark.parametrize("payload", [None, [], "supplier"])
def test_non_object_payload(payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schemas.SupplierBase, payload)
    assert exc_info.value.messages == ['"value" must be of type object']


@pytest.mark.parametrize("field, limit", [("supplierName", 100), ("contactInfo", 100), ("address", 200)])
def test_supplier_length_limits(supplier_payload, field, limit):
    assert validate_payload(schemas.SupplierBase, {**supplier_payload, field: "x" * limit})[field] == "x" * limit
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schemas.SupplierBase, {**supplier_payload, field: "x" * (limit + 1)})
    assert exc_info.value.messages == [
        f'"{field}" length must be less than or equal to {limit} characters long'
    ]


@pytest.mark.parametrize("schema, payload_fixture, field", [
    (schemas.ShipmentBase, "shipment_payload", "shipmentDate"),
    (schemas.TransactionBase, "transaction_payload", "transactionDate"),
])
def test_invalid_dates(request, schema, payload_fixture, field):
    payload = {**request.getfixturevalue(payload_fixture), field: "not-a-date"}
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schema, payload)
    assert exc_info.value.messages == [f'"{field}" must be a valid date']


@pytest.mark.parametrize("schema, payload_fixture, field, bad_value, message", [
    (schemas.InventoryItemBase, "inventory_payload", "price", float("inf"), '"price" must be a number'),
    (schemas.InventoryItemBase, "inventory_payload", "price", float("nan"), '"price" must be a number'),
    (schemas.TransactionBase, "transaction_payload", "payment", float("nan"), '"payment" must be a number'),
    (schemas.TransactionBase, "transaction_payload", "payment", float("-inf"), '"payment" must be a number'),
    (schemas.InventoryItemBase, "inventory_payload", "price", True, '"price" must be a number'),
    (schemas.InventoryItemBase, "inventory_payload", "stockQuantity", True, '"stockQuantity" must be an integer'),
    (schemas.TransactionBase, "transaction_payload", "quantity", True, '"quantity" must be an integer'),
    (schemas.TransactionBase, "transaction_payload", "payment", False, '"payment" must be a number'),
])
def test_numbers_must_be_real_numbers(request, schema, payload_fixture, field, bad_value, message):
    payload = {**request.getfixturevalue(payload_fixture), field: bad_value}
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schema, payload)
    assert exc_info.value.messages == [message]


def test_integer_payment_is_a_number(transaction_payload):
    value = validate_payload(schemas.TransactionBase, {**transaction_payload, "payment": 20})
    assert value["payment"] == 20


def test_float_bound_is_reported_without_decimals(inventory_payload):
    with pytest.raises(ValidationError) as exc_info:
        validate_payload(schemas.InventoryItemBase, {**inventory_payload, "price": -0.5})
    assert exc_info.value.messages == ['"price" must be greater than or equal to 0']
