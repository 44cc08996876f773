from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from modules.orders.schema import OrderCreate, OrderUpdate

ITEM = {"bookId": 5, "quantity": 2, "price": 10.00}


@pytest.mark.parametrize("status", [None, ""])
def test_create_defaults_status_to_pending(status) -> None:
    order = OrderCreate.model_validate({"customerId": 1, "items": [ITEM], "status": status})

    assert order.status == "Pending"


def test_create_keeps_unrecognized_status() -> None:
    order = OrderCreate.model_validate({"customerId": 1, "items": [ITEM], "status": "On Hold"})

    assert order.status == "On Hold"


def test_create_accepts_wire_and_python_names() -> None:
    wire = OrderCreate.model_validate({"customerId": 1, "items": [ITEM]})
    python = OrderCreate(customer_id=1, items=[{"book_id": 5, "quantity": 2, "price": Decimal("10.00")}])

    assert wire == python
    assert wire.items[0].price == Decimal("10.00")


@pytest.mark.parametrize(
    "payload",
    [
        {"items": [ITEM]},
        {"customerId": 0, "items": [ITEM]},
        {"customerId": 1, "items": []},
        {"customerId": 1, "items": [{"bookId": 5, "quantity": -1, "price": 1}]},
        {"customerId": 1, "items": [{"bookId": 5, "quantity": 1}]},
        {"customerId": 1, "items": [{"bookId": 5, "quantity": 1, "price": "1.001"}]},
    ],
)
def test_create_rejects_malformed_payload(payload) -> None:
    with pytest.raises(ValidationError):
        OrderCreate.model_validate(payload)


@pytest.mark.parametrize(
    "payload",
    [
        {"customerId": 1, "items": [ITEM], "status": "Pending"},
        {"orderId": 7, "items": [ITEM], "status": "Pending"},
        {"orderId": 7, "customerId": 1, "items": [], "status": "Pending"},
        {"orderId": 7, "customerId": 1, "items": [ITEM]},
    ],
)
def test_update_rejects_malformed_payload(payload) -> None:
    with pytest.raises(ValidationError):
        OrderUpdate.model_validate(payload)


@pytest.mark.parametrize(
    "item",
    [
        {"bookId": 5, "quantity": True, "price": 10.00},
        {"bookId": True, "quantity": 2, "price": 10.00},
        {"bookId": 5, "quantity": "2", "price": 10.00},
    ],
)
def test_item_ids_and_quantity_must_be_real_integers(item) -> None:
    with pytest.raises(ValidationError):
        OrderCreate.model_validate({"customerId": 1, "items": [item]})


def test_update_order_id_must_be_real_integer() -> None:
    with pytest.raises(ValidationError):
        OrderUpdate.model_validate({"orderId": "7", "customerId": 1, "items": [ITEM], "status": "Pending"})
