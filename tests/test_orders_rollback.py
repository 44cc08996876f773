"""Fault injection: whichever write fails, the call leaves no trace."""

from __future__ import annotations

from decimal import Decimal

import pytest

from modules.orders.schema import OrderCreate, OrderItemIn, OrderUpdate
from modules.orders.service import create_order, delete_order, update_order
from tests.conftest import DUNE_ID, SHINING_ID, InjectedFault

pytestmark = pytest.mark.usefixtures("catalog")

TWO_ITEMS = [
    OrderItemIn(book_id=SHINING_ID, quantity=2, price=Decimal("10.00")),
    OrderItemIn(book_id=DUNE_ID, quantity=1, price=Decimal("7.50")),
]

# order row, then (item row, stock update) per item
CREATE_WRITES = 1 + 2 * len(TWO_ITEMS)
# restore + delete items + update order + (item row, stock update) per new item
UPDATE_WRITES = 1 + 1 + 1 + 2 * 1
# restore per item + delete items + delete order
DELETE_WRITES = len(TWO_ITEMS) + 1 + 1


@pytest.mark.parametrize("failing_write", range(1, CREATE_WRITES + 1))
async def test_create_order_rolls_back_on_any_failed_write(
    session_factory, snapshot, fail_on_write, failing_write
) -> None:
    before = await snapshot()
    fail_on_write(failing_write)

    with pytest.raises(InjectedFault):
        await create_order(OrderCreate(customer_id=1, items=TWO_ITEMS), session_factory)

    assert await snapshot() == before


@pytest.mark.parametrize("failing_write", range(1, UPDATE_WRITES + 1))
async def test_update_order_rolls_back_on_any_failed_write(
    session_factory, snapshot, fail_on_write, failing_write
) -> None:
    order_id = await create_order(
        OrderCreate(customer_id=1, items=[OrderItemIn(book_id=SHINING_ID, quantity=2, price=Decimal("10.00"))]),
        session_factory,
    )
    before = await snapshot()
    fail_on_write(failing_write)

    with pytest.raises(InjectedFault):
        await update_order(
            OrderUpdate(
                order_id=order_id,
                customer_id=2,
                items=[OrderItemIn(book_id=DUNE_ID, quantity=3, price=Decimal("7.50"))],
                status="Processing",
            ),
            session_factory,
        )

    assert await snapshot() == before


@pytest.mark.parametrize("failing_write", range(1, DELETE_WRITES + 1))
async def test_delete_order_rolls_back_on_any_failed_write(
    session_factory, snapshot, fail_on_write, failing_write
) -> None:
    order_id = await create_order(OrderCreate(customer_id=1, items=TWO_ITEMS), session_factory)
    before = await snapshot()
    fail_on_write(failing_write)

    with pytest.raises(InjectedFault):
        await delete_order(order_id, session_factory)

    after = await snapshot()
    assert after == before
    assert any(row[0] == order_id for row in after["orders"])


async def test_session_is_usable_after_a_failed_call(session_factory, stock_of, fail_on_write) -> None:
    fail_on_write(2)
    with pytest.raises(InjectedFault):
        await create_order(OrderCreate(customer_id=1, items=TWO_ITEMS), session_factory)

    # the injector only fires once; the next call goes through on a fresh session
    await create_order(OrderCreate(customer_id=1, items=TWO_ITEMS), session_factory)
    assert await stock_of(SHINING_ID) == 8
    assert await stock_of(DUNE_ID) == 3
