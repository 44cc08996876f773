"""Atomic create/update/delete of orders.

Each operation opens one session and one transaction from the injected
``session_factory``. ``session.begin()`` commits when the block exits
cleanly and rolls back when anything raises; the surrounding
``async with`` closes the session on every path. Exceptions are logged and
re-raised unchanged so callers see the original failure.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Iterable

from sqlalchemy.orm import sessionmaker

from db.models.order import ORDER_STATUSES
from utils.log import Logger
from . import repository
from .errors import OrderNotFoundError
from .ledger import adjust_stock
from .schema import OrderCreate, OrderItemIn, OrderUpdate

logger = Logger(name="order_service")


def _check_status(status: str) -> None:
    if status not in ORDER_STATUSES:
        logger.warning(f"Order status '{status}' is not one of {', '.join(ORDER_STATUSES)}")


def calculate_total_amount(items: Iterable[OrderItemIn]) -> Decimal:
    return sum((item.quantity * item.price for item in items), Decimal("0"))


async def _apply_items(order_id: int, items: Iterable[OrderItemIn], db) -> None:
    for item in items:
        await repository.insert_order_item(order_id, item.book_id, item.quantity, item.price, db)
        await adjust_stock(item.book_id, -item.quantity, db)


async def _release_items(order_id: int, db) -> None:
    for book_id, quantity in await repository.get_items_by_order(order_id, db):
        await adjust_stock(book_id, quantity, db)
    await repository.delete_items_by_order(order_id, db)


async def create_order(order_data: OrderCreate, session_factory: sessionmaker) -> int:
    logger.info(f"Creating order for customer {order_data.customer_id} with {len(order_data.items)} item(s)")
    total_amount = calculate_total_amount(order_data.items)
    _check_status(order_data.status)

    try:
        async with session_factory() as db, db.begin():
            order_id = await repository.insert_order(
                customer_id=order_data.customer_id,
                order_date=datetime.now(timezone.utc),
                total_amount=total_amount,
                status=order_data.status,
                db=db,
            )
            await _apply_items(order_id, order_data.items, db)
    except Exception as e:
        logger.error(f"Error creating order: {e}")
        raise

    logger.info(f"Order {order_id} created, total {total_amount}")
    return order_id


async def update_order(order_data: OrderUpdate, session_factory: sessionmaker) -> int:
    """Replace an order's customer, status and items.

    The previous items are fully reversed (stock restored, rows deleted)
    before the new items are applied, so the net stock change per book is
    new quantity minus old quantity whatever the overlap between the sets.
    """
    order_id = order_data.order_id
    logger.info(f"Updating order {order_id}")
    total_amount = calculate_total_amount(order_data.items)
    _check_status(order_data.status)

    try:
        async with session_factory() as db, db.begin():
            if await repository.get_order_for_update(order_id, db) is None:
                raise OrderNotFoundError(order_id)

            await _release_items(order_id, db)
            await repository.update_order_fields(
                order_id,
                customer_id=order_data.customer_id,
                total_amount=total_amount,
                status=order_data.status,
                db=db,
            )
            await _apply_items(order_id, order_data.items, db)
    except Exception as e:
        logger.error(f"Error updating order {order_id}: {e}")
        raise

    logger.info(f"Order {order_id} updated, total {total_amount}")
    return order_id


async def delete_order(order_id: int, session_factory: sessionmaker) -> None:
    logger.info(f"Deleting order {order_id}")

    try:
        async with session_factory() as db, db.begin():
            if await repository.get_order_for_update(order_id, db) is None:
                raise OrderNotFoundError(order_id)

            await _release_items(order_id, db)
            await repository.delete_order(order_id, db)
    except Exception as e:
        logger.error(f"Error deleting order {order_id}: {e}")
        raise

    logger.info(f"Order {order_id} deleted")
