"""Row-level primitives for orders and their items.

Every function runs inside the caller's transaction: it may flush so that
generated ids are available, but never commits or rolls back.
"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import Row, delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from db.models.order import Order, OrderItem


async def insert_order(
    customer_id: int,
    order_date: datetime,
    total_amount: Decimal,
    status: str,
    db: AsyncSession,
) -> int:
    order = Order(
        customer_id=customer_id,
        order_date=order_date,
        total_amount=total_amount,
        status=status,
    )
    db.add(order)
    await db.flush()
    return order.id


async def insert_order_item(order_id: int, book_id: int, quantity: int, price: Decimal, db: AsyncSession) -> int:
    db_item = OrderItem(order_id=order_id, book_id=book_id, quantity=quantity, price=price)
    db.add(db_item)
    await db.flush()
    return db_item.id


async def get_order_for_update(order_id: int, db: AsyncSession) -> Optional[Row]:
    result = await db.execute(
        select(Order.id, Order.customer_id, Order.status).where(Order.id == order_id).with_for_update()
    )
    return result.one_or_none()


async def get_items_by_order(order_id: int, db: AsyncSession) -> List[Row]:
    """(book_id, quantity) rows of an order, oldest line first."""
    result = await db.execute(
        select(OrderItem.book_id, OrderItem.quantity)
        .where(OrderItem.order_id == order_id)
        .order_by(OrderItem.id)
    )
    return result.all()


async def delete_items_by_order(order_id: int, db: AsyncSession) -> int:
    result = await db.execute(
        delete(OrderItem)
        .where(OrderItem.order_id == order_id)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount


async def update_order_fields(
    order_id: int,
    customer_id: int,
    total_amount: Decimal,
    status: str,
    db: AsyncSession,
) -> int:
    result = await db.execute(
        update(Order)
        .where(Order.id == order_id)
        .values(customer_id=customer_id, total_amount=total_amount, status=status)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount


async def delete_order(order_id: int, db: AsyncSession) -> int:
    result = await db.execute(
        delete(Order)
        .where(Order.id == order_id)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount
