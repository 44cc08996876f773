from decimal import Decimal
from typing import Dict, List

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from db.models.book import Book
from db.models.customer import Customer
from db.models.order import Order, OrderItem
from .schema import OrderListing

ITEM_SEPARATOR = ", "


def format_order_item(title: str, quantity: int, price: Decimal) -> str:
    return f"{title} ({quantity} x ${Decimal(price):.2f})"


async def list_orders(db: AsyncSession) -> List[OrderListing]:
    """Orders newest first, with customer name and items flattened to text.

    Outer joins keep orders whose customer or items are missing; such an
    order lists an empty ``items`` string.
    """
    stmt = (
        select(
            Order.id,
            Order.order_date,
            Order.total_amount,
            Order.status,
            Customer.name.label("customer_name"),
            Book.title,
            OrderItem.quantity,
            OrderItem.price,
        )
        .outerjoin(Customer, Order.customer_id == Customer.id)
        .outerjoin(OrderItem, Order.id == OrderItem.order_id)
        .outerjoin(Book, OrderItem.book_id == Book.id)
        .order_by(desc(Order.order_date), desc(Order.id), OrderItem.id)
    )
    result = await db.execute(stmt)

    listings: Dict[int, OrderListing] = {}
    lines: Dict[int, List[str]] = {}
    for row in result:
        if row.id not in listings:
            listings[row.id] = OrderListing(
                order_id=row.id,
                order_date=row.order_date,
                total_amount=row.total_amount,
                status=row.status,
                customer_name=row.customer_name,
            )
            lines[row.id] = []
        if row.quantity is not None:
            lines[row.id].append(format_order_item(row.title, row.quantity, row.price))

    for order_id, listing in listings.items():
        listing.items = ITEM_SEPARATOR.join(lines[order_id])
    return list(listings.values())
