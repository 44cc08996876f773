from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

import config
from db.models.book import Book
from .errors import BookNotFoundError, InsufficientStockError

STOCK_POLICY_REJECT = "reject"
STOCK_POLICY_BACKORDER = "backorder"
STOCK_POLICIES = (STOCK_POLICY_REJECT, STOCK_POLICY_BACKORDER)


async def adjust_stock(book_id: int, delta: int, db: AsyncSession, policy: str | None = None) -> None:
    """Add ``delta`` to a book's stock inside the caller's transaction.

    Negative deltas take stock for an order line, positive deltas give it
    back. The change is a single ``stock = stock + delta`` statement so
    concurrent transactions on the same book serialize on the row lock.

    Under the ``reject`` policy a decrement that would leave stock below
    zero raises :class:`InsufficientStockError`; ``backorder`` lets the
    count go negative.
    """
    policy = policy or config.STOCK_POLICY
    if policy not in STOCK_POLICIES:
        raise ValueError(f"Unknown stock policy: {policy}")

    stmt = (
        update(Book)
        .where(Book.id == book_id)
        .values(stock=Book.stock + delta)
        .execution_options(synchronize_session=False)
    )
    guarded = delta < 0 and policy == STOCK_POLICY_REJECT
    if guarded:
        stmt = stmt.where(Book.stock + delta >= 0)

    result = await db.execute(stmt)
    if result.rowcount:
        return

    current = await db.execute(select(Book.stock).where(Book.id == book_id))
    available = current.scalar_one_or_none()
    if available is None:
        raise BookNotFoundError(book_id)
    if guarded:
        raise InsufficientStockError(book_id, available=available, requested=-delta)
