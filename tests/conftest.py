"""Shared fixtures for the order engine tests.

Every test gets its own SQLite database file (through aiosqlite) with
foreign keys enforced, the full schema created, and a small catalog:
two customers and two books.
"""

from __future__ import annotations

import os

# keep test runs from writing Logs/app.log
os.environ.setdefault("LOG_FILE", "")

from decimal import Decimal
from typing import Callable

import pytest
from sqlalchemy import event, func, select

from db.models import Book, Customer, Order, OrderItem
from db.session import Base, build_engine, build_session_factory

SHINING_ID = 5
DUNE_ID = 6


class InjectedFault(RuntimeError):
    """Raised by the fault injector in place of a real write failure."""


@pytest.fixture
async def engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}")

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def catalog(session_factory) -> None:
    async with session_factory() as db:
        db.add_all(
            [
                Customer(id=1, name="John Doe", email="john@example.com"),
                Customer(id=2, name="Jane Smith", email="jane@example.com"),
                Book(id=SHINING_ID, title="The Shining", price=Decimal("10.00"), stock=10),
                Book(id=DUNE_ID, title="Dune", price=Decimal("7.50"), stock=4),
            ]
        )
        await db.commit()


@pytest.fixture
def stock_of(session_factory) -> Callable:
    async def _stock_of(book_id: int) -> int:
        async with session_factory() as db:
            return await db.scalar(select(Book.stock).where(Book.id == book_id))

    return _stock_of


@pytest.fixture
def snapshot(session_factory) -> Callable:
    """Everything an order operation may touch, in comparable form."""

    async def _snapshot() -> dict:
        async with session_factory() as db:
            orders = (
                await db.execute(
                    select(Order.id, Order.customer_id, Order.total_amount, Order.status).order_by(Order.id)
                )
            ).all()
            items = (
                await db.execute(
                    select(OrderItem.order_id, OrderItem.book_id, OrderItem.quantity, OrderItem.price).order_by(
                        OrderItem.id
                    )
                )
            ).all()
            stock = (await db.execute(select(Book.id, Book.stock).order_by(Book.id))).all()
            item_count = await db.scalar(select(func.count()).select_from(OrderItem))
        return {
            "orders": [tuple(row) for row in orders],
            "items": [tuple(row) for row in items],
            "stock": dict((book_id, value) for book_id, value in stock),
            "item_count": item_count,
        }

    return _snapshot


@pytest.fixture
def fail_on_write(engine):
    """Make the Nth INSERT/UPDATE/DELETE issued on ``engine`` raise InjectedFault."""
    listeners = []

    def _install(n: int) -> None:
        seen = {"writes": 0}

        def _before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            verb = statement.lstrip().split(None, 1)[0].upper()
            if verb not in ("INSERT", "UPDATE", "DELETE"):
                return
            seen["writes"] += 1
            if seen["writes"] == n:
                raise InjectedFault(f"injected failure at write #{n}")

        event.listen(engine.sync_engine, "before_cursor_execute", _before_cursor_execute)
        listeners.append(_before_cursor_execute)

    yield _install

    for listener in listeners:
        event.remove(engine.sync_engine, "before_cursor_execute", listener)


@pytest.fixture
async def client(session_factory):
    """HTTP client bound to the app, with its database pointed at the test engine."""
    from httpx import ASGITransport, AsyncClient

    from db.session import get_db, get_session_factory
    from main import app

    async def _get_db():
        async with session_factory() as db:
            yield db

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http:
        yield http
    app.dependency_overrides.clear()
