import sys
import os
import asyncio
from decimal import Decimal

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from sqlalchemy import func, select

from db.session import Base, get_engine, get_session_factory
from db.models import Author, Book, Category, Customer, Order
from modules.orders.schema import OrderCreate, OrderItemIn
from modules.orders.service import create_order

sample_authors = [
    Author(name="J.K. Rowling", bio="British author best known for the Harry Potter series"),
    Author(name="George R.R. Martin", bio="American novelist and short story writer"),
    Author(name="Stephen King", bio="American author of horror and supernatural fiction"),
]

sample_categories = ["Fantasy", "Science Fiction", "Mystery", "Horror"]

# (title, author index, category index, price, stock)
sample_books = [
    ("Harry Potter and the Philosopher's Stone", 0, 0, Decimal("19.99"), 100),
    ("A Game of Thrones", 1, 0, Decimal("24.99"), 75),
    ("The Shining", 2, 3, Decimal("15.99"), 50),
]

sample_customers = [
    Customer(name="John Doe", email="john@example.com", phone="123-456-7890", address="123 Main St"),
    Customer(name="Jane Smith", email="jane@example.com", phone="098-765-4321", address="456 Oak Ave"),
]


async def create_tables():
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    print("✅ Tables created/verified.")


async def seed():
    session_factory = get_session_factory()
    async with session_factory() as db:
        if await db.scalar(select(func.count()).select_from(Book)):
            print("Sample data already present, skipping.")
            return

        categories = [Category(name=name) for name in sample_categories]
        db.add_all(sample_authors + categories + sample_customers)
        await db.flush()

        books = [
            Book(
                title=title,
                author_id=sample_authors[author].id,
                category_id=categories[category].id,
                price=price,
                stock=stock,
            )
            for title, author, category, price, stock in sample_books
        ]
        db.add_all(books)
        await db.commit()

    # orders go through the order service so stock is taken for them
    await create_order(
        OrderCreate(
            customer_id=sample_customers[0].id,
            items=[OrderItemIn(book_id=books[0].id, quantity=2, price=books[0].price)],
            status="Completed",
        ),
        session_factory,
    )
    await create_order(
        OrderCreate(
            customer_id=sample_customers[1].id,
            items=[OrderItemIn(book_id=books[1].id, quantity=1, price=books[1].price)],
        ),
        session_factory,
    )

    async with session_factory() as db:
        order_count = await db.scalar(select(func.count()).select_from(Order))
    print(f"✅ Sample data added ({order_count} orders).")


async def main():
    await create_tables()
    await seed()
    await get_engine().dispose()

if __name__ == "__main__":
    asyncio.run(main())
