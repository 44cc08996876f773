from sqlalchemy import select, asc, exists
from sqlalchemy.ext.asyncio import AsyncSession
from db.models.author import Author
from db.models.book import Book
from db.models.category import Category
from db.models.order import OrderItem
from .schema import BookCreate, BookOut, BookUpdate
from typing import List, Optional


def _book_listing():
    # outer joins keep books without an author or category
    return (
        select(Book, Author.name.label("author_name"), Category.name.label("category_name"))
        .outerjoin(Author, Book.author_id == Author.id)
        .outerjoin(Category, Book.category_id == Category.id)
        .order_by(asc(Book.title), asc(Book.id))
    )


def _to_out(row) -> BookOut:
    return BookOut.model_validate(row.Book).model_copy(
        update={"author_name": row.author_name, "category_name": row.category_name}
    )


async def get_all_books(db: AsyncSession) -> List[BookOut]:
    result = await db.execute(_book_listing())
    return [_to_out(row) for row in result]


async def get_book_detail(book_id: int, db: AsyncSession) -> Optional[BookOut]:
    result = await db.execute(_book_listing().where(Book.id == book_id))
    row = result.first()
    return _to_out(row) if row else None


async def get_books_by_category(category_id: int, db: AsyncSession) -> List[BookOut]:
    result = await db.execute(_book_listing().where(Book.category_id == category_id))
    return [_to_out(row) for row in result]


async def get_books_by_author(author_id: int, db: AsyncSession) -> List[BookOut]:
    result = await db.execute(_book_listing().where(Book.author_id == author_id))
    return [_to_out(row) for row in result]


async def get_book_by_id(book_id: int, db: AsyncSession):
    result = await db.execute(select(Book).where(Book.id == book_id))
    return result.scalar_one_or_none()


async def book_has_order_items(book_id: int, db: AsyncSession) -> bool:
    result = await db.execute(select(exists().where(OrderItem.book_id == book_id)))
    return bool(result.scalar())


async def create_book(book: BookCreate, db: AsyncSession) -> BookOut:
    db_book = Book(**book.model_dump())
    db.add(db_book)
    await db.commit()
    return await get_book_detail(db_book.id, db)


async def update_book(book_id: int, book: BookUpdate, db: AsyncSession) -> Optional[BookOut]:
    db_book = await get_book_by_id(book_id, db)
    if not db_book:
        return None
    for key, value in book.model_dump().items():
        setattr(db_book, key, value)
    await db.commit()
    return await get_book_detail(book_id, db)


async def delete_book(book_id: int, db: AsyncSession):
    db_book = await get_book_by_id(book_id, db)
    if db_book:
        await db.delete(db_book)
        await db.commit()
    return db_book
