from typing import List, Optional

from sqlalchemy import asc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from db.models.book import Book
from db.models.category import Category
from .category_schema import CategoryIn, CategoryPatch


async def list_categories(db: AsyncSession) -> List[Category]:
    result = await db.execute(select(Category).order_by(asc(Category.name)))
    return result.scalars().all()


async def find_category(category_id: int, db: AsyncSession) -> Optional[Category]:
    return await db.get(Category, category_id)


async def name_taken(name: str, db: AsyncSession, exclude_id: Optional[int] = None) -> bool:
    stmt = select(Category.id).where(func.lower(Category.name) == name.lower())
    if exclude_id is not None:
        stmt = stmt.where(Category.id != exclude_id)
    return (await db.execute(stmt.limit(1))).first() is not None


async def add_category(data: CategoryIn, db: AsyncSession) -> Category:
    category = Category(name=data.name)
    db.add(category)
    await db.commit()
    await db.refresh(category)
    return category


async def rename_category(category: Category, data: CategoryPatch, db: AsyncSession) -> Category:
    if data.name is not None:
        category.name = data.name
        await db.commit()
        await db.refresh(category)
    return category


async def remove_category(category: Category, db: AsyncSession) -> int:
    """Delete a category and return how many books lost it.

    Books are detached explicitly in the same commit, so the result does not
    depend on the store enforcing ON DELETE SET NULL.
    """
    detached = await db.execute(
        update(Book)
        .where(Book.category_id == category.id)
        .values(category_id=None)
        .execution_options(synchronize_session=False)
    )
    await db.delete(category)
    await db.commit()
    return detached.rowcount
