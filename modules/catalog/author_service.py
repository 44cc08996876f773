from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, asc
from db.models.author import Author
from .author_schema import AuthorCreate, AuthorUpdate


async def create_author(author: AuthorCreate, db: AsyncSession):
    db_author = Author(**author.model_dump())
    db.add(db_author)
    await db.commit()
    await db.refresh(db_author)
    return db_author


async def get_author_by_id(author_id: int, db: AsyncSession):
    result = await db.execute(select(Author).where(Author.id == author_id))
    return result.scalar_one_or_none()


async def get_all_authors(db: AsyncSession):
    result = await db.execute(select(Author).order_by(asc(Author.name)))
    return result.scalars().all()


async def update_author(author_id: int, update: AuthorUpdate, db: AsyncSession):
    author = await get_author_by_id(author_id, db)
    if author:
        for key, value in update.model_dump(exclude_unset=True).items():
            setattr(author, key, value)
        await db.commit()
        await db.refresh(author)
    return author


async def delete_author(author_id: int, db: AsyncSession):
    author = await get_author_by_id(author_id, db)
    if author:
        await db.delete(author)
        await db.commit()
    return author
