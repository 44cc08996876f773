from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_db
from . import author_service, service
from .author_schema import AuthorCreate, AuthorUpdate, AuthorOut
from .schema import BookOut

router = APIRouter(prefix="/authors", tags=["Authors"])


async def _get_or_404(author_id: int, db: AsyncSession):
    author = await author_service.get_author_by_id(author_id, db)
    if not author:
        raise HTTPException(status_code=404, detail="Author not found")
    return author


@router.get("/", response_model=List[AuthorOut])
async def list_authors(db: AsyncSession = Depends(get_db)):
    return await author_service.get_all_authors(db)


@router.get("/{author_id}", response_model=AuthorOut)
async def read_author(author_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_or_404(author_id, db)


@router.get("/{author_id}/books", response_model=List[BookOut])
async def read_author_books(author_id: int, db: AsyncSession = Depends(get_db)):
    await _get_or_404(author_id, db)
    return await service.get_books_by_author(author_id, db)


@router.post("/", response_model=AuthorOut, status_code=status.HTTP_201_CREATED)
async def create_author(author: AuthorCreate, db: AsyncSession = Depends(get_db)):
    return await author_service.create_author(author, db)


@router.put("/{author_id}", response_model=AuthorOut)
async def update_author(author_id: int, author: AuthorUpdate, db: AsyncSession = Depends(get_db)):
    updated = await author_service.update_author(author_id, author, db)
    if not updated:
        raise HTTPException(status_code=404, detail="Author not found")
    return updated


@router.delete("/{author_id}")
async def delete_author(author_id: int, db: AsyncSession = Depends(get_db)):
    # books by the author keep existing with author_id set to NULL
    deleted = await author_service.delete_author(author_id, db)
    if not deleted:
        raise HTTPException(status_code=404, detail="Author not found")
    return {"message": "Author deleted successfully"}
