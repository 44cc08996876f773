from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_db
from . import category_service, service
from .category_schema import CategoryDeletedOut, CategoryIn, CategoryOut, CategoryPatch
from .schema import BookOut

router = APIRouter(prefix="/categories", tags=["Categories"])


async def _get_or_404(category_id: int, db: AsyncSession):
    category = await category_service.find_category(category_id, db)
    if not category:
        raise HTTPException(status_code=404, detail="Category not found")
    return category


async def _ensure_name_free(name: str, db: AsyncSession, exclude_id: int | None = None) -> None:
    if await category_service.name_taken(name, db, exclude_id=exclude_id):
        raise HTTPException(status_code=400, detail=f"Category '{name}' already exists")


@router.get("/", response_model=List[CategoryOut])
async def list_categories(db: AsyncSession = Depends(get_db)):
    return await category_service.list_categories(db)


@router.get("/{category_id}", response_model=CategoryOut)
async def read_category(category_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_or_404(category_id, db)


@router.get("/{category_id}/books", response_model=List[BookOut])
async def read_category_books(category_id: int, db: AsyncSession = Depends(get_db)):
    await _get_or_404(category_id, db)
    return await service.get_books_by_category(category_id, db)


@router.post("/", response_model=CategoryOut, status_code=status.HTTP_201_CREATED)
async def create_category(category: CategoryIn, db: AsyncSession = Depends(get_db)):
    await _ensure_name_free(category.name, db)
    return await category_service.add_category(category, db)


@router.put("/{category_id}", response_model=CategoryOut)
async def update_category(category_id: int, category: CategoryPatch, db: AsyncSession = Depends(get_db)):
    db_category = await _get_or_404(category_id, db)
    if category.name is not None:
        await _ensure_name_free(category.name, db, exclude_id=category_id)
    return await category_service.rename_category(db_category, category, db)


@router.delete("/{category_id}", response_model=CategoryDeletedOut)
async def delete_category(category_id: int, db: AsyncSession = Depends(get_db)):
    db_category = await _get_or_404(category_id, db)
    detached = await category_service.remove_category(db_category, db)
    return CategoryDeletedOut(message="Category deleted successfully", books_detached=detached)
