from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from . import service, schema
from db.session import get_db

router = APIRouter(prefix="/books", tags=["Books"])

@router.get("/", response_model=list[schema.BookOut])
async def read_books(db: AsyncSession = Depends(get_db)):
    return await service.get_all_books(db)

@router.get("/{book_id}", response_model=schema.BookOut)
async def read_book(book_id: int, db: AsyncSession = Depends(get_db)):
    db_book = await service.get_book_detail(book_id, db)
    if not db_book:
        raise HTTPException(status_code=404, detail="Book not found")
    return db_book

@router.post("/", response_model=schema.BookOut)
async def create_book(book: schema.BookCreate, db: AsyncSession = Depends(get_db)):
    return await service.create_book(book, db)

@router.put("/{book_id}", response_model=schema.BookOut)
async def update_book(book_id: int, book: schema.BookUpdate, db: AsyncSession = Depends(get_db)):
    updated_book = await service.update_book(book_id, book, db)
    if not updated_book:
        raise HTTPException(status_code=404, detail="Book not found")
    return updated_book

@router.delete("/{book_id}")
async def delete_book(book_id: int, db: AsyncSession = Depends(get_db)):
    if await service.book_has_order_items(book_id, db):
        raise HTTPException(status_code=409, detail="Book is referenced by orders and cannot be deleted")
    deleted_book = await service.delete_book(book_id, db)
    if not deleted_book:
        raise HTTPException(status_code=404, detail="Book not found")
    return {"message": "Book deleted successfully"}
