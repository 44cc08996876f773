from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from db.session import get_db
from . import service
from .schema import CustomerCreate, CustomerUpdate, CustomerOut

router = APIRouter(prefix="/customers", tags=["Customers"])


async def _get_or_404(customer_id: int, db: AsyncSession):
    customer = await service.find_customer(customer_id, db)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.get("/", response_model=List[CustomerOut])
async def list_customers(db: AsyncSession = Depends(get_db)):
    return await service.list_customers(db)


@router.get("/by-email/{email}", response_model=CustomerOut)
async def read_customer_by_email(email: str, db: AsyncSession = Depends(get_db)):
    customer = await service.find_customer_by_email(email, db)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.get("/{customer_id}", response_model=CustomerOut)
async def read_customer(customer_id: int, db: AsyncSession = Depends(get_db)):
    return await _get_or_404(customer_id, db)


@router.post("/", response_model=CustomerOut, status_code=status.HTTP_201_CREATED)
async def create_customer(customer: CustomerCreate, db: AsyncSession = Depends(get_db)):
    if await service.email_taken(customer.email, db):
        raise HTTPException(status_code=400, detail="Email already registered")
    return await service.register_customer(customer, db)


@router.put("/{customer_id}", response_model=CustomerOut)
async def update_customer(customer_id: int, customer_data: CustomerUpdate, db: AsyncSession = Depends(get_db)):
    customer = await _get_or_404(customer_id, db)
    if customer_data.email and await service.email_taken(customer_data.email, db, exclude_id=customer_id):
        raise HTTPException(status_code=400, detail="Email already registered")
    return await service.edit_customer(customer, customer_data, db)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(customer_id: int, db: AsyncSession = Depends(get_db)):
    customer = await _get_or_404(customer_id, db)
    # orders keep a reference to their customer
    if await service.has_orders(customer_id, db):
        raise HTTPException(status_code=409, detail="Customer has orders and cannot be deleted")
    await service.remove_customer(customer, db)
    return None
