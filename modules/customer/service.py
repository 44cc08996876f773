from typing import List, Optional

from sqlalchemy import asc, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from db.models.customer import Customer
from db.models.order import Order
from .schema import CustomerCreate, CustomerUpdate


async def list_customers(db: AsyncSession) -> List[Customer]:
    result = await db.execute(select(Customer).order_by(asc(Customer.name), asc(Customer.id)))
    return result.scalars().all()


async def find_customer(customer_id: int, db: AsyncSession) -> Optional[Customer]:
    return await db.get(Customer, customer_id)


async def find_customer_by_email(email: str, db: AsyncSession) -> Optional[Customer]:
    # emails are compared ignoring case
    result = await db.execute(
        select(Customer).where(func.lower(Customer.email) == email.lower())
    )
    return result.scalars().first()


async def email_taken(email: str, db: AsyncSession, exclude_id: Optional[int] = None) -> bool:
    owner = await find_customer_by_email(email, db)
    return owner is not None and owner.id != exclude_id


async def has_orders(customer_id: int, db: AsyncSession) -> bool:
    result = await db.execute(select(exists().where(Order.customer_id == customer_id)))
    return bool(result.scalar())


async def register_customer(data: CustomerCreate, db: AsyncSession) -> Customer:
    customer = Customer(**data.model_dump())
    db.add(customer)
    await db.commit()
    await db.refresh(customer)
    return customer


async def edit_customer(customer: Customer, data: CustomerUpdate, db: AsyncSession) -> Customer:
    changes = data.model_dump(exclude_unset=True)
    if changes:
        for field, value in changes.items():
            setattr(customer, field, value)
        await db.commit()
        await db.refresh(customer)
    return customer


async def remove_customer(customer: Customer, db: AsyncSession) -> None:
    await db.delete(customer)
    await db.commit()
