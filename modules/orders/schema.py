from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from db.models.order import DEFAULT_ORDER_STATUS

# Field aliases keep the camelCase / PascalCase wire format the admin UI uses.


class OrderItemIn(BaseModel):
    book_id: int = Field(..., alias="bookId", strict=True, gt=0, example=5)
    quantity: int = Field(..., strict=True, gt=0, example=2)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, example="10.00")

    class Config:
        populate_by_name = True


class OrderCreate(BaseModel):
    customer_id: int = Field(..., alias="customerId", strict=True, gt=0, example=1)
    items: List[OrderItemIn] = Field(..., min_length=1)
    status: str = DEFAULT_ORDER_STATUS

    class Config:
        populate_by_name = True

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, value):
        return value or DEFAULT_ORDER_STATUS


class OrderUpdate(BaseModel):
    order_id: int = Field(..., alias="orderId", strict=True, gt=0, example=7)
    customer_id: int = Field(..., alias="customerId", strict=True, gt=0, example=1)
    items: List[OrderItemIn] = Field(..., min_length=1)
    status: str = Field(..., min_length=1, example="Processing")

    class Config:
        populate_by_name = True


class OrderRef(BaseModel):
    order_id: int = Field(..., alias="orderId")

    class Config:
        populate_by_name = True


class OrderListing(BaseModel):
    """One denormalized row of the orders listing."""

    order_id: int = Field(..., alias="OrderID")
    order_date: datetime = Field(..., alias="OrderDate")
    total_amount: Decimal = Field(..., alias="TotalAmount")
    status: str = Field(..., alias="Status")
    customer_name: Optional[str] = Field(None, alias="CustomerName")
    items: str = Field("", alias="Items")

    class Config:
        populate_by_name = True


class OrderMutationOut(BaseModel):
    success: bool = True
    message: str
    data: Optional[OrderRef] = None


class OrderListOut(BaseModel):
    success: bool = True
    data: List[OrderListing]
