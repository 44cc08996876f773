from pydantic import BaseModel, Field
from decimal import Decimal
from typing import Optional

class BookBase(BaseModel):
    title: str = Field(..., min_length=1, example="The Shining")
    author_id: Optional[int] = None
    category_id: Optional[int] = None
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, example="15.99")
    stock: int = Field(0, ge=0, example=50)


class BookCreate(BookBase):
    pass

class BookUpdate(BookBase):
    pass

class BookOut(BookBase):
    id: int
    # stock can be negative when backorders are allowed
    stock: int
    author_name: Optional[str] = None
    category_name: Optional[str] = None

    class Config:
        from_attributes = True
