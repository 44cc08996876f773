from pydantic import BaseModel, EmailStr, Field

class CustomerBase(BaseModel):
    name: str = Field(..., min_length=1, example="John Doe")
    email: EmailStr = Field(..., example="john@example.com")
    phone: str | None = Field(None, max_length=20, example="123-456-7890")
    address: str | None = Field(None, example="123 Main St")


class CustomerCreate(CustomerBase):
    pass


class CustomerUpdate(BaseModel):
    name: str | None = None
    email: EmailStr | None = None
    phone: str | None = None
    address: str | None = None


class CustomerOut(CustomerBase):
    id: int

    class Config:
        from_attributes = True
