from pydantic import BaseModel, Field
from typing import Optional


class AuthorBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, example="Agatha Christie")
    bio: Optional[str] = None


class AuthorCreate(AuthorBase):
    pass


class AuthorUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    bio: Optional[str] = None


class AuthorOut(AuthorBase):
    id: int

    class Config:
        from_attributes = True
