from typing import Optional

from pydantic import BaseModel, Field, field_validator

# Category names are unique ignoring case; surrounding whitespace is dropped.


class CategoryIn(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, example="Mystery")

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value


class CategoryPatch(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value


class CategoryOut(CategoryIn):
    id: int

    class Config:
        from_attributes = True


class CategoryDeletedOut(BaseModel):
    message: str
    books_detached: int
