from pydantic import Field, ValidationInfo, field_validator
from typing import Optional
from .base import CamelModel, normalize_name, reject_explicit_null


class CategoryBase(CamelModel):
    name: str = Field(..., max_length=255)
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return normalize_name(v)


class CategoryCreate(CategoryBase):
    pass


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "is_active")
    @classmethod
    def validate_not_null(cls, v, info: ValidationInfo):
        reject_explicit_null(v, info.field_name)
        if info.field_name == "name":
            return normalize_name(v)
        return v


class Category(CategoryBase):
    id: int
    is_active: bool

    class Config:
        from_attributes = True
