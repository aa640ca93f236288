"""Pydantic models for article categories."""

from typing import Optional

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    name: Optional[str] = Field(None, examples=["Politics"])


class CategoryUpdate(CategoryCreate):
    """Schema for renaming a category."""


class CategoryRead(BaseModel):
    id: int
    name: str
