"""
Pydantic models for journalists.

The email address is stored as given; no format validation happens
beyond the presence check on create.
"""

from typing import Optional

from pydantic import BaseModel, Field


class JournalistCreate(BaseModel):
    """Schema for creating a journalist."""

    name: Optional[str] = Field(None, examples=["Ada Park"])
    email: Optional[str] = Field(None, examples=["ada@newsroom.example"])


class JournalistUpdate(JournalistCreate):
    """Schema for updating a journalist.

    All fields are optional; only provided fields will be updated.
    """


class JournalistRead(BaseModel):
    id: int
    name: str
    email: str
