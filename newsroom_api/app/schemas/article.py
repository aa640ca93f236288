"""
Pydantic models for article data.

Articles reference their journalist and category by id.  On the wire
those keys are camelCase (``journalistId``, ``categoryId``); inside
Python they are ``journalist_id`` and ``category_id``.  Both spellings
are accepted when parsing.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    """Schema for creating an article.

    Every field is optional at the schema level.  Presence is checked by
    the store so that a missing field answers with 400 and the
    ``Missing required fields`` message rather than a schema error.
    """

    title: Optional[str] = Field(None, examples=["Budget passes after late vote"])
    content: Optional[str] = Field(None, examples=["The council approved..."])
    journalist_id: Optional[int] = Field(None, alias="journalistId", examples=[1])
    category_id: Optional[int] = Field(None, alias="categoryId", examples=[1])

    model_config = {
        "populate_by_name": True,
    }


class ArticleUpdate(ArticleCreate):
    """Schema for updating an article.

    All fields are optional; only provided non‑null values are applied.
    """


class ArticleRead(BaseModel):
    """An article as stored and returned by the API."""

    id: int
    title: str
    content: str
    journalist_id: int = Field(..., alias="journalistId")
    category_id: int = Field(..., alias="categoryId")

    model_config = {
        "populate_by_name": True,
    }
