"""
Article endpoints for API v1.

These routes provide CRUD operations for articles.  Article references
to journalists and categories are only checked when the application
runs with ``ENFORCE_REFERENCES`` enabled.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from newsroom_api.app.api.deps import get_store, parse_identifier
from newsroom_api.app.core.exceptions import NotFoundError, ValidationError
from newsroom_api.app.core.store import NewsroomStore
from newsroom_api.app.schemas.article import ArticleCreate, ArticleRead, ArticleUpdate

router = APIRouter()


@router.get("", response_model=List[ArticleRead])
@router.get("/", response_model=List[ArticleRead], include_in_schema=False)
async def list_articles(store: NewsroomStore = Depends(get_store)) -> List[ArticleRead]:
    """Return every article in insertion order."""
    return store.articles.list_all()


@router.get("/{article_id}", response_model=ArticleRead)
async def get_article(article_id: str, store: NewsroomStore = Depends(get_store)) -> ArticleRead:
    """Retrieve a single article by its ID.  Raises 404 if not found."""
    try:
        return store.articles.get_by_id(parse_identifier(article_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.post("", response_model=ArticleRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=ArticleRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_article(
    article_in: Optional[ArticleCreate] = Body(None),
    store: NewsroomStore = Depends(get_store),
) -> ArticleRead:
    """Create a new article.

    ``title``, ``content``, ``journalistId`` and ``categoryId`` are all
    required; a missing or empty value answers with 400.
    """
    fields = article_in.model_dump() if article_in else {}
    try:
        return store.create_article(fields)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.put("/{article_id}", response_model=ArticleRead)
async def update_article(
    article_id: str,
    updates: Optional[ArticleUpdate] = Body(None),
    store: NewsroomStore = Depends(get_store),
) -> ArticleRead:
    """Update an existing article.

    Partial updates are supported; any unspecified or null fields
    remain unchanged.
    """
    update_dict = {k: v for k, v in updates.model_dump().items() if v is not None} if updates else {}
    try:
        return store.update_article(parse_identifier(article_id), update_dict)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(article_id: str, store: NewsroomStore = Depends(get_store)) -> None:
    """Delete an article."""
    try:
        store.articles.delete_by_id(parse_identifier(article_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return None
