"""
Category endpoints for API v1.

``GET /categories/{id}/articles`` lists the articles filed under a
category and answers 404 when there are none.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from newsroom_api.app.api.deps import get_store, parse_identifier
from newsroom_api.app.core.exceptions import NotFoundError, ValidationError
from newsroom_api.app.core.store import NewsroomStore
from newsroom_api.app.schemas.article import ArticleRead
from newsroom_api.app.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate

router = APIRouter()


@router.get("", response_model=List[CategoryRead])
@router.get("/", response_model=List[CategoryRead], include_in_schema=False)
async def list_categories(store: NewsroomStore = Depends(get_store)) -> List[CategoryRead]:
    return store.categories.list_all()


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(category_id: str, store: NewsroomStore = Depends(get_store)) -> CategoryRead:
    try:
        return store.categories.get_by_id(parse_identifier(category_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.post("", response_model=CategoryRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=CategoryRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_category(
    category_in: Optional[CategoryCreate] = Body(None),
    store: NewsroomStore = Depends(get_store),
) -> CategoryRead:
    fields = category_in.model_dump() if category_in else {}
    try:
        return store.categories.create(fields)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.put("/{category_id}", response_model=CategoryRead)
async def update_category(
    category_id: str,
    updates: Optional[CategoryUpdate] = Body(None),
    store: NewsroomStore = Depends(get_store),
) -> CategoryRead:
    update_dict = {k: v for k, v in updates.model_dump().items() if v is not None} if updates else {}
    try:
        return store.categories.update(parse_identifier(category_id), update_dict)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: str, store: NewsroomStore = Depends(get_store)) -> None:
    try:
        store.categories.delete_by_id(parse_identifier(category_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return None


@router.get("/{category_id}/articles", response_model=List[ArticleRead])
async def list_category_articles(
    category_id: str,
    store: NewsroomStore = Depends(get_store),
) -> List[ArticleRead]:
    """List the articles filed under a category."""
    try:
        return store.relations.articles_by_category(parse_identifier(category_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
