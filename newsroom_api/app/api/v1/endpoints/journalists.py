"""
Journalist endpoints for API v1.

Besides CRUD, ``GET /journalists/{id}/articles`` lists the articles
written by a journalist.  It answers 404 both for an unknown
journalist and for a journalist without articles.
"""

from typing import List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status

from newsroom_api.app.api.deps import get_store, parse_identifier
from newsroom_api.app.core.exceptions import NotFoundError, ValidationError
from newsroom_api.app.core.store import NewsroomStore
from newsroom_api.app.schemas.article import ArticleRead
from newsroom_api.app.schemas.journalist import JournalistCreate, JournalistRead, JournalistUpdate

router = APIRouter()


@router.get("", response_model=List[JournalistRead])
@router.get("/", response_model=List[JournalistRead], include_in_schema=False)
async def list_journalists(store: NewsroomStore = Depends(get_store)) -> List[JournalistRead]:
    return store.journalists.list_all()


@router.get("/{journalist_id}", response_model=JournalistRead)
async def get_journalist(journalist_id: str, store: NewsroomStore = Depends(get_store)) -> JournalistRead:
    try:
        return store.journalists.get_by_id(parse_identifier(journalist_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e


@router.post("", response_model=JournalistRead, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=JournalistRead, status_code=status.HTTP_201_CREATED, include_in_schema=False)
async def create_journalist(
    journalist_in: Optional[JournalistCreate] = Body(None),
    store: NewsroomStore = Depends(get_store),
) -> JournalistRead:
    """Create a journalist.  ``name`` and ``email`` are required."""
    fields = journalist_in.model_dump() if journalist_in else {}
    try:
        return store.journalists.create(fields)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.put("/{journalist_id}", response_model=JournalistRead)
async def update_journalist(
    journalist_id: str,
    updates: Optional[JournalistUpdate] = Body(None),
    store: NewsroomStore = Depends(get_store),
) -> JournalistRead:
    update_dict = {k: v for k, v in updates.model_dump().items() if v is not None} if updates else {}
    try:
        return store.journalists.update(parse_identifier(journalist_id), update_dict)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.delete("/{journalist_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_journalist(journalist_id: str, store: NewsroomStore = Depends(get_store)) -> None:
    """Delete a journalist.

    Articles written by the journalist are kept and keep pointing at
    the removed id.
    """
    try:
        store.journalists.delete_by_id(parse_identifier(journalist_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    return None


@router.get("/{journalist_id}/articles", response_model=List[ArticleRead])
async def list_journalist_articles(
    journalist_id: str,
    store: NewsroomStore = Depends(get_store),
) -> List[ArticleRead]:
    """List the articles written by a journalist."""
    try:
        return store.relations.articles_by_journalist(parse_identifier(journalist_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
