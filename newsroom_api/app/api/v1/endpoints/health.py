"""Liveness endpoint reporting the size of each collection."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from newsroom_api.app.api.deps import get_store
from newsroom_api.app.core.store import NewsroomStore

router = APIRouter()


@router.get("/health", response_model=Dict[str, Any])
async def health(store: NewsroomStore = Depends(get_store)) -> Dict[str, Any]:
    return {
        "status": "ok",
        "articles": len(store.articles),
        "journalists": len(store.journalists),
        "categories": len(store.categories),
    }
