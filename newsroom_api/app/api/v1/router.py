"""
Top‑level router for version 1 of the API.

This router aggregates the resource routers under their collection
prefixes.  When a new resource is added, include its router here.
"""

from fastapi import APIRouter

from .endpoints import articles, categories, health, journalists

router = APIRouter()

router.include_router(articles.router, prefix="/articles", tags=["articles"])
router.include_router(journalists.router, prefix="/journalists", tags=["journalists"])
router.include_router(categories.router, prefix="/categories", tags=["categories"])
# The health router defines its own "/health" path internally.
router.include_router(health.router, tags=["health"])
