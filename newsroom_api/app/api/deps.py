"""
Shared FastAPI dependencies and path helpers.

``get_store`` hands the application's ``NewsroomStore`` to a route.
``parse_identifier`` turns an ``{id}`` path segment into an integer
the way lenient clients expect: leading whitespace and a sign are
allowed and anything after the digits is ignored, so ``"12abc"`` is
``12``.  A segment without leading digits gives ``None``, which never
matches a stored id and therefore ends in a 404 rather than a 422.
"""

import re
from typing import Optional

from fastapi import Request

from newsroom_api.app.core.store import NewsroomStore

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def get_store(request: Request) -> NewsroomStore:
    return request.app.state.store


def parse_identifier(raw: str) -> Optional[int]:
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))
