"""
Errors raised by the in‑memory store.

Only two outcomes exist besides success: the requested entity (or
relationship result) does not exist, or a create/update payload is
not acceptable.  Endpoints translate them into HTTP 404 and 400.
"""

from typing import Iterable, Optional


class StoreError(Exception):
    """Base class for store failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(StoreError):
    """No entity with the given id, or an empty relationship result."""


class ValidationError(StoreError):
    """A payload is missing required fields or references a missing entity."""

    def __init__(self, message: str, missing: Optional[Iterable[str]] = None) -> None:
        super().__init__(message)
        self.missing = list(missing or [])
