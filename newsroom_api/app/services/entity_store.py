"""
Generic in‑memory collection with CRUD operations.

An ``EntityStore`` owns one ordered list of pydantic models (articles,
journalists or categories) and is the only place that list is
mutated.  Lookups are linear scans over the list; insertion order is
kept for listing.

Ids are assigned by one of two strategies:

``sequential``
    A counter that only grows.  An id is never handed out twice, even
    after the entity holding it was deleted.
``length``
    ``len(collection) + 1`` at insert time.  Deleting an entity and
    creating a new one can therefore produce an id that another entity
    still holds.  Kept for clients that depend on the old numbering.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, List, Mapping, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from newsroom_api.app.core.exceptions import NotFoundError, ValidationError

ID_STRATEGIES = ("sequential", "length")

T = TypeVar("T", bound=BaseModel)

logger = logging.getLogger(__name__)


class EntityStore(Generic[T]):
    """Ordered collection of entities of one type."""

    def __init__(
        self,
        model: Type[T],
        required_fields: Sequence[str],
        label: str,
        id_strategy: str = "sequential",
    ) -> None:
        """Create an empty store.

        Parameters
        ----------
        model : Type[T]
            Pydantic model of the stored entity.  It must declare an
            integer ``id`` field.
        required_fields : Sequence[str]
            Field names that must be present and truthy on create.
        label : str
            Singular, capitalised entity name used in error messages
            (``"Article"`` gives ``"Article not found"``).
        id_strategy : str
            ``"sequential"`` or ``"length"``.
        """
        if id_strategy not in ID_STRATEGIES:
            raise ValueError(
                f"Unknown id strategy {id_strategy!r}; expected one of {', '.join(ID_STRATEGIES)}"
            )
        self.model = model
        self.required_fields = tuple(required_fields)
        self.label = label
        self.id_strategy = id_strategy
        self._items: List[T] = []
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def list_all(self) -> List[T]:
        """Return all entities in insertion order.

        The returned list is a copy; the entities in it are the stored
        objects.
        """
        return list(self._items)

    def get_by_id(self, entity_id: Optional[int]) -> T:
        """Return the first entity whose id equals ``entity_id``.

        ``None`` (an identifier that could not be parsed) never matches.
        Raises ``NotFoundError`` when nothing matches.
        """
        return self._items[self._index_of(entity_id)]

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def create(self, fields: Mapping[str, Any]) -> T:
        """Validate ``fields``, assign an id and append a new entity.

        Required fields that are absent or falsy (``None``, ``""``,
        ``0``) are reported together in a single ``ValidationError``
        and nothing is appended.
        """
        missing = [name for name in self.required_fields if not fields.get(name)]
        if missing:
            logger.debug("Rejected %s create, missing %s", self.label, ", ".join(missing))
            raise ValidationError("Missing required fields", missing=missing)

        values = {
            name: value
            for name, value in fields.items()
            if name in self.model.model_fields and name != "id"
        }
        entity = self._build(id=self._next_id(), **values)
        self._items.append(entity)
        self._last_id = max(self._last_id, entity.id)
        logger.info("Created %s %s", self.label, entity.id)
        return entity

    def update(self, entity_id: Optional[int], fields: Mapping[str, Any]) -> T:
        """Apply a partial update and return the stored entity.

        Only known fields with a non‑``None`` value are written; ``id``
        is never changed.  The entity is updated in place, so earlier
        references to it observe the change.
        """
        entity = self.get_by_id(entity_id)
        changes = {
            name: value
            for name, value in fields.items()
            if value is not None and name in self.model.model_fields and name != "id"
        }
        if not changes:
            return entity

        # Validate the merged record first so a bad value leaves the
        # stored entity untouched.
        candidate = self._build(**{**entity.model_dump(), **changes})
        for name in changes:
            setattr(entity, name, getattr(candidate, name))
        logger.info("Updated %s %s (%s)", self.label, entity.id, ", ".join(sorted(changes)))
        return entity

    def delete_by_id(self, entity_id: Optional[int]) -> None:
        """Remove the entity with ``entity_id``; later entities shift down."""
        index = self._index_of(entity_id)
        del self._items[index]
        logger.info("Deleted %s %s", self.label, entity_id)

    def clear(self) -> None:
        """Drop every entity and reset id assignment."""
        self._items.clear()
        self._last_id = 0

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _next_id(self) -> int:
        if self.id_strategy == "length":
            return len(self._items) + 1
        return self._last_id + 1

    def _index_of(self, entity_id: Optional[int]) -> int:
        if entity_id is not None:
            for index, entity in enumerate(self._items):
                if entity.id == entity_id:
                    return index
        logger.debug("%s %s not found", self.label, entity_id)
        raise NotFoundError(f"{self.label} not found")

    def _build(self, **values: Any) -> T:
        try:
            return self.model.model_validate(values)
        except SchemaValidationError as exc:
            fields = sorted({str(error["loc"][0]) for error in exc.errors() if error.get("loc")})
            raise ValidationError(
                f"Invalid {self.label.lower()} fields: {', '.join(fields)}", missing=[]
            ) from exc
