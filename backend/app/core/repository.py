"""Repository contract and its in-memory implementation."""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

from app.core.errors import InvalidArgumentError
from app.models.employee import Entity

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", bound=Entity)


class Repository(ABC, Generic[EntityT]):
    @abstractmethod
    def get_by_id(self, entity_id: int) -> EntityT | None: ...

    @abstractmethod
    def get_all(self) -> list[EntityT]: ...

    @abstractmethod
    def create(self, entity: EntityT) -> EntityT: ...

    @abstractmethod
    def update(self, entity: EntityT, fields: Iterable[str] | None = None) -> EntityT: ...

    @abstractmethod
    def delete(self, entity: EntityT) -> None: ...


class InMemoryRepository(Repository[EntityT]):
    """Process-local store keyed by id.

    The store is empty when constructed and lives as long as the instance;
    ``clear()`` discards it. Stored entities never leave the repository:
    every read returns a deep copy, and every write stores one. All access
    goes through a single re-entrant lock.
    """

    # Fields ``update`` copies when the caller names none.
    default_update_fields: tuple[str, ...] = ()

    def __init__(self) -> None:
        self._entities: dict[int, EntityT] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)

    def get_by_id(self, entity_id: int) -> EntityT | None:
        with self._lock:
            entity = self._entities.get(entity_id)
            return entity.model_copy(deep=True) if entity is not None else None

    def get_all(self) -> list[EntityT]:
        with self._lock:
            return [entity.model_copy(deep=True) for entity in self._entities.values()]

    def create(self, entity: EntityT) -> EntityT:
        if entity is None:
            raise InvalidArgumentError("entity must not be None")

        with self._lock:
            # max + 1, not a running counter: freeing the top id makes it reusable
            entity.id = max(self._entities, default=0) + 1
            self._entities[entity.id] = entity.model_copy(deep=True)
            logger.debug("Assigned id=%d to new %s", entity.id, type(entity).__name__)
            return entity.model_copy(deep=True)

    def update(self, entity: EntityT, fields: Iterable[str] | None = None) -> EntityT:
        """Merge ``fields`` of the ``entity`` snapshot into the stored entity.

        Raises ``InvalidArgumentError`` when nothing is stored under
        ``entity.id``; callers that want a not-found outcome must check with
        ``get_by_id`` first.
        """
        if entity is None:
            raise InvalidArgumentError("entity must not be None")

        names = tuple(fields) if fields is not None else self.default_update_fields
        with self._lock:
            existing = self._entities.get(entity.id)
            if existing is None:
                raise InvalidArgumentError(f"No {type(entity).__name__} stored with id={entity.id}")

            unknown = [name for name in names if name not in type(existing).model_fields or name == "id"]
            if unknown:
                raise InvalidArgumentError(f"Cannot update fields: {', '.join(unknown)}")

            merged = existing.model_copy(
                update={name: getattr(entity, name) for name in names},
                deep=True,
            )
            self._entities[entity.id] = merged
            return merged.model_copy(deep=True)

    def delete(self, entity: EntityT) -> None:
        if entity is None:
            raise InvalidArgumentError("entity must not be None")

        with self._lock:
            self._entities.pop(entity.id, None)

    def clear(self) -> None:
        with self._lock:
            self._entities.clear()
