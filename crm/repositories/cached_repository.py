"""Read-through id cache in front of a Repository."""
from __future__ import annotations

import logging
from typing import Callable, Generic, Optional

from crm.repositories.repository import Repository, T

logger = logging.getLogger(__name__)


class CachedRepository(Generic[T]):
    """
    Same surface as Repository, with get_by_id answered from a dict of
    previously fetched entities. Any add clears the whole cache.
    """

    def __init__(self, inner: Repository[T]) -> None:
        self.inner = inner
        self._cache: dict[int, T] = {}

    @property
    def lock(self):
        return self.inner.lock

    @property
    def storage(self):
        return self.inner.storage

    def get_all(self) -> list[T]:
        return self.inner.get_all()

    def get_by_id(self, entity_id: int) -> Optional[T]:
        with self.inner.lock:
            if entity_id in self._cache:
                return self._cache[entity_id]
            entity = self.inner.get_by_id(entity_id)
            # Misses are not remembered.
            if entity is not None:
                self._cache[entity_id] = entity
            return entity

    def find(self, predicate: Callable[[T], bool]) -> list[T]:
        return self.inner.find(predicate)

    def add(self, entity: T) -> None:
        with self.inner.lock:
            self.inner.add(entity)
            self.invalidate()

    def get_next_id(self) -> int:
        return self.inner.get_next_id()

    def create(self, factory: Callable[[int], T]) -> T:
        with self.inner.lock:
            entity = self.inner.create(factory)
            self.invalidate()
            return entity

    def discard(self, entity: T) -> None:
        with self.inner.lock:
            self.inner.discard(entity)
            self.invalidate()

    def save(self) -> None:
        self.inner.save()

    def invalidate(self) -> None:
        if self._cache:
            logger.debug("Dropping %d cached entities", len(self._cache))
        self._cache.clear()
