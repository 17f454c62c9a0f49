"""In-memory repositories backed by a whole-file storage adapter."""
from __future__ import annotations

import threading
from typing import Callable, Generic, Optional, Protocol, TypeVar

from crm.domain.entities import Order
from crm.repositories.json_storage import JsonFileStorage


class HasId(Protocol):
    @property
    def id(self) -> int: ...


T = TypeVar("T", bound=HasId)


class Repository(Generic[T]):
    """
    Owns the in-memory list for one entity type.

    The list is loaded once at construction; later changes to the file are
    not seen until a new repository is built. Nothing reaches disk until
    save() is called. Every operation runs under the same re-entrant lock,
    which callers may also hold to group several operations.
    """

    def __init__(self, storage: JsonFileStorage[T]) -> None:
        self.storage = storage
        self.lock = threading.RLock()
        self._items: list[T] = list(storage.load())

    def get_all(self) -> list[T]:
        # Live list, not a copy.
        with self.lock:
            return self._items

    def get_by_id(self, entity_id: int) -> Optional[T]:
        with self.lock:
            for item in self._items:
                if item.id == entity_id:
                    return item
            return None

    def find(self, predicate: Callable[[T], bool]) -> list[T]:
        with self.lock:
            return [item for item in self._items if predicate(item)]

    def add(self, entity: T) -> None:
        with self.lock:
            self._items.append(entity)

    def get_next_id(self) -> int:
        with self.lock:
            if not self._items:
                return 1
            return max(item.id for item in self._items) + 1

    def create(self, factory: Callable[[int], T]) -> T:
        """Assign the next id, build the entity with it and append it."""
        with self.lock:
            entity = factory(self.get_next_id())
            self.add(entity)
            return entity

    def discard(self, entity: T) -> None:
        """Undo an add whose save failed; removes the last matching entity."""
        with self.lock:
            for index in range(len(self._items) - 1, -1, -1):
                if self._items[index] is entity:
                    del self._items[index]
                    return

    def save(self) -> None:
        with self.lock:
            self.storage.save(self._items)


class OrderRepository(Repository[Order]):
    def get_by_client_id(self, client_id: int) -> list[Order]:
        return self.find(lambda order: order.client_id == client_id)
