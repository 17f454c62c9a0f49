from __future__ import annotations

from datetime import datetime, timezone

from crm.domain.entities import Client
from crm.repositories.cached_repository import CachedRepository
from crm.repositories.repository import Repository


class CountingRepository(Repository[Client]):
    def __init__(self, storage):
        super().__init__(storage)
        self.get_by_id_calls = 0

    def get_by_id(self, entity_id):
        self.get_by_id_calls += 1
        return super().get_by_id(entity_id)


def _client(cid: int) -> Client:
    return Client(id=cid, name=f"c{cid}", email=f"c{cid}@x.com", created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))


def test_second_lookup_is_served_from_cache(client_storage):
    inner = CountingRepository(client_storage)
    inner.add(_client(1))
    repo = CachedRepository(inner)

    first = repo.get_by_id(1)
    second = repo.get_by_id(1)

    assert first == second == _client(1)
    assert inner.get_by_id_calls == 1


def test_add_invalidates_cache(client_storage):
    inner = CountingRepository(client_storage)
    inner.add(_client(1))
    repo = CachedRepository(inner)

    repo.get_by_id(1)
    repo.add(_client(2))
    repo.get_by_id(1)

    assert inner.get_by_id_calls == 2


def test_create_invalidates_cache(client_storage):
    inner = CountingRepository(client_storage)
    inner.add(_client(1))
    repo = CachedRepository(inner)

    repo.get_by_id(1)
    created = repo.create(_client)
    assert created.id == 2
    repo.get_by_id(1)

    assert inner.get_by_id_calls == 2


def test_misses_are_not_cached(client_storage):
    inner = CountingRepository(client_storage)
    repo = CachedRepository(inner)

    assert repo.get_by_id(5) is None
    assert repo.get_by_id(5) is None
    assert inner.get_by_id_calls == 2


def test_other_operations_delegate(client_storage):
    inner = Repository(client_storage)
    repo = CachedRepository(inner)
    repo.add(_client(1))

    assert repo.get_all() is inner.get_all()
    assert repo.get_next_id() == 2
    repo.save()
    assert Repository(client_storage).get_all() == [_client(1)]


def test_discard_removes_entity_and_invalidates_cache(client_storage):
    inner = CountingRepository(client_storage)
    inner.add(_client(1))
    repo = CachedRepository(inner)
    added = repo.create(_client)

    repo.get_by_id(1)
    repo.discard(added)

    assert repo.get_all() == [_client(1)]
    assert repo.get_next_id() == 2
    repo.get_by_id(1)
    assert inner.get_by_id_calls == 2
