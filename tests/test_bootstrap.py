"""Tests for startup loading."""
import json
import logging
from pathlib import Path

import pytest

from employee_directory.errors import PersistenceUnavailableError, SeedUnavailableError
from employee_directory.services.bootstrap import load_data
from employee_directory.services.seed import SeedClient
from employee_directory.services.store import RecordStore

from .conftest import SAMPLE_EMPLOYEES, MemorySnapshotRepository


class UnavailableRepository(MemorySnapshotRepository):
    async def load(self):
        raise PersistenceUnavailableError("locked")


@pytest.mark.asyncio
async def test_prefers_stored_snapshot(seed_file: Path) -> None:
    stored = json.dumps(SAMPLE_EMPLOYEES[:1])
    repository = MemorySnapshotRepository(stored=stored)
    store = RecordStore(repository=repository)

    await load_data(store, repository, SeedClient(str(seed_file)))

    assert [e.id for e in store.employees] == [1]


@pytest.mark.asyncio
async def test_empty_snapshot_falls_back_to_seed(seed_file: Path) -> None:
    repository = MemorySnapshotRepository(stored="[]")
    store = RecordStore(repository=repository)
    events = []
    store.subscribe(events.append)

    await load_data(store, repository, SeedClient(str(seed_file)))
    await store.flush()

    assert [e.id for e in store.employees] == [1, 2, 3]
    assert len(events) == 1
    assert repository.saved_ids() == [1, 2, 3]


@pytest.mark.asyncio
async def test_unavailable_storage_falls_back_to_seed(seed_file: Path, caplog) -> None:
    repository = UnavailableRepository()
    store = RecordStore()

    with caplog.at_level(logging.WARNING):
        await load_data(store, repository, SeedClient(str(seed_file)))

    assert len(store) == 3
    assert "falling back to seed" in caplog.text


@pytest.mark.asyncio
async def test_seed_failure_propagates(tmp_path: Path) -> None:
    repository = MemorySnapshotRepository()
    store = RecordStore()

    with pytest.raises(SeedUnavailableError):
        await load_data(store, repository, SeedClient(str(tmp_path / "missing.json")))
    assert len(store) == 0


@pytest.mark.asyncio
async def test_snapshot_with_repeated_ids_falls_back_to_seed(seed_file: Path, caplog) -> None:
    stored = json.dumps([SAMPLE_EMPLOYEES[0], SAMPLE_EMPLOYEES[0]])
    repository = MemorySnapshotRepository(stored=stored)
    store = RecordStore(repository=repository)

    with caplog.at_level(logging.WARNING):
        await load_data(store, repository, SeedClient(str(seed_file)))
    await store.flush()

    assert [e.id for e in store.employees] == [1, 2, 3]
    assert repository.saved_ids() == [1, 2, 3]
    assert "falling back to seed" in caplog.text
