"""Shared fixtures for the employee directory tests."""
import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from employee_directory.api import create_app
from employee_directory.config import Settings
from employee_directory.errors import PersistenceUnavailableError
from employee_directory.services.persistence import deserialize_snapshot
from employee_directory.services.store import RecordStore

SAMPLE_EMPLOYEES: List[Dict[str, Any]] = [
    {
        "id": 1,
        "firstName": "Ahmet",
        "lastName": "Sourtimes",
        "dateOfEmployment": "2022-09-23",
        "dateOfBirth": "1990-03-15",
        "phone": "+(90) 532 123 45 67",
        "email": "ahmet@sourtimes.org",
        "department": "Analytics",
        "position": "Junior",
    },
    {
        "id": 2,
        "firstName": "Zeynep",
        "lastName": "Kaya",
        "dateOfEmployment": "2021-06-12",
        "dateOfBirth": "1988-07-22",
        "phone": "+(90) 545 234 56 78",
        "email": "zeynep.kaya@kaya.com",
        "department": "Tech",
        "position": "Senior",
    },
    {
        "id": 3,
        "firstName": "Mehmet",
        "lastName": "Özkan",
        "dateOfEmployment": "2023-01-15",
        "dateOfBirth": "1992-11-08",
        "phone": "+(90) 536 345 67 89",
        "email": "mehmet.ozkan@ozkan.org",
        "department": "Analytics",
        "position": "Medior",
    },
]


class MemorySnapshotRepository:
    """In-memory stand-in for ``SnapshotRepository``."""

    def __init__(self, stored: Optional[str] = None, fail_times: int = 0) -> None:
        self.stored = stored
        self.saves: List[str] = []
        self.fail_times = fail_times

    async def save(self, serialized: str) -> None:
        if self.fail_times > 0:
            self.fail_times -= 1
            raise PersistenceUnavailableError("disk unavailable")
        self.saves.append(serialized)
        self.stored = serialized

    async def load(self):
        if not self.stored:
            return None
        return deserialize_snapshot(self.stored)

    def saved_ids(self) -> List[int]:
        return [employee["id"] for employee in json.loads(self.stored or "[]")]


@pytest.fixture
def employee_form() -> Callable[..., Dict[str, Any]]:
    """Factory for a valid add/edit form; keyword arguments override fields."""

    def _build(**overrides: Any) -> Dict[str, Any]:
        data = {
            "firstName": "Ada",
            "lastName": "Lovelace",
            "email": "ada@example.com",
            "phone": "0532 123 45 67",
            "department": "Tech",
            "position": "Senior",
            "dateOfEmployment": "2020-01-01",
            "dateOfBirth": "1990-12-10",
        }
        data.update(overrides)
        return data

    return _build


@pytest.fixture
def store() -> RecordStore:
    """A store preloaded with three employees and no persistence."""

    return RecordStore(SAMPLE_EMPLOYEES)


@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    path = tmp_path / "employees.json"
    path.write_text(json.dumps(SAMPLE_EMPLOYEES), encoding="utf-8")
    return path


@pytest.fixture
def settings(tmp_path: Path, seed_file: Path) -> Settings:
    """Settings pointing at a throwaway SQLite file and the sample seed."""

    return Settings(
        database_url=f"sqlite+aiosqlite:///{(tmp_path / 'test_directory.db').as_posix()}",
        seed_url=str(seed_file),
        default_language="en",
    )


@pytest_asyncio.fixture
async def client(settings: Settings) -> AsyncClient:
    """Provide an HTTP client with the application lifespan running."""

    app = create_app(settings)
    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            client.app = app
            yield client
