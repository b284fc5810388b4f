"""Snapshot persistence for the employee collection.

Snapshots are stored as a single JSON document under a fixed key in a
SQLite key/value table. Reads fail soft: an undecodable snapshot is logged
and treated as absent.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import ValidationError
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from ..errors import PersistenceUnavailableError
from ..models import SnapshotEntry
from ..schemas import EMPLOYEE_LIST, Employee

logger = logging.getLogger(__name__)


def serialize_snapshot(employees: Iterable[Employee]) -> str:
    """Encode employees as an indented JSON array with camelCase keys."""

    return EMPLOYEE_LIST.dump_json(list(employees), by_alias=True, indent=2).decode("utf-8")


def deserialize_snapshot(payload: str) -> List[Employee]:
    """Decode a snapshot; raises ``pydantic.ValidationError`` when malformed."""

    return EMPLOYEE_LIST.validate_json(payload)


class SnapshotRepository:
    """Load and save the serialized collection under ``key``."""

    def __init__(self, sessionmaker: async_sessionmaker[AsyncSession], key: str = "employees") -> None:
        self._sessionmaker = sessionmaker
        self.key = key

    async def save(self, serialized: str) -> None:
        """Insert or replace the stored snapshot."""

        try:
            async with self._sessionmaker() as session:
                row = await session.get(SnapshotEntry, self.key)
                if row is None:
                    row = SnapshotEntry(key=self.key)
                    session.add(row)
                row.value = serialized
                row.updated_at = datetime.now(timezone.utc)
                await session.commit()
        except SQLAlchemyError as exc:
            raise PersistenceUnavailableError(f"Could not write snapshot '{self.key}'") from exc

    async def load_raw(self) -> Optional[str]:
        try:
            async with self._sessionmaker() as session:
                result = await session.execute(
                    select(SnapshotEntry.value).where(SnapshotEntry.key == self.key)
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise PersistenceUnavailableError(f"Could not read snapshot '{self.key}'") from exc

    async def load(self) -> Optional[List[Employee]]:
        """Return the stored employees, or ``None`` if absent or malformed."""

        raw = await self.load_raw()
        if not raw:
            return None
        try:
            return deserialize_snapshot(raw)
        except ValidationError as exc:
            logger.warning("Could not parse employees from storage: %s", exc)
            return None

    async def clear(self) -> None:
        try:
            async with self._sessionmaker() as session:
                await session.execute(delete(SnapshotEntry).where(SnapshotEntry.key == self.key))
                await session.commit()
        except SQLAlchemyError as exc:
            raise PersistenceUnavailableError(f"Could not clear snapshot '{self.key}'") from exc
