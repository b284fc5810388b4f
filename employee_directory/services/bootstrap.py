"""Startup loading of the employee collection."""
from __future__ import annotations

import logging
from typing import List, Optional

from ..errors import PersistenceUnavailableError
from ..schemas import Employee
from .persistence import SnapshotRepository
from .seed import SeedClient
from .store import RecordStore

logger = logging.getLogger(__name__)


async def load_data(store: RecordStore, repository: SnapshotRepository, seed: SeedClient) -> List[Employee]:
    """Fill ``store`` from the stored snapshot, or from the seed if there is none.

    A missing, empty or malformed snapshot, one that repeats an id, and an
    unreachable database all fall back to the seed. Seed failures propagate.
    """

    employees: Optional[List[Employee]]
    try:
        employees = await repository.load()
    except PersistenceUnavailableError as exc:
        logger.warning("Snapshot storage unavailable, falling back to seed: %s", exc)
        employees = None

    if employees:
        try:
            store.set_employees(employees)
            return employees
        except ValueError as exc:
            logger.warning("Stored snapshot is inconsistent, falling back to seed: %s", exc)

    logger.info("No usable stored employees; loading seed from %s", seed.source)
    employees = await seed.fetch_employees()
    store.set_employees(employees)
    return employees
