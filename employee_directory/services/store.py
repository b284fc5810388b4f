"""The record store: sole owner of the employee collection.

Every mutation swaps in a complete new tuple of frozen ``Employee`` models,
schedules a snapshot write, and then publishes the new snapshot to every
subscribed observer before returning. Validation is the caller's job (see
``employees_service.submit_employee``); the store only answers the
uniqueness question for it.
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Generic, List, Optional, Protocol, Set, Tuple, TypeVar, Union

from ..core.translations import DEFAULT_LANGUAGE, is_supported, translate
from ..errors import EmployeeNotFoundError, PersistenceUnavailableError
from ..schemas import (
    SEARCHABLE_FIELDS,
    Employee,
    EmployeeInput,
    EmployeesChanged,
    LanguageChanged,
)
from .persistence import serialize_snapshot

logger = logging.getLogger(__name__)

P = TypeVar("P")

EmployeeData = Union[EmployeeInput, Mapping[str, Any]]


class SnapshotWriter(Protocol):
    async def save(self, serialized: str) -> None: ...


class Subscription:
    """Handle returned by ``subscribe``; ``cancel()`` detaches the observer."""

    def __init__(self, channel: "_Channel[Any]", observer: Callable[[Any], None]) -> None:
        self._channel = channel
        self._observer = observer

    @property
    def active(self) -> bool:
        return self._channel.has(self._observer)

    def cancel(self) -> None:
        self._channel.remove(self._observer)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cancel()


class _Channel(Generic[P]):
    """Ordered observer list for one kind of notification."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._observers: List[Callable[[P], None]] = []

    def add(self, observer: Callable[[P], None]) -> Subscription:
        if observer not in self._observers:
            self._observers.append(observer)
        return Subscription(self, observer)

    def remove(self, observer: Callable[[P], None]) -> bool:
        if observer in self._observers:
            self._observers.remove(observer)
            return True
        return False

    def has(self, observer: Callable[[P], None]) -> bool:
        return observer in self._observers

    def __len__(self) -> int:
        return len(self._observers)

    def publish(self, payload: P) -> None:
        # Observers added or removed during the publish take effect next time.
        for observer in list(self._observers):
            try:
                observer(payload)
            except Exception:
                logger.exception("Observer %r failed on %s notification", observer, self.name)


def _coerce_id(employee_id: Any) -> Optional[int]:
    try:
        return int(employee_id)
    except (TypeError, ValueError):
        return None


def _as_input(candidate: EmployeeData) -> EmployeeInput:
    if isinstance(candidate, EmployeeInput):
        return EmployeeInput.model_validate(candidate.model_dump())
    return EmployeeInput.model_validate(dict(candidate))


def _as_employee(record: Union[Employee, Mapping[str, Any]]) -> Employee:
    if isinstance(record, Employee):
        return record
    return Employee.model_validate(dict(record))


class RecordStore:
    """Authoritative in-memory employee collection with change notifications."""

    def __init__(
        self,
        employees: Iterable[Union[Employee, Mapping[str, Any]]] = (),
        repository: Optional[SnapshotWriter] = None,
        language: str = DEFAULT_LANGUAGE,
        persistence_retries: int = 1,
    ) -> None:
        self._employees: Tuple[Employee, ...] = self._checked(employees)
        self._repository = repository
        self._language = language if is_supported(language) else DEFAULT_LANGUAGE
        self._persistence_retries = max(persistence_retries, 0)
        self._employee_channel: _Channel[EmployeesChanged] = _Channel("employees")
        self._language_channel: _Channel[LanguageChanged] = _Channel("language")
        self._write_seq = 0
        self._pending: Set[asyncio.Task[None]] = set()

    # ---------- read side ----------

    @property
    def employees(self) -> Tuple[Employee, ...]:
        return self._employees

    def __len__(self) -> int:
        return len(self._employees)

    def get_by_id(self, employee_id: Any) -> Optional[Employee]:
        target = _coerce_id(employee_id)
        for employee in self._employees:
            if employee.id == target:
                return employee
        return None

    def search(self, query: str) -> List[Employee]:
        """Case-insensitive substring match over the searchable fields."""

        if not query:
            return list(self._employees)
        needle = query.lower()
        return [
            employee
            for employee in self._employees
            if any(needle in getattr(employee, field).lower() for field in SEARCHABLE_FIELDS)
        ]

    def is_email_unique(self, email: str, exclude_id: Any = None) -> bool:
        target = (email or "").lower()
        excluded = _coerce_id(exclude_id) if exclude_id is not None else None
        return not any(
            employee.email.lower() == target and employee.id != excluded
            for employee in self._employees
        )

    # ---------- write side ----------

    def set_employees(self, employees: Iterable[Union[Employee, Mapping[str, Any]]]) -> None:
        """Replace the whole collection, persist it and notify observers."""

        self._commit(self._checked(employees))

    def add(self, candidate: EmployeeData) -> Employee:
        """Append a new employee with id ``max(ids, 0) + 1``. Does not validate."""

        data = _as_input(candidate)
        new_id = max((employee.id for employee in self._employees), default=0) + 1
        employee = Employee(id=new_id, **data.model_dump())
        self._commit(self._employees + (employee,))
        return employee

    def update(self, employee_id: Any, candidate: EmployeeData) -> Employee:
        """Replace every field of ``employee_id`` except the id itself."""

        index = self._index_of(employee_id)
        current = self._employees[index]
        updated = Employee(id=current.id, **_as_input(candidate).model_dump())
        self._commit(self._employees[:index] + (updated,) + self._employees[index + 1 :])
        return updated

    def delete(self, employee_id: Any) -> Employee:
        """Remove and return the employee with ``employee_id``."""

        index = self._index_of(employee_id)
        removed = self._employees[index]
        self._commit(self._employees[:index] + self._employees[index + 1 :])
        return removed

    def _index_of(self, employee_id: Any) -> int:
        target = _coerce_id(employee_id)
        for index, employee in enumerate(self._employees):
            if employee.id == target:
                return index
        raise EmployeeNotFoundError(employee_id)

    @staticmethod
    def _checked(employees: Iterable[Union[Employee, Mapping[str, Any]]]) -> Tuple[Employee, ...]:
        records = tuple(_as_employee(record) for record in employees)
        seen: Set[int] = set()
        for record in records:
            if record.id in seen:
                raise ValueError(f"Duplicate employee id {record.id}")
            seen.add(record.id)
        return records

    def _commit(self, employees: Tuple[Employee, ...]) -> None:
        self._employees = employees
        self._schedule_persist(employees)
        self._employee_channel.publish(EmployeesChanged(employees=employees))

    # ---------- observers ----------

    def subscribe(self, observer: Callable[[EmployeesChanged], None]) -> Subscription:
        return self._employee_channel.add(observer)

    def unsubscribe(self, observer: Callable[[EmployeesChanged], None]) -> bool:
        return self._employee_channel.remove(observer)

    def subscribe_language(self, observer: Callable[[LanguageChanged], None]) -> Subscription:
        return self._language_channel.add(observer)

    def unsubscribe_language(self, observer: Callable[[LanguageChanged], None]) -> bool:
        return self._language_channel.remove(observer)

    # ---------- locale ----------

    @property
    def language(self) -> str:
        return self._language

    def set_language(self, language: str) -> bool:
        """Switch the display locale; unknown codes are rejected."""

        if not is_supported(language):
            return False
        if language != self._language:
            self._language = language
            self._language_channel.publish(LanguageChanged(language=language))
        return True

    def t(self, key: str, **replacements: object) -> str:
        return translate(key, self._language, **replacements)

    # ---------- persistence ----------

    def _schedule_persist(self, employees: Tuple[Employee, ...]) -> None:
        if self._repository is None:
            return

        self._write_seq += 1
        seq = self._write_seq
        payload = serialize_snapshot(employees)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No loop to defer onto; write before returning.
            asyncio.run(self._persist(seq, payload))
            return

        task = loop.create_task(self._persist(seq, payload))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _persist(self, seq: int, payload: str) -> None:
        attempts = self._persistence_retries + 1
        for attempt in range(1, attempts + 1):
            if seq != self._write_seq:
                logger.debug("Skipping superseded snapshot write #%d", seq)
                return
            try:
                await self._repository.save(payload)
                return
            except PersistenceUnavailableError as exc:
                if attempt == attempts:
                    logger.warning(
                        "Dropping snapshot write #%d after %d attempt(s): %s", seq, attempts, exc
                    )
                else:
                    logger.info("Retrying snapshot write #%d: %s", seq, exc)
            except Exception:
                logger.exception("Dropping snapshot write #%d after unexpected error", seq)
                return

    async def flush(self) -> None:
        """Wait until every scheduled snapshot write has finished."""

        while self._pending:
            await asyncio.gather(*list(self._pending))
