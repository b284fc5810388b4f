"""Tests for the Qt signal bridge."""
import pytest

pytest.importorskip("PySide6")

from employee_directory.core.events import EmployeeEvents  # noqa: E402


def test_store_notifications_become_signals(store, employee_form) -> None:
    events = EmployeeEvents(store)
    employees_seen = []
    languages_seen = []
    events.employees_changed.connect(employees_seen.append)
    events.language_changed.connect(languages_seen.append)

    store.add(employee_form())
    store.set_language("tr")

    assert len(employees_seen) == 1
    assert [e.id for e in employees_seen[0]] == [1, 2, 3, 4]
    assert languages_seen == ["tr"]


def test_detach(store, employee_form) -> None:
    events = EmployeeEvents(store)
    seen = []
    events.employees_changed.connect(seen.append)

    events.detach()
    store.add(employee_form())

    assert seen == []
