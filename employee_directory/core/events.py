"""Qt signals mirroring record store notifications.

Widgets connect to these signals instead of subscribing to the store
directly, so a view can react to shared state changes without holding a
reference to the store itself.
"""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..schemas import EmployeesChanged, LanguageChanged
from ..services.store import RecordStore


class EmployeeEvents(QObject):
    """Signals related to employee data and locale changes."""

    employees_changed = Signal(object)
    language_changed = Signal(str)

    def __init__(self, store: RecordStore, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._subscriptions = [
            store.subscribe(self._on_employees_changed),
            store.subscribe_language(self._on_language_changed),
        ]

    def _on_employees_changed(self, event: EmployeesChanged) -> None:
        self.employees_changed.emit(list(event.employees))

    def _on_language_changed(self, event: LanguageChanged) -> None:
        self.language_changed.emit(event.language)

    def detach(self) -> None:
        """Stop relaying store notifications."""

        for subscription in self._subscriptions:
            subscription.cancel()
        self._subscriptions = []
