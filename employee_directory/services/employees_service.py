"""
Employee submission workflow used by the API and the CLI.

Mirrors what an add/edit form does: sanitize the free-text fields, run the
validation engine with the store as uniqueness oracle, and only commit when
there are no violations.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.security import sanitize_email, sanitize_input, sanitize_phone
from ..core.validation import validate_form
from ..schemas import Employee, EmployeeInput
from .store import RecordStore

_SANITIZERS: Dict[str, Callable[[Any], str]] = {
    "first_name": sanitize_input,
    "last_name": sanitize_input,
    "email": sanitize_email,
    "phone": sanitize_phone,
    "department": sanitize_input,
    "position": sanitize_input,
    "date_of_employment": sanitize_input,
    "date_of_birth": sanitize_input,
}


@dataclass
class SubmissionResult:
    """Outcome of a submission: the committed employee or the violations."""

    employee: Optional[Employee] = None
    errors: Dict[str, List[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def clean_form(form_data: Mapping[str, Any] | EmployeeInput) -> EmployeeInput:
    """Coerce a raw form to ``EmployeeInput`` and sanitize every field."""

    data = form_data if isinstance(form_data, EmployeeInput) else EmployeeInput.model_validate(dict(form_data))
    values = data.model_dump()
    return EmployeeInput(**{name: _SANITIZERS[name](value) for name, value in values.items()})


def submit_employee(
    store: RecordStore,
    form_data: Mapping[str, Any] | EmployeeInput,
    employee_id: Optional[int] = None,
) -> SubmissionResult:
    """
    Validate and commit a form.

    With ``employee_id`` the record is updated (its own email does not count
    as a duplicate) and ``EmployeeNotFoundError`` propagates when it is gone;
    otherwise a new record is added.
    """

    candidate = clean_form(form_data)
    errors = validate_form(candidate, store=store, exclude_id=employee_id)
    if errors:
        return SubmissionResult(errors=errors)

    if employee_id is not None:
        employee = store.update(employee_id, candidate)
    else:
        employee = store.add(candidate)
    return SubmissionResult(employee=employee)


def translate_errors(
    errors: Mapping[str, List[str]],
    translate: Callable[[str], str],
) -> Dict[str, List[str]]:
    """Map violation identifiers to display text with an injected translator."""

    return {name: [translate(code) for code in codes] for name, codes in errors.items()}
