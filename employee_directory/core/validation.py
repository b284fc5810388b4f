"""Declarative field validation for employee forms.

The engine never mutates anything and never produces display text: it
returns violation identifiers such as ``firstNameRequired`` or
``emailNotUnique`` which callers translate themselves.
"""
from __future__ import annotations

import re
from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Protocol

from pydantic import BaseModel


class EmailRegistry(Protocol):
    """Anything that can answer the unique-email question (the record store)."""

    def is_email_unique(self, email: str, exclude_id: Optional[int] = None) -> bool: ...


_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE_SEPARATORS = re.compile(r"[\s\-()]")
_PHONE_PATTERN = re.compile(r"(\+90|90|0)?[1-9][0-9]{9}")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return not str(value).strip()


def is_present(value: Any) -> bool:
    """``required`` rule: ``None`` fails, numbers pass, text must be non-blank."""

    if value is None:
        return False
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return True
    return not _is_blank(value)


def is_email(value: Any) -> bool:
    if not value:
        return False
    return _EMAIL_PATTERN.fullmatch(str(value)) is not None


def is_phone(value: Any) -> bool:
    if not value:
        return False
    cleaned = _PHONE_SEPARATORS.sub("", str(value))
    return _PHONE_PATTERN.fullmatch(cleaned) is not None


def parse_date(value: Any) -> Optional[date]:
    """Parse ISO date or datetime text; return ``None`` when it does not parse."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def is_date(value: Any) -> bool:
    if not value:
        return False
    parsed = parse_date(value)
    return parsed is not None and parsed.year > 1900


VALIDATION_RULES: Dict[str, Callable[[Any], bool]] = {
    "required": is_present,
    "email": is_email,
    "phone": is_phone,
    "date": is_date,
}

FORM_RULES: Dict[str, tuple[str, ...]] = {
    "firstName": ("required",),
    "lastName": ("required",),
    "email": ("required", "email", "unique-email"),
    "phone": ("required", "phone"),
    "department": ("required",),
    "position": ("required",),
    "dateOfEmployment": ("required", "date"),
    "dateOfBirth": ("required", "date"),
}

# Format checks run in this order after ``required``.
_FORMAT_CHECKS: tuple[tuple[str, str], ...] = (
    ("email", "emailInvalid"),
    ("unique-email", "emailNotUnique"),
    ("phone", "phoneInvalid"),
    ("date", "dateInvalid"),
)


def validate_field(
    value: Any,
    rules: Sequence[str],
    field_name: str,
    store: Optional[EmailRegistry] = None,
    exclude_id: Optional[int] = None,
) -> List[str]:
    """Return the violation identifiers for a single field, in check order.

    A blank value only ever yields the ``required`` violation; format and
    uniqueness rules are skipped for it. ``unique-email`` is skipped when no
    store is supplied.
    """

    errors: List[str] = []

    if "required" in rules and not is_present(value):
        errors.append(f"{field_name}Required")

    if _is_blank(value):
        return errors

    for rule, code in _FORMAT_CHECKS:
        if rule not in rules:
            continue
        if rule == "unique-email":
            if store is not None and not store.is_email_unique(str(value), exclude_id):
                errors.append(code)
        elif not VALIDATION_RULES[rule](value):
            errors.append(code)

    return errors


def _to_snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def _field_value(form_data: Mapping[str, Any], field: str) -> Any:
    if field in form_data:
        return form_data[field]
    return form_data.get(_to_snake(field))


def validate_form(
    form_data: Mapping[str, Any] | BaseModel,
    store: Optional[EmailRegistry] = None,
    exclude_id: Optional[int] = None,
) -> Dict[str, List[str]]:
    """Validate every employee field independently.

    Returns a mapping of field name to violations; valid fields are absent,
    so an empty mapping means the form may be committed.
    """

    if isinstance(form_data, BaseModel):
        form_data = form_data.model_dump(by_alias=True)

    errors: Dict[str, List[str]] = {}
    for field, rules in FORM_RULES.items():
        field_errors = validate_field(
            _field_value(form_data, field),
            rules,
            field,
            store=store,
            exclude_id=exclude_id,
        )
        if field_errors:
            errors[field] = field_errors
    return errors
