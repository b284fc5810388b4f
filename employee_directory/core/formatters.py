"""Display helpers for employee fields."""
from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .validation import parse_date

POSITIONS = ("Junior", "Medior", "Senior")

INVALID_DATE = "invalid-date"

_DATE_PATTERNS = {
    "en-GB": "%d/%m/%Y",
    "en-US": "%m/%d/%Y",
    "tr-TR": "%d.%m.%Y",
}


def format_date(value: Any, locale: str = "en-GB") -> str:
    """Render an ISO date for display; unknown locales use the ``en-GB`` layout."""

    if not value:
        return ""
    parsed = parse_date(value)
    if parsed is None:
        return INVALID_DATE
    return parsed.strftime(_DATE_PATTERNS.get(locale, _DATE_PATTERNS["en-GB"]))


def format_date_for_input(value: Any) -> str:
    """Normalise a date to ``YYYY-MM-DD`` for form inputs, or ``""``."""

    if not value:
        return ""
    parsed = parse_date(value)
    return parsed.isoformat() if parsed else ""


def _translated_label(value: str, translate: Callable[[str], str]) -> str:
    if not value:
        return ""
    key = value.lower()
    translated = translate(key)
    return translated if translated != key else value


def get_translated_department(department: str, translate: Callable[[str], str]) -> str:
    return _translated_label(department, translate)


def get_translated_position(position: str, translate: Callable[[str], str]) -> str:
    return _translated_label(position, translate)
