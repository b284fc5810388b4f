"""Tests for display formatters."""
from employee_directory.core.formatters import (
    POSITIONS,
    format_date,
    format_date_for_input,
    get_translated_department,
    get_translated_position,
)
from employee_directory.core.translations import translate


def test_format_date() -> None:
    assert format_date("2023-01-15") == "15/01/2023"
    assert format_date("2023-01-15", "tr-TR") == "15.01.2023"
    assert format_date("2023-01-15", "en-US") == "01/15/2023"
    assert format_date("2023-01-15", "xx-XX") == "15/01/2023"


def test_format_date_invalid_and_blank() -> None:
    assert format_date("garbage") == "invalid-date"
    assert format_date("") == ""
    assert format_date(None) == ""


def test_format_date_for_input() -> None:
    assert format_date_for_input("2023-01-15T08:00:00") == "2023-01-15"
    assert format_date_for_input("nope") == ""
    assert format_date_for_input("") == ""


def test_positions() -> None:
    assert POSITIONS == ("Junior", "Medior", "Senior")


def test_translated_labels() -> None:
    def turkish(key: str) -> str:
        return translate(key, "tr")

    assert get_translated_department("Analytics", turkish) == "Analitik"
    assert get_translated_department("Marketing", turkish) == "Marketing"
    assert get_translated_position("Senior", turkish) == "Senior"
    assert get_translated_position("", turkish) == ""
