"""Tests for translation lookup and locale detection."""
from employee_directory.core.translations import (
    TRANSLATIONS,
    available_languages,
    detect_language,
    translate,
)


def test_every_locale_has_the_full_table() -> None:
    english = set(TRANSLATIONS["en"])
    for language in available_languages():
        assert set(TRANSLATIONS[language]) == english


def test_translate_in_active_language() -> None:
    assert translate("employees", "tr") == "Çalışanlar"
    assert translate("employees", "en") == "Employees"


def test_unknown_language_falls_back_to_default() -> None:
    assert translate("save", "de") == "Save"


def test_unknown_key_falls_back_to_key() -> None:
    assert translate("someMissingKey", "tr") == "someMissingKey"


def test_placeholders_are_replaced() -> None:
    text = translate("selectedEmployeeWillBeDeleted", "tr", name="Ayşe Demir")
    assert text == "Ayşe Demir adlı çalışanın kaydı silinecek"


def test_detect_language() -> None:
    assert detect_language(None, "tr_TR.UTF-8") == "tr"
    assert detect_language("en-GB", "tr") == "en"
    assert detect_language("fr", "") == "en"
    assert detect_language() == "en"
