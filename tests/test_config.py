"""Tests for environment-driven settings."""
from employee_directory.config import DEFAULT_SEED_PATH, Settings, settings_from_env


def test_defaults(monkeypatch) -> None:
    for name in ("DATABASE_URL", "SEED_URL", "ITEMS_PER_PAGE", "DEFAULT_LANGUAGE"):
        monkeypatch.delenv(name, raising=False)

    settings = settings_from_env()

    assert settings.database_url.startswith("sqlite+aiosqlite://")
    assert settings.seed_url == str(DEFAULT_SEED_PATH)
    assert settings.items_per_page == 10
    assert settings.grid_items_per_page == 4


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("ITEMS_PER_PAGE", "5")
    monkeypatch.setenv("DEFAULT_LANGUAGE", "tr")
    monkeypatch.setenv("SEED_URL", "https://seed.test/employees.json")

    settings = settings_from_env()

    assert settings.items_per_page == 5
    assert settings.default_language == "tr"
    assert settings.seed_url == "https://seed.test/employees.json"


def test_field_names_are_accepted() -> None:
    assert Settings(storage_key="staff").storage_key == "staff"
