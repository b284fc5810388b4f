"""Application settings and configuration helpers."""
from functools import lru_cache
import os
from pathlib import Path

from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()

DEFAULT_SEED_PATH = Path(__file__).resolve().parent / "data" / "employees.json"


class Settings(BaseModel):
    """Runtime configuration loaded from environment variables."""

    database_url: str = Field(
        default="sqlite+aiosqlite:///./employee_directory.db", alias="DATABASE_URL"
    )
    seed_url: str = Field(default=str(DEFAULT_SEED_PATH), alias="SEED_URL")
    seed_timeout: float = Field(default=10.0, alias="SEED_TIMEOUT")
    storage_key: str = Field(default="employees", alias="STORAGE_KEY")
    default_language: str = Field(default="en", alias="DEFAULT_LANGUAGE")
    items_per_page: int = Field(default=10, ge=1, alias="ITEMS_PER_PAGE")
    grid_items_per_page: int = Field(default=4, ge=1, alias="GRID_ITEMS_PER_PAGE")
    persistence_retries: int = Field(default=1, ge=0, alias="PERSISTENCE_RETRIES")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


def settings_from_env() -> Settings:
    """Build Settings from the variables currently set in the environment."""

    values = {
        field.alias: os.environ[field.alias]
        for field in Settings.model_fields.values()
        if field.alias and field.alias in os.environ
    }
    return Settings(**values)


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return settings_from_env()
