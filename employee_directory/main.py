"""Command-line entry point for the employee directory package."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from typing import Sequence

from .config import Settings, get_settings
from .core.database import build_engine, build_sessionmaker, init_db
from .core.formatters import format_date, get_translated_department, get_translated_position
from .core.pagination import PageResult, paginate
from .core.security import sanitize_input
from .core.translations import available_languages, detect_language
from .schemas import Employee
from .services.bootstrap import load_data
from .services.persistence import SnapshotRepository
from .services.seed import SeedClient
from .services.store import RecordStore

_DATE_LOCALES = {"en": "en-GB", "tr": "tr-TR"}

_COLUMNS = (
    "firstName",
    "lastName",
    "dateOfEmployment",
    "dateOfBirth",
    "phone",
    "email",
    "department",
    "position",
)


def render_page(store: RecordStore, page: PageResult[Employee]) -> str:
    """Render one page as plain text with headers in the store's language."""

    if not page.items:
        return store.t("noEmployeesFound")

    locale = _DATE_LOCALES.get(store.language, "en-GB")
    lines = [" | ".join(store.t(column) for column in _COLUMNS)]
    for employee in page.items:
        lines.append(
            " | ".join(
                (
                    employee.first_name,
                    employee.last_name,
                    format_date(employee.date_of_employment, locale),
                    format_date(employee.date_of_birth, locale),
                    employee.phone,
                    employee.email,
                    get_translated_department(employee.department, store.t),
                    get_translated_position(employee.position, store.t),
                )
            )
        )
    lines.append(
        f"{store.t('page')} {page.current_page} {store.t('of')} {page.total_pages}"
        f" ({page.total_items})"
    )
    return "\n".join(lines)


async def _run(args: argparse.Namespace, settings: Settings) -> str:
    engine = build_engine(settings.database_url)
    try:
        await init_db(engine)
        repository = SnapshotRepository(build_sessionmaker(engine), key=settings.storage_key)
        if args.reset:
            await repository.clear()

        store = RecordStore(
            repository=repository,
            language=detect_language(args.language, settings.default_language, os.getenv("LANG")),
            persistence_retries=settings.persistence_retries,
        )
        await load_data(store, repository, SeedClient(settings.seed_url, timeout=settings.seed_timeout))

        per_page = args.per_page or settings.items_per_page
        page = paginate(store.search(sanitize_input(args.search)), args.page, per_page)
        output = render_page(store, page)
        await store.flush()
        return output
    finally:
        await engine.dispose()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse CLI arguments, load the directory and print one page."""

    parser = argparse.ArgumentParser(
        prog="employee_directory",
        description="Search and page through the employee directory.",
    )
    parser.add_argument("--search", default="", help="Case-insensitive search query.")
    parser.add_argument("--page", type=int, default=1, help="1-based page number.")
    parser.add_argument("--per-page", type=int, default=None, help="Rows per page.")
    parser.add_argument(
        "--language",
        choices=sorted(available_languages()),
        default=None,
        help="Display language for headers and labels.",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Discard the stored snapshot and reload the seed data.",
    )

    args = parser.parse_args(None if argv is None else list(argv))
    if args.per_page is not None and args.per_page < 1:
        parser.error("--per-page must be at least 1")

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    print(asyncio.run(_run(args, settings)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
