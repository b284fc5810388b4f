"""
Client for the static seed resource used when no snapshot is stored.

The seed is a JSON array of employee objects. ``SEED_URL`` may point at an
``http(s)`` endpoint, fetched with httpx, or at a local file:

    seed = SeedClient("https://example.org/employees.json")
    employees = await seed.fetch_employees()
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional
from urllib.parse import urlparse

import httpx
from pydantic import ValidationError

from ..errors import SeedUnavailableError
from ..schemas import EMPLOYEE_LIST, Employee


class SeedClient:
    """Fetch seed employees from a URL or a file path."""

    def __init__(
        self,
        source: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.source = source
        self.timeout = timeout
        self._transport = transport

    @property
    def is_remote(self) -> bool:
        return urlparse(self.source).scheme in ("http", "https")

    async def _fetch_remote(self) -> str:
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            try:
                resp = await client.get(self.source)
                resp.raise_for_status()
            except httpx.HTTPStatusError as exc:
                raise SeedUnavailableError(
                    f"GET {self.source} failed with status {exc.response.status_code}"
                ) from exc
            except httpx.HTTPError as exc:
                raise SeedUnavailableError(f"Unable to reach seed source {self.source}: {exc}") from exc
        return resp.text

    def _read_local(self) -> str:
        path = Path(self.source)
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SeedUnavailableError(f"Unable to read seed file {path}: {exc}") from exc

    async def fetch_employees(self) -> List[Employee]:
        """Return the seed employees; raises ``SeedUnavailableError`` on failure."""

        raw = await self._fetch_remote() if self.is_remote else self._read_local()
        try:
            return EMPLOYEE_LIST.validate_json(raw)
        except ValidationError as exc:
            raise SeedUnavailableError(f"Seed data from {self.source} is malformed") from exc
