"""Utility helpers for FastAPI WebSocket broadcasting of store events."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, List

from fastapi import WebSocket

from ..schemas import EmployeesChanged, LanguageChanged
from ..services.store import RecordStore, Subscription

logger = logging.getLogger(__name__)


class WebSocketManager:
    """Tracks open WebSocket connections and fans payloads out to them."""

    def __init__(self) -> None:
        self._connections: List[WebSocket] = []
        self._lock = asyncio.Lock()
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def connection_count(self) -> int:
        return len(self._connections)

    async def connect(self, websocket: WebSocket) -> None:
        """Accept and register a websocket connection."""

        await websocket.accept()
        async with self._lock:
            self._connections.append(websocket)

    async def disconnect(self, websocket: WebSocket) -> None:
        """Remove a websocket connection if it still exists."""

        async with self._lock:
            if websocket in self._connections:
                self._connections.remove(websocket)

    async def broadcast(self, payload: Dict[str, Any]) -> None:
        """Send a payload to every registered websocket."""

        async with self._lock:
            targets = list(self._connections)

        stale_connections: list[WebSocket] = []
        for connection in targets:
            try:
                await connection.send_json(payload)
            except Exception as exc:  # pragma: no cover - cleanup of dead sockets
                logger.info("Dropping websocket after failed send: %s", exc)
                stale_connections.append(connection)

        for websocket in stale_connections:
            await self.disconnect(websocket)

    def _schedule(self, payload: Dict[str, Any]) -> None:
        # Store observers are synchronous; the send happens on the running loop.
        task = asyncio.get_running_loop().create_task(self.broadcast(payload))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def on_employees_changed(self, event: EmployeesChanged) -> None:
        self._schedule(event_payload("employees", "changed", event.to_json_payload()))

    def on_language_changed(self, event: LanguageChanged) -> None:
        self._schedule(event_payload("language", "changed", {"language": event.language}))

    def attach(self, store: RecordStore) -> list[Subscription]:
        """Subscribe this manager to both store channels."""

        return [
            store.subscribe(self.on_employees_changed),
            store.subscribe_language(self.on_language_changed),
        ]

    async def drain(self) -> None:
        """Wait for broadcasts that are still in flight."""

        while self._tasks:
            await asyncio.gather(*list(self._tasks))


def event_payload(channel: str, action: str, data: Dict[str, Any]) -> Dict[str, Any]:
    """Normalized event envelope sent to subscribers."""

    return {
        "channel": channel,
        "action": action,
        "data": data,
    }
