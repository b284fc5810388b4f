"""FastAPI application entry point."""
from __future__ import annotations

import logging
import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, WebSocket, WebSocketDisconnect

from .. import __version__
from ..config import Settings, get_settings
from ..core.database import build_engine, build_sessionmaker, init_db
from ..core.translations import detect_language
from ..schemas import EmployeesChanged
from ..services.bootstrap import load_data
from ..services.persistence import SnapshotRepository
from ..services.seed import SeedClient
from ..services.store import RecordStore
from .routers.employees import router as employees_router
from .routers.system import router as system_router
from .websocket_manager import WebSocketManager, event_payload

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around a freshly loaded record store."""

    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine = build_engine(settings.database_url)
        await init_db(engine)

        repository = SnapshotRepository(build_sessionmaker(engine), key=settings.storage_key)
        store = RecordStore(
            repository=repository,
            language=detect_language(settings.default_language, os.getenv("LANG")),
            persistence_retries=settings.persistence_retries,
        )
        await load_data(store, repository, SeedClient(settings.seed_url, timeout=settings.seed_timeout))

        ws_manager = WebSocketManager()
        subscriptions = ws_manager.attach(store)

        app.state.settings = settings
        app.state.store = store
        app.state.ws_manager = ws_manager
        logger.info("Employee directory ready with %d employees", len(store))
        try:
            yield
        finally:
            for subscription in subscriptions:
                subscription.cancel()
            await ws_manager.drain()
            await store.flush()
            await engine.dispose()

    app = FastAPI(title="Employee Directory", version=__version__, lifespan=lifespan)
    app.include_router(employees_router)
    app.include_router(system_router)

    @app.get("/health", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        """Simple readiness probe for uptime checks."""

        return {"status": "ok"}

    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket) -> None:
        """Stream store change events; the current snapshot is sent first."""

        store: RecordStore = websocket.app.state.store
        ws_manager: WebSocketManager = websocket.app.state.ws_manager

        await ws_manager.connect(websocket)
        try:
            await websocket.send_json(
                event_payload(
                    "employees",
                    "snapshot",
                    EmployeesChanged(employees=store.employees).to_json_payload(),
                )
            )
            while True:
                # Keep the connection alive and listen for optional client pings
                await websocket.receive_text()
        except WebSocketDisconnect:
            pass
        finally:
            await ws_manager.disconnect(websocket)

    return app
