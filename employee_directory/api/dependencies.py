"""Reusable FastAPI dependencies."""
from __future__ import annotations

from fastapi import HTTPException, Request, status

from ..config import Settings
from ..errors import EmployeeNotFoundError
from ..services.store import RecordStore


def get_store(request: Request) -> RecordStore:
    """Return the record store created by the application lifespan."""

    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def not_found(exc: EmployeeNotFoundError) -> HTTPException:
    """Translate a missing record into a 404 response."""

    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=str(exc),
    )
