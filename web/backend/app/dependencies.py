"""FastAPI dependencies shared by the routers."""

from __future__ import annotations

from fastapi import Request

from solace.service import CompanionService


def get_service(request: Request) -> CompanionService:
    """Return the :class:`CompanionService` created by the app factory."""
    return request.app.state.service
