"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from brandmark import __version__
from brandmark.models.responses import HealthResponse
from brandmark.render.icon import get_icon

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    # Sync so a cold-cache render runs in the threadpool
    return HealthResponse(
        status="ok",
        version=__version__,
        icon_bytes=len(get_icon()),
    )
