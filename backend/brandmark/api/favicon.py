"""GET /favicon.ico — the procedurally rendered site mark."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from brandmark.config import Settings
from brandmark.dependencies import get_settings
from brandmark.render.icon import ICON_MEDIA_TYPE, get_icon

router = APIRouter()


@router.api_route("/favicon.ico", methods=["GET", "HEAD"], include_in_schema=False)
def favicon(settings: Settings = Depends(get_settings)) -> Response:
    # Sync handler: the first render is CPU-bound and runs in the threadpool
    return Response(
        content=get_icon(),
        media_type=ICON_MEDIA_TYPE,
        headers={"Cache-Control": settings.favicon_cache_control},
    )
