"""Master routers: JSON API under /api, site assets at the root."""

from __future__ import annotations

from fastapi import APIRouter

from brandmark.api import crawler, favicon, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)

site_router = APIRouter()

site_router.include_router(favicon.router)
site_router.include_router(crawler.router)
