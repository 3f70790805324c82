"""GET /robots.txt and GET /sitemap.xml — crawler metadata next to the favicon."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from xml.sax.saxutils import escape

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from brandmark.config import Settings
from brandmark.dependencies import get_settings

router = APIRouter()

LOCALES = ("de", "ru")
STATIC_PATHS = ("", "/news", "/galerie", "/impressum", "/datenschutz")
DISALLOWED_PREFIXES = ("/admin", "/api")

# Used when SITE_URL is set but blank
DEFAULT_SITE_URL = "https://onebbau.de"

_SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


@dataclass(frozen=True)
class SitemapEntry:
    url: str
    last_modified: str
    change_frequency: str
    priority: float


def base_url(site_url: str) -> str:
    site_url = site_url.strip()
    if not site_url:
        return DEFAULT_SITE_URL
    return site_url.rstrip("/")


def build_robots(site_url: str) -> str:
    lines = ["User-agent: *", "Allow: /"]
    lines.extend(f"Disallow: {prefix}" for prefix in DISALLOWED_PREFIXES)
    lines.append("")
    lines.append(f"Sitemap: {base_url(site_url)}/sitemap.xml")
    return "\n".join(lines) + "\n"


def _priority(path: str) -> float:
    if path == "":
        return 1.0
    if path == "/news":
        return 0.9
    return 0.7


def static_entries(site_url: str, today: str) -> list[SitemapEntry]:
    """One entry per locale × static page. Articles live in the store, not here."""
    root = base_url(site_url)
    return [
        SitemapEntry(
            url=f"{root}/{locale}{path}",
            last_modified=today,
            change_frequency="weekly" if path == "" else "monthly",
            priority=_priority(path),
        )
        for locale in LOCALES
        for path in STATIC_PATHS
    ]


def build_sitemap(entries: list[SitemapEntry]) -> str:
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<urlset xmlns="{_SITEMAP_NS}">',
    ]
    for e in entries:
        lines.append("  <url>")
        lines.append(f"    <loc>{escape(e.url)}</loc>")
        lines.append(f"    <lastmod>{e.last_modified}</lastmod>")
        lines.append(f"    <changefreq>{e.change_frequency}</changefreq>")
        lines.append(f"    <priority>{e.priority:.1f}</priority>")
        lines.append("  </url>")
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"


@router.get("/robots.txt", response_class=PlainTextResponse, include_in_schema=False)
async def robots(settings: Settings = Depends(get_settings)) -> str:
    return build_robots(settings.site_url)


@router.get("/sitemap.xml", include_in_schema=False)
async def sitemap(settings: Settings = Depends(get_settings)) -> Response:
    today = datetime.now(timezone.utc).date().isoformat()
    body = build_sitemap(static_entries(settings.site_url, today))
    return Response(content=body, media_type="application/xml")
