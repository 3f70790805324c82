"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from brandmark import __version__
from brandmark.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.brandmark_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="brandmark",
        description="Procedural favicon and crawler metadata for the Onebbau site",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "HEAD"],
        allow_headers=["*"],
    )

    from brandmark.api.router import api_router, site_router

    app.include_router(api_router)
    app.include_router(site_router)

    return app


app = create_app()
