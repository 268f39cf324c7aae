"""FastAPI application factory.

Routers
-------
    /latest    — resolve / download / convert the newest listed document
"""

from __future__ import annotations

import httpx
from fastapi import FastAPI

from latestdoc.api.routers import latest as latest_router
from latestdoc.config import Settings, settings as default_settings


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Return a fully-configured FastAPI application instance.

    Args:
        settings: Pipeline configuration; defaults to the environment-derived
            module singleton.
        transport: Optional httpx transport used for upstream requests.
    """
    app = FastAPI(
        title="Latest Document API",
        description=(
            "Finds the most recent document on the configured listing page and "
            "serves it as PDF, a table spreadsheet, a line spreadsheet or a "
            "Word table."
        ),
        version="0.1.0",
    )
    app.state.settings = settings or default_settings
    app.state.transport = transport

    app.include_router(latest_router.router, prefix="/latest", tags=["latest"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn latestdoc.api.app:app --reload
app = create_app()
