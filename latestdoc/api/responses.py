"""Response packaging. The only place transport headers are set."""

from __future__ import annotations

import logging

from fastapi.responses import JSONResponse, Response

from latestdoc.errors import PipelineError
from latestdoc.scraper.models import OutputPayload

logger = logging.getLogger(__name__)


def payload_response(payload: OutputPayload) -> Response:
    """Return *payload* as a downloadable attachment."""
    return Response(
        content=payload.content,
        media_type=payload.mime_type,
        headers={
            "Content-Disposition": f'attachment; filename="{payload.filename}"',
        },
    )


def error_response(exc: Exception) -> JSONResponse:
    """Map *exc* to a ``{"error": message}`` JSON body.

    Pipeline errors keep their own status code; anything else is a 500.
    """
    if isinstance(exc, PipelineError):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
    logger.error("Unhandled error: %s", exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})
