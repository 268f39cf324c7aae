"""Latest-document endpoints.

Routes
------
GET /latest                     Resolve only → {"display_name", "url", "date_token"}
GET /latest/{output_format}     Download + convert → attachment

``output_format`` is one of ``pdf``, ``xlsx`` (tables), ``xlsx-lines`` or
``docx``.
"""

from __future__ import annotations

from typing import Literal, Optional

from fastapi import APIRouter, Request
from fastapi.responses import Response
from pydantic import BaseModel

from latestdoc.api.responses import error_response, payload_response
from latestdoc.convert import get_converter
from latestdoc.pipeline import LatestDocumentPipeline
from latestdoc.scraper.selector import date_token_text

router = APIRouter()

OutputFormat = Literal["pdf", "xlsx", "xlsx-lines", "docx"]


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class LatestReferenceResponse(BaseModel):
    display_name: str
    url: str
    date_token: Optional[str] = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _pipeline(request: Request) -> LatestDocumentPipeline:
    return LatestDocumentPipeline(
        request.app.state.settings,
        transport=request.app.state.transport,
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("", response_model=LatestReferenceResponse)
async def latest_reference(request: Request):
    """Return the newest document on the listing page without downloading it."""
    try:
        ref = await _pipeline(request).resolve()
    except Exception as exc:
        return error_response(exc)
    return LatestReferenceResponse(
        display_name=ref.display_name,
        url=ref.url,
        date_token=date_token_text(ref.display_name),
    )


@router.get("/{output_format}")
async def latest_document(output_format: OutputFormat, request: Request) -> Response:
    """Download the newest document and return it in *output_format*."""
    converter = get_converter(output_format, request.app.state.settings)
    try:
        payload = await _pipeline(request).run(converter)
    except Exception as exc:
        return error_response(exc)
    return payload_response(payload)
