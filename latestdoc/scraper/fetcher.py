"""Async HTTP fetchers for the listing page and the selected document."""

from __future__ import annotations

import logging

import httpx

from latestdoc.config import Settings
from latestdoc.errors import DownloadFailed, ListingUnavailable
from latestdoc.scraper.models import DocumentReference, RawDocument

logger = logging.getLogger(__name__)


async def fetch_listing(client: httpx.AsyncClient, cfg: Settings) -> str:
    """Fetch the listing page and return its HTML.

    Raises:
        ListingUnavailable: On transport errors or a non-success status.
    """
    try:
        response = await client.get(cfg.listing_url, headers=cfg.listing_headers())
    except httpx.HTTPError as exc:
        logger.warning("Listing fetch failed for %s: %s", cfg.listing_url, exc)
        raise ListingUnavailable(f"Failed to fetch listing page: {exc}") from exc

    if not response.is_success:
        logger.warning(
            "Listing fetch for %s returned status %d", cfg.listing_url, response.status_code
        )
        raise ListingUnavailable(
            f"Failed to fetch listing page (status {response.status_code})"
        )

    logger.info("Fetched listing %s (%d chars)", cfg.listing_url, len(response.text))
    return response.text


async def fetch_document(
    client: httpx.AsyncClient, ref: DocumentReference, cfg: Settings
) -> RawDocument:
    """Download the document behind *ref*, following redirects.

    Raises:
        DownloadFailed: On transport errors or a non-success status.  The
            upstream status code is attached when the server answered.
    """
    try:
        response = await client.get(
            ref.url, headers=cfg.document_headers(), follow_redirects=True
        )
    except httpx.HTTPError as exc:
        logger.warning("Download failed for %s: %s", ref.url, exc)
        raise DownloadFailed(f"Failed to download PDF: {exc}") from exc

    if not response.is_success:
        logger.warning("Download of %s returned status %d", ref.url, response.status_code)
        raise DownloadFailed(
            f"Failed to download PDF (status {response.status_code})",
            upstream_status=response.status_code,
        )

    logger.info("Downloaded %s (%d bytes)", ref.url, len(response.content))
    return RawDocument(reference=ref, content=response.content)
