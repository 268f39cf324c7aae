"""Latest-document pipeline.

``LatestDocumentPipeline`` runs one request end to end:

    fetch listing → extract links → select latest → download → convert

Every call opens its own HTTP client and shares no state with other calls.
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from latestdoc.config import Settings
from latestdoc.convert.base import Converter
from latestdoc.errors import ConversionFailure, NoCandidatesFound, PipelineError
from latestdoc.scraper.extractor import extract_links
from latestdoc.scraper.fetcher import fetch_document, fetch_listing
from latestdoc.scraper.models import DocumentReference, OutputPayload, RawDocument
from latestdoc.scraper.selector import select_latest

logger = logging.getLogger(__name__)


class LatestDocumentPipeline:
    """Resolve, download and convert the newest document on the listing page.

    Args:
        cfg: Endpoint, header and naming configuration.
        transport: Optional httpx transport, mainly for tests.
    """

    def __init__(
        self,
        cfg: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.cfg = cfg or Settings()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.cfg.request_timeout,
            follow_redirects=True,
            transport=self._transport,
        )

    async def _resolve(self, client: httpx.AsyncClient) -> DocumentReference:
        html = await fetch_listing(client, self.cfg)
        refs = extract_links(html, self.cfg.base_url, self.cfg.redirect_marker)
        if not refs:
            logger.warning(
                "No links containing %r on %s",
                self.cfg.redirect_marker,
                self.cfg.listing_url,
            )
            raise NoCandidatesFound()

        latest = select_latest(refs)
        logger.info("Selected %r out of %d candidates", latest.display_name, len(refs))
        return latest

    async def resolve(self) -> DocumentReference:
        """Return the newest document reference without downloading it.

        Raises:
            ListingUnavailable: The listing page could not be fetched.
            NoCandidatesFound: The listing page has no document links.
        """
        async with self._client() as client:
            return await self._resolve(client)

    async def download(self) -> RawDocument:
        """Resolve the newest document and return its bytes."""
        async with self._client() as client:
            latest = await self._resolve(client)
            return await fetch_document(client, latest, self.cfg)

    async def run(self, converter: Converter) -> OutputPayload:
        """Run the full pipeline with *converter* as the final step.

        Raises:
            PipelineError: Any pipeline failure.  Unexpected converter errors
                are wrapped in :class:`ConversionFailure`.
        """
        raw = await self.download()
        # Decoders block on file I/O; keep them off the event loop.
        try:
            payload = await asyncio.to_thread(converter.convert, raw)
        except PipelineError:
            raise
        except Exception as exc:
            logger.exception("Conversion to %s failed", converter.name)
            raise ConversionFailure(str(exc) or type(exc).__name__) from exc

        logger.info(
            "Converted to %s: %s (%d bytes)",
            converter.name,
            payload.filename,
            len(payload.content),
        )
        return payload
