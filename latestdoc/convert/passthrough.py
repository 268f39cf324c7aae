"""Passthrough converter — serves the downloaded PDF unchanged."""

from __future__ import annotations

from latestdoc.convert.base import Converter
from latestdoc.scraper.models import OutputPayload, RawDocument


class PassthroughConverter(Converter):
    name = "pdf"
    extension = "pdf"
    mime_type = "application/pdf"

    def convert(self, raw: RawDocument) -> OutputPayload:
        return self.payload(raw, raw.content)
