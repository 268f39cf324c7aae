"""Common converter interface and naming helpers."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod

from latestdoc.config import Settings
from latestdoc.scraper.models import DocumentReference, OutputPayload, RawDocument
from latestdoc.scraper.selector import date_token_text

_NON_ASCII_RE = re.compile(r"[^\x00-\x7F]")
_WHITESPACE_RE = re.compile(r"\s+")
_STRIP_RE = re.compile(r"[()\"\\]")


def sanitize_filename(name: str, fallback: str = "latest") -> str:
    """Return an ASCII-only filename stem safe for a Content-Disposition header.

    Non-ASCII characters are dropped first, then whitespace runs become a
    single underscore.  Parentheses, double quotes and backslashes are
    removed so the name can sit inside a quoted header value.  Idempotent.
    """
    cleaned = _NON_ASCII_RE.sub("", name or "")
    cleaned = _WHITESPACE_RE.sub("_", cleaned)
    cleaned = _STRIP_RE.sub("", cleaned)
    return cleaned or fallback


def sheet_name_for(ref: DocumentReference, fallback: str = "Sheet1") -> str:
    """Sheet title for *ref*: its date token digits, else *fallback*."""
    return date_token_text(ref.display_name) or fallback


class Converter(ABC):
    """Transforms a downloaded document into an :class:`OutputPayload`."""

    #: Short name used on the CLI and in URLs.
    name: str = ""
    extension: str = ""
    mime_type: str = ""

    def __init__(self, cfg: Settings | None = None) -> None:
        self.cfg = cfg or Settings()

    def filename_for(self, ref: DocumentReference) -> str:
        stem = sanitize_filename(ref.display_name, self.cfg.fallback_filename)
        return f"{stem}.{self.extension}"

    def payload(self, raw: RawDocument, content: bytes) -> OutputPayload:
        return OutputPayload(
            content=content,
            filename=self.filename_for(raw.reference),
            mime_type=self.mime_type,
        )

    @abstractmethod
    def convert(self, raw: RawDocument) -> OutputPayload:
        """Return the converted payload for *raw*."""
