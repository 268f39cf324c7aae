"""Data models for the latest-document pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentReference:
    """A candidate document link found on the listing page.

    ``url`` is always absolute, resolved against the listing base URL.
    """

    display_name: str
    url: str


@dataclass
class RawDocument:
    """The downloaded bytes of a selected document."""

    reference: DocumentReference
    content: bytes


@dataclass
class OutputPayload:
    """The converted artifact handed to the response packager."""

    content: bytes
    filename: str
    mime_type: str
