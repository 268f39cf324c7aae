"""Scraper package — listing fetch, link extraction and latest selection."""

from latestdoc.scraper.extractor import extract_links
from latestdoc.scraper.fetcher import fetch_document, fetch_listing
from latestdoc.scraper.models import DocumentReference, OutputPayload, RawDocument
from latestdoc.scraper.selector import date_token, select_latest

__all__ = [
    "extract_links",
    "fetch_listing",
    "fetch_document",
    "select_latest",
    "date_token",
    "DocumentReference",
    "RawDocument",
    "OutputPayload",
]
