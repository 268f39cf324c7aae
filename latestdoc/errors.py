"""Failure taxonomy for the latest-document pipeline.

Every error carries the HTTP status it should be reported with and a short
machine-readable ``code``.  Nothing here is retried; each error is local to
a single invocation.
"""

from __future__ import annotations


class PipelineError(Exception):
    """Base class for all pipeline failures."""

    status_code: int = 500
    code: str = "pipeline_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ListingUnavailable(PipelineError):
    """The listing page could not be fetched or returned a non-success status."""

    code = "listing_unavailable"


class NoCandidatesFound(PipelineError):
    """The listing page contained no document links.

    Usually means the remote page's markup changed.
    """

    code = "no_candidates"

    def __init__(self, message: str = "No PDF links found") -> None:
        super().__init__(message)


class DownloadFailed(PipelineError):
    """The selected document could not be downloaded."""

    status_code = 502
    code = "download_failed"

    def __init__(self, message: str, upstream_status: int | None = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status


class ExtractionEmpty(PipelineError):
    """Decoding produced no rows where an empty result is not acceptable."""

    code = "extraction_empty"


class ConversionFailure(PipelineError):
    """Unexpected failure inside a decoding or generation library."""

    code = "conversion_failure"
