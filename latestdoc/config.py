"""Centralised settings for the latest-document service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

The pipeline and the app factory take a :class:`Settings` instance
explicitly; the module-level ``settings`` singleton is only the default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _env_flag(name: str, default: str = "0") -> bool:
    return os.environ.get(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Listing page
    # ------------------------------------------------------------------
    listing_url: str = field(
        default_factory=lambda: os.environ.get(
            "LISTING_URL",
            "https://en.fa.gov.tw/view.php?theme=VR_of_RFMO&subtheme=&id=10",
        )
    )
    base_url: str = field(
        default_factory=lambda: os.environ.get("LISTING_BASE_URL", "https://en.fa.gov.tw/")
    )
    redirect_marker: str = field(
        default_factory=lambda: os.environ.get("REDIRECT_MARKER", "redirect_file.php")
    )

    # ------------------------------------------------------------------
    # HTTP
    # ------------------------------------------------------------------
    user_agent: str = field(
        default_factory=lambda: os.environ.get("USER_AGENT", "Mozilla/5.0")
    )
    listing_accept: str = field(
        default_factory=lambda: os.environ.get(
            "LISTING_ACCEPT", "text/html,application/xhtml+xml"
        )
    )
    document_accept: str = field(
        default_factory=lambda: os.environ.get("DOCUMENT_ACCEPT", "application/pdf")
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )

    # ------------------------------------------------------------------
    # Output naming / policy
    # ------------------------------------------------------------------
    fallback_sheet_name: str = field(
        default_factory=lambda: os.environ.get("FALLBACK_SHEET_NAME", "Sheet1")
    )
    fallback_filename: str = field(
        default_factory=lambda: os.environ.get("FALLBACK_FILENAME", "latest")
    )
    # When True, line-oriented exports with no surviving lines raise
    # ExtractionEmpty instead of returning an empty workbook / table.
    fail_on_empty_lines: bool = field(
        default_factory=lambda: _env_flag("FAIL_ON_EMPTY_LINES")
    )

    def listing_headers(self) -> dict[str, str]:
        """Headers sent with the listing page request."""
        return {"User-Agent": self.user_agent, "Accept": self.listing_accept}

    def document_headers(self) -> dict[str, str]:
        """Headers sent with the document download request."""
        return {
            "User-Agent": self.user_agent,
            "Referer": self.listing_url,
            "Accept": self.document_accept,
        }


# Module-level default, imported by entry points:
#   from latestdoc.config import settings
settings = Settings()
