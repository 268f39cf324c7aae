"""Latest-document selection by embedded ``YYYYMMDD`` date token."""

from __future__ import annotations

import re
from typing import Sequence

from latestdoc.scraper.models import DocumentReference

_DATE_TOKEN_RE = re.compile(r"[0-9]{8}")

# Rank assigned to names without a date token; loses to any real token.
MISSING_TOKEN_RANK = 0


def date_token_text(name: str) -> str | None:
    """Return the first run of eight digits in *name*, or ``None``."""
    match = _DATE_TOKEN_RE.search(name or "")
    return match.group(0) if match else None


def date_token(name: str) -> int:
    """Return the numeric date token of *name*, or ``MISSING_TOKEN_RANK``."""
    text = date_token_text(name)
    if text is None:
        return MISSING_TOKEN_RANK
    return int(text)


def select_latest(refs: Sequence[DocumentReference]) -> DocumentReference:
    """Return the reference with the highest date token.

    Ties (including a set with no tokens at all) go to the reference that
    appears first in *refs*.

    Raises:
        ValueError: If *refs* is empty.
    """
    if not refs:
        raise ValueError("select_latest() requires at least one reference")
    # max() keeps the first of equal keys.
    return max(refs, key=lambda ref: date_token(ref.display_name))
