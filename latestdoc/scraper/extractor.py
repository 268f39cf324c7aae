"""Link extraction: turns listing-page HTML into :class:`DocumentReference` s."""

from __future__ import annotations

from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from latestdoc.scraper.models import DocumentReference


def extract_links(html: str, base_url: str, marker: str) -> List[DocumentReference]:
    """Return every anchor in *html* whose ``href`` contains *marker*.

    The anchor's trimmed text becomes the display name and relative hrefs are
    resolved against *base_url*.  Source order is preserved and nothing is
    deduplicated; an empty list means the page had no matching links.
    """
    soup = BeautifulSoup(html, "html.parser")
    refs: List[DocumentReference] = []
    for anchor in soup.find_all("a", href=True):
        href = anchor["href"]
        if marker not in href:
            continue
        refs.append(
            DocumentReference(
                display_name=anchor.get_text().strip(),
                url=urljoin(base_url, href.strip()),
            )
        )
    return refs
