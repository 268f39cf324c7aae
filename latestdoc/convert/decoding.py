"""PDF decoding helpers: temporary storage, text and table extraction.

Both decoders read from a per-call temporary file created by
:func:`scoped_temp_file`, which is removed on every exit path.
"""

from __future__ import annotations

import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterable, Iterator, List, Optional, Sequence


@contextmanager
def scoped_temp_file(data: bytes, suffix: str = ".pdf") -> Iterator[Path]:
    """Write *data* to a uniquely named temp file and yield its path.

    The file is deleted when the block exits, including on exceptions.
    """
    tmp = tempfile.NamedTemporaryFile(delete=False, suffix=suffix)
    tmp_path = Path(tmp.name)
    try:
        with tmp:
            tmp.write(data)
        yield tmp_path
    finally:
        tmp_path.unlink(missing_ok=True)


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def extract_pdf_text(path: str | Path) -> str:
    """Return the text of every page of *path*, pages joined by newlines."""
    import pypdf  # noqa: PLC0415

    reader = pypdf.PdfReader(str(path))
    pages: list[str] = []
    for page in reader.pages:
        pages.append(page.extract_text() or "")
    return "\n".join(pages)


def split_lines(text: str) -> List[str]:
    """Split *text* into trimmed, non-blank lines in source order."""
    return [line.strip() for line in text.splitlines() if line.strip()]


# ---------------------------------------------------------------------------
# Tables
# ---------------------------------------------------------------------------

Table = Sequence[Sequence[Optional[Any]]]


def flatten_tables(pages: Iterable[Iterable[Table]]) -> List[List[str]]:
    """Flatten page → table → row into one row list.

    Order is page, then table within the page, then row within the table.
    Missing cells become empty strings.
    """
    rows: List[List[str]] = []
    for tables in pages:
        for table in tables:
            for row in table:
                rows.append(["" if cell is None else str(cell) for cell in row])
    return rows


def extract_pdf_tables(path: str | Path) -> List[List[Table]]:
    """Return the tables found on each page of *path*, one list per page."""
    import pdfplumber  # noqa: PLC0415

    with pdfplumber.open(str(path)) as pdf:
        return [page.extract_tables() for page in pdf.pages]
