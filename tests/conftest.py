"""Shared fixtures.

``make_pdf`` builds a tiny single-page PDF in memory (Helvetica, one text
line per entry) so decoding paths run against real bytes without any
fixture files on disk.
"""

from __future__ import annotations

from typing import Callable, Sequence

import pytest

from latestdoc.config import Settings

LISTING_URL = "https://example.test/list"
BASE_URL = "https://example.test/"

LISTING_HTML = """\
<!DOCTYPE html>
<html>
<head><title>Vessel registry</title></head>
<body>
  <ul>
    <li><a href="redirect_file.php?id=1">Vessel list 20230101</a></li>
    <li><a href="/redirect_file.php?id=2"> Vessel list 20240601 (updated) </a></li>
    <li><a href="https://cdn.example.test/redirect_file.php?id=3">Vessel list 20231231</a></li>
    <li><a href="/news.php?id=9">News 20991231</a></li>
    <li><a>No href</a></li>
  </ul>
</body>
</html>
"""

LATEST_URL = "https://example.test/redirect_file.php?id=2"
LATEST_NAME = "Vessel list 20240601 (updated)"


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")


def build_pdf(lines: Sequence[str]) -> bytes:
    ops = ["BT", "/F1 12 Tf", "72 720 Td"]
    for i, line in enumerate(lines):
        if i:
            ops.append("0 -20 Td")
        ops.append(f"({_escape(line)}) Tj")
    ops.append("ET")
    stream = "\n".join(ops).encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1,
        xref_at,
    )
    return bytes(out)


@pytest.fixture()
def cfg() -> Settings:
    """Settings pointed at a fake listing host."""
    return Settings(
        listing_url=LISTING_URL,
        base_url=BASE_URL,
        redirect_marker="redirect_file.php",
        user_agent="Mozilla/5.0",
        listing_accept="text/html,application/xhtml+xml",
        document_accept="application/pdf",
        request_timeout=5.0,
        fallback_sheet_name="Sheet1",
        fallback_filename="latest",
        fail_on_empty_lines=False,
    )


@pytest.fixture()
def make_pdf() -> Callable[[Sequence[str]], bytes]:
    return build_pdf
