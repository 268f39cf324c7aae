"""Spreadsheet and word-processing output."""

from __future__ import annotations

import io
from typing import Iterable, Sequence

from docx import Document
from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE


def _clean_cell(value: str) -> str:
    # Control characters from PDF text are rejected by both XML writers.
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def build_workbook(rows: Iterable[Sequence[str]], sheet_name: str) -> bytes:
    """Return ``.xlsx`` bytes holding *rows* on a single sheet."""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_name
    for row in rows:
        ws.append([_clean_cell(cell) for cell in row])
        # openpyxl types any "=..." string as a formula; keep it as text.
        for cell in ws[ws.max_row]:
            if isinstance(cell.value, str) and cell.value.startswith("="):
                cell.data_type = "s"

    buf = io.BytesIO()
    wb.save(buf)
    return buf.getvalue()


def build_line_table_document(lines: Iterable[str]) -> bytes:
    """Return ``.docx`` bytes with one single-column, page-wide table row per line."""
    document = Document()
    section = document.sections[0]
    width = section.page_width - section.left_margin - section.right_margin

    table = document.add_table(rows=0, cols=1)
    table.style = "Table Grid"
    table.autofit = False
    table.columns[0].width = width
    for line in lines:
        cell = table.add_row().cells[0]
        cell.width = width
        cell.text = _clean_cell(line)

    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()
