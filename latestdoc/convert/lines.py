"""Line-oriented exports: PDF text → one row per non-blank line."""

from __future__ import annotations

import logging
from typing import List

from latestdoc.convert import decoding
from latestdoc.convert.base import Converter, sheet_name_for
from latestdoc.convert.tables import XLSX_MIME
from latestdoc.convert.writers import build_line_table_document, build_workbook
from latestdoc.errors import ExtractionEmpty
from latestdoc.scraper.models import OutputPayload, RawDocument

logger = logging.getLogger(__name__)

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class _LineConverter(Converter):
    def extract_lines(self, raw: RawDocument) -> List[str]:
        """Decode *raw* to text and return its non-blank lines.

        Raises:
            ExtractionEmpty: If no lines survive and
                ``fail_on_empty_lines`` is enabled.
        """
        with decoding.scoped_temp_file(raw.content) as path:
            text = decoding.extract_pdf_text(path)

        lines = decoding.split_lines(text)
        if not lines:
            logger.warning("No text lines extracted from %s", raw.reference.url)
            if self.cfg.fail_on_empty_lines:
                raise ExtractionEmpty("No text lines extracted from PDF")
        return lines


class LineSpreadsheetConverter(_LineConverter):
    name = "xlsx-lines"
    extension = "xlsx"
    mime_type = XLSX_MIME

    def convert(self, raw: RawDocument) -> OutputPayload:
        lines = self.extract_lines(raw)
        sheet = sheet_name_for(raw.reference, self.cfg.fallback_sheet_name)
        return self.payload(raw, build_workbook(([line] for line in lines), sheet))


class LineDocumentConverter(_LineConverter):
    name = "docx"
    extension = "docx"
    mime_type = DOCX_MIME

    def convert(self, raw: RawDocument) -> OutputPayload:
        lines = self.extract_lines(raw)
        return self.payload(raw, build_line_table_document(lines))
