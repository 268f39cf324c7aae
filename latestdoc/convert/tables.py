"""Table-structured export: PDF tables → one spreadsheet sheet."""

from __future__ import annotations

import logging

from latestdoc.convert import decoding
from latestdoc.convert.base import Converter, sheet_name_for
from latestdoc.convert.writers import build_workbook
from latestdoc.errors import ExtractionEmpty
from latestdoc.scraper.models import OutputPayload, RawDocument

logger = logging.getLogger(__name__)

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class TableSpreadsheetConverter(Converter):
    """Flattens every table from every page into a single sheet.

    An empty result is always fatal for this converter.
    """

    name = "xlsx"
    extension = "xlsx"
    mime_type = XLSX_MIME

    def convert(self, raw: RawDocument) -> OutputPayload:
        with decoding.scoped_temp_file(raw.content) as path:
            pages = decoding.extract_pdf_tables(path)

        rows = decoding.flatten_tables(pages)
        if not rows:
            logger.warning("No tables extracted from %s", raw.reference.url)
            raise ExtractionEmpty("No tables extracted from PDF")

        sheet = sheet_name_for(raw.reference, self.cfg.fallback_sheet_name)
        logger.info("Extracted %d table rows into sheet %r", len(rows), sheet)
        return self.payload(raw, build_workbook(rows, sheet))
