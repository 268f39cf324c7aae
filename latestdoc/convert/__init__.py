"""Format converters.

Each converter is selected by its short ``name``::

    from latestdoc.convert import get_converter
    converter = get_converter("xlsx")
"""

from __future__ import annotations

from latestdoc.config import Settings
from latestdoc.convert.base import Converter, sanitize_filename, sheet_name_for
from latestdoc.convert.lines import LineDocumentConverter, LineSpreadsheetConverter
from latestdoc.convert.passthrough import PassthroughConverter
from latestdoc.convert.tables import TableSpreadsheetConverter

CONVERTERS: dict[str, type[Converter]] = {
    cls.name: cls
    for cls in (
        PassthroughConverter,
        TableSpreadsheetConverter,
        LineSpreadsheetConverter,
        LineDocumentConverter,
    )
}


def get_converter(name: str, cfg: Settings | None = None) -> Converter:
    """Return a converter instance for format *name*.

    Raises:
        KeyError: If *name* is not a known format.
    """
    try:
        cls = CONVERTERS[name]
    except KeyError:
        raise KeyError(
            f"Unknown format {name!r}. Use one of: {', '.join(CONVERTERS)}"
        ) from None
    return cls(cfg)


__all__ = [
    "CONVERTERS",
    "Converter",
    "get_converter",
    "sanitize_filename",
    "sheet_name_for",
    "PassthroughConverter",
    "TableSpreadsheetConverter",
    "LineSpreadsheetConverter",
    "LineDocumentConverter",
]
