"""Latest-document resolution and format-conversion pipeline."""

__version__ = "0.1.0"
