"""Exceptions raised by statement decoding.

Only whole-file problems raise. Row-level problems are reported through
``StatementParseResult.skipped_rows`` instead.
"""

from __future__ import annotations

EMPTY_FILE_MESSAGE = (
    "File is empty or invalid. Please include a header row and at least one data row."
)
PDF_UNSUPPORTED_MESSAGE = (
    "PDF bank statements are not supported. Please convert the statement to CSV or "
    "Excel (.xlsx) and upload it again."
)


class StatementParseError(ValueError):
    """The uploaded statement cannot be decoded as a whole."""


class UnsupportedFormatError(StatementParseError):
    """The statement's file format is not accepted (PDF, unknown extension)."""


__all__ = [
    "EMPTY_FILE_MESSAGE",
    "PDF_UNSUPPORTED_MESSAGE",
    "StatementParseError",
    "UnsupportedFormatError",
]
