"""Ingest entry points shared by the CLI and host applications.

Routes a statement to the right adapter by file extension:

- ``.csv`` → :func:`~bank_journal.ingest.adapters.delimited_csv.parse_csv`
- ``.xlsx`` / ``.xls`` →
  :func:`~bank_journal.ingest.adapters.spreadsheet.parse_spreadsheet`
- ``.pdf`` → always rejected; statements must be converted to CSV/Excel first.

Files are buffered whole before decoding. Upload objects are read with a
single awaited ``read()``.
"""

from __future__ import annotations

from datetime import date
from os import PathLike
from pathlib import Path
from typing import Protocol

from ..errors import PDF_UNSUPPORTED_MESSAGE, UnsupportedFormatError
from ..models import StatementParseResult
from .adapters.delimited_csv import parse_csv
from .adapters.spreadsheet import parse_spreadsheet

SUPPORTED_EXTENSIONS: tuple[str, ...] = ("csv", "xlsx", "xls")


class AsyncUpload(Protocol):
    """Minimal shape of an uploaded file (e.g. a web framework's upload object)."""

    filename: str | None

    async def read(self) -> bytes: ...


def parse_pdf(content: bytes) -> StatementParseResult:
    """Reject PDF statements outright; no text extraction is attempted."""

    raise UnsupportedFormatError(PDF_UNSUPPORTED_MESSAGE)


def _extension(filename: str) -> str:
    return Path(filename).suffix.lower().lstrip(".")


def parse_statement(
    content: bytes | str, filename: str, *, today: date | None = None
) -> StatementParseResult:
    """Decode ``content`` according to the extension of ``filename``."""

    ext = _extension(filename)
    if ext == "csv":
        return parse_csv(content, today=today)
    if ext in {"xlsx", "xls"}:
        if isinstance(content, str):
            raise UnsupportedFormatError(f"Spreadsheet content for {filename!r} must be bytes")
        return parse_spreadsheet(content, today=today)
    if ext == "pdf":
        return parse_pdf(content if isinstance(content, bytes) else content.encode())
    raise UnsupportedFormatError(
        f"Unsupported file format: {ext or '(none)'!s}. "
        "Please upload a CSV (.csv) or Excel (.xlsx, .xls) file."
    )


def load_statement(path: str | PathLike[str], *, today: date | None = None) -> StatementParseResult:
    """Read a statement file from disk and decode it."""

    p = Path(path)
    return parse_statement(p.read_bytes(), p.name, today=today)


async def parse_upload(upload: AsyncUpload, *, today: date | None = None) -> StatementParseResult:
    """Read an uploaded statement to completion, then decode it."""

    content = await upload.read()
    return parse_statement(content, upload.filename or "", today=today)


__all__ = [
    "AsyncUpload",
    "SUPPORTED_EXTENSIONS",
    "load_statement",
    "parse_pdf",
    "parse_statement",
    "parse_upload",
]
