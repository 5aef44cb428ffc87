"""Adapter for spreadsheet bank statements (``.xlsx``).

Only the first worksheet is read. Cells arrive as native values (numbers,
``datetime`` objects, strings) and are normalized by the shared decoder, which
accepts all three.
"""

from __future__ import annotations

from datetime import date
from io import BytesIO
from typing import Any
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ...errors import StatementParseError, UnsupportedFormatError
from ...logging_setup import get_logger
from ...models import StatementParseResult
from ..decoder import decode_grid

_logger = get_logger("bank_journal.ingest.adapters.spreadsheet")


def read_first_sheet(content: bytes) -> list[list[Any]]:
    """Return the first worksheet as a list of value rows."""

    try:
        wb = load_workbook(BytesIO(content), read_only=True, data_only=True)
    except (InvalidFileException, BadZipFile) as exc:
        raise UnsupportedFormatError(
            "Could not read the spreadsheet. Legacy .xls workbooks must be saved as "
            ".xlsx (or exported to CSV) before uploading."
        ) from exc
    except (OSError, KeyError, ValueError) as exc:
        raise StatementParseError(f"Spreadsheet is corrupt or unreadable: {exc}") from exc

    try:
        if not wb.sheetnames:
            return []
        if len(wb.sheetnames) > 1:
            _logger.info(
                "workbook has %d sheets; only %r is processed",
                len(wb.sheetnames),
                wb.sheetnames[0],
            )
        ws = wb[wb.sheetnames[0]]
        return [list(row) for row in ws.iter_rows(values_only=True)]
    finally:
        wb.close()


def parse_spreadsheet(content: bytes, *, today: date | None = None) -> StatementParseResult:
    """Decode a spreadsheet statement into transactions."""

    return decode_grid(read_first_sheet(content), source_format="excel", today=today)


__all__ = ["parse_spreadsheet", "read_first_sheet"]
