"""CSV and XLSX serialization for tabular exports.

This module only formats; it holds no business rules. Two encodings are
offered for any header/rows table:

- CSV text following RFC 4180 quoting (fields containing a comma, quote, or
  newline are quoted and embedded quotes doubled), encoded as UTF-8 bytes;
- an XLSX workbook with one sheet per table, a bold header row, and column
  widths sized to the longest value in each column, capped at 50 characters.

The journal template gets a dedicated workbook with a "Journal Entries" sheet
and an "Instructions" sheet describing each column.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from io import BytesIO, StringIO
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from .models import JOURNAL_TEMPLATE_COLUMNS, JournalTemplateRow

MAX_COLUMN_WIDTH = 50
MAX_SHEET_NAME = 31

JOURNAL_SHEET_NAME = "Journal Entries"
INSTRUCTIONS_SHEET_NAME = "Instructions"
JOURNAL_TEMPLATE_BASENAME = "bank-statement-journal-template"

JOURNAL_INSTRUCTIONS: tuple[tuple[str, str], ...] = (
    (
        "Date",
        "Transaction date in YYYY-MM-DD format (e.g., 2024-01-15). "
        "Pre-filled from bank statement.",
    ),
    (
        "Amount",
        "Transaction amount (numeric value, no currency symbols). "
        "Pre-filled from bank statement.",
    ),
    (
        "DebitAccount",
        "Account name to debit. Pre-filled with bank account name for deposits. "
        "For withdrawals, leave blank and fill with appropriate expense/asset account name.",
    ),
    (
        "CreditAccount",
        "Account name to credit. Pre-filled with bank account name for withdrawals. "
        "For deposits, leave blank and fill with appropriate income/liability account name.",
    ),
    ("Narration", "Description of the transaction. Pre-filled from bank statement."),
)


@dataclass(frozen=True, slots=True)
class ExportData:
    headers: list[str]
    rows: list[list[Any]]
    sheet_name: str | None = None


def _cell_str(value: Any) -> str:
    return "" if value is None else str(value)


def records_to_export_data(
    records: Sequence[Mapping[str, Any]],
    *,
    headers: Sequence[str] | None = None,
    exclude_keys: Iterable[str] = (),
    sheet_name: str | None = None,
) -> ExportData:
    """Turn homogeneous row mappings into an :class:`ExportData` table.

    Headers default to the keys of the first record, minus ``exclude_keys``.
    Missing values become empty strings.
    """

    if not records:
        return ExportData(headers=list(headers or []), rows=[], sheet_name=sheet_name)
    excluded = set(exclude_keys)
    cols = list(headers) if headers else [k for k in records[0] if k not in excluded]
    rows = [[r.get(c) if r.get(c) is not None else "" for c in cols] for r in records]
    return ExportData(headers=cols, rows=rows, sheet_name=sheet_name)


def journal_export_data(rows: Iterable[JournalTemplateRow]) -> ExportData:
    return ExportData(
        headers=list(JOURNAL_TEMPLATE_COLUMNS),
        rows=[list(r.as_dict().values()) for r in rows],
        sheet_name=JOURNAL_SHEET_NAME,
    )


# ---------------------------------------------------------------------------
# File names
# ---------------------------------------------------------------------------


def export_filename(
    base_name: str, extension: str, *, include_date: bool = True, today: date | None = None
) -> str:
    """Return ``<base>[_YYYY-MM-DD].<ext>``."""

    suffix = f"_{(today or date.today()).isoformat()}" if include_date else ""
    return f"{base_name}{suffix}.{extension.lstrip('.')}"


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------


def to_csv(data: ExportData) -> str:
    """Render ``data`` as CSV text with minimal RFC 4180 quoting."""

    with StringIO(newline="") as buf:
        writer = csv.writer(buf, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        writer.writerow(data.headers)
        for row in data.rows:
            writer.writerow([_cell_str(v) for v in row])
        return buf.getvalue()


def to_csv_bytes(data: ExportData) -> bytes:
    return to_csv(data).encode("utf-8")


def journal_template_to_csv(rows: Iterable[JournalTemplateRow]) -> bytes:
    return to_csv_bytes(journal_export_data(rows))


# ---------------------------------------------------------------------------
# XLSX
# ---------------------------------------------------------------------------


def column_widths(data: ExportData, *, max_width: int = MAX_COLUMN_WIDTH) -> list[int]:
    """Width per column: the longest of header and cell strings, capped."""

    widths: list[int] = []
    for i, header in enumerate(data.headers):
        longest = len(header)
        for row in data.rows:
            if i < len(row):
                longest = max(longest, len(_cell_str(row[i])))
        widths.append(min(longest, max_width))
    return widths


def _xlsx_value(value: Any) -> Any:
    # Decimals are written as numbers so the sheet can sum them.
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    return "" if value is None else value


def _fill_sheet(ws: Worksheet, data: ExportData, *, max_width: int) -> None:
    ws.append(list(data.headers))
    for cell in ws[1]:
        cell.font = Font(bold=True)
    for row in data.rows:
        ws.append([_xlsx_value(v) for v in row])
    for i, width in enumerate(column_widths(data, max_width=max_width), start=1):
        ws.column_dimensions[get_column_letter(i)].width = width


def to_xlsx(
    sheets: ExportData | Sequence[ExportData], *, max_width: int = MAX_COLUMN_WIDTH
) -> bytes:
    """Render one or more tables as an XLSX workbook and return its bytes."""

    tables = [sheets] if isinstance(sheets, ExportData) else list(sheets)
    wb = Workbook()
    wb.remove(wb.active)
    for pos, table in enumerate(tables):
        name = table.sheet_name or ("Sheet1" if pos == 0 else f"Sheet{pos + 1}")
        ws = wb.create_sheet(title=name[:MAX_SHEET_NAME])
        _fill_sheet(ws, table, max_width=max_width)
    if not tables:
        wb.create_sheet(title="Sheet1")

    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


def journal_template_to_xlsx(
    rows: Iterable[JournalTemplateRow], *, max_width: int = MAX_COLUMN_WIDTH
) -> bytes:
    """Workbook with the template rows and a column guide."""

    instructions = ExportData(
        headers=["Column", "Description"],
        rows=[list(item) for item in JOURNAL_INSTRUCTIONS],
        sheet_name=INSTRUCTIONS_SHEET_NAME,
    )
    return to_xlsx([journal_export_data(rows), instructions], max_width=max_width)


__all__ = [
    "ExportData",
    "INSTRUCTIONS_SHEET_NAME",
    "JOURNAL_INSTRUCTIONS",
    "JOURNAL_SHEET_NAME",
    "JOURNAL_TEMPLATE_BASENAME",
    "MAX_COLUMN_WIDTH",
    "column_widths",
    "export_filename",
    "journal_export_data",
    "journal_template_to_csv",
    "journal_template_to_xlsx",
    "records_to_export_data",
    "to_csv",
    "to_csv_bytes",
    "to_xlsx",
]
