"""Shared row decoding for CSV and spreadsheet statements.

Adapters turn a file into a grid (a list of rows of raw cell values) and hand
it to :func:`decode_grid`, so both formats go through identical column
detection and row rules:

- the grid must hold at least two rows, otherwise the whole file is rejected;
- columns come from :func:`~bank_journal.ingest.columns.detect_columns` on
  row 0, and data starts at row 1 only when row 0 mentions ``date``;
- rows without a date or description, or without a positive amount, are
  recorded in ``skipped_rows`` and never raise.

Statements that print account details first are decoded from the header row
found further down: directly when row 0 is not a header, or as a retry when
the row-0 header yields no transactions at all.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import date
from decimal import Decimal
from typing import Any, TypeAlias

from ..errors import EMPTY_FILE_MESSAGE, StatementParseError
from ..logging_setup import get_logger
from ..models import (
    ParsedTransaction,
    SkippedRow,
    SourceFormat,
    StatementParseResult,
    StatementPeriod,
)
from ..normalizers import clean_text, parse_amount, parse_date
from .columns import (
    UNSET,
    ColumnMap,
    cell_text,
    detect_columns,
    find_preamble_header,
    is_header_row,
)

_logger = get_logger("bank_journal.ingest.decoder")

Grid: TypeAlias = Sequence[Sequence[Any]]


def _cell(row: Sequence[Any], idx: int) -> Any:
    if idx == UNSET or idx >= len(row):
        return None
    return row[idx]


def _raw_content(row: Sequence[Any]) -> str:
    return ",".join(cell_text(c) for c in row)


def _resolve_amounts(
    withdrawal: Decimal | None, deposit: Decimal | None
) -> tuple[Decimal | None, Decimal | None]:
    w = withdrawal if withdrawal is not None and withdrawal > 0 else None
    d = deposit if deposit is not None and deposit > 0 else None
    if w is not None and d is not None:
        # Keep one side only; the larger figure wins and ties go to the withdrawal.
        if w >= d:
            d = None
        else:
            w = None
    return w, d


def _decode_row(
    row: Sequence[Any], columns: ColumnMap, *, today: date | None
) -> ParsedTransaction | str:
    """Return a transaction, or the reason the row was skipped."""

    raw_date = _cell(row, columns.date)
    description = clean_text(_cell(row, columns.description))
    if not cell_text(raw_date):
        return "missing date"
    if description is None:
        return "missing description"

    withdrawal = parse_amount(_cell(row, columns.withdrawal))
    deposit = parse_amount(_cell(row, columns.deposit))
    if withdrawal is None and deposit is None:
        return "no withdrawal or deposit amount"

    withdrawal, deposit = _resolve_amounts(withdrawal, deposit)
    if withdrawal is None and deposit is None:
        return "no positive amount"

    reference = clean_text(_cell(row, columns.reference))
    return ParsedTransaction(
        date=parse_date(raw_date, today=today),
        description=description,
        withdrawal=withdrawal,
        deposit=deposit,
        balance=parse_amount(_cell(row, columns.balance)),
        reference=reference,
    )


def _decode_from(
    grid: Grid, header_idx: int, *, force_header: bool, today: date | None
) -> tuple[list[ParsedTransaction], list[SkippedRow]]:
    header = grid[header_idx]
    has_header = force_header or is_header_row(header)
    # Data cells such as "Salary Credit" must not be read as header keywords.
    columns = detect_columns(header if has_header else ())
    start = header_idx + 1 if has_header else header_idx

    transactions: list[ParsedTransaction] = []
    skipped: list[SkippedRow] = []
    for i in range(start, len(grid)):
        row = grid[i]
        outcome = _decode_row(row, columns, today=today)
        if isinstance(outcome, ParsedTransaction):
            transactions.append(outcome)
            continue
        skipped.append(SkippedRow(index=i, raw_content=_raw_content(row), reason=outcome))
        _logger.debug("skipped row %d: %s", i, outcome)
    return transactions, skipped


# ---------------------------------------------------------------------------
# Statement summary
# ---------------------------------------------------------------------------

_ACCOUNT_NUMBER_LABELS: tuple[str, ...] = ("account number", "account no", "a/c no", "a/c number")
_ACCOUNT_NAME_LABELS: tuple[str, ...] = ("account name", "a/c name", "customer name")
_LABEL_SPLIT_RE = re.compile(r"[:\-]\s*", re.UNICODE)


def _labelled_value(rows: Grid, labels: Sequence[str]) -> str | None:
    """Find ``Label: value`` or ``Label | value`` pairs in preamble rows."""

    for row in rows:
        cells = [cell_text(c) for c in row]
        for pos, text in enumerate(cells):
            lowered = text.lower()
            label = next((lb for lb in labels if lowered.startswith(lb)), None)
            if label is None:
                continue
            remainder = _LABEL_SPLIT_RE.split(text[len(label) :], maxsplit=1)
            inline = remainder[-1].strip() if len(remainder) > 1 else ""
            if inline:
                return inline
            following = next((c for c in cells[pos + 1 :] if c), None)
            if following:
                return following
    return None


def _summarize(
    transactions: Sequence[ParsedTransaction],
) -> tuple[StatementPeriod | None, Decimal | None, Decimal | None]:
    if not transactions:
        return None, None, None

    dates = [t.date for t in transactions]
    period = StatementPeriod(start=min(dates), end=max(dates))

    ordered = list(transactions)
    if ordered[0].date > ordered[-1].date:
        # Newest-first export.
        ordered.reverse()
    first, last = ordered[0], ordered[-1]
    opening: Decimal | None = None
    if first.balance is not None:
        # Undo the first movement to get the balance brought forward.
        opening = first.balance - (first.deposit or 0) + (first.withdrawal or 0)
    return period, opening, last.balance


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------


def drop_blank_rows(rows: Grid) -> list[list[Any]]:
    return [list(r) for r in rows if any(cell_text(c) for c in r)]


def decode_grid(
    grid: Grid, *, source_format: SourceFormat, today: date | None = None
) -> StatementParseResult:
    """Decode a statement grid into a :class:`StatementParseResult`.

    Raises :class:`~bank_journal.errors.StatementParseError` when the grid has
    fewer than two rows. Everything else is reported per row.
    """

    rows = drop_blank_rows(grid)
    if len(rows) < 2:
        raise StatementParseError(EMPTY_FILE_MESSAGE)

    # A header below a preamble takes precedence over the positional layout.
    header_idx = None if is_header_row(rows[0]) else find_preamble_header(rows)
    if header_idx:
        _logger.info("row 0 is not a header; decoding from header row %d", header_idx)
        transactions, skipped = _decode_from(rows, header_idx, force_header=True, today=today)
    else:
        transactions, skipped = _decode_from(rows, 0, force_header=False, today=today)
        if not transactions:
            retry_idx = find_preamble_header(rows)
            if retry_idx:
                _logger.info("no transactions under row 0; retrying from header row %d", retry_idx)
                retry, retry_skipped = _decode_from(rows, retry_idx, force_header=True, today=today)
                if retry:
                    transactions, skipped, header_idx = retry, retry_skipped, retry_idx

    account_number: str | None = None
    account_name: str | None = None
    if header_idx:
        preamble = rows[:header_idx]
        account_number = _labelled_value(preamble, _ACCOUNT_NUMBER_LABELS)
        account_name = _labelled_value(preamble, _ACCOUNT_NAME_LABELS)

    period, opening, closing = _summarize(transactions)
    _logger.info(
        "decoded %s statement: %d transactions, %d skipped rows",
        source_format,
        len(transactions),
        len(skipped),
    )
    return StatementParseResult(
        transactions=transactions,
        source_format=source_format,
        skipped_rows=skipped,
        raw_row_count=len(rows),
        account_number=account_number,
        account_name=account_name,
        statement_period=period,
        opening_balance=opening,
        closing_balance=closing,
    )


__all__ = ["Grid", "decode_grid", "drop_blank_rows"]
