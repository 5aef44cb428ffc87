"""Adapter for comma-delimited bank statement exports.

Splitting follows RFC 4180 via the stdlib :mod:`csv` module: commas inside
quoted fields are not split points and the surrounding quotes are removed from
the cell text. Cells are trimmed; fully blank lines are ignored before the
two-row minimum is checked.
"""

from __future__ import annotations

import csv
from datetime import date
from io import StringIO

from ...models import StatementParseResult
from ..decoder import decode_grid


def decode_text(content: bytes | str) -> str:
    """Decode uploaded bytes as UTF-8, dropping a leading byte-order mark."""

    if isinstance(content, str):
        return content.removeprefix("\ufeff")
    return content.decode("utf-8-sig", errors="replace")


def split_rows(csv_text: str) -> list[list[str]]:
    """Split CSV text into trimmed cell rows, skipping blank lines."""

    rows: list[list[str]] = []
    with StringIO(csv_text, newline="") as f:
        for record in csv.reader(f, skipinitialspace=True):
            cells = [c.strip() for c in record]
            if any(cells):
                rows.append(cells)
    return rows


def parse_csv(content: bytes | str, *, today: date | None = None) -> StatementParseResult:
    """Decode a CSV statement into transactions."""

    return decode_grid(split_rows(decode_text(content)), source_format="csv", today=today)


__all__ = ["decode_text", "parse_csv", "split_rows"]
