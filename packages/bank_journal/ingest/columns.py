"""Header column detection for bank statement grids.

Header cells are lower-cased and tested by substring against ordered keyword
sets. A column index is set every time a cell matches, so when several cells
match the same set the right-most one wins. Fields that stay unset fall back
to fixed positions (date=0, description=1, withdrawal=2, deposit=3).

Note that ``dr``/``cr`` are plain substrings: ``"Description"`` matches the
credit set, which only matters when no later cell says ``Credit``/``Deposit``.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

UNSET = -1

# (field, keywords). Withdrawal/deposit share the debit/credit keyword sets.
HEADER_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("date", ("date",)),
    ("description", ("description", "particulars", "narration", "details")),
    ("withdrawal", ("debit", "withdrawal", "dr")),
    ("deposit", ("credit", "deposit", "cr")),
    ("balance", ("balance",)),
    ("reference", ("ref", "cheque", "chq", "utr")),
)

POSITIONAL_DEFAULTS: dict[str, int] = {
    "date": 0,
    "description": 1,
    "withdrawal": 2,
    "deposit": 3,
}

# Keywords used to recognise a header row below a preamble (account details
# printed above the transaction table).
PREAMBLE_HEADER_KEYWORDS: tuple[str, ...] = (
    "transaction date",
    "value date",
    "date",
    "particulars",
    "description",
    "narration",
    "debit",
    "credit",
    "balance",
    "cheque",
)
PREAMBLE_MIN_HITS = 3


@dataclass(frozen=True, slots=True)
class ColumnMap:
    """Resolved column indices; ``-1`` means the column is absent."""

    date: int
    description: int
    withdrawal: int
    deposit: int
    balance: int = UNSET
    reference: int = UNSET


def cell_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def detect_columns(header: Sequence[Any]) -> ColumnMap:
    """Resolve column indices from a candidate header row."""

    found: dict[str, int] = {name: UNSET for name, _ in HEADER_KEYWORDS}
    for idx, cell in enumerate(header):
        text = cell_text(cell).lower()
        if not text:
            continue
        for name, keywords in HEADER_KEYWORDS:
            if any(k in text for k in keywords):
                found[name] = idx

    for name, default in POSITIONAL_DEFAULTS.items():
        if found[name] == UNSET:
            found[name] = default

    # A reference keyword inside the narration header is not a separate column.
    if found["reference"] == found["description"]:
        found["reference"] = UNSET

    return ColumnMap(**found)


def is_header_row(row: Sequence[Any]) -> bool:
    """Row 0 is a header when any of its cells mentions ``date``."""

    return any("date" in cell_text(c).lower() for c in row)


def find_preamble_header(rows: Sequence[Sequence[Any]], *, max_scan: int = 80) -> int | None:
    """Return the index of the first row that looks like a table header.

    A row qualifies when its joined cells contain at least three distinct
    header keywords. Row 0 is included in the scan.
    """

    for i, row in enumerate(rows[:max_scan]):
        joined = " ".join(cell_text(c) for c in row).lower()
        hits = sum(1 for k in PREAMBLE_HEADER_KEYWORDS if k in joined)
        if hits >= PREAMBLE_MIN_HITS:
            return i
    return None


__all__ = [
    "ColumnMap",
    "HEADER_KEYWORDS",
    "POSITIONAL_DEFAULTS",
    "UNSET",
    "cell_text",
    "detect_columns",
    "find_preamble_header",
    "is_header_row",
]
