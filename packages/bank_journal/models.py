"""Data models for ``bank_journal``.

Records produced by the pipeline are frozen ``dataclass`` instances with
explicit field order, so they compare by value in tests and cannot be mutated
once a decoder or generator has emitted them. Amounts are ``Decimal`` and
dates are ISO ``YYYY-MM-DD`` strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Literal, TypeAlias

TransactionType: TypeAlias = Literal["credit", "debit"]
Direction: TypeAlias = Literal["receipt", "payment", "unknown"]
SourceFormat: TypeAlias = Literal["csv", "excel"]


# ---------------------------------------------------------------------------
# Decoded statement
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ParsedTransaction:
    """One row of a decoded bank statement.

    ``withdrawal`` is money leaving the account and ``deposit`` is money
    entering it. Exactly one of them is a positive ``Decimal``; the other is
    ``None``. ``balance`` is informational only.
    """

    date: str
    description: str
    withdrawal: Decimal | None
    deposit: Decimal | None
    balance: Decimal | None = None
    reference: str | None = None

    @property
    def type(self) -> TransactionType:
        return "credit" if self.deposit is not None else "debit"

    @property
    def amount(self) -> Decimal:
        """The single non-null magnitude of this transaction."""

        if self.deposit is not None:
            return self.deposit
        return self.withdrawal if self.withdrawal is not None else Decimal(0)

    def as_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "description": self.description,
            "withdrawal": self.withdrawal,
            "deposit": self.deposit,
            "balance": self.balance,
            "reference": self.reference,
            "type": self.type,
        }


@dataclass(frozen=True, slots=True)
class SkippedRow:
    """A source row the decoder dropped, with the reason it was dropped.

    ``index`` is the 0-based position of the row within the decoded grid
    (header row included), ``raw_content`` the row's cells joined by commas.
    """

    index: int
    raw_content: str
    reason: str


@dataclass(frozen=True, slots=True)
class StatementPeriod:
    start: str
    end: str


@dataclass(frozen=True, slots=True)
class StatementParseResult:
    """Outcome of decoding one statement file."""

    transactions: list[ParsedTransaction]
    source_format: SourceFormat
    skipped_rows: list[SkippedRow] = field(default_factory=list)
    raw_row_count: int = 0
    account_number: str | None = None
    account_name: str | None = None
    statement_period: StatementPeriod | None = None
    opening_balance: Decimal | None = None
    closing_balance: Decimal | None = None

    @property
    def skipped_row_count(self) -> int:
        return len(self.skipped_rows)

    @property
    def warnings(self) -> list[str]:
        # Row numbers are 1-based for people reading the original file.
        return [f"Row {s.index + 1}: {s.reason}" for s in self.skipped_rows]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Classification:
    type: Direction
    suggested_account: str | None = None
    category: str | None = None


# ---------------------------------------------------------------------------
# Journal template
# ---------------------------------------------------------------------------

JOURNAL_TEMPLATE_COLUMNS: tuple[str, ...] = (
    "Date",
    "Amount",
    "DebitAccount",
    "CreditAccount",
    "Narration",
)


@dataclass(frozen=True, slots=True)
class JournalTemplateRow:
    """One journal line with the bank leg filled and the counter leg blank.

    Exactly one of ``debit_account`` / ``credit_account`` holds the bank
    label; the other is ``""`` for the user to complete.
    """

    date: str
    amount: Decimal
    debit_account: str
    credit_account: str
    narration: str

    def as_dict(self) -> dict[str, Any]:
        """Return the row keyed by the template's column headers."""

        return dict(
            zip(
                JOURNAL_TEMPLATE_COLUMNS,
                (self.date, self.amount, self.debit_account, self.credit_account, self.narration),
                strict=True,
            )
        )


__all__ = [
    "Classification",
    "Direction",
    "JOURNAL_TEMPLATE_COLUMNS",
    "JournalTemplateRow",
    "ParsedTransaction",
    "SkippedRow",
    "SourceFormat",
    "StatementParseResult",
    "StatementPeriod",
    "TransactionType",
]
