"""Journal template generation from decoded bank transactions.

Each transaction becomes one journal line with the bank leg pre-filled:

- deposit (money in): the bank account is debited, the credit side is blank;
- withdrawal (money out): the bank account is credited, the debit side is blank.

The blank side is the counter leg the user completes. Input order is kept and
nothing is sorted, merged or de-duplicated.
"""

from __future__ import annotations

from collections.abc import Iterable

from .logging_setup import get_logger
from .models import JournalTemplateRow, ParsedTransaction
from .normalizers import parse_date

_logger = get_logger("bank_journal.journal")


def build_narration(description: str, reference: str | None) -> str:
    if reference and reference.strip():
        return f"{description} (Ref: {reference.strip()})"
    return description


def generate_journal_template(
    transactions: Iterable[ParsedTransaction], bank_account_label: str
) -> list[JournalTemplateRow]:
    """Convert transactions into journal template rows.

    Raises ``ValueError`` when ``bank_account_label`` is blank. Transactions
    with neither a positive deposit nor a positive withdrawal are skipped.
    """

    label = (bank_account_label or "").strip()
    if not label:
        raise ValueError("bank_account_label is required and must be a non-empty string")

    rows: list[JournalTemplateRow] = []
    deposits = withdrawals = dropped = 0
    for txn in transactions:
        # Dates are normalized again so rows built by callers in DD/MM/YYYY still come out ISO.
        date = parse_date(txn.date)
        narration = build_narration(txn.description, txn.reference)

        if txn.deposit is not None and txn.deposit > 0:
            rows.append(
                JournalTemplateRow(
                    date=date,
                    amount=txn.deposit,
                    debit_account=label,
                    credit_account="",
                    narration=narration,
                )
            )
            deposits += 1
        elif txn.withdrawal is not None and txn.withdrawal > 0:
            rows.append(
                JournalTemplateRow(
                    date=date,
                    amount=txn.withdrawal,
                    debit_account="",
                    credit_account=label,
                    narration=narration,
                )
            )
            withdrawals += 1
        else:
            dropped += 1

    _logger.debug(
        "journal template: %d deposit rows, %d withdrawal rows, %d dropped",
        deposits,
        withdrawals,
        dropped,
    )
    return rows


__all__ = ["build_narration", "generate_journal_template"]
