"""Rule-based direction and account suggestions for statement narrations.

Rules are plain data evaluated by one loop: the first rule whose pattern
matches the lower-cased description wins. Receipt rules come before payment
rules, so a word present in both groups (``salary``) always yields a receipt.
Keywords match at the start of a word, which lets ``purchases`` hit
``purchase`` while keeping ``premium`` from hitting ``emi``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from .models import Classification, Direction


@dataclass(frozen=True, slots=True)
class ClassificationRule:
    direction: Direction
    pattern: re.Pattern[str]
    account: str
    category: str


def _rule(
    direction: Direction, keywords: Sequence[str], account: str, category: str
) -> ClassificationRule:
    alternation = "|".join(re.escape(k) for k in keywords)
    return ClassificationRule(
        direction=direction,
        pattern=re.compile(rf"\b(?:{alternation})", re.IGNORECASE),
        account=account,
        category=category,
    )


# Account codes refer to the default chart of accounts.
RULES: tuple[ClassificationRule, ...] = (
    # Receipts
    _rule(
        "receipt",
        (
            "salary",
            "income",
            "revenue",
            "sale",
            "invoice",
            "payment received",
            "credit",
            "deposit",
            "refund",
        ),
        "4010",
        "Revenue",
    ),
    _rule("receipt", ("loan", "advance received", "borrowed"), "2210", "Loan"),
    _rule("receipt", ("investment", "dividend", "interest received"), "4520", "Investment"),
    # Payments
    _rule("payment", ("rent", "lease", "accommodation"), "6020", "Rent"),
    _rule("payment", ("salary", "wages", "payroll", "employee"), "6010", "Salaries"),
    _rule("payment", ("electricity", "power", "utility"), "6140", "Utilities"),
    _rule("payment", ("phone", "telecom", "mobile"), "6050", "Utilities"),
    _rule("payment", ("internet", "broadband"), "6050", "Utilities"),
    _rule("payment", ("purchase", "buy", "vendor", "supplier", "bill"), "5050", "Purchases"),
    _rule("payment", ("tax", "gst", "tds", "income tax"), "2420", "Tax"),
    _rule("payment", ("loan repayment", "emi", "installment"), "2210", "Loan"),
    _rule("payment", ("insurance", "premium"), "6110", "Insurance"),
    _rule("payment", ("maintenance", "repair", "service"), "6130", "Maintenance"),
)


def categorize(
    description: str, *, rules: Sequence[ClassificationRule] = RULES
) -> Classification:
    """Return the direction, suggested account, and category for a narration."""

    text = (description or "").lower()
    for rule in rules:
        if rule.pattern.search(text):
            return Classification(
                type=rule.direction,
                suggested_account=rule.account,
                category=rule.category,
            )
    return Classification(type="unknown")


__all__ = ["ClassificationRule", "RULES", "categorize"]
