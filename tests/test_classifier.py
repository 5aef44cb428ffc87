import re

import pytest

from bank_journal.classifier import RULES, ClassificationRule, categorize
from bank_journal.models import Classification


@pytest.mark.parametrize(
    ("description", "expected"),
    [
        ("Salary Credit", ("receipt", "4010", "Revenue")),
        ("Salary paid to staff", ("receipt", "4010", "Revenue")),
        ("Customer refund", ("receipt", "4010", "Revenue")),
        ("Dividend from XYZ", ("receipt", "4520", "Investment")),
        ("Wages for March", ("payment", "6010", "Salaries")),
        ("Office rent March", ("payment", "6020", "Rent")),
        ("Electricity bill", ("payment", "6140", "Utilities")),
        ("Airtel mobile recharge", ("payment", "6050", "Utilities")),
        ("Broadband charges", ("payment", "6050", "Utilities")),
        ("Purchase from supplier", ("payment", "5050", "Purchases")),
        ("Card purchases", ("payment", "5050", "Purchases")),
        ("GST payment", ("payment", "2420", "Tax")),
        ("EMI 5 of 12", ("payment", "2210", "Loan")),
        ("LIC insurance premium", ("payment", "6110", "Insurance")),
        ("AC repair", ("payment", "6130", "Maintenance")),
    ],
)
def test_categorize_matches_rules(description, expected):
    c = categorize(description)
    assert (c.type, c.suggested_account, c.category) == expected


@pytest.mark.parametrize("description", ["ATM WDL", "current account transfer", "", "   "])
def test_unmatched_descriptions_are_unknown(description):
    assert categorize(description) == Classification(type="unknown")


def test_receipt_rules_are_checked_first():
    # "loan" in the receipt group shadows the repayment rule.
    c = categorize("Loan repayment to bank")
    assert (c.type, c.suggested_account) == ("receipt", "2210")


def test_rule_order_is_fixed():
    assert [r.direction for r in RULES[:3]] == ["receipt"] * 3
    assert all(r.direction == "payment" for r in RULES[3:])
    assert [r.account for r in RULES] == [
        "4010",
        "2210",
        "4520",
        "6020",
        "6010",
        "6140",
        "6050",
        "6050",
        "5050",
        "2420",
        "2210",
        "6110",
        "6130",
    ]


def test_custom_rules():
    rules = [ClassificationRule("payment", re.compile(r"\bfuel"), "6200", "Travel")]
    assert categorize("FUEL STATION 22", rules=rules).suggested_account == "6200"
    assert categorize("Salary", rules=rules).type == "unknown"


@pytest.mark.parametrize("description", ["MONTHLYRENT", "NEFTSALARY", "AUTOEMI"])
def test_keywords_glued_inside_words_do_not_match(description):
    assert categorize(description).type == "unknown"
