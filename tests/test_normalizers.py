from datetime import date, datetime
from decimal import Decimal

import pytest

from bank_journal.normalizers import clean_text, parse_amount, parse_date

TODAY = date(2024, 5, 6)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("(1,234.50)", Decimal("-1234.50")),
        ("₹1,234.50", Decimal("1234.50")),
        ("$ 12,000", Decimal("12000")),
        ("1,000.00 Cr", Decimal("1000.00")),
        (" 5,000.25 ", Decimal("5000.25")),
        ("-(50)", Decimal("-50")),
        ("-42.5", Decimal("-42.5")),
        (5000, Decimal("5000")),
        (12.5, Decimal("12.5")),
        (Decimal("7.10"), Decimal("7.10")),
    ],
)
def test_parse_amount_values(raw, expected):
    assert parse_amount(raw) == expected


@pytest.mark.parametrize(
    "raw", [None, "", "   ", "abc", "-", "1.2.3", float("nan"), float("inf"), True]
)
def test_parse_amount_rejects_without_raising(raw):
    assert parse_amount(raw) is None


@pytest.mark.parametrize("raw", ["1,234.50", "(99.99)", "₹ 10,00,000", "0.01", "-7"])
def test_parse_amount_is_idempotent(raw):
    first = parse_amount(raw)
    assert first is not None
    assert parse_amount(str(first)) == first


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2024-02-01", "2024-02-01"),
        ("01/02/2024", "2024-02-01"),
        ("01-02-2024", "2024-02-01"),
        ("1/2/2024", "2024-02-01"),
        ("2024/02/01", "2024-02-01"),
        ("2024/2/1", "2024-02-01"),
        ("05 Mar 2024", "2024-03-05"),
        ("5 march 2024", "2024-03-05"),
        ("05-MAR-2024", "2024-03-05"),
        ("45323", "2024-02-01"),
        (45323, "2024-02-01"),
        (45323.0, "2024-02-01"),
        (datetime(2024, 3, 4, 10, 30), "2024-03-04"),
        (date(2024, 3, 4), "2024-03-04"),
    ],
)
def test_parse_date_formats(raw, expected):
    assert parse_date(raw, today=TODAY) == expected


@pytest.mark.parametrize(
    "raw", [None, "", "not a date", "31/02/2024", "2024-13-45", "7", 7, "2024", "20240201"]
)
def test_parse_date_falls_back_to_today(raw):
    assert parse_date(raw, today=TODAY) == "2024-05-06"


def test_parse_date_default_today_is_current_date():
    assert parse_date("???") == date.today().isoformat()


def test_clean_text_collapses_whitespace_and_controls():
    assert clean_text("  NEFT\tACME \n LTD\x07 ") == "NEFT ACME LTD"
    assert clean_text("   ") is None
    assert clean_text(None) is None


def test_parse_date_fills_missing_fields_from_today():
    assert parse_date("15 June", today=TODAY) == "2024-06-15"
