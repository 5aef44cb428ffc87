from pathlib import Path

import pytest
from pydantic import ValidationError

from bank_journal.config import Settings, load_settings


def test_defaults():
    s = load_settings()
    assert s == Settings(
        bank_label=None, include_date=True, max_column_width=50, output_dir=Path.cwd()
    )


def test_values_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("BANK_JOURNAL_BANK_LABEL", "  ICICI Current A/c ")
    monkeypatch.setenv("BANK_JOURNAL_INCLUDE_DATE", "no")
    monkeypatch.setenv("BANK_JOURNAL_MAX_COLUMN_WIDTH", "30")
    monkeypatch.setenv("BANK_JOURNAL_OUTPUT_DIR", str(tmp_path / "out"))

    s = load_settings()

    assert s.bank_label == "ICICI Current A/c"
    assert s.include_date is False
    assert s.max_column_width == 30
    assert s.output_dir == Path(tmp_path / "out")


def test_blank_label_is_none(monkeypatch):
    monkeypatch.setenv("BANK_JOURNAL_BANK_LABEL", "   ")
    assert load_settings().bank_label is None


def test_invalid_boolean(monkeypatch):
    monkeypatch.setenv("BANK_JOURNAL_INCLUDE_DATE", "maybe")
    with pytest.raises(ValueError, match="BANK_JOURNAL_INCLUDE_DATE"):
        load_settings()


@pytest.mark.parametrize("width", ["2", "1000", "wide"])
def test_invalid_width(monkeypatch, width):
    monkeypatch.setenv("BANK_JOURNAL_MAX_COLUMN_WIDTH", width)
    with pytest.raises(ValidationError):
        load_settings()
