import logging
from io import StringIO

import pytest

from bank_journal import logging_setup
from bank_journal.logging_setup import configure_logging, get_logger, resolve_level


@pytest.fixture
def root_logger():
    logger = logging.getLogger("bank_journal")
    yield logger
    if logging_setup._handler is not None:
        logger.removeHandler(logging_setup._handler)
        logging_setup._handler = None
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("debug", logging.DEBUG),
        (" INFO ", logging.INFO),
        ("15", 15),
        (logging.ERROR, logging.ERROR),
        ("", logging.WARNING),
        ("chatty", logging.WARNING),
        (None, logging.WARNING),
    ],
)
def test_resolve_level(value, expected):
    assert resolve_level(value) == expected


def test_get_logger_stays_under_package_root():
    assert get_logger("bank_journal.journal").name == "bank_journal.journal"
    assert get_logger("bank_journal").name == "bank_journal"
    assert get_logger("plugins.csv").name == "bank_journal.plugins.csv"


def test_level_comes_from_environment(root_logger, monkeypatch):
    monkeypatch.setenv("BANK_JOURNAL_LOG_LEVEL", "DEBUG")
    out = StringIO()

    configure_logging(stream=out)
    get_logger("bank_journal.ingest.decoder").debug("skipped row %d: %s", 3, "missing date")

    assert root_logger.level == logging.DEBUG
    assert out.getvalue() == "DEBUG   bank_journal.ingest.decoder: skipped row 3: missing date\n"


def test_default_level_hides_info(root_logger):
    out = StringIO()
    configure_logging(stream=out)

    get_logger("bank_journal.cli").info("wrote 2 template rows")
    get_logger("bank_journal.cli").warning("column width capped")

    assert out.getvalue() == "WARNING bank_journal.cli: column width capped\n"


def test_reconfiguring_replaces_the_handler(root_logger):
    first, second = StringIO(), StringIO()
    configure_logging("INFO", stream=first)
    configure_logging("INFO", stream=second)

    get_logger("bank_journal.journal").info("hello")

    assert first.getvalue() == ""
    assert "hello" in second.getvalue()
    assert sum(isinstance(h, logging.StreamHandler) for h in root_logger.handlers) == 1
