"""Pytest configuration.

Puts the workspace ``packages/`` directory on ``sys.path`` so ``bank_journal``
imports without an install, and keeps ``BANK_JOURNAL_*`` variables from the
developer's shell out of the tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_ROOT = Path(__file__).resolve().parents[1]
_PKG_DIR = _ROOT / "packages"
sys.path[:0] = [p for p in [str(_PKG_DIR)] if p not in sys.path]

_ENV_VARS = (
    "BANK_JOURNAL_BANK_LABEL",
    "BANK_JOURNAL_INCLUDE_DATE",
    "BANK_JOURNAL_MAX_COLUMN_WIDTH",
    "BANK_JOURNAL_OUTPUT_DIR",
    "BANK_JOURNAL_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Clear package settings and run each test from its own directory.

    The CLI loads ``.env`` from the CWD; a temporary CWD keeps a developer's
    local ``.env`` from leaking into assertions.
    """

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
