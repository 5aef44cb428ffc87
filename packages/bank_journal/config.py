"""Runtime settings read from the environment.

Entrypoints load a local ``.env`` (via ``python-dotenv``) before calling
:func:`load_settings`; library functions take explicit arguments and never
read the environment themselves.

Variables
---------
- ``BANK_JOURNAL_BANK_LABEL``: default bank ledger label for templates.
- ``BANK_JOURNAL_INCLUDE_DATE``: ``1/true/yes`` or ``0/false/no``; whether
  export file names get a ``_YYYY-MM-DD`` suffix (default true).
- ``BANK_JOURNAL_MAX_COLUMN_WIDTH``: XLSX column width cap (default 50).
- ``BANK_JOURNAL_OUTPUT_DIR``: directory for written exports (default CWD).
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .export import MAX_COLUMN_WIDTH

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    bank_label: str | None = None
    include_date: bool = True
    max_column_width: int = Field(default=MAX_COLUMN_WIDTH, ge=8, le=255)
    output_dir: Path = Field(default_factory=Path.cwd)

    @field_validator("bank_label")
    @classmethod
    def _blank_label_is_none(cls, v: str | None) -> str | None:
        return v or None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"{name} must be one of {sorted(_TRUE | _FALSE)}, got {raw!r}")


def load_settings() -> Settings:
    """Build :class:`Settings` from ``BANK_JOURNAL_*`` environment variables."""

    values: dict[str, object] = {
        "bank_label": os.getenv("BANK_JOURNAL_BANK_LABEL"),
        "include_date": _env_bool("BANK_JOURNAL_INCLUDE_DATE", True),
    }
    width = os.getenv("BANK_JOURNAL_MAX_COLUMN_WIDTH")
    if width and width.strip():
        values["max_column_width"] = width.strip()
    out_dir = os.getenv("BANK_JOURNAL_OUTPUT_DIR")
    if out_dir and out_dir.strip():
        values["output_dir"] = Path(out_dir.strip()).expanduser()
    return Settings.model_validate(values)


__all__ = ["Settings", "load_settings"]
