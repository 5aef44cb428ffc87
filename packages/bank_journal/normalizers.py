"""Amount, date and text normalization for raw statement cells.

Both parsers are total: ``parse_amount`` returns ``None`` for anything it
cannot read and ``parse_date`` falls back to today's date. Callers that need
stricter validation must check plausibility themselves.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time, timedelta
from decimal import Decimal, InvalidOperation
from typing import Any

from dateutil import parser as dateutil_parser

# ---------------------------------------------------------------------------
# Amounts
# ---------------------------------------------------------------------------

_WHITESPACE_RE = re.compile(r"\s+")
_NON_NUMERIC_RE = re.compile(r"[^0-9,.\-]")


def parse_amount(raw: Any) -> Decimal | None:
    """Parse a statement amount into a ``Decimal``.

    Numbers are accepted directly when finite. Strings lose whitespace
    (including non-breaking spaces) and every character other than digits,
    ``,``, ``.`` and ``-``, so currency symbols and stray letters such as
    ``Cr``/``Dr`` go in one pass. Accounting notation ``(1,234.50)`` is read as
    negative. Returns ``None`` for empty or unparseable input.
    """

    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Decimal):
        return raw if raw.is_finite() else None
    if isinstance(raw, int):
        return Decimal(raw)
    if isinstance(raw, float):
        # str() keeps the shortest repr so 0.1 does not become 0.1000000000000000055.
        return Decimal(str(raw)) if math.isfinite(raw) else None

    text = str(raw)
    cleaned = _NON_NUMERIC_RE.sub("", _WHITESPACE_RE.sub("", text))
    if "(" in text and ")" in text and not cleaned.startswith("-"):
        cleaned = "-" + cleaned
    cleaned = cleaned.replace(",", "")
    if not cleaned:
        return None

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

# Spreadsheet serial 25569 is 1970-01-01 (serial day 0 is 1899-12-30).
_UNIX_EPOCH_SERIAL = 25569
_UNIX_EPOCH = datetime(1970, 1, 1)

_ISO_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_SERIAL_RE = re.compile(r"^\d+$")
_DAY_FIRST_RE = re.compile(r"^(\d{1,2})[-/](\d{1,2})[-/](\d{4})$")
_YEAR_FIRST_RE = re.compile(r"^(\d{4})[-/](\d{1,2})[-/](\d{1,2})$")
_DAY_MONTH_NAME_RE = re.compile(r"^(\d{1,2})[\s\-]+([A-Za-z]{3,})\.?[\s\-,]+(\d{4})$")

_MONTHS: tuple[str, ...] = (
    "jan",
    "feb",
    "mar",
    "apr",
    "may",
    "jun",
    "jul",
    "aug",
    "sep",
    "oct",
    "nov",
    "dec",
)


def _safe_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _from_serial(serial: int) -> date | None:
    millis = (serial - _UNIX_EPOCH_SERIAL) * 86400 * 1000
    try:
        return (_UNIX_EPOCH + timedelta(milliseconds=millis)).date()
    except OverflowError:
        return None


def _match_patterns(s: str) -> date | None:
    m = _DAY_FIRST_RE.match(s)
    if m:
        day, month, year = (int(g) for g in m.groups())
        return _safe_date(year, month, day)

    m = _YEAR_FIRST_RE.match(s)
    if m:
        year, month, day = (int(g) for g in m.groups())
        return _safe_date(year, month, day)

    m = _DAY_MONTH_NAME_RE.match(s)
    if m:
        prefix = m.group(2)[:3].lower()
        if prefix in _MONTHS:
            return _safe_date(int(m.group(3)), _MONTHS.index(prefix) + 1, int(m.group(1)))
    return None


def parse_date(raw: Any, *, today: date | None = None) -> str:
    """Normalize a statement date cell to ``YYYY-MM-DD``.

    Order of attempts: ISO passthrough, spreadsheet serial for bare integers
    above 25569, ``DD-MM-YYYY``/``DD/MM/YYYY``, ``YYYY-MM-DD``/``YYYY/MM/DD``,
    ``DD <Month> YYYY``, generic day-first parsing, and finally ``today``.
    Bare integers that are not serials go straight to ``today``, and the
    generic parser takes any field the text omits from ``today`` as well.
    """

    fallback_date = today or date.today()
    fallback = fallback_date.isoformat()

    if isinstance(raw, datetime):
        return raw.date().isoformat()
    if isinstance(raw, date):
        return raw.isoformat()
    if raw is None or isinstance(raw, bool):
        return fallback
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)

    s = str(raw).strip()
    if not s:
        return fallback

    if _ISO_RE.match(s) and _safe_date(int(s[:4]), int(s[5:7]), int(s[8:10])):
        return s

    if _SERIAL_RE.match(s):
        # Bare integers are only ever spreadsheet serials.
        serial = int(s)
        converted = _from_serial(serial) if serial > _UNIX_EPOCH_SERIAL else None
        return converted.isoformat() if converted is not None else fallback

    matched = _match_patterns(s)
    if matched is not None:
        return matched.isoformat()

    try:
        # Fields missing from the text come from the fallback date, not the clock.
        default = datetime.combine(fallback_date, time())
        return dateutil_parser.parse(s, dayfirst=True, default=default).date().isoformat()
    except (ValueError, OverflowError):
        return fallback


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")


def clean_text(value: Any) -> str | None:
    """Collapse whitespace, drop control characters, and strip.

    Returns ``None`` when nothing is left.
    """

    if value is None:
        return None
    collapsed = _WHITESPACE_RE.sub(" ", str(value))
    cleaned = _CONTROL_RE.sub("", collapsed).strip()
    return cleaned if cleaned != "" else None


__all__ = ["clean_text", "parse_amount", "parse_date"]
