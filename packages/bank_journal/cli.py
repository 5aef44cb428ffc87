# ruff: noqa: I001
"""CLI for the ``bank_journal`` package.

This module exposes callable command handlers (``cmd_parse``,
``cmd_template``, ``cmd_categorize``) and a Typer-based console interface.
Settings are loaded from a local ``.env`` using ``python-dotenv`` before the
handlers run. Business logic lives in ``bank_journal.ingest``,
``bank_journal.classifier``, ``bank_journal.journal`` and
``bank_journal.export``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from typer.models import OptionInfo

from .classifier import categorize
from .config import load_settings
from .errors import StatementParseError
from .export import (
    JOURNAL_TEMPLATE_BASENAME,
    export_filename,
    journal_template_to_csv,
    journal_template_to_xlsx,
)
from .ingest.utils import load_statement
from .journal import generate_journal_template
from .logging_setup import configure_logging, get_logger
from .models import StatementParseResult

_logger = get_logger("bank_journal.cli")


def _load(path: Path) -> StatementParseResult | None:
    """Decode ``path`` or print a readable error and return ``None``."""

    try:
        return load_statement(path)
    except FileNotFoundError:
        print(f"Error: File not found: {path}", file=sys.stderr)
    except PermissionError:
        print(f"Error: Permission denied: {path}", file=sys.stderr)
    except StatementParseError as e:
        print(f"Error: {e}", file=sys.stderr)
    except OSError as e:
        print(f"Error: Could not read {path}: {e.strerror or e}", file=sys.stderr)
    return None


def _fmt(value: object) -> str:
    return "" if value is None else str(value)


def cmd_parse(
    file_path: str, *, show_skipped: bool = False, console: Console | None = None
) -> int:
    """Decode a statement and print its transactions as a table.

    Each row also shows the classifier's suggested account. Returns ``0`` on
    success and ``1`` when the file cannot be decoded.
    """

    out = console or Console()
    result = _load(Path(file_path))
    if result is None:
        return 1

    table = Table(title=Path(file_path).name)
    for col in ("Date", "Description", "Withdrawal", "Deposit", "Balance", "Suggested"):
        table.add_column(col, overflow="fold")
    for txn in result.transactions:
        suggestion = categorize(txn.description)
        suggested = (
            f"{suggestion.suggested_account} {suggestion.category}"
            if suggestion.suggested_account
            else ""
        )
        table.add_row(
            txn.date,
            txn.description,
            _fmt(txn.withdrawal),
            _fmt(txn.deposit),
            _fmt(txn.balance),
            suggested,
        )
    out.print(table)

    summary = f"{len(result.transactions)} transactions, {result.skipped_row_count} rows skipped"
    if result.statement_period is not None:
        summary += f" ({result.statement_period.start} to {result.statement_period.end})"
    out.print(summary)
    if show_skipped:
        for warning in result.warnings:
            out.print(warning)
    return 0


def cmd_template(
    file_path: str,
    *,
    bank_label: str | None,
    fmt: str = "xlsx",
    output_dir: str | None = None,
    base_name: str | None = None,
    include_date: bool | None = None,
) -> int:
    """Write a journal template for the statement at ``file_path``.

    Options not passed explicitly fall back to ``BANK_JOURNAL_*`` settings.
    Prints the written path on success.
    """

    try:
        settings = load_settings()
    except ValueError as e:
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    label = bank_label or settings.bank_label
    if not label:
        print(
            "Error: a bank account label is required (--bank-label or BANK_JOURNAL_BANK_LABEL).",
            file=sys.stderr,
        )
        return 1

    fmt = fmt.strip().lower()
    if fmt not in {"xlsx", "csv"}:
        print(f"Error: unsupported format {fmt!r}; choose xlsx or csv.", file=sys.stderr)
        return 1

    result = _load(Path(file_path))
    if result is None:
        return 1

    rows = generate_journal_template(result.transactions, label)
    if not rows:
        print(
            "Error: no valid transactions found. Transactions need a withdrawal or deposit amount.",
            file=sys.stderr,
        )
        return 1

    payload = (
        journal_template_to_xlsx(rows, max_width=settings.max_column_width)
        if fmt == "xlsx"
        else journal_template_to_csv(rows)
    )
    name = export_filename(
        base_name or JOURNAL_TEMPLATE_BASENAME,
        fmt,
        include_date=settings.include_date if include_date is None else include_date,
    )
    target_dir = Path(output_dir) if output_dir else settings.output_dir
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / name
        target.write_bytes(payload)
    except OSError as e:
        print(f"Error: could not write template: {e}", file=sys.stderr)
        return 1

    _logger.info("wrote %d template rows to %s", len(rows), target)
    print(str(target))
    return 0


def cmd_categorize(description: str) -> int:
    """Print ``<type>\\t<account>\\t<category>`` for one narration."""

    c = categorize(description)
    print(f"{c.type}\t{c.suggested_account or ''}\t{c.category or ''}")
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help=(
        "Decode CSV/Excel bank statements and export journal templates with the bank "
        "leg pre-filled. Loads BANK_JOURNAL_* settings from a local .env."
    ),
)

# Module-level option object to satisfy ruff B008 (no calls in parameter
# defaults). Typer will inspect this when used as a default value below.
FILE_OPTION: OptionInfo = typer.Option(
    ...,
    "--file",
    "-f",
    help="Path to a bank statement (.csv, .xlsx, .xls)",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)


@app.command("parse")
def parse_cmd(
    file: Annotated[Path, FILE_OPTION],
    *,
    show_skipped: bool = typer.Option(False, help="List rows that were skipped and why."),
) -> None:
    """Decode a statement and show its transactions."""

    raise typer.Exit(cmd_parse(str(file), show_skipped=show_skipped))


@app.command("template")
def template_cmd(
    file: Annotated[Path, FILE_OPTION],
    *,
    bank_label: str | None = typer.Option(
        None, help="Bank ledger account name (falls back to BANK_JOURNAL_BANK_LABEL)."
    ),
    fmt: str = typer.Option("xlsx", "--format", help="Output format: xlsx or csv."),
    output_dir: str | None = typer.Option(
        None, help="Directory to write into (falls back to BANK_JOURNAL_OUTPUT_DIR)."
    ),
    name: str | None = typer.Option(None, help="Base file name without extension."),
    include_date: bool | None = typer.Option(
        None, "--date/--no-date", help="Append _YYYY-MM-DD to the file name."
    ),
) -> None:
    """Generate a journal template from a statement."""

    raise typer.Exit(
        cmd_template(
            str(file),
            bank_label=bank_label,
            fmt=fmt,
            output_dir=output_dir,
            base_name=name,
            include_date=include_date,
        )
    )


@app.command("categorize")
def categorize_cmd(description: str) -> None:
    """Suggest a direction and ledger account for a narration."""

    raise typer.Exit(cmd_categorize(description))


@app.callback()
def _root() -> None:
    """Load ``.env`` from the CWD (without overriding set variables) and set up logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()


if __name__ == "__main__":  # pragma: no cover
    app()
