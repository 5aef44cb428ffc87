"""Public interface for the ``bank_journal`` package.

Bank statement ingestion (CSV/XLSX), rule-based transaction classification,
journal template generation and CSV/XLSX export. This module only re-exports
the stable import surface; there is no runtime logic here.
"""

from .classifier import RULES, ClassificationRule, categorize
from .errors import StatementParseError, UnsupportedFormatError
from .export import (
    ExportData,
    export_filename,
    journal_template_to_csv,
    journal_template_to_xlsx,
    records_to_export_data,
    to_csv,
    to_csv_bytes,
    to_xlsx,
)
from .ingest.adapters.delimited_csv import parse_csv
from .ingest.adapters.spreadsheet import parse_spreadsheet
from .ingest.utils import load_statement, parse_pdf, parse_statement, parse_upload
from .journal import generate_journal_template
from .models import (
    JOURNAL_TEMPLATE_COLUMNS,
    Classification,
    JournalTemplateRow,
    ParsedTransaction,
    SkippedRow,
    StatementParseResult,
    StatementPeriod,
)
from .normalizers import parse_amount, parse_date

__all__ = [
    # Normalizers
    "parse_amount",
    "parse_date",
    # Decoding
    "load_statement",
    "parse_csv",
    "parse_pdf",
    "parse_spreadsheet",
    "parse_statement",
    "parse_upload",
    # Classification
    "categorize",
    "ClassificationRule",
    "RULES",
    # Journal template
    "generate_journal_template",
    # Export
    "ExportData",
    "export_filename",
    "journal_template_to_csv",
    "journal_template_to_xlsx",
    "records_to_export_data",
    "to_csv",
    "to_csv_bytes",
    "to_xlsx",
    # Models / errors
    "Classification",
    "JOURNAL_TEMPLATE_COLUMNS",
    "JournalTemplateRow",
    "ParsedTransaction",
    "SkippedRow",
    "StatementParseError",
    "StatementParseResult",
    "StatementPeriod",
    "UnsupportedFormatError",
]
