import asyncio
import textwrap
from dataclasses import dataclass
from datetime import date

import pytest

from bank_journal.errors import PDF_UNSUPPORTED_MESSAGE, UnsupportedFormatError
from bank_journal.ingest.utils import load_statement, parse_pdf, parse_statement, parse_upload

TODAY = date(2024, 5, 6)

CSV_BYTES = textwrap.dedent(
    """\
    Date,Description,Debit,Credit,Balance
    01/02/2024,Salary Credit,,50000,50000
    03/02/2024,Rent Payment,15000,,35000
    """
).encode("utf-8")


@dataclass
class FakeUpload:
    filename: str | None
    content: bytes

    async def read(self) -> bytes:
        return self.content


def test_pdf_is_always_rejected():
    with pytest.raises(UnsupportedFormatError) as exc:
        parse_pdf(b"%PDF-1.7")
    assert str(exc.value) == PDF_UNSUPPORTED_MESSAGE

    with pytest.raises(UnsupportedFormatError):
        parse_statement(b"%PDF-1.7", "statement.PDF")


@pytest.mark.parametrize("filename", ["statement.txt", "statement", "notes.json"])
def test_unknown_extensions_are_rejected(filename):
    with pytest.raises(UnsupportedFormatError, match="Unsupported file format"):
        parse_statement(CSV_BYTES, filename)


def test_extension_dispatch_is_case_insensitive():
    result = parse_statement(CSV_BYTES, "March.CSV", today=TODAY)
    assert result.source_format == "csv"
    assert len(result.transactions) == 2


def test_load_statement_reads_from_disk(tmp_path):
    path = tmp_path / "feb.csv"
    path.write_bytes(CSV_BYTES)

    result = load_statement(path, today=TODAY)

    assert [t.description for t in result.transactions] == ["Salary Credit", "Rent Payment"]


def test_parse_upload_reads_then_decodes():
    upload = FakeUpload(filename="feb.csv", content=CSV_BYTES)
    result = asyncio.run(parse_upload(upload, today=TODAY))
    assert [t.type for t in result.transactions] == ["credit", "debit"]


def test_parse_upload_without_filename_is_rejected():
    upload = FakeUpload(filename=None, content=CSV_BYTES)
    with pytest.raises(UnsupportedFormatError):
        asyncio.run(parse_upload(upload))
