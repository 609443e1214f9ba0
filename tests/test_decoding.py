"""Tests for statement decoding."""

import io

import pytest

from bankreport.domain.errors import FileReadError
from bankreport.utils.decoding import decode_statement, open_decoded, read_statement_bytes


def test_decode_windows_1252():
    assert decode_statement(b"Beg\xfcnstigter \x80") == "Begünstigter €"


def test_undecodable_bytes_are_replaced():
    assert decode_statement(b"a\x81b") == "a\ufffdb"


def test_open_decoded_reads_lines():
    lines = open_decoded(io.BytesIO(b"first\r\nsecond\n"))
    assert lines.readline() == "first\r\n"
    assert lines.readline() == "second\n"
    assert lines.readline() == ""


def test_open_decoded_accepts_bytes():
    assert open_decoded(b"W\xe4hrung").read() == "Währung"


def test_read_statement_bytes(fixtures_dir):
    text = decode_statement(read_statement_bytes(fixtures_dir / "ing_giro_account_statement.csv"))
    assert "Auftraggeber/Empfänger" in text


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileReadError):
        read_statement_bytes(tmp_path / "missing.csv")
