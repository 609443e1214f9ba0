"""Decoding of statement exports.

Banks export their statements in the Windows-1252 code page. Bytes that have
no mapping in it are replaced instead of failing, so a single broken
character never prevents a statement from being read.
"""

import io
from pathlib import Path
from typing import BinaryIO, Union

from bankreport.domain.errors import FileReadError, file_not_readable

STATEMENT_ENCODING = "cp1252"


def decode_statement(data: bytes) -> str:
    """Decode raw statement bytes into text."""
    return data.decode(STATEMENT_ENCODING, errors="replace")


def open_decoded(source: Union[bytes, BinaryIO]) -> io.StringIO:
    """Return a line-readable text stream for statement bytes.

    ``source`` is either the raw bytes or a binary file object. Newlines are
    passed through untranslated so the csv module sees the original row
    endings.
    """
    data = source if isinstance(source, bytes) else source.read()
    return io.StringIO(decode_statement(data), newline="")


def read_statement_bytes(path: Union[str, Path]) -> bytes:
    """Read the raw bytes of a statement file.

    Raises:
        FileReadError: If the file cannot be opened or read
    """
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FileReadError(file_not_readable(str(path), e)) from e
