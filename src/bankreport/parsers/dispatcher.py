"""Statement format detection."""

import logging
from pathlib import Path
from typing import Union

from bankreport.domain.entities import AccountHistory
from bankreport.domain.errors import NoParserFoundError, no_parser_found
from bankreport.parsers.formats import FORMATS, FormatHandle
from bankreport.parsers.statement import StatementParser
from bankreport.utils.decoding import decode_statement, read_statement_bytes

logger = logging.getLogger(__name__)


def detect_format(text: str) -> FormatHandle:
    """Return the first format whose signature occurs in decoded text.

    Raises:
        NoParserFoundError: If no known signature occurs
    """
    for handle in FORMATS:
        if handle.signature in text:
            return handle
    raise NoParserFoundError("No known statement signature found")


def select_format_for_bytes(data: bytes, source: Union[str, Path]) -> FormatHandle:
    """Select the statement format of already read statement bytes.

    Raises:
        NoParserFoundError: If no known format matches
    """
    try:
        handle = detect_format(decode_statement(data))
    except NoParserFoundError as e:
        raise NoParserFoundError(no_parser_found(str(source))) from e

    logger.debug("Detected %s format for %s", handle.kind.value, source)
    return handle


def select_format(file_path: Union[str, Path]) -> FormatHandle:
    """Select the statement format of a file.

    Raises:
        FileReadError: If the file cannot be read
        NoParserFoundError: If no known format matches
    """
    return select_format_for_bytes(read_statement_bytes(file_path), file_path)


def create_parser(file_path: Union[str, Path]) -> StatementParser:
    """Create a StatementParser for the format of a file."""
    return StatementParser(select_format(file_path))


def load_statement(file_path: Union[str, Path]) -> tuple[FormatHandle, AccountHistory]:
    """Read a file once, detect its format and parse it.

    Raises:
        FileReadError: If the file cannot be read
        NoParserFoundError: If no known format matches
        ParserError: If a field of the statement cannot be parsed
    """
    data = read_statement_bytes(file_path)
    handle = select_format_for_bytes(data, file_path)
    return handle, StatementParser(handle).parse(data)


def parse_statement_file(file_path: Union[str, Path]) -> AccountHistory:
    """Detect the format of a file and parse it."""
    _, history = load_statement(file_path)
    return history
