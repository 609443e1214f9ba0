"""Bank statement parsers."""

from bankreport.parsers.dispatcher import (
    create_parser,
    detect_format,
    load_statement,
    parse_statement_file,
    select_format,
)
from bankreport.parsers.formats import FORMATS, FormatHandle, StatementFormat, get_format
from bankreport.parsers.statement import StatementParser

__all__ = [
    "FORMATS",
    "FormatHandle",
    "StatementFormat",
    "StatementParser",
    "create_parser",
    "detect_format",
    "get_format",
    "load_statement",
    "parse_statement_file",
    "select_format",
]
