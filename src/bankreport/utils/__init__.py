"""Utility functions for bankreport."""

from bankreport.utils.amount_parser import parse_amount, parse_strict_amount
from bankreport.utils.date_parser import parse_date, parse_statement_date
from bankreport.utils.statement_files import list_statement_files

__all__ = [
    "parse_amount",
    "parse_strict_amount",
    "parse_date",
    "parse_statement_date",
    "list_statement_files",
]
