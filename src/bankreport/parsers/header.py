"""Statement preamble parsing."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
import logging
from typing import TextIO

from bankreport.domain.entities import AccountType
from bankreport.parsers.formats import HeaderSpec
from bankreport.utils.date_parser import parse_statement_date

logger = logging.getLogger(__name__)

DEFAULT_ACCOUNT_NAME = "AccountNumber"
DEFAULT_BALANCE = Decimal("0")
DEFAULT_BALANCE_DATE = date(2000, 1, 1)


@dataclass(frozen=True)
class StatementHeader:
    """Account metadata found in a statement preamble."""

    account_name: str
    account_type: AccountType
    current_balance: Decimal
    current_balance_date: date


def parse_header(spec: HeaderSpec, lines: TextIO) -> StatementHeader:
    """Read exactly ``spec.header_length`` lines and extract account metadata.

    Every line is matched against all three patterns. A later match replaces
    an earlier one; fields that never match keep their defaults. Reading
    stops early only when the stream is exhausted.

    Raises:
        InvalidDateError: If a matched balance date is not DD.MM.YYYY
        FloatError: If a matched balance amount is not a number
    """
    account_name = DEFAULT_ACCOUNT_NAME
    current_balance = DEFAULT_BALANCE
    current_balance_date = DEFAULT_BALANCE_DATE

    for _ in range(spec.header_length):
        line = lines.readline()

        match = spec.account_number_pattern.search(line)
        if match:
            account_name = match.group("account").strip()

        match = spec.balance_date_pattern.search(line)
        if match:
            current_balance_date = parse_statement_date(match.group("date"))

        match = spec.balance_amount_pattern.search(line)
        if match:
            current_balance = spec.parse_balance(match.group("amount"))

    logger.debug(
        "Header: account=%s balance=%s on %s",
        account_name,
        current_balance,
        current_balance_date,
    )
    return StatementHeader(
        account_name=account_name,
        account_type=spec.account_type,
        current_balance=current_balance,
        current_balance_date=current_balance_date,
    )
