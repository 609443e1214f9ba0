"""Supported bank statement formats.

Each format pairs a header specification (how many preamble lines to scan
and the patterns that pull account metadata out of them) with a record
mapping (which columns of a data row hold which field). Patterns, column
positions and signatures follow the exports the banks actually produce and
must not be changed without new sample files.
"""

import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, Optional, Sequence

from bankreport.domain.entities import AccountRecord, AccountType
from bankreport.domain.errors import RecordFormatError
from bankreport.utils.amount_parser import parse_amount, parse_strict_amount
from bankreport.utils.date_parser import parse_statement_date


class StatementFormat(Enum):
    """Known statement export formats, in detection priority order."""

    DKB_ACCOUNT = "dkb-account"
    DKB_CREDIT_CARD = "dkb-credit-card"
    ING_GIRO_ACCOUNT = "ing-giro-account"
    ING_EXTRA_ACCOUNT = "ing-extra-account"


@dataclass(frozen=True)
class HeaderSpec:
    """Where a format keeps its account metadata.

    The three patterns are matched against every preamble line with named
    groups ``account``, ``amount`` and ``date``.
    """

    header_length: int
    account_number_pattern: re.Pattern
    balance_amount_pattern: re.Pattern
    balance_date_pattern: re.Pattern
    parse_balance: Callable[[str], Decimal]
    account_type: AccountType


@dataclass(frozen=True)
class RecordMapping:
    """Column positions of a format's data rows."""

    amount: int
    date: int
    booking_text: int
    counterparty: Optional[int] = None
    purpose: Optional[int] = None

    @property
    def width(self) -> int:
        """Minimum number of fields a row needs."""
        columns = [self.amount, self.date, self.booking_text, self.counterparty, self.purpose]
        return max(c for c in columns if c is not None) + 1

    def parse_row(self, row: Sequence[str]) -> AccountRecord:
        """Map one data row to an AccountRecord.

        Raises:
            RecordFormatError: If the row is too short for this mapping
            InvalidDateError: If the date column is not DD.MM.YYYY
            FloatError: If the amount column is not a number
        """
        if len(row) < self.width:
            raise RecordFormatError(
                f"Row has {len(row)} fields, expected at least {self.width}"
            )

        return AccountRecord(
            amount=parse_amount(row[self.amount]),
            date=parse_statement_date(row[self.date]),
            counterparty=row[self.counterparty] if self.counterparty is not None else None,
            booking_text=row[self.booking_text],
            purpose=row[self.purpose] if self.purpose is not None else None,
        )


@dataclass(frozen=True)
class FormatHandle:
    """A selected statement format with everything needed to parse it."""

    kind: StatementFormat
    signature: str
    header: HeaderSpec
    records: RecordMapping


_EUR_BALANCE = r"(?P<amount>[+-]?[\d,.]+) EUR"

_ING_HEADER = dict(
    header_length=12,
    account_number_pattern=re.compile(r"IBAN;(?P<account>[A-Z\d\s]+)"),
    balance_amount_pattern=re.compile(r"Saldo;(?P<amount>[+-]?[\d,.]+);EUR"),
    balance_date_pattern=re.compile(r"Datei erstellt am: (?P<date>[\d.]+)"),
    parse_balance=parse_amount,
)

FORMATS: tuple[FormatHandle, ...] = (
    FormatHandle(
        kind=StatementFormat.DKB_ACCOUNT,
        signature='"Kontonummer:"',
        header=HeaderSpec(
            header_length=6,
            account_number_pattern=re.compile(
                r'"Kontonummer:";"(?P<account>[A-Z\d]+) / Girokonto";'
            ),
            balance_amount_pattern=re.compile(_EUR_BALANCE),
            balance_date_pattern=re.compile(r"Kontostand vom (?P<date>[\d.]+)"),
            parse_balance=parse_amount,
            account_type=AccountType.CHECKING_ACCOUNT,
        ),
        records=RecordMapping(amount=7, date=0, booking_text=2, counterparty=3, purpose=4),
    ),
    FormatHandle(
        kind=StatementFormat.DKB_CREDIT_CARD,
        signature='"Kreditkarte:"',
        header=HeaderSpec(
            header_length=7,
            account_number_pattern=re.compile(r'"Kreditkarte:";"(?P<account>[\d*]+)";'),
            balance_amount_pattern=re.compile(_EUR_BALANCE),
            balance_date_pattern=re.compile(r'"Datum:";"(?P<date>[\d.]+)"'),
            parse_balance=parse_strict_amount,
            account_type=AccountType.CREDIT_CARD,
        ),
        records=RecordMapping(amount=4, date=1, booking_text=3),
    ),
    FormatHandle(
        kind=StatementFormat.ING_GIRO_ACCOUNT,
        signature="Kontoname;Girokonto",
        header=HeaderSpec(account_type=AccountType.GIRO_ACCOUNT, **_ING_HEADER),
        records=RecordMapping(amount=5, date=0, booking_text=3, counterparty=2, purpose=4),
    ),
    FormatHandle(
        kind=StatementFormat.ING_EXTRA_ACCOUNT,
        signature="Kontoname;Extra-Konto",
        header=HeaderSpec(account_type=AccountType.EXTRA_SAVINGS_ACCOUNT, **_ING_HEADER),
        records=RecordMapping(amount=7, date=0, booking_text=3, counterparty=2, purpose=4),
    ),
)


def get_format(kind: StatementFormat) -> FormatHandle:
    """Return the handle registered for a format kind."""
    for handle in FORMATS:
        if handle.kind == kind:
            return handle
    raise KeyError(kind)
