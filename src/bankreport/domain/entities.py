"""Domain model entities for bankreport.

These are pure data classes describing parsed statements and the rules used
to merge them. They carry no parsing or aggregation logic, so every parser
and report works on the same immutable values.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountType(Enum):
    """Kind of account a statement export belongs to."""

    CHECKING_ACCOUNT = "checking-account"
    CREDIT_CARD = "credit-card"
    GIRO_ACCOUNT = "giro-account"
    EXTRA_SAVINGS_ACCOUNT = "extra-savings-account"


@dataclass(frozen=True)
class AccountRecord:
    """One booked transaction of an account.

    Positive amounts are earnings, negative amounts are spendings. Equality
    and hashing cover every field, which is what duplicate removal relies on.
    """

    amount: Decimal
    date: date
    counterparty: Optional[str] = None
    booking_text: str = ""
    purpose: Optional[str] = None


@dataclass(frozen=True)
class AccountHistory:
    """Parsed content of a single statement file."""

    account_name: str
    account_type: AccountType
    current_balance: Decimal
    current_balance_date: date
    records: tuple[AccountRecord, ...] = ()


@dataclass(frozen=True)
class MergeRule:
    """Exclusion rule applied when merging records.

    ``other_side_is`` is compared case-insensitively for equality with the
    record's counterparty, ``booking_text_contains`` case-insensitively as a
    substring of the booking text.
    """

    other_side_is: Optional[str] = None
    booking_text_contains: Optional[str] = None


@dataclass(frozen=True, order=True)
class YearMonth:
    """Calendar month used as aggregation key, with a zero-based month."""

    year: int
    month0: int

    @classmethod
    def of(cls, day: date) -> "YearMonth":
        """Return the month containing ``day``."""
        return cls(year=day.year, month0=day.month - 1)

    def __str__(self) -> str:
        return f"{self.year}-{self.month0 + 1}"
