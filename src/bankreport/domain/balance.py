"""Account balance at historic dates."""

from datetime import date
from decimal import Decimal

from bankreport.domain.entities import AccountHistory
from bankreport.domain.errors import DateOutOfBoundsError, date_out_of_bounds


def balance_at(history: AccountHistory, day: date) -> Decimal:
    """Return the balance of an account at the end of ``day``.

    Starting from the statement balance, records are walked newest first and
    undone one by one until a record on or before ``day`` is reached.

    Raises:
        DateOutOfBoundsError: If ``day`` precedes the oldest record
    """
    current_balance = history.current_balance
    for record in history.records:
        if day >= record.date:
            return current_balance
        current_balance -= record.amount

    earliest = history.records[-1].date if history.records else None
    raise DateOutOfBoundsError(date_out_of_bounds(day, earliest))


def balance_history(history: AccountHistory) -> list[tuple[date, Decimal]]:
    """Balance at every distinct record date, newest first."""
    points = []
    for day in dict.fromkeys(record.date for record in history.records):
        points.append((day, balance_at(history, day)))
    return points
