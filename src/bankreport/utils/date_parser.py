"""Date parsing utilities."""

from datetime import date, datetime, timedelta
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from bankreport.domain.errors import InvalidDateError, invalid_date


def parse_statement_date(date_str: str) -> date:
    """Parse a DD.MM.YYYY date as used in statement exports.

    Day and month may be written without leading zeros ("5.3.2024").

    Raises:
        InvalidDateError: If the string has another shape or is not a
            calendar date
    """
    try:
        return datetime.strptime(date_str, "%d.%m.%Y").date()
    except ValueError as e:
        raise InvalidDateError(invalid_date(date_str)) from e


def parse_date(date_str: str) -> date:
    """Parse a date given on the command line.

    Supports:
    - ISO dates: "2024-01-15"
    - Statement dates: "15.01.2024"
    - Relative dates: "today", "yesterday", "this month", "last month",
      "this year", "last year"
    - Anything else python-dateutil understands, read day-first

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = date.today()

    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "this month": today.replace(day=1),
        "last month": (today - relativedelta(months=1)).replace(day=1),
        "this year": today.replace(month=1, day=1),
        "last year": today.replace(month=1, day=1) - relativedelta(years=1),
    }
    if date_str in relative_dates:
        return relative_dates[date_str]

    try:
        return date.fromisoformat(date_str)
    except ValueError:
        pass

    try:
        return parse_statement_date(date_str)
    except InvalidDateError:
        pass

    try:
        return date_parser.parse(date_str, dayfirst=True).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def months_back_start(months: int, today: date | None = None) -> date:
    """Return the first day of the month ``months - 1`` months before today.

    ``months_back_start(1)`` is the first of the current month, so a window of
    N months always covers N calendar months including the running one.

    Raises:
        ValueError: If months is smaller than 1
    """
    if months < 1:
        raise ValueError(f"Number of months must be at least 1, got {months}")

    today = today or date.today()
    return (today - relativedelta(months=months - 1)).replace(day=1)
