"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

from bankreport.domain.errors import FloatError, invalid_amount

# Plain signed decimal number, as written in the statement exports.
_NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a German formatted amount string into a Decimal.

    Handles formats such as:
    - "0,97"
    - "-60,01"
    - "10.123,45" (dot as thousands separator)

    Args:
        amount_str: Amount string with decimal comma

    Returns:
        Decimal amount

    Raises:
        FloatError: If the remainder is not a valid decimal number
    """
    return parse_strict_amount(amount_str.replace(".", "").replace(",", "."))


def parse_strict_amount(amount_str: str) -> Decimal:
    """Parse a dot-decimal amount string such as "0.97" or "-2400.00".

    Raises:
        FloatError: If the string is not a valid decimal number
    """
    if _NUMBER_PATTERN.fullmatch(amount_str) is None:
        raise FloatError(invalid_amount(amount_str))

    try:
        return Decimal(amount_str)
    except InvalidOperation as e:
        raise FloatError(invalid_amount(amount_str)) from e
