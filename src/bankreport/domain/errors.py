"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only care about bad input.
    """


class ParserError(DomainError):
    """A field of a statement file could not be parsed."""


class InvalidDateError(ParserError):
    """Date string is not a valid DD.MM.YYYY calendar date."""


class FloatError(ParserError):
    """Amount string is not a valid decimal number."""


class RecordFormatError(ParserError):
    """Data row does not have the columns a format needs."""


class FileReadError(DomainError):
    """Statement file cannot be opened or read."""


class NoParserFoundError(DomainError):
    """No known statement format matches a file."""


class DateOutOfBoundsError(DomainError):
    """Requested date precedes the oldest record of an account history."""


class MergeRuleReadingError(DomainError):
    """Merge rules could not be loaded."""


class RulesFileError(MergeRuleReadingError):
    """Merge rules file cannot be read."""


class RulesJsonError(MergeRuleReadingError):
    """Merge rules file is not a valid rules document."""


def invalid_date(value: str) -> str:
    """Return message for an unparseable statement date."""
    return f"Invalid date '{value}': expected DD.MM.YYYY"


def invalid_amount(value: str) -> str:
    """Return message for an unparseable amount."""
    return f"Invalid amount '{value}'"


def no_parser_found(path: str) -> str:
    """Return message when no statement format matches a file."""
    return f"No parser found for '{path}'"


def file_not_readable(path: str, reason: object) -> str:
    """Return message for a statement or rules file that cannot be read."""
    return f"Cannot read '{path}': {reason}"


def date_out_of_bounds(requested, earliest) -> str:
    """Return message for a balance query before the first record."""
    if earliest is None:
        return f"No balance known for {requested}: account history has no records"
    return f"No balance known for {requested}: earliest record is from {earliest}"
