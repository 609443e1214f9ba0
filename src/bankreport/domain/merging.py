"""Record merging domain logic.

Statement exports of the same account often overlap in time, and transfers
between the user's own accounts show up once per account. Merging combines
the record lists of several statements, drops exact duplicates and removes
records matched by any merge rule.
"""

from datetime import date
import logging
from typing import Iterable, Sequence

from bankreport.domain.entities import AccountRecord, MergeRule

logger = logging.getLogger(__name__)


def other_side_rule_applies(rule: MergeRule, record: AccountRecord) -> bool:
    """Check the counterparty condition of a rule.

    Unlike the booking text condition, an unset ``other_side_is`` is still
    evaluated: it matches only records without a counterparty.
    """
    if rule.other_side_is is None and record.counterparty is None:
        return True

    if rule.other_side_is is not None and record.counterparty is not None:
        return record.counterparty.lower() == rule.other_side_is.lower()

    return False


def booking_text_rule_applies(rule: MergeRule, record: AccountRecord) -> bool:
    """Check the booking text condition of a rule; unset always matches."""
    if rule.booking_text_contains is None:
        return True

    return rule.booking_text_contains.lower() in record.booking_text.lower()


def rule_applies(rule: MergeRule, record: AccountRecord) -> bool:
    """Return True if both conditions of ``rule`` hold for ``record``."""
    return other_side_rule_applies(rule, record) and booking_text_rule_applies(
        rule, record
    )


def unique_records(records: Iterable[AccountRecord]) -> list[AccountRecord]:
    """Drop repeated records, keeping the first occurrence in place."""
    return list(dict.fromkeys(records))


def merge_records(
    histories: Sequence[Sequence[AccountRecord]],
    remove_rules: Sequence[MergeRule] = (),
) -> list[AccountRecord]:
    """Merge record lists into one list without duplicates.

    Records keep the order of the input lists, then their order within each
    list. Exact duplicates collapse to their first occurrence. Every record
    matched by any rule in ``remove_rules`` is removed.

    Args:
        histories: Record lists, one per statement
        remove_rules: Rules describing records to drop

    Returns:
        Merged list of records
    """
    all_records = [record for records in histories for record in records]
    unique = unique_records(all_records)

    merged = [
        record
        for record in unique
        if not any(rule_applies(rule, record) for rule in remove_rules)
    ]

    logger.debug(
        "Merged %d records from %d lists: %d duplicates, %d excluded by rules",
        len(merged),
        len(histories),
        len(all_records) - len(unique),
        len(unique) - len(merged),
    )
    return merged


def merge_records_from_date(
    histories: Sequence[Sequence[AccountRecord]],
    remove_rules: Sequence[MergeRule],
    start_date: date,
) -> list[AccountRecord]:
    """Merge record lists and keep only records on or after ``start_date``.

    Duplicates are removed across the full input before the date filter, so
    overlapping statements are still reconciled outside the window.
    """
    return [
        record
        for record in merge_records(histories, remove_rules)
        if record.date >= start_date
    ]
