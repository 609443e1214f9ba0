"""Domain layer for bankreport application."""

from bankreport.domain.balance import balance_at, balance_history
from bankreport.domain.entities import (
    AccountHistory,
    AccountRecord,
    AccountType,
    MergeRule,
    YearMonth,
)
from bankreport.domain.merge_rules import parse_merge_rules, read_merge_rules
from bankreport.domain.merging import merge_records, merge_records_from_date
from bankreport.domain.monthly_report import MonthlyReport, MonthlyReports, build_reports

__all__ = [
    "AccountHistory",
    "AccountRecord",
    "AccountType",
    "MergeRule",
    "MonthlyReport",
    "MonthlyReports",
    "YearMonth",
    "balance_at",
    "balance_history",
    "build_reports",
    "merge_records",
    "merge_records_from_date",
    "parse_merge_rules",
    "read_merge_rules",
]
