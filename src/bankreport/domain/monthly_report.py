"""Monthly aggregation of merged records."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Sequence

from bankreport.domain.entities import AccountRecord, YearMonth


def average(values: Sequence[Decimal]) -> Decimal:
    """Arithmetic mean; NaN for an empty sequence."""
    if not values:
        return Decimal("NaN")
    return sum(values, Decimal("0")) / len(values)


@dataclass(frozen=True)
class MonthlyReport:
    """Records of one calendar month with their totals."""

    month: YearMonth
    records: tuple[AccountRecord, ...]

    def earnings(self) -> Decimal:
        """Sum of all non-negative amounts."""
        return sum((r.amount for r in self.records if r.amount >= 0), Decimal("0"))

    def spendings(self) -> Decimal:
        """Sum of all negative amounts."""
        return sum((r.amount for r in self.records if r.amount < 0), Decimal("0"))

    def balance(self) -> Decimal:
        return self.earnings() + self.spendings()

    def top_earnings(self, n: int) -> list[AccountRecord]:
        """The ``n`` largest positive records, ties in record order."""
        earnings = [r for r in self.records if r.amount > 0]
        return sorted(earnings, key=lambda r: r.amount, reverse=True)[:n]

    def top_spendings(self, n: int) -> list[AccountRecord]:
        """The ``n`` most negative records, ties in record order."""
        spendings = [r for r in self.records if r.amount < 0]
        return sorted(spendings, key=lambda r: r.amount)[:n]


@dataclass(frozen=True)
class MonthlyReports:
    """Monthly reports in ascending month order."""

    reports: tuple[MonthlyReport, ...] = ()

    @classmethod
    def create(cls, records: Iterable[AccountRecord]) -> "MonthlyReports":
        """Group records by calendar month.

        Records keep their relative order inside each month; months without
        records produce no report.
        """
        records_by_month: dict[YearMonth, list[AccountRecord]] = {}
        for record in records:
            records_by_month.setdefault(YearMonth.of(record.date), []).append(record)

        return cls(
            reports=tuple(
                MonthlyReport(month=month, records=tuple(month_records))
                for month, month_records in sorted(
                    records_by_month.items(), key=lambda item: item[0]
                )
            )
        )

    def __len__(self) -> int:
        return len(self.reports)

    def __iter__(self):
        return iter(self.reports)

    def average_earnings(self) -> Decimal:
        return average([r.earnings() for r in self.reports])

    def average_spendings(self) -> Decimal:
        return average([r.spendings() for r in self.reports])


def build_reports(records: Iterable[AccountRecord]) -> MonthlyReports:
    """Group merged records into monthly reports."""
    return MonthlyReports.create(records)
