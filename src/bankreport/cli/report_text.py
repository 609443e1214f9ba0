"""Plain-text rendering of monthly reports."""

from decimal import Decimal

from bankreport.domain.entities import AccountRecord
from bankreport.domain.monthly_report import MonthlyReport, MonthlyReports

TOP_RECORDS = 10


def format_amount(amount: Decimal) -> str:
    return f"{amount:,.2f} EUR"


def format_record(record: AccountRecord) -> str:
    """One line per record: date, amount, counterparty and booking text."""
    parts = [record.counterparty, record.booking_text, record.purpose]
    description = " | ".join(part for part in parts if part)
    return f"    {record.date.isoformat()}  {format_amount(record.amount):>16}  {description}"


def render_month(report: MonthlyReport, top: int = TOP_RECORDS) -> list[str]:
    """Render the section of one month."""
    lines = [str(report.month)]
    lines.append(f"  Earnings: {format_amount(report.earnings())}")
    lines.extend(format_record(r) for r in report.top_earnings(top))
    lines.append(f"  Spendings: {format_amount(report.spendings())}")
    lines.extend(format_record(r) for r in report.top_spendings(top))
    lines.append(f"  Balance: {format_amount(report.balance())}")
    return lines


def render_report(reports: MonthlyReports, top: int = TOP_RECORDS) -> str:
    """Render the full report, most recent month first."""
    lines = [
        f"Average earnings: {format_amount(reports.average_earnings())}",
        f"Average spendings: {format_amount(reports.average_spendings())}",
    ]
    for report in reversed(reports.reports):
        lines.append("")
        lines.extend(render_month(report, top))
    return "\n".join(lines) + "\n"
