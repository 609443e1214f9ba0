"""CLI helpers for start date resolution."""

from datetime import date

import click

from bankreport.utils.date_parser import months_back_start, parse_date


def resolve_cli_start_date(
    ctx,
    *,
    start_date: str | None,
    months: int | None,
    today: date | None = None,
) -> date | None:
    """Resolve the report start date from --start-date or --months."""
    if start_date and months is not None:
        click.echo(
            "Error: --start-date and --months cannot be combined.",
            err=True,
        )
        ctx.exit(1)

    if months is not None:
        try:
            return months_back_start(months, today=today)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            ctx.exit(1)

    if start_date:
        try:
            return parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    return None
