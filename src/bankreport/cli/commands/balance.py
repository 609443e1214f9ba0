"""Account balance command."""

from pathlib import Path

import click

from bankreport.cli.error_handling import handle_domain_error
from bankreport.cli.report_text import format_amount
from bankreport.domain.balance import balance_at, balance_history
from bankreport.domain.errors import DomainError
from bankreport.parsers.dispatcher import parse_statement_file
from bankreport.utils.date_parser import parse_date


@click.command("balance")
@click.argument("statement", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--date", "on_date", help="Date to show the balance for")
@click.pass_context
def show_balance(ctx, statement: Path, on_date: str | None):
    """Show the balance of the account in STATEMENT.

    Without --date the balance at every booking date is listed, newest first.

    Examples:
        bankreport balance giro.csv
        bankreport balance giro.csv --date 01.03.2024
    """
    try:
        history = parse_statement_file(statement)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"{history.account_name} ({history.account_type.value})")

    if on_date is not None:
        try:
            day = parse_date(on_date)
            click.echo(f"{day.isoformat()}: {format_amount(balance_at(history, day))}")
        except ValueError as e:
            handle_domain_error(ctx, e)
        return

    click.echo(
        f"{history.current_balance_date.isoformat()}: "
        f"{format_amount(history.current_balance)} (statement balance)"
    )
    for day, amount in balance_history(history):
        click.echo(f"{day.isoformat()}: {format_amount(amount)}")


def register_commands(cli):
    """Register balance command with main CLI."""
    cli.add_command(show_balance)
