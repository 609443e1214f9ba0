"""Statement overview command."""

from pathlib import Path

import click

from bankreport.cli.report_text import format_amount
from bankreport.domain.statement_import import StatementImportService
from bankreport.utils.statement_files import DEFAULT_RULES_FILE, list_statement_files


@click.command("accounts")
@click.argument(
    "directory", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.pass_context
def list_accounts(ctx, directory: Path):
    """List the statements found in DIRECTORY."""
    paths = list_statement_files(directory, exclude=[directory / DEFAULT_RULES_FILE])
    result = StatementImportService().import_files(paths)

    if not result["histories"] and not result["skipped"]:
        click.echo("No statement files found.")
        return

    if result["histories"]:
        click.echo("\nStatements:")
        click.echo("-" * 100)
    for path, kind, history in result["histories"]:
        click.echo(
            f"{path.name:24s} | {kind.value:18s} | {history.account_name:28s} | "
            f"{history.account_type.value:21s} | "
            f"{format_amount(history.current_balance)} on {history.current_balance_date.isoformat()} | "
            f"{len(history.records)} records"
        )

    for path, error in result["skipped"]:
        click.echo(f"Skipped {path.name}: {error}")


def register_commands(cli):
    """Register accounts command with main CLI."""
    cli.add_command(list_accounts)
