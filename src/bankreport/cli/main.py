"""Main CLI entry point."""

import click

from bankreport.logging_setup import configure_logging

# Import and register all commands at module level
from bankreport.cli.commands import accounts, balance, report


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    envvar="BANKREPORT_LOG_LEVEL",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (overrides BANKREPORT_LOG_LEVEL environment variable)",
)
@click.pass_context
def cli(ctx, log_level: str):
    """Bankreport - monthly reports from bank statement exports.

    Reads DKB and ING CSV exports, merges overlapping statements of several
    accounts and summarizes earnings and spendings per month.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)


# Register all commands
report.register_commands(cli)
accounts.register_commands(cli)
balance.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
