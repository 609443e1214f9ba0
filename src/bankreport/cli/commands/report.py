"""Monthly report command."""

from pathlib import Path

import click

from bankreport.cli.date_filters import resolve_cli_start_date
from bankreport.cli.error_handling import handle_domain_error
from bankreport.cli.report_text import TOP_RECORDS, render_report
from bankreport.domain.errors import MergeRuleReadingError
from bankreport.domain.merge_rules import read_merge_rules
from bankreport.domain.merging import merge_records, merge_records_from_date
from bankreport.domain.monthly_report import build_reports
from bankreport.domain.statement_import import StatementImportService
from bankreport.utils.statement_files import DEFAULT_RULES_FILE, list_statement_files


@click.command("report")
@click.argument(
    "directory", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option(
    "--rules",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="BANKREPORT_RULES",
    help=f"Merge rules JSON file (default: DIRECTORY/{DEFAULT_RULES_FILE})",
)
@click.option(
    "--output",
    "-o",
    default="-",
    envvar="BANKREPORT_OUTPUT",
    help="Report file ('-' for standard output)",
)
@click.option("--start-date", help="Only report records from this date on")
@click.option("--months", type=int, help="Only report the last N calendar months")
@click.option("--top", default=TOP_RECORDS, show_default=True, help="Records listed per month")
@click.pass_context
def report(
    ctx,
    directory: Path,
    rules: Path | None,
    output: str,
    start_date: str | None,
    months: int | None,
    top: int,
):
    """Merge all statements in DIRECTORY and write a monthly report.

    Every file in DIRECTORY except the rules file is tried as a statement
    export; files of unknown format are skipped.

    Examples:
        bankreport report ~/statements
        bankreport report ~/statements --months 12 -o report.txt
    """
    start = resolve_cli_start_date(ctx, start_date=start_date, months=months)

    rules_path = rules if rules is not None else directory / DEFAULT_RULES_FILE
    merge_rules = []
    if rules is not None or rules_path.exists():
        try:
            merge_rules = read_merge_rules(rules_path)
        except MergeRuleReadingError as e:
            handle_domain_error(ctx, e)

    exclude = [rules_path]
    if output != "-":
        exclude.append(Path(output))
    paths = list_statement_files(directory, exclude=exclude)

    service = StatementImportService()
    result = service.import_files(paths)
    for path, error in result["skipped"]:
        click.echo(f"Skipped {path.name}: {error}", err=True)

    record_lists = [history.records for _, _, history in result["histories"]]
    if start is None:
        records = merge_records(record_lists, merge_rules)
    else:
        records = merge_records_from_date(record_lists, merge_rules, start)

    text = render_report(build_reports(records), top=top)
    with click.open_file(output, "w", encoding="utf-8") as f:
        f.write(text)

    if output != "-":
        click.echo(
            f"Wrote report for {len(result['histories'])} statements "
            f"({len(records)} records) to {output}"
        )


def register_commands(cli):
    """Register report command with main CLI."""
    cli.add_command(report)
