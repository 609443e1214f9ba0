"""Tests for the command line interface."""

from datetime import date

from bankreport.cli.main import cli


def test_report_writes_file(cli_runner, statements_dir):
    output = statements_dir / "report.txt"

    result = cli_runner.invoke(cli, ["report", str(statements_dir), "-o", str(output)])

    assert result.exit_code == 0, result.output
    assert "Wrote report for 4 statements (6 records)" in result.output
    assert "Skipped notes.txt" in result.output

    text = output.read_text(encoding="utf-8")
    assert text.index("2024-9") < text.index("2024-8") < text.index("2024-1") < text.index("2023-12")
    assert "Average spendings: -20.05 EUR" in text
    assert "  Earnings: 5,000.72 EUR" in text
    assert "  Balance: -76.99 EUR" in text
    # removed by merge rules
    assert "VISA-CARD GELDANLAGE" not in text
    assert "Auszahlung" not in text


def test_report_to_stdout(cli_runner, statements_dir):
    result = cli_runner.invoke(cli, ["report", str(statements_dir)])

    assert result.exit_code == 0, result.output
    assert "Average earnings:" in result.output
    assert "EDEKA.BERGER" in result.output


def test_report_without_rules_file_keeps_all_records(cli_runner, statements_dir):
    (statements_dir / "merge_rules.json").unlink()

    result = cli_runner.invoke(cli, ["report", str(statements_dir)])

    assert result.exit_code == 0, result.output
    assert "VISA-CARD GELDANLAGE" in result.output
    assert "Auszahlung" in result.output


def test_report_with_start_date(cli_runner, statements_dir):
    result = cli_runner.invoke(cli, ["report", str(statements_dir), "--start-date", "01.08.2024"])

    assert result.exit_code == 0, result.output
    assert "2024-9" in result.output
    assert "2024-8" in result.output
    assert "2023-12" not in result.output


class _FixedDate(date):
    @classmethod
    def today(cls):
        return cls(2024, 9, 15)


def test_report_with_months_window(cli_runner, statements_dir, monkeypatch):
    monkeypatch.setattr("bankreport.utils.date_parser.date", _FixedDate)

    result = cli_runner.invoke(cli, ["report", str(statements_dir), "--months", "2"])

    assert result.exit_code == 0, result.output
    assert "2024-9" in result.output
    assert "2024-8" in result.output
    assert "2023-12" not in result.output


def test_report_rejects_zero_months(cli_runner, statements_dir):
    result = cli_runner.invoke(cli, ["report", str(statements_dir), "--months", "0"])

    assert result.exit_code == 1
    assert "at least 1" in result.output


def test_report_missing_explicit_rules_file(cli_runner, statements_dir):
    result = cli_runner.invoke(
        cli, ["report", str(statements_dir), "--rules", str(statements_dir / "nope.json")]
    )

    assert result.exit_code == 1
    assert "Error: Cannot read" in result.output


def test_report_invalid_rules_json(cli_runner, statements_dir):
    (statements_dir / "merge_rules.json").write_text("{not json", encoding="utf-8")

    result = cli_runner.invoke(cli, ["report", str(statements_dir)])

    assert result.exit_code == 1
    assert "Invalid merge rules JSON" in result.output


def test_report_rejects_start_date_with_months(cli_runner, statements_dir):
    result = cli_runner.invoke(
        cli, ["report", str(statements_dir), "--start-date", "2024-01-01", "--months", "3"]
    )

    assert result.exit_code == 1
    assert "cannot be combined" in result.output


def test_accounts_lists_statements(cli_runner, statements_dir):
    result = cli_runner.invoke(cli, ["accounts", str(statements_dir)])

    assert result.exit_code == 0, result.output
    assert "DE08120300001234567890" in result.output
    assert "4930********0595" in result.output
    assert "extra-savings-account" in result.output
    assert "12,234.00 EUR on 2024-09-04" in result.output
    assert "Skipped notes.txt" in result.output
    assert "merge_rules.json" not in result.output


def test_accounts_empty_directory(cli_runner, tmp_path):
    result = cli_runner.invoke(cli, ["accounts", str(tmp_path)])

    assert result.exit_code == 0
    assert "No statement files found." in result.output


def test_balance_history(cli_runner, fixtures_dir):
    result = cli_runner.invoke(cli, ["balance", str(fixtures_dir / "ing_giro_account_statement.csv")])

    assert result.exit_code == 0, result.output
    assert "DE25 5001 0123 4567 8910 11 (giro-account)" in result.output
    assert "2024-09-04: 12,234.00 EUR (statement balance)" in result.output
    assert "2024-08-13: 12,250.98 EUR" in result.output


def test_balance_on_date(cli_runner, fixtures_dir):
    result = cli_runner.invoke(
        cli,
        ["balance", str(fixtures_dir / "ing_giro_account_statement.csv"), "--date", "2024-08-20"],
    )

    assert result.exit_code == 0, result.output
    assert "2024-08-20: 12,250.98 EUR" in result.output


def test_balance_date_out_of_bounds(cli_runner, fixtures_dir):
    result = cli_runner.invoke(
        cli,
        ["balance", str(fixtures_dir / "ing_giro_account_statement.csv"), "--date", "2024-01-01"],
    )

    assert result.exit_code == 1
    assert "No balance known" in result.output


def test_balance_unknown_format(cli_runner, fixtures_dir):
    result = cli_runner.invoke(cli, ["balance", str(fixtures_dir / "notes.txt")])

    assert result.exit_code == 1
    assert "No parser found" in result.output


def test_log_level_option(cli_runner, statements_dir):
    result = cli_runner.invoke(cli, ["--log-level", "info", "accounts", str(statements_dir)])

    assert result.exit_code == 0, result.output
