"""Shared pytest fixtures for bankreport tests."""

from datetime import date, datetime
from decimal import Decimal
import logging
from pathlib import Path
import shutil

import pytest

from bankreport.domain.entities import AccountHistory, AccountRecord, AccountType


def str_date(value: str) -> date:
    """Parse a D.M.YYYY test date."""
    return datetime.strptime(value, "%d.%m.%Y").date()


def new_record(amount, day: str, counterparty=None, booking_text="", purpose=None):
    """Build an AccountRecord from compact test values."""
    return AccountRecord(
        amount=Decimal(str(amount)),
        date=str_date(day),
        counterparty=counterparty,
        booking_text=booking_text,
        purpose=purpose,
    )


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def sample_history():
    """Account history with a statement balance of 350 on 6.3.2024."""
    return AccountHistory(
        account_name="1018793511",
        account_type=AccountType.CHECKING_ACCOUNT,
        current_balance=Decimal("350"),
        current_balance_date=str_date("6.3.2024"),
        records=(
            new_record(300, "5.3.2024"),
            new_record(-50, "3.3.2024"),
            new_record(100, "1.3.2024"),
        ),
    )


@pytest.fixture
def statements_dir(tmp_path, fixtures_dir):
    """Temporary directory holding all statement fixtures and a rules file."""
    for name in (
        "dkb_account_statement.csv",
        "dkb_credit_card_statement.csv",
        "ing_giro_account_statement.csv",
        "ing_extra_account_statement.csv",
        "merge_rules.json",
        "notes.txt",
    ):
        shutil.copy(fixtures_dir / name, tmp_path / name)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo logging configuration done by CLI invocations."""
    yield
    logger = logging.getLogger("bankreport")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
