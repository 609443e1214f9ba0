"""Statement parsing: decoded text to AccountHistory."""

import csv
import logging
from pathlib import Path
from typing import BinaryIO, Iterator, TextIO, Union

from bankreport.domain.entities import AccountHistory, AccountRecord
from bankreport.parsers.formats import FormatHandle, RecordMapping
from bankreport.parsers.header import parse_header
from bankreport.utils.decoding import open_decoded, read_statement_bytes

logger = logging.getLogger(__name__)

DELIMITER = ";"


class StatementParser:
    """Parser for one statement format."""

    def __init__(self, handle: FormatHandle):
        """Initialize statement parser.

        Args:
            handle: Format whose header and record layout to apply
        """
        self.handle = handle

    def parse(self, source: Union[bytes, BinaryIO]) -> AccountHistory:
        """Parse raw statement bytes into an AccountHistory.

        Args:
            source: Statement bytes or a binary file object

        Returns:
            AccountHistory with records in file order

        Raises:
            InvalidDateError: If a header or row date cannot be parsed
            FloatError: If a header or row amount cannot be parsed
        """
        lines = open_decoded(source)
        header = parse_header(self.handle.header, lines)
        records = tuple(self.parse_records(lines))

        logger.debug(
            "Parsed %d records for %s (%s)",
            len(records),
            header.account_name,
            self.handle.kind.value,
        )
        return AccountHistory(
            account_name=header.account_name,
            account_type=header.account_type,
            current_balance=header.current_balance,
            current_balance_date=header.current_balance_date,
            records=records,
        )

    def parse_file(self, path: Union[str, Path]) -> AccountHistory:
        """Parse the statement stored at ``path``.

        Raises:
            FileReadError: If the file cannot be opened or read
        """
        return self.parse(read_statement_bytes(path))

    def parse_records(self, lines: TextIO) -> Iterator[AccountRecord]:
        """Parse the column header row and all data rows after the preamble.

        Rows the csv reader rejects, and rows whose field count differs from
        the column header row, are skipped. A field that fails to parse in an
        accepted row aborts the whole parse.
        """
        mapping: RecordMapping = self.handle.records
        reader = csv.reader(lines, delimiter=DELIMITER)
        expected_width = None

        while True:
            try:
                row = next(reader)
            except StopIteration:
                return
            except csv.Error as e:
                logger.debug("Skipping malformed row %d: %s", reader.line_num, e)
                continue

            if not row:
                continue
            if expected_width is None:
                expected_width = len(row)
                continue
            if len(row) != expected_width:
                logger.debug(
                    "Skipping row %d with %d fields, expected %d",
                    reader.line_num,
                    len(row),
                    expected_width,
                )
                continue

            yield mapping.parse_row(row)
