"""Statement import domain service."""

import logging
from pathlib import Path
from typing import Any, Sequence, Union

from bankreport.domain.entities import AccountHistory
from bankreport.domain.errors import FileReadError, NoParserFoundError, ParserError
from bankreport.parsers.dispatcher import load_statement

logger = logging.getLogger(__name__)


class StatementImportService:
    """Service for parsing a batch of statement files."""

    def import_files(self, paths: Sequence[Union[str, Path]]) -> dict[str, Any]:
        """Parse every file that matches a known statement format.

        Failures are per file: a file that cannot be read, matches no format
        or contains an unparseable field is skipped and reported, the other
        files are still parsed.

        Args:
            paths: Candidate statement files

        Returns:
            Dict with import results:
            - histories: list of (path, format kind, AccountHistory)
            - skipped: list of (path, error message)
        """
        histories = []
        skipped = []

        for path in paths:
            try:
                handle, history = load_statement(path)
            except (FileReadError, NoParserFoundError, ParserError) as e:
                logger.warning("Skipping %s: %s", path, e)
                skipped.append((Path(path), str(e)))
                continue

            logger.info(
                "Parsed %s as %s: %d records", path, handle.kind.value, len(history.records)
            )
            histories.append((Path(path), handle.kind, history))

        return {
            "histories": histories,
            "skipped": skipped,
        }

    def load_histories(self, paths: Sequence[Union[str, Path]]) -> list[AccountHistory]:
        """Parse files best-effort and return only the account histories."""
        return [history for _, _, history in self.import_files(paths)["histories"]]
