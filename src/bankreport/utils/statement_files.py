"""Statement file discovery."""

from pathlib import Path
from typing import Iterable, Union

DEFAULT_RULES_FILE = "merge_rules.json"


def list_statement_files(
    directory: Union[str, Path], exclude: Iterable[Union[str, Path]] = ()
) -> list[Path]:
    """List candidate statement files in a directory.

    Subdirectories and the excluded paths (e.g. the merge rules file or the
    report being written) are skipped. The result is sorted by file name so
    merges are reproducible regardless of directory listing order.

    Args:
        directory: Directory holding statement exports
        exclude: Paths that must not be treated as statements

    Returns:
        Sorted list of file paths
    """
    excluded = {Path(p).resolve() for p in exclude}
    return sorted(
        (
            entry
            for entry in Path(directory).iterdir()
            if entry.is_file() and entry.resolve() not in excluded
        ),
        key=lambda entry: entry.name,
    )
