"""Loading merge rules from JSON.

A rules file is a JSON list of objects, each with the optional keys
``other_side_is`` and ``booking_text_contains``::

    [
        {"other_side_is": "John Doe"},
        {"booking_text_contains": "Einzahlung"}
    ]
"""

import json
from pathlib import Path
from typing import Any, Union

from bankreport.domain.entities import MergeRule
from bankreport.domain.errors import RulesFileError, RulesJsonError, file_not_readable

RULE_KEYS = ("other_side_is", "booking_text_contains")


def _rule_from_json(index: int, item: Any) -> MergeRule:
    if not isinstance(item, dict):
        raise RulesJsonError(f"Rule {index}: expected an object, got {type(item).__name__}")

    values = {}
    for key in RULE_KEYS:
        value = item.get(key)
        if value is not None and not isinstance(value, str):
            raise RulesJsonError(f"Rule {index}: '{key}' must be a string or null")
        values[key] = value

    return MergeRule(**values)


def parse_merge_rules(text: str) -> list[MergeRule]:
    """Parse the content of a rules file.

    Unknown keys are ignored.

    Raises:
        RulesJsonError: If the text is not a JSON list of rule objects
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise RulesJsonError(f"Invalid merge rules JSON: {e}") from e

    if not isinstance(document, list):
        raise RulesJsonError("Merge rules must be a JSON list")

    return [_rule_from_json(index, item) for index, item in enumerate(document)]


def read_merge_rules(path: Union[str, Path]) -> list[MergeRule]:
    """Read merge rules from a JSON file.

    Raises:
        RulesFileError: If the file cannot be read
        RulesJsonError: If the content is not a valid rules document
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RulesFileError(file_not_readable(str(path), e)) from e

    return parse_merge_rules(text)
