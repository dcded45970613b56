"""Line-oriented text codec for goal manager state.

File layout, one record per line:

    <score>
    <level>
    <VariantTag>:<name>,<description>,<points>[,<extra fields>]
    ...

Decoding never touches a live manager: it returns a LoadedState that the
manager swaps in only when the whole text parsed.
"""
from __future__ import annotations
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

import jsonschema

from ..errors import ParseError, ValidationError
from .model import (
    FIELD_SEPARATOR, TAG_SEPARATOR,
    ChecklistGoal, EternalGoal, Goal, SimpleGoal,
)
from .schema import GOAL_RECORD_SCHEMA

# Payload field count per variant tag (common fields included)
FIELD_COUNTS = {
    SimpleGoal.kind: 4,
    EternalGoal.kind: 3,
    ChecklistGoal.kind: 6,
}

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass
class LoadedState:
    """Fully parsed save file, not yet applied to a manager."""
    score: int
    stored_level: int
    goals: List[Goal] = field(default_factory=list)


def encode_goal(goal: Goal) -> str:
    return goal.serialize()


def encode_state(score: int, level: int, goals: Iterable[Goal]) -> str:
    """Render manager state in the save file layout, newline-terminated."""
    lines = [str(score), str(level)]
    lines.extend(encode_goal(g) for g in goals)
    return "\n".join(lines) + "\n"


def _parse_int(label: str, raw: str, line_number: Optional[int]) -> int:
    text = raw.strip()
    if not _INT_RE.fullmatch(text):
        raise ParseError(f"{label} is not an integer: {raw!r}", line_number)
    return int(text)


def _parse_bool(label: str, raw: str, line_number: Optional[int]) -> bool:
    text = raw.strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise ParseError(f"{label} is not True/False: {raw!r}", line_number)


def _split_record(line: str, line_number: Optional[int]) -> Dict[str, Any]:
    tag, sep, payload = line.partition(TAG_SEPARATOR)
    if not sep:
        raise ParseError(f"missing '{TAG_SEPARATOR}' after variant tag", line_number)
    if tag not in FIELD_COUNTS:
        raise ParseError(f"unknown goal variant '{tag}'", line_number)

    fields = payload.split(FIELD_SEPARATOR)
    expected = FIELD_COUNTS[tag]
    if len(fields) != expected:
        raise ParseError(
            f"{tag} needs {expected} fields, found {len(fields)}", line_number
        )

    record: Dict[str, Any] = {
        "kind": tag,
        "name": fields[0],
        "description": fields[1],
        "points": _parse_int("points", fields[2], line_number),
    }
    if tag == SimpleGoal.kind:
        record["complete"] = _parse_bool("complete flag", fields[3], line_number)
    elif tag == ChecklistGoal.kind:
        record["bonus"] = _parse_int("bonus", fields[3], line_number)
        record["target"] = _parse_int("target", fields[4], line_number)
        record["amount_completed"] = _parse_int("amount completed", fields[5], line_number)
    return record


def validate_record(record: Dict[str, Any]) -> bool:
    """Validate a decoded record against GOAL_RECORD_SCHEMA."""
    jsonschema.validate(record, GOAL_RECORD_SCHEMA)
    return True


def _build_goal(record: Dict[str, Any]) -> Goal:
    kind = record["kind"]
    common = (record["name"], record["description"], record["points"])
    if kind == SimpleGoal.kind:
        return SimpleGoal(*common, complete=record["complete"])
    if kind == ChecklistGoal.kind:
        # Counters are restored as stored, no events are replayed
        return ChecklistGoal(
            *common,
            target=record["target"],
            bonus=record["bonus"],
            amount_completed=record["amount_completed"],
        )
    return EternalGoal(*common)


def decode_goal(line: str, line_number: Optional[int] = None) -> Goal:
    """Rebuild one goal from its serialized line.

    Args:
        line: A single record line, without the trailing newline
        line_number: 1-based position in the file, used in error messages

    Returns:
        The goal with its saved progress

    Raises:
        ParseError: Wrong field count, unknown tag, bad number or out-of-range value
    """
    record = _split_record(line, line_number)
    try:
        validate_record(record)
    except jsonschema.ValidationError as e:
        raise ParseError(f"invalid {record['kind']} record: {e.message}", line_number) from e
    try:
        return _build_goal(record)
    except ValidationError as e:
        raise ParseError(str(e), line_number) from e


def decode_state(text: str) -> LoadedState:
    """Parse a whole save file.

    Blank lines are skipped. The first two non-blank lines are the score and
    the stored level; every following line is one goal.

    Raises:
        ParseError: On any malformed line; nothing is partially returned
    """
    # Records end at "\n" only; other Unicode line breaks are field text
    numbered = [
        (i, line.rstrip("\r")) for i, line in enumerate(text.split("\n"), start=1)
        if line.strip()
    ]
    if len(numbered) < 2:
        raise ParseError("save file needs a score line and a level line")

    (score_no, score_raw), (level_no, level_raw) = numbered[0], numbered[1]
    score = _parse_int("score", score_raw, score_no)
    if score < 0:
        raise ParseError(f"score must not be negative, got {score}", score_no)
    stored_level = _parse_int("level", level_raw, level_no)
    if stored_level < 1:
        raise ParseError(f"level must be at least 1, got {stored_level}", level_no)

    goals = [decode_goal(line, no) for no, line in numbered[2:]]
    return LoadedState(score=score, stored_level=stored_level, goals=goals)
