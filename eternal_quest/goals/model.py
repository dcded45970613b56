"""Goal data models for Eternal Quest.

Defines the three goal variants (simple, eternal, checklist) and the
RecordOutcome value every recorded event returns. Goals never print: the
outcome carries the message and the caller decides how to show it.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, List, Optional

from ..errors import ValidationError

# Separators of the line format (see codec). Text fields may not contain them.
TAG_SEPARATOR = ":"
FIELD_SEPARATOR = ","


@dataclass
class RecordOutcome:
    """Result of recording one event against a goal."""
    points: int
    completed_now: bool = False  # this event completed the goal
    already_complete: bool = False  # goal was finished before the event
    bonus_awarded: int = 0
    message: str = ""


def _check_text(field_name: str, value: str) -> None:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    if FIELD_SEPARATOR in value or "\n" in value or "\r" in value:
        raise ValidationError(
            f"{field_name} may not contain '{FIELD_SEPARATOR}' or line breaks: {value!r}"
        )


def _check_int(field_name: str, value: int, minval: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer")
    if value < minval:
        raise ValidationError(f"{field_name} must be >= {minval}, got {value}")


@dataclass
class Goal(ABC):
    """Base goal: a name, a description and the points one event is worth.

    Abstract: only SimpleGoal, EternalGoal and ChecklistGoal are instantiable.
    """
    name: str
    description: str
    points: int

    kind: ClassVar[str]

    def __post_init__(self):
        _check_text("name", self.name)
        if not self.name.strip():
            raise ValidationError("name must not be empty")
        _check_text("description", self.description)
        _check_int("points", self.points, 0)

    @abstractmethod
    def record_event(self) -> RecordOutcome:
        pass

    @abstractmethod
    def is_complete(self) -> bool:
        pass

    def describe(self) -> str:
        """Status line for listings, e.g. '[X] Run (run a marathon)'."""
        marker = "X" if self.is_complete() else " "
        return f"[{marker}] {self.name} ({self.description})"

    def extra_fields(self) -> List[str]:
        """Variant-specific fields appended after the common ones when saving."""
        return []

    def serialize(self) -> str:
        fields = [self.name, self.description, str(self.points)] + self.extra_fields()
        return f"{self.kind}{TAG_SEPARATOR}{FIELD_SEPARATOR.join(fields)}"


@dataclass
class SimpleGoal(Goal):
    """Completed once; later events award nothing."""
    complete: bool = False

    kind: ClassVar[str] = "SimpleGoal"

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.complete, bool):
            raise ValidationError("complete must be True or False")

    def record_event(self) -> RecordOutcome:
        if self.complete:
            return RecordOutcome(
                points=0,
                already_complete=True,
                message=f"'{self.name}' is already complete.",
            )
        self.complete = True
        return RecordOutcome(
            points=self.points,
            completed_now=True,
            message=f"Congratulations! You have completed '{self.name}' and earned {self.points} points!",
        )

    def is_complete(self) -> bool:
        return self.complete

    def extra_fields(self) -> List[str]:
        return [str(self.complete)]


@dataclass
class EternalGoal(Goal):
    """Never completes; every event awards the points."""

    kind: ClassVar[str] = "EternalGoal"

    def record_event(self) -> RecordOutcome:
        return RecordOutcome(
            points=self.points,
            message=f"You have earned {self.points} points for recording '{self.name}'!",
        )

    def is_complete(self) -> bool:
        return False


@dataclass
class ChecklistGoal(Goal):
    """Must be recorded `target` times; the last one also pays the bonus."""
    target: int = 1
    bonus: int = 0
    amount_completed: int = 0

    kind: ClassVar[str] = "ChecklistGoal"

    def __post_init__(self):
        super().__post_init__()
        _check_int("target", self.target, 1)
        _check_int("bonus", self.bonus, 0)
        _check_int("amount_completed", self.amount_completed, 0)
        if self.amount_completed > self.target:
            raise ValidationError(
                f"amount_completed ({self.amount_completed}) exceeds target ({self.target})"
            )

    def record_event(self) -> RecordOutcome:
        if self.amount_completed >= self.target:
            return RecordOutcome(
                points=0,
                already_complete=True,
                message=f"'{self.name}' has already been completed!",
            )
        self.amount_completed += 1
        if self.amount_completed == self.target:
            return RecordOutcome(
                points=self.points + self.bonus,
                completed_now=True,
                bonus_awarded=self.bonus,
                message=(
                    f"Congratulations! You completed '{self.name}' and earned "
                    f"{self.points} points + {self.bonus} bonus points!"
                ),
            )
        return RecordOutcome(
            points=self.points,
            message=(
                f"Progress recorded for '{self.name}'. You earned {self.points} points! "
                f"({self.amount_completed}/{self.target})"
            ),
        )

    def is_complete(self) -> bool:
        return self.amount_completed >= self.target

    def describe(self) -> str:
        return f"{super().describe()} -- Currently completed: {self.amount_completed}/{self.target}"

    def extra_fields(self) -> List[str]:
        # Order matches the save format: bonus, target, amount completed
        return [str(self.bonus), str(self.target), str(self.amount_completed)]


GOAL_TYPES = {
    SimpleGoal.kind: SimpleGoal,
    EternalGoal.kind: EternalGoal,
    ChecklistGoal.kind: ChecklistGoal,
}

GOAL_KINDS = tuple(GOAL_TYPES)


def create_goal(
    kind: str,
    name: str,
    description: str,
    points: int,
    target: Optional[int] = None,
    bonus: Optional[int] = None,
) -> Goal:
    """Build a fresh goal of the given variant.

    Args:
        kind: Variant tag, one of GOAL_KINDS
        name: Short goal name
        description: Free text description
        points: Points awarded per recorded event
        target: Times a checklist goal must be recorded (checklist only)
        bonus: Extra points on reaching the target (checklist only)

    Returns:
        A new goal with no progress

    Raises:
        ValidationError: On unknown kind or invalid arguments
    """
    if kind not in GOAL_TYPES:
        raise ValidationError(f"Unknown goal kind '{kind}'; expected one of {', '.join(GOAL_KINDS)}")
    if kind == ChecklistGoal.kind:
        if target is None or bonus is None:
            raise ValidationError("Checklist goals need both target and bonus")
        return ChecklistGoal(name, description, points, target=target, bonus=bonus)
    return GOAL_TYPES[kind](name, description, points)
