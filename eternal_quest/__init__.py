"""Eternal Quest goal engine."""
import logging

from .errors import (
    EngineError, ValidationError, OutOfRangeError, NotFoundError, SaveError, ParseError,
)
from .goals import Goal, SimpleGoal, EternalGoal, ChecklistGoal, RecordOutcome, create_goal
from .core import GoalManager, EventResult, level_for_score

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'EngineError', 'ValidationError', 'OutOfRangeError', 'NotFoundError', 'SaveError', 'ParseError',
    'Goal', 'SimpleGoal', 'EternalGoal', 'ChecklistGoal', 'RecordOutcome', 'create_goal',
    'GoalManager', 'EventResult', 'level_for_score',
]
