"""Goal manager and save file I/O."""

from .manager import GoalManager, EventResult, level_for_score

__all__ = ['GoalManager', 'EventResult', 'level_for_score']
