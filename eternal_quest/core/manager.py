"""Goal manager: the ordered goal list, the score and the derived level.

The manager is the engine's only entry point for callers. It never prints;
every operation returns data or raises an EngineError subclass.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Optional

from ..errors import OutOfRangeError
from ..goals.codec import decode_state, encode_state
from ..goals.model import Goal, RecordOutcome, create_goal
from . import persistence

logger = logging.getLogger(__name__)

# Score span of one level
POINTS_PER_LEVEL = 1000


def level_for_score(score: int) -> int:
    """Level reached with the given score (1 for the first 1000 points)."""
    return score // POINTS_PER_LEVEL + 1


@dataclass
class EventResult:
    """What recording one event did to the manager."""
    points: int
    score: int
    level: int
    leveled_up: bool
    outcome: RecordOutcome


class GoalManager:
    """Owns the player's goals and accumulated score."""

    def __init__(self):
        self.goals: List[Goal] = []
        self.score: int = 0
        self.level: int = 1

    def add_goal(self, goal: Goal) -> None:
        """Append a goal. Duplicate names are allowed."""
        self.goals.append(goal)
        logger.debug("Added %s '%s' (%d goals)", goal.kind, goal.name, len(self.goals))

    def create_goal(
        self,
        kind: str,
        name: str,
        description: str,
        points: int,
        target: Optional[int] = None,
        bonus: Optional[int] = None,
    ) -> Goal:
        """Build a goal of the given variant and append it.

        Raises:
            ValidationError: On unknown kind or invalid arguments
        """
        goal = create_goal(kind, name, description, points, target=target, bonus=bonus)
        self.add_goal(goal)
        return goal

    def list_goals(self) -> List[str]:
        """Status line of each goal, in insertion order."""
        return [goal.describe() for goal in self.goals]

    def goal_names(self) -> List[str]:
        return [goal.name for goal in self.goals]

    def record_event(self, index: int) -> EventResult:
        """Record one event against the goal at `index` (0-based).

        Args:
            index: Position of the goal in the list

        Returns:
            EventResult with the points earned and the new score and level

        Raises:
            OutOfRangeError: If index is outside [0, number of goals)
        """
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(self.goals):
            raise OutOfRangeError(
                f"Goal index {index!r} out of range (have {len(self.goals)} goals)"
            )
        goal = self.goals[index]
        outcome = goal.record_event()

        old_level = self.level
        self.score += outcome.points
        self.level = level_for_score(self.score)
        leveled_up = self.level > old_level
        if leveled_up:
            logger.debug("Level up: %d -> %d at score %d", old_level, self.level, self.score)

        return EventResult(
            points=outcome.points,
            score=self.score,
            level=self.level,
            leveled_up=leveled_up,
            outcome=outcome,
        )

    def current_score(self) -> int:
        return self.score

    def current_level(self) -> int:
        return self.level

    def save(self, destination=None) -> str:
        """Write score, level and every goal to `destination`.

        Args:
            destination: File path; defaults to the configured save file

        Returns:
            Path of the written file

        Raises:
            SaveError: If the destination cannot be written
        """
        path = persistence.resolve_path(destination)
        written = persistence.write_text(path, encode_state(self.score, self.level, self.goals))
        logger.debug("Saved %d goals to %s", len(self.goals), written)
        return written

    def load(self, source=None) -> None:
        """Replace the manager's state with the contents of `source`.

        Nothing changes unless the whole file parses.

        Raises:
            NotFoundError: If the file does not exist
            SaveError: If the file cannot be read
            ParseError: If any line is malformed
        """
        path = persistence.resolve_path(source)
        loaded = decode_state(persistence.read_text(path))

        level = level_for_score(loaded.score)
        if loaded.stored_level != level:
            logger.debug(
                "Stored level %d does not match score %d; using level %d",
                loaded.stored_level, loaded.score, level,
            )

        self.goals = loaded.goals
        self.score = loaded.score
        self.level = level
        logger.debug("Loaded %d goals from %s", len(self.goals), path)
