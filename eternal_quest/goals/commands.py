"""Goal command handlers for a text front end.

Each handler drives the GoalManager and returns a command result dictionary
with display lines. Engine errors are turned into lines, so a front end can
print whatever comes back without its own error handling.
"""

from typing import Any, Dict, List, Optional

from ..core.manager import GoalManager
from ..errors import EngineError, NotFoundError


def _result(lines: List[str], changes: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return {"lines": lines, "hints": [], "events_triggered": [], "changes": changes or {}}


def player_info_command(manager: GoalManager) -> Dict[str, Any]:
    """Handle the 'info' command: show score and level."""
    return _result([
        f"Your current score is: {manager.current_score()}",
        f"Level: {manager.current_level()}",
    ])


def goals_list_command(manager: GoalManager) -> Dict[str, Any]:
    """Handle the 'list' command: numbered goal status lines."""
    lines = ["=== Your Goals ==="]
    descriptions = manager.list_goals()
    if not descriptions:
        lines.append("No goals created yet.")
        return _result(lines)

    for number, description in enumerate(descriptions, start=1):
        lines.append(f"{number}. {description}")
    return _result(lines)


def create_goal_command(
    manager: GoalManager,
    kind: str,
    name: str,
    description: str,
    points: int,
    target: Optional[int] = None,
    bonus: Optional[int] = None,
) -> Dict[str, Any]:
    """Handle the 'create' command.

    Args:
        manager: GoalManager instance
        kind: Goal variant tag (SimpleGoal, EternalGoal, ChecklistGoal)
        name: Goal name
        description: Goal description
        points: Points per recorded event
        target: Checklist target count
        bonus: Checklist completion bonus

    Returns:
        Command result dictionary
    """
    try:
        goal = manager.create_goal(kind, name, description, points, target=target, bonus=bonus)
    except EngineError as e:
        return _result([f"Could not create goal: {e}"], {"created": False, "error": str(e)})
    return _result(
        [f"Goal '{goal.name}' created successfully!"],
        {"created": True, "goal_count": len(manager.goals)},
    )


def record_event_command(manager: GoalManager, goal_number: int) -> Dict[str, Any]:
    """Handle the 'record' command.

    Args:
        manager: GoalManager instance
        goal_number: 1-based number as shown by the goal list

    Returns:
        Command result dictionary
    """
    if not manager.goals:
        return _result(["No goals available to record."], {"recorded": False})

    try:
        result = manager.record_event(goal_number - 1)
    except EngineError:
        return _result(
            [f"Invalid selection: choose a goal between 1 and {len(manager.goals)}."],
            {"recorded": False},
        )

    lines = [result.outcome.message]
    events = []
    if result.leveled_up:
        lines.append(f"Congratulations! You have reached Level {result.level}!")
        events.append("level_up")
    if result.outcome.completed_now:
        events.append("goal_completed")
    lines.append(f"Your total score is now: {result.score}")

    return {
        "lines": lines,
        "hints": [],
        "events_triggered": events,
        "changes": {
            "recorded": True,
            "points": result.points,
            "score": result.score,
            "level": result.level,
        },
    }


def save_command(manager: GoalManager, path: Optional[str] = None) -> Dict[str, Any]:
    """Handle the 'save' command; path defaults to the configured save file."""
    try:
        filepath = manager.save(path)
    except EngineError as e:
        return _result([f"Error saving goals: {e}"], {"saved": False, "error": str(e)})
    return _result([f"Goals saved to: {filepath}"], {"saved": True, "path": filepath})


def load_command(manager: GoalManager, path: Optional[str] = None) -> Dict[str, Any]:
    """Handle the 'load' command; path defaults to the configured save file."""
    try:
        manager.load(path)
    except NotFoundError as e:
        return _result([f"No saved file found: {e}"], {"loaded": False, "error": str(e)})
    except EngineError as e:
        return _result([f"Error loading goals: {e}"], {"loaded": False, "error": str(e)})
    return _result(
        [
            f"Loaded {len(manager.goals)} goals.",
            f"Score: {manager.current_score()} - Level: {manager.current_level()}",
        ],
        {"loaded": True, "goal_count": len(manager.goals)},
    )
