"""Goal variants, their text codec and command handlers."""

from .model import (
    Goal, SimpleGoal, EternalGoal, ChecklistGoal, RecordOutcome,
    GOAL_KINDS, GOAL_TYPES, create_goal,
)
from .codec import LoadedState, encode_goal, encode_state, decode_goal, decode_state
from .schema import GOAL_RECORD_SCHEMA
from .commands import (
    player_info_command, goals_list_command, create_goal_command,
    record_event_command, save_command, load_command,
)

__all__ = [
    'Goal', 'SimpleGoal', 'EternalGoal', 'ChecklistGoal', 'RecordOutcome',
    'GOAL_KINDS', 'GOAL_TYPES', 'create_goal',
    'LoadedState', 'encode_goal', 'encode_state', 'decode_goal', 'decode_state',
    'GOAL_RECORD_SCHEMA',
    'player_info_command', 'goals_list_command', 'create_goal_command',
    'record_event_command', 'save_command', 'load_command',
]
