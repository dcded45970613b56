"""JSON schema for decoded goal records.

A record is the dict the codec builds from one goal line before it is turned
into a goal object. The schema pins the fields each variant carries and
their ranges.
"""

_COMMON_PROPERTIES = {
    "name": {"type": "string", "minLength": 1, "pattern": r"\S"},
    "description": {"type": "string"},
    "points": {"type": "integer", "minimum": 0},
}

GOAL_RECORD_SCHEMA = {
    "type": "object",
    "required": ["kind", "name", "description", "points"],
    "properties": {
        "kind": {"type": "string", "enum": ["SimpleGoal", "EternalGoal", "ChecklistGoal"]},
    },
    "oneOf": [
        {
            "properties": {
                "kind": {"const": "SimpleGoal"},
                **_COMMON_PROPERTIES,
                "complete": {"type": "boolean"},
            },
            "required": ["complete"],
            "additionalProperties": False,
        },
        {
            "properties": {
                "kind": {"const": "EternalGoal"},
                **_COMMON_PROPERTIES,
            },
            "additionalProperties": False,
        },
        {
            "properties": {
                "kind": {"const": "ChecklistGoal"},
                **_COMMON_PROPERTIES,
                "bonus": {"type": "integer", "minimum": 0},
                "target": {"type": "integer", "minimum": 1},
                "amount_completed": {"type": "integer", "minimum": 0},
            },
            "required": ["bonus", "target", "amount_completed"],
            "additionalProperties": False,
        },
    ],
}
