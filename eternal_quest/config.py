"""Central configuration for Eternal Quest.

Tunable values live here. Every value has a sensible default and can be
overridden through environment variables. Getters read the environment at
call time, so a changed variable takes effect on the next call.
"""
from __future__ import annotations
import os


def _get_str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


# ---------------- Save file ----------------
DEFAULT_SAVE_FILE: str = "goals.txt"
ENV_SAVE_FILE = "EQ_SAVE_FILE"

DEFAULT_SAVE_ENCODING: str = "utf-8"
ENV_SAVE_ENCODING = "EQ_SAVE_ENCODING"


def get_save_file() -> str:
    """Path used by save/load when the caller gives none. Var: EQ_SAVE_FILE."""
    return _get_str_env(ENV_SAVE_FILE, DEFAULT_SAVE_FILE)


def get_save_encoding() -> str:
    """Text encoding of save files. Var: EQ_SAVE_ENCODING (default utf-8)."""
    return _get_str_env(ENV_SAVE_ENCODING, DEFAULT_SAVE_ENCODING)


__all__ = [
    "DEFAULT_SAVE_FILE", "ENV_SAVE_FILE", "get_save_file",
    "DEFAULT_SAVE_ENCODING", "ENV_SAVE_ENCODING", "get_save_encoding",
]
