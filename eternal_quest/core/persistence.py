"""Save file I/O for Eternal Quest.

Reads and writes the text produced by the goal codec. Writes go to a
temporary file next to the destination and are moved into place with an
atomic replace, so a failed save leaves any previous file intact.
"""
from __future__ import annotations
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Union

from ..config import get_save_encoding, get_save_file
from ..errors import NotFoundError, SaveError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def resolve_path(path: Optional[PathLike] = None) -> Path:
    """Return the given path, or the configured default save file."""
    return Path(path) if path is not None else Path(get_save_file())


def write_text(path: PathLike, text: str) -> str:
    """Write a save file.

    Args:
        path: Destination file
        text: Full file contents

    Returns:
        Path of the written file

    Raises:
        SaveError: If the destination cannot be written
    """
    target = Path(path)
    encoding = get_save_encoding()
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding=encoding,
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
            newline="\n",
        ) as f:
            tmp_name = f.name
            f.write(text)
        os.replace(tmp_name, target)
    except (OSError, UnicodeError, LookupError) as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise SaveError(f"Failed to save goals to {target}: {e}") from e
    logger.debug("Wrote %d bytes to %s", len(text), target)
    return str(target)


def read_text(path: PathLike) -> str:
    """Read a save file.

    Raises:
        NotFoundError: If the file does not exist
        SaveError: If the file exists but cannot be read or decoded
    """
    source = Path(path)
    if not source.exists():
        raise NotFoundError(f"Save file not found: {source}")
    try:
        with open(source, "r", encoding=get_save_encoding()) as f:
            text = f.read()
    except (OSError, UnicodeDecodeError, LookupError) as e:
        raise SaveError(f"Failed to read goals from {source}: {e}") from e
    logger.debug("Read %d bytes from %s", len(text), source)
    return text
