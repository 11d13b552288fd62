"""Existence checks for source/destination paths.

Symbolic links never satisfy either predicate, and any stat failure
reads as "does not exist". Neither function raises.
"""

import os
import stat
from pathlib import Path

from loguru import logger

log = logger.bind(stage="pathcheck")


def _lstat_mode(path: str | Path) -> int | None:
    try:
        return os.lstat(path).st_mode
    except (OSError, ValueError) as e:
        log.debug(f"lstat failed for {path}: {e}")
        return None


def exists_as_directory(path: str | Path) -> bool:
    """True if path is a real directory (not a symlink to one)."""
    mode = _lstat_mode(path)
    return mode is not None and stat.S_ISDIR(mode)


def exists_as_file(path: str | Path) -> bool:
    """True if path exists and is neither a directory nor a symlink."""
    mode = _lstat_mode(path)
    if mode is None:
        return False
    return not stat.S_ISDIR(mode) and not stat.S_ISLNK(mode)
