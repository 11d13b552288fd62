"""Exception hierarchy for the music sorter."""

from pathlib import Path


class SorterError(Exception):
    """Base exception for all sorter errors."""


class ConfigError(SorterError):
    """Invalid or missing configuration (bad source/destination roots)."""


class StageError(SorterError):
    """A pipeline stage could not run."""

    def __init__(self, message: str, stage: str) -> None:
        super().__init__(message)
        self.stage = stage


class CopyError(SorterError):
    """Creating a destination directory or copying a file failed."""

    def __init__(self, source: Path, dest: Path, reason: str) -> None:
        super().__init__(f"Cannot copy {source} -> {dest}: {reason}")
        self.source = source
        self.dest = dest
        self.reason = reason
