"""Sorter configuration via pydantic-settings (.env + MUSIC_SORTER_* env vars)."""

import sys
from pathlib import Path

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import UNKNOWN


class SorterConfig(BaseSettings):
    """All sorter configuration with layered resolution:
    .env file < environment variables < constructor kwargs.
    """

    model_config = SettingsConfigDict(
        env_prefix="MUSIC_SORTER_",
        env_file=".env",
        extra="ignore",
    )

    # -- Logging --
    log_dir: Path = Path.home() / ".local" / "state" / "music-sorter"
    log_level: str = "INFO"

    # -- Behavior --
    dry_run: bool = False
    verbose: bool = False
    show_progress: bool = True
    strict_exit: bool = False

    # -- Layout --
    unknown_value: str = UNKNOWN
    sanitize_paths: bool = False

    # -- Copying --
    atomic_copy: bool = True

    @property
    def log_file(self) -> Path:
        """Path to the rotating debug log."""
        return self.log_dir / "music-sorter.log"

    def setup_logging(self) -> None:
        """Configure loguru for the sorter."""
        logger.remove()  # Remove default stderr handler

        log_format = (
            "{time:YYYY-MM-DDTHH:mm:ssZ} | {level:<8} | "
            "{extra[stage]:<8} | {message}"
        )

        def _default_extra(record):
            record["extra"].setdefault("stage", "")
            return True

        level = "DEBUG" if self.verbose else self.log_level.upper()
        logger.add(
            sys.stderr,
            format=log_format,
            level=level,
            filter=_default_extra,
        )

        self.log_dir.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(self.log_file),
            format=log_format,
            level="DEBUG",
            rotation="10 MB",
            retention="30 days",
            filter=_default_extra,
        )
