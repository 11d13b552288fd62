"""Sorter runner -- validates roots and runs the stages in order."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

from loguru import logger

from .config import SorterConfig
from .errors import ConfigError, StageError
from .models import STAGE_ORDER, RunContext, RunStats, Stage, TagProbe
from .pathcheck import exists_as_directory
from .stages import get_stage_runner

log = logger.bind(stage="runner")


class SorterRunner:
    """Sorts one source tree into an Artist/Album/Title layout."""

    def __init__(
        self,
        config: SorterConfig,
        tag_reader: Callable[[Path], TagProbe] | None = None,
    ) -> None:
        self.config = config
        self.tag_reader = tag_reader
        self.context: RunContext | None = None

    def _check_roots(
        self,
        source_root: Path,
        destination_root: Path,
        create_destination: bool,
    ) -> None:
        if not exists_as_directory(source_root):
            raise ConfigError(f"Source is not a directory: {source_root}")

        if exists_as_directory(destination_root):
            return

        if not create_destination:
            raise ConfigError(f"Destination folder does not exist: {destination_root}")

        if self.config.dry_run:
            log.info(f"[DRY-RUN] Would create destination {destination_root}")
            return

        try:
            destination_root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigError(
                f"Cannot create destination {destination_root}: {e}"
            ) from e
        if not exists_as_directory(destination_root):
            raise ConfigError(f"Destination is not a directory: {destination_root}")
        log.info(f"Created destination {destination_root}")

    def run(
        self,
        source_root: Path,
        destination_root: Path,
        create_destination: bool = False,
    ) -> RunStats:
        """Scan, extract, copy and report; return the final counters.

        Raises ConfigError when the roots are unusable and StageError if a
        stage is missing or the copy counters don't add up to found.
        Per-file problems never raise; they end up in the failed counter.
        """
        self._check_roots(source_root, destination_root, create_destination)

        ctx = RunContext(source_root=source_root, destination_root=destination_root)
        self.context = ctx

        for stage in STAGE_ORDER:
            try:
                stage_run = get_stage_runner(stage)
            except NotImplementedError as e:
                raise StageError(str(e), stage=stage) from e
            log.debug(f"Running stage {stage}")
            delta = stage_run(ctx, self.config, tag_reader=self.tag_reader)
            ctx.stats.merge(delta)

            if stage == Stage.COPY and ctx.stats.processed != ctx.stats.found:
                raise StageError(
                    f"Counter mismatch: found={ctx.stats.found} "
                    f"processed={ctx.stats.processed}",
                    stage=stage,
                )

        return ctx.stats
