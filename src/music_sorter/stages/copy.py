"""Copy stage -- place each file at its destination, never overwriting."""

from __future__ import annotations

import contextlib
from pathlib import Path
from typing import TYPE_CHECKING

import click
from loguru import logger

from ..errors import CopyError
from ..models import AudioFile, CopyOutcome, RunStats
from ..ops.library import copy_file, ensure_directory
from ..pathcheck import exists_as_file

if TYPE_CHECKING:
    from ..config import SorterConfig
    from ..models import RunContext

log = logger.bind(stage="copy")


def _copy_one(
    audio: AudioFile,
    config: SorterConfig,
    planned: set[Path],
) -> CopyOutcome:
    dest = audio.destination_path
    if dest is None:
        log.warning(f"No destination computed for {audio.source_path}")
        return CopyOutcome.FAILED

    try:
        ensure_directory(dest.parent, dry_run=config.dry_run)
    except CopyError as e:
        log.warning(f"FAILED {audio.source_path}: {e.reason}")
        return CopyOutcome.FAILED

    if exists_as_file(dest) or dest.is_symlink() or dest in planned:
        log.debug(f"Skip (already exists): {dest}")
        return CopyOutcome.SKIPPED

    if config.dry_run:
        planned.add(dest)
        log.info(f"[DRY-RUN] Would copy {audio.source_path} -> {dest}")
        return CopyOutcome.COPIED

    try:
        copy_file(audio.source_path, dest, atomic=config.atomic_copy)
    except CopyError as e:
        log.warning(f"FAILED {audio.source_path}: {e.reason}")
        return CopyOutcome.FAILED
    return CopyOutcome.COPIED


def run(ctx: RunContext, config: SorterConfig, **kwargs) -> RunStats:
    """Copy every file in traversal order and count the outcomes.

    One bad file never stops the run: directory-creation and copy errors
    are counted as failed and the loop moves on. No retries.
    """
    delta = RunStats()
    # Destinations claimed earlier in a dry run, standing in for files on disk
    planned: set[Path] = set()

    if config.show_progress:
        progress = click.progressbar(
            ctx.files,
            label="Copying files",
            show_pos=True,
            item_show_func=lambda a: a.source_path.name if a else "",
        )
    else:
        progress = contextlib.nullcontext(ctx.files)

    with progress as files:
        for audio in files:
            audio.outcome = _copy_one(audio, config, planned)
            delta.record(audio.outcome)

    log.info(
        f"Copy complete: {delta.copied} copied, {delta.skipped} skipped, "
        f"{delta.failed} failed"
    )
    return delta
