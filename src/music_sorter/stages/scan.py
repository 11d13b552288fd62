"""Scan stage -- find audio files under the source root."""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterator

import click
from loguru import logger

from ..models import AudioFile, RunStats, TagProbe
from ..tagreader import probe_tags

if TYPE_CHECKING:
    from ..config import SorterConfig
    from ..models import RunContext

log = logger.bind(stage="scan")


def _walk(root: Path) -> Iterator[Path]:
    """Yield every non-directory entry below root, in traversal order."""

    def _on_error(error: OSError) -> None:
        log.debug(f"Skipping unreadable directory: {error}")

    for dirpath, _dirnames, filenames in os.walk(root, onerror=_on_error):
        for name in filenames:
            yield Path(dirpath) / name


def _is_regular_file(path: Path) -> bool:
    try:
        mode = os.lstat(path).st_mode
    except OSError as e:
        log.debug(f"Skipping {path}: {e}")
        return False
    return stat.S_ISREG(mode)


def run(
    ctx: RunContext,
    config: SorterConfig,
    tag_reader: Callable[[Path], TagProbe] | None = None,
    **kwargs,
) -> RunStats:
    """Collect accepted audio files into ctx.files.

    Every regular file is opened once with the tag reader; the probe is
    cached on the AudioFile so extraction doesn't reopen it.
    """
    reader = tag_reader or probe_tags
    delta = RunStats()

    for path in _walk(ctx.source_root):
        if not _is_regular_file(path):
            continue

        probe = reader(path)
        if not probe.is_audio:
            log.debug(f"Not audio: {path}")
            continue

        ctx.files.append(AudioFile(source_path=path, probe=probe))
        delta.found += 1

        if config.show_progress:
            click.echo(f"Scanning for music files (found {delta.found})...\r", nl=False)

    if config.show_progress:
        click.echo(f"Scanning for music files (found {delta.found})... Complete!")
    log.info(f"Found {delta.found} audio files in {ctx.source_root}")
    return delta
