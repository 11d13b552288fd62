"""Extract stage -- resolve artist/album/title and the destination path."""

from __future__ import annotations

import contextlib
from pathlib import Path
from typing import TYPE_CHECKING, Callable

import click
from loguru import logger

from ..models import AudioFile, RunStats, TagProbe
from ..ops.library import build_destination_path
from ..sanitize import sanitize_component
from ..tagreader import probe_tags

if TYPE_CHECKING:
    from ..config import SorterConfig
    from ..models import RunContext

log = logger.bind(stage="extract")


def _apply_tags(audio: AudioFile, probe: TagProbe, unknown: str) -> None:
    """Fill artist/album/title/extension from a probe, with fallbacks."""
    tags = probe.tags if probe.is_audio else None
    file_name = audio.source_path.name

    if tags is None:
        audio.artist = unknown
        audio.album = unknown
        audio.title = file_name
        audio.title_from_filename = True
    else:
        audio.artist = tags.artist or unknown
        audio.album = tags.album or unknown
        if tags.title:
            audio.title = tags.title
        else:
            audio.title = file_name
            audio.title_from_filename = True

    # A filename title already carries its extension
    if audio.title_from_filename:
        log.debug(f"No title tag, using file name: {file_name}")
    else:
        audio.extension = audio.source_path.suffix


def _sanitize(audio: AudioFile, unknown: str) -> None:
    audio.artist = sanitize_component(audio.artist, unknown)
    audio.album = sanitize_component(audio.album, unknown)
    audio.title = sanitize_component(audio.title, audio.source_path.stem or unknown)


def run(
    ctx: RunContext,
    config: SorterConfig,
    tag_reader: Callable[[Path], TagProbe] | None = None,
    **kwargs,
) -> RunStats:
    """Annotate every file in ctx.files and fix its destination_path.

    Uses the probe cached by the scan stage; files without one are probed
    here. Nothing in this stage is fatal and no counter changes.
    """
    reader = tag_reader or probe_tags
    unknown = config.unknown_value

    if config.show_progress:
        progress = click.progressbar(
            ctx.files, label="Extracting metadata", show_pos=True
        )
    else:
        progress = contextlib.nullcontext(ctx.files)

    with progress as files:
        for audio in files:
            probe = audio.probe if audio.probe is not None else reader(audio.source_path)
            _apply_tags(audio, probe, unknown)
            if config.sanitize_paths:
                _sanitize(audio, unknown)

            audio.destination_path = build_destination_path(
                ctx.destination_root,
                audio.artist,
                audio.album,
                audio.title,
                audio.extension,
            )
            log.debug(f"{audio.source_path} -> {audio.destination_path}")

    log.info(f"Extracted metadata for {len(ctx.files)} files")
    return RunStats()
