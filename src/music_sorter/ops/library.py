"""Build Artist/Album/Title destinations and copy files into the library."""

from __future__ import annotations

import os
import shutil
import tempfile
from pathlib import Path

from loguru import logger

from ..errors import CopyError
from ..pathcheck import exists_as_directory

log = logger.bind(stage="library")


def build_destination_path(
    destination_root: str | Path,
    artist: str,
    album: str,
    title: str,
    extension: str,
) -> Path:
    """Compose root/artist/album/title+extension.

    Plain string composition: segments are not sanitized, so a separator
    inside a tag value produces extra directory levels. Same inputs always
    give the same path.
    """
    return Path(f"{destination_root}/{artist}/{album}/{title}{extension}")


def ensure_directory(directory: Path, dry_run: bool = False) -> None:
    """Create directory and any missing parents.

    Raises CopyError if the directory still isn't there afterwards.
    """
    if exists_as_directory(directory):
        return
    if dry_run:
        log.debug(f"[DRY-RUN] Would create {directory}")
        return

    try:
        directory.mkdir(parents=True, exist_ok=True)
        log.debug(f"Created {directory}")
    except OSError as e:
        log.debug(f"mkdir failed for {directory}: {e}")

    if not exists_as_directory(directory):
        raise CopyError(directory, directory, "destination directory could not be created")


def _temp_file(dest_file: Path) -> Path:
    """Create an empty hidden temp file next to dest_file.

    The name is short and fixed-length so it fits wherever dest_file does.
    """
    fd, name = tempfile.mkstemp(dir=dest_file.parent, prefix=".", suffix=".part")
    os.close(fd)
    return Path(name)


def copy_file(source_file: Path, dest_file: Path, atomic: bool = True) -> Path:
    """Copy source_file to dest_file.

    With atomic=True the bytes land in a hidden temp file next to the
    destination first and are renamed into place on success; the temp file
    is removed on failure. Raises CopyError on any OS error.
    """
    target: Path | None = None
    try:
        target = _temp_file(dest_file) if atomic else dest_file
        shutil.copy2(source_file, target)
        if atomic:
            os.replace(target, dest_file)
    except OSError as e:
        if atomic and target is not None:
            try:
                target.unlink(missing_ok=True)
            except OSError as cleanup_error:
                log.warning(f"Could not remove partial copy {target}: {cleanup_error}")
        raise CopyError(source_file, dest_file, str(e)) from e

    log.debug(f"Copied {source_file} -> {dest_file}")
    return dest_file
