"""Stage registry -- maps Stage enum values to run functions.

Pipeline order: scan -> extract -> copy -> report

Every stage finishes for the whole file set before the next one starts.
Each run function takes (ctx, config, **kwargs) and returns a RunStats
delta; the runner merges deltas into ctx.stats.

Stages:
    scan    -- Walk the source root (symlinks not followed, entries classified
               with lstat so links are skipped), open every regular file with
               the tag reader, and keep the ones it accepts as AudioFile
               records in traversal order. Unreadable entries and rejected
               files are dropped silently. Counts found.
    extract -- Turn each cached tag probe into artist/album/title, substituting
               the unknown value for missing artist/album and the file name for
               a missing title. The extension is kept only for tag titles.
               Optionally sanitizes segments, then fixes destination_path.
    copy    -- Create the destination directory chain, skip when a file is
               already at the destination, otherwise copy (temp + rename).
               Directory or copy failures count as failed for that file only.
               Counts copied, skipped, failed.
    report  -- Print the final tally.
"""

from ..models import Stage


def get_stage_runner(stage: Stage):
    """Return the run function for a given stage.

    Raises NotImplementedError for unknown stages.
    """
    if stage == Stage.SCAN:
        from .scan import run as scan_run

        return scan_run

    if stage == Stage.EXTRACT:
        from .extract import run as extract_run

        return extract_run

    if stage == Stage.COPY:
        from .copy import run as copy_run

        return copy_run

    if stage == Stage.REPORT:
        from .report import run as report_run

        return report_run

    raise NotImplementedError(f"Stage '{stage}' is not implemented.")
