"""Report stage -- print the run summary."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from loguru import logger

from ..models import RunStats

if TYPE_CHECKING:
    from ..config import SorterConfig
    from ..models import RunContext

log = logger.bind(stage="report")


def render_summary(stats: RunStats, dry_run: bool = False) -> str:
    """Render the counters as the end-of-run text block."""
    heading = "Sorting results (dry-run)" if dry_run else "Sorting results"
    return "\n".join(
        [
            heading,
            "",
            f"    Files found     : {stats.found}",
            f"    Files copied    : {stats.copied}",
            f"    Files skipped   : {stats.skipped}",
            f"    Files failed    : {stats.failed}",
        ]
    )


def run(ctx: RunContext, config: SorterConfig, **kwargs) -> RunStats:
    click.echo("")
    click.echo(render_summary(ctx.stats, dry_run=config.dry_run))
    log.info(f"Summary: {ctx.stats.as_dict()}")
    return RunStats()
