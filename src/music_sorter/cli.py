"""CLI entry point for the music sorter."""

import json
from pathlib import Path

import click
from loguru import logger

from .config import SorterConfig
from .errors import SorterError
from .pathcheck import exists_as_directory
from .runner import SorterRunner

log = logger.bind(stage="cli")


def _prompt_source() -> Path:
    """Ask for the music folder until an existing directory is given."""
    while True:
        answer = click.prompt("Enter the music folder", type=str).strip()
        if exists_as_directory(answer):
            return Path(answer)
        click.echo("ERROR: Invalid directory, please try again")


def _prompt_destination() -> Path:
    return Path(click.prompt("Enter the destination folder", type=str).strip())


@click.command()
@click.argument("source", required=False)
@click.argument("destination", required=False)
@click.option(
    "--dry-run", is_flag=True, help="Show what would happen without doing it."
)
@click.option(
    "--create-dest",
    is_flag=True,
    help="Create a missing destination without asking.",
)
@click.option(
    "--sanitize",
    is_flag=True,
    help="Replace path separators and reserved characters in tag values.",
)
@click.option(
    "--strict", is_flag=True, help="Exit with status 1 if any file failed to copy."
)
@click.option("--json", "as_json", is_flag=True, help="Also print counters as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to .env file.",
)
def main(
    source: str | None,
    destination: str | None,
    dry_run: bool,
    create_dest: bool,
    sanitize: bool,
    strict: bool,
    as_json: bool,
    verbose: bool,
    config_file: str | None,
) -> None:
    """Sort audio files into Artist/Album/Title folders using their tags."""
    if source is None:
        source_root = _prompt_source()
    else:
        source_root = Path(source.strip())
        if not exists_as_directory(source_root):
            raise click.UsageError(f"Invalid source directory: {source}")

    if destination is None:
        destination_root = _prompt_destination()
    else:
        destination_root = Path(destination.strip())

    # absolute() keeps symlinks visible to the directory checks
    source_root = source_root.absolute()
    destination_root = destination_root.absolute()

    if not exists_as_directory(destination_root) and not create_dest:
        create_dest = click.confirm(
            "Directory does not exist. Would you like to create it?", default=False
        )
        if not create_dest:
            click.echo("ERROR: Destination folder does not exist. Cannot continue.")
            click.echo("Aborting...")
            raise SystemExit(0)

    # CLI flags as kwargs override env/.env; only pass flags that were set
    config_kwargs: dict[str, object] = {}
    if config_file:
        config_kwargs["_env_file"] = config_file
    if dry_run:
        config_kwargs["dry_run"] = True
    if verbose:
        config_kwargs["verbose"] = True
    if sanitize:
        config_kwargs["sanitize_paths"] = True
    if strict:
        config_kwargs["strict_exit"] = True

    config = SorterConfig(**config_kwargs)  # type: ignore[arg-type]
    config.setup_logging()

    log.info(
        f"Starting sort: source={source_root} destination={destination_root} "
        f"dry_run={config.dry_run}"
    )

    runner = SorterRunner(config=config)
    try:
        stats = runner.run(
            source_root,
            destination_root,
            create_destination=create_dest,
        )
    except SorterError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps(stats.as_dict()))

    if config.strict_exit and stats.failed > 0:
        raise SystemExit(1)
