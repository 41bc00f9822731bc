#!/usr/bin/env python3


import logging
from pathlib import Path

import click
import rich

from . import __version__
from .errors import InvalidRootError
from .types import Config
from .walker import walk


def validate_root(path: Path) -> Path:
    """Check the root before anything is read or renamed."""
    if not path.exists():
        raise InvalidRootError(path, "does not exist")
    if not path.is_dir():
        raise InvalidRootError(path, "is not a directory")
    return path


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("path", type=click.Path(path_type=Path))
@click.option("-d", "--dry-run", is_flag=True, help="Show changes without renaming")
@click.option("--include-hidden", is_flag=True, help="Also rename entries whose name starts with a dot")
@click.option("-v", "--verbose", is_flag=True, help="Print a line for every rename")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default="WARNING",
    help="Set the logging level (default: WARNING)",
)
@click.version_option(__version__, "-V", "--version", prog_name="snakit")
def main(
    path: Path,
    dry_run: bool,
    include_hidden: bool,
    verbose: bool,
    log_level: str,
) -> None:
    """Rename all files and folders under PATH to snake_case."""
    # Set up logging
    level = getattr(logging, log_level.upper())
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    # When not in debug mode, only show our own debug messages
    if level != logging.DEBUG:
        for logger_name in logging.root.manager.loggerDict:
            if not logger_name.startswith("snakit"):
                logging.getLogger(logger_name).setLevel(logging.WARNING)

    root = validate_root(path)
    config = Config(
        root_path=root,
        dry_run=dry_run,
        include_hidden=include_hidden,
        verbose=verbose,
    )

    stats = walk(root, config)

    if verbose or dry_run:
        action = "Would rename" if dry_run else "Renamed"
        rich.print(f"\n{action} {stats.renamed} of {stats.entries_seen} entries")
        if stats.skipped_hidden or stats.skipped_symlinks:
            rich.print(
                f"[yellow]Skipped {stats.skipped_hidden} hidden entries and {stats.skipped_symlinks} symlinks[/yellow]"
            )


if __name__ == "__main__":
    main()
