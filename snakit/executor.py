import logging
from pathlib import Path

import rich
from rich.markup import escape

from .errors import FileSystemError, display_path
from .types import Config, RenamePlan


def shown_path(path: Path, config: Config) -> str:
    """Return a path relative to the root, ready for rich output."""
    try:
        path = path.relative_to(config.root_path)
    except ValueError:
        pass
    return escape(display_path(path))


def describe(plan: RenamePlan, config: Config) -> tuple[str, str]:
    return shown_path(plan.source, config), escape(display_path(plan.final_path.name))


def execute_rename(plan: RenamePlan, config: Config) -> None:
    """Rename one entry, or only report it in a dry run."""
    old, new = describe(plan, config)
    if config.dry_run:
        rich.print(f"Would rename {old} → {new}")
        return

    logging.debug(f"Renaming {plan.source} to {plan.final_path}")
    try:
        plan.source.rename(plan.final_path)
    except OSError as e:
        raise FileSystemError(plan.source, e) from e

    if config.verbose:
        rich.print(f"Renamed {old} → {new}")
