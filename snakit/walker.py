import logging
import os
from pathlib import Path

import rich

from .collisions import resolve_collision
from .errors import EncodingError, FileSystemError, display_path
from .executor import execute_rename, shown_path
from .normalize import is_hidden_name, normalize_name
from .types import Config, DirectoryEntry, RenamePlan, WalkStats


def check_encoding(path: Path, name: str) -> None:
    """Raise EncodingError if a name holds bytes that are not valid UTF-8."""
    try:
        name.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(path) from e


def read_entry(entry: os.DirEntry) -> DirectoryEntry:
    path = Path(entry.path)
    try:
        is_symlink = entry.is_symlink()
        is_dir = not is_symlink and entry.is_dir(follow_symlinks=False)
    except OSError as e:
        raise FileSystemError(path, e) from e
    return DirectoryEntry(
        path=path,
        name=entry.name,
        is_dir=is_dir,
        is_symlink=is_symlink,
        is_hidden=is_hidden_name(entry.name),
    )


def list_entries(directory: Path, config: Config, stats: WalkStats) -> list[DirectoryEntry]:
    """Read a directory and return the entries to process, in listing order.

    The whole listing is read before anything in the directory is renamed.
    Hidden entries (unless included) and symlinks are left out.
    """
    try:
        with os.scandir(directory) as it:
            raw_entries = list(it)
    except OSError as e:
        raise FileSystemError(directory, e) from e

    entries = []
    for raw in raw_entries:
        if is_hidden_name(raw.name) and not config.include_hidden:
            logging.debug(f"Skipping hidden entry {display_path(raw.path)}")
            stats.skipped_hidden += 1
            continue

        entry = read_entry(raw)
        if entry.is_symlink:
            stats.skipped_symlinks += 1
            if config.verbose:
                rich.print(f"[yellow]Skipping symlink {shown_path(entry.path, config)}[/yellow]")
            continue

        check_encoding(entry.path, entry.name)
        entries.append(entry)

    stats.entries_seen += len(entries)
    return entries


def rename_entries(directory: Path, entries: list[DirectoryEntry], config: Config, stats: WalkStats) -> None:
    """Rename the entries of one directory whose names are not snake_case yet."""
    reserved: set[str] = set()
    for entry in entries:
        target_name = normalize_name(entry.name, entry.is_hidden)
        if target_name == entry.name:
            continue

        final_path = resolve_collision(directory, target_name, source=entry.path, reserved=reserved)
        plan = RenamePlan(
            source=entry.path,
            original_name=entry.name,
            target_name=target_name,
            final_path=final_path,
        )
        execute_rename(plan, config)
        reserved.add(final_path.name)
        stats.renamed += 1


def walk(root: Path, config: Config) -> WalkStats:
    """Rename everything below ``root`` to snake_case, depth first.

    The contents of a directory are renamed before the directory itself, so
    every directory is read under its original path. Uses an explicit stack
    rather than recursion. The root itself is never renamed.

    Args:
        root: Directory to process
        config: Options for this run

    Returns:
        Counters for the run
    """
    stats = WalkStats()
    stack: list[tuple[Path, list[DirectoryEntry] | None]] = [(root, None)]
    while stack:
        directory, entries = stack.pop()
        if entries is None:
            logging.debug(f"Reading {display_path(directory)}")
            entries = list_entries(directory, config, stats)
            # Revisit this directory once all of its subdirectories are done
            stack.append((directory, entries))
            stack.extend((entry.path, None) for entry in reversed(entries) if entry.is_dir)
            continue
        rename_entries(directory, entries, config, stats)
    return stats
