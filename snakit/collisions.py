import logging
import os
from collections.abc import Collection
from itertools import count
from pathlib import Path

from .normalize import join_name, split_name

SUFFIX_SEPARATOR = "_"


def suffixed_name(name: str, counter: int) -> str:
    """Append a counter to the stem of a name, keeping its extension.

    A leading dot belongs to the stem, so ``.cfg`` becomes ``.cfg_1``.
    """
    stem, extension = split_name(name)
    return join_name(f"{stem}{SUFFIX_SEPARATOR}{counter}", extension)


def is_free(candidate: Path, source: Path | None, reserved: Collection[str] = ()) -> bool:
    if candidate.name in reserved:
        return False
    if not os.path.lexists(candidate):
        return True
    # On case-insensitive filesystems a case-only rename finds the source itself.
    return (
        source is not None
        and candidate.name != source.name
        and candidate.name.casefold() == source.name.casefold()
        and _same_entry(candidate, source)
    )


def _same_entry(a: Path, b: Path) -> bool:
    try:
        return os.path.samestat(os.lstat(a), os.lstat(b))
    except OSError:
        return False


def resolve_collision(
    parent: Path,
    desired_name: str,
    *,
    source: Path | None = None,
    reserved: Collection[str] = (),
) -> Path:
    """Find a path in ``parent`` for ``desired_name`` that is not taken.

    Args:
        parent: Directory the entry stays in
        desired_name: The normalized name
        source: The entry being renamed, if any. A candidate that is only
            another spelling of the source itself is not a collision.
        reserved: Names already claimed in ``parent`` by earlier renames of
            this run, taken even when nothing is on disk yet (dry runs)

    Returns:
        ``parent / desired_name`` when it is free, otherwise the first free
        ``stem_1.ext``, ``stem_2.ext``, ... candidate. Dangling symlinks count
        as taken.
    """
    candidate = parent / desired_name
    if is_free(candidate, source, reserved):
        return candidate

    candidates = (parent / suffixed_name(desired_name, counter) for counter in count(1))
    candidate = next(c for c in candidates if is_free(c, source, reserved))
    logging.debug(f"{desired_name} is taken in {parent}, using {candidate.name}")
    return candidate
