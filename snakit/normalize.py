"""Filename normalization for snakit."""

import re
from typing import Final

WHITESPACE_PATTERN: Final = re.compile(r"\s+")


def is_hidden_name(name: str) -> bool:
    """Check if a name marks a hidden entry (a leading dot)."""
    return name.startswith(".")


def split_name(name: str) -> tuple[str, str | None]:
    """Split a name into its stem and extension.

    The separator is the last dot that is not the first character, so
    ``.bashrc`` has no extension and ``archive.tar.gz`` has extension ``gz``.

    Returns:
        A ``(stem, extension)`` pair. The extension is None when the name has
        no separator, and an empty string for a name that ends with a dot.
    """
    index = name.rfind(".")
    if index <= 0:
        return name, None
    return name[:index], name[index + 1 :]


def join_name(stem: str, extension: str | None) -> str:
    if extension is None:
        return stem
    return f"{stem}.{extension}"


def collapse_whitespace(text: str) -> str:
    """Convert text to snake_case by collapsing whitespace.

    Leading and trailing whitespace is removed, every run of whitespace becomes
    a single underscore and the result is lowercased. Punctuation is kept.
    """
    return WHITESPACE_PATTERN.sub("_", text.strip()).lower()


def normalize_name(name: str, is_hidden: bool) -> str:
    """Compute the snake_case name for a directory entry.

    Args:
        name: The entry name, without any directory part
        is_hidden: Whether the entry is hidden; its leading dot is kept and
            never taken as the extension separator

    Returns:
        The target name. The extension keeps its original case. A name whose
        stem would become empty, or a visible name that would start with a
        dot, is returned unchanged.
    """
    prefix = ""
    rest = name
    if is_hidden and is_hidden_name(name):
        prefix, rest = ".", name[1:]

    stem, extension = split_name(rest)
    new_stem = collapse_whitespace(stem)
    if not new_stem:
        return name
    # Only an entry that is already hidden may carry the leading dot
    if not prefix and new_stem.startswith("."):
        return name

    return prefix + join_name(new_stem, extension)
