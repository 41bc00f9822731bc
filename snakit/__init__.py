"""A command-line tool that renames files and folders to snake_case."""

from .collisions import resolve_collision
from .normalize import normalize_name
from .types import Config
from .walker import walk

__version__ = "0.1.0"

__all__ = ["Config", "normalize_name", "resolve_collision", "walk"]
