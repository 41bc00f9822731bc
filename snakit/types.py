from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Config:
    """Options for a single run, built once by the command line."""

    root_path: Path
    dry_run: bool = False
    include_hidden: bool = False
    verbose: bool = False


@dataclass(frozen=True)
class DirectoryEntry:
    path: Path
    name: str
    is_dir: bool
    is_symlink: bool
    is_hidden: bool


@dataclass(frozen=True)
class RenamePlan:
    """A rename of one entry within its own directory."""

    source: Path
    original_name: str
    target_name: str
    final_path: Path

    def __post_init__(self) -> None:
        if self.final_path.parent != self.source.parent:
            raise ValueError(f"{self.final_path} is not in the same directory as {self.source}")


@dataclass
class WalkStats:
    """Counters collected while walking a tree."""

    entries_seen: int = 0
    renamed: int = 0
    skipped_hidden: int = 0
    skipped_symlinks: int = 0
