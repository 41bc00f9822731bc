"""Tests for name normalization."""

import pytest

from snakit.normalize import collapse_whitespace, is_hidden_name, normalize_name, split_name


def test_split_name() -> None:
    """Test stem and extension splitting."""
    assert split_name("report.txt") == ("report", "txt")
    assert split_name("archive.tar.gz") == ("archive.tar", "gz")
    assert split_name("README") == ("README", None)
    assert split_name("trailing.") == ("trailing", "")

    # A leading dot is never the separator
    assert split_name(".bashrc") == (".bashrc", None)
    assert split_name(".env.local") == (".env", "local")


def test_is_hidden_name() -> None:
    assert is_hidden_name(".git")
    assert is_hidden_name(".tmp file.txt")
    assert not is_hidden_name("git")
    assert not is_hidden_name("file.")


def test_collapse_whitespace() -> None:
    """Test whitespace collapsing."""
    assert collapse_whitespace("tmp file") == "tmp_file"
    assert collapse_whitespace("  Padded   Name  ") == "padded_name"
    assert collapse_whitespace("tab\tand\nnewline") == "tab_and_newline"
    assert collapse_whitespace("already_snake") == "already_snake"

    # Punctuation is left alone
    assert collapse_whitespace("Rock & Roll-Mix (2)") == "rock_&_roll-mix_(2)"


def test_normalize_name() -> None:
    """Test snake_case conversion of entry names."""
    assert normalize_name("tmp file.txt", is_hidden=False) == "tmp_file.txt"
    assert normalize_name("another file.txt", is_hidden=False) == "another_file.txt"
    assert normalize_name("My Folder", is_hidden=False) == "my_folder"
    assert normalize_name("Quarterly  Report.Final.PDF", is_hidden=False) == "quarterly_report.final.PDF"

    # Whitespace right before the extension is trimmed from the stem
    assert normalize_name("draft .md", is_hidden=False) == "draft.md"

    # Extension keeps its case and content
    assert normalize_name("Photo.JPG", is_hidden=False) == "photo.JPG"
    assert normalize_name("notes.Old Copy", is_hidden=False) == "notes.Old Copy"


def test_normalize_hidden_name() -> None:
    """Test that the leading dot of hidden names is preserved."""
    assert normalize_name(".tmp file.txt", is_hidden=True) == ".tmp_file.txt"
    assert normalize_name(".secret file", is_hidden=True) == ".secret_file"
    assert normalize_name(".Bash Profile", is_hidden=True) == ".bash_profile"
    assert normalize_name(".gitignore", is_hidden=True) == ".gitignore"
    assert normalize_name(". spaced", is_hidden=True) == ".spaced"


def test_normalize_keeps_names_without_stem() -> None:
    """Names that would lose their whole stem are left unchanged."""
    assert normalize_name("   ", is_hidden=False) == "   "
    assert normalize_name(" .txt", is_hidden=False) == " .txt"
    assert normalize_name(".  ", is_hidden=True) == ".  "

    # A visible name never turns into a hidden one
    assert normalize_name("  .profile.txt", is_hidden=False) == "  .profile.txt"
    assert normalize_name(" .env.Local Copy", is_hidden=False) == " .env.Local Copy"


@pytest.mark.parametrize(
    "name",
    [
        "tmp file.txt",
        "Already_Lower.TXT",
        "  lots   of   space  ",
        "Mixed\tWhitespace Here.tar.gz",
        ".hidden Thing.cfg",
        "trailing dot.",
        "ÉCOLE Élémentaire.pdf",
        "a .b",
    ],
)
def test_normalize_is_idempotent(name: str) -> None:
    is_hidden = is_hidden_name(name)
    once = normalize_name(name, is_hidden)
    assert normalize_name(once, is_hidden_name(once)) == once


def test_normalize_unchanged_when_already_snake_case() -> None:
    for name in ["tmp_file.txt", "test", ".config", "data-2024.csv", "a.B"]:
        assert normalize_name(name, is_hidden_name(name)) == name
