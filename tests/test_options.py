"""Tests for LsdirpOptions."""

from pathlib import Path

import pytest

from lsdirp.exceptions import InvalidArgumentError
from lsdirp.options import ALWAYS_IGNORE, LsdirpOptions, merge_ignore_paths, parse_file_type
from lsdirp.types import FileType


def test_defaults():
    options = LsdirpOptions()

    assert options.root == "."
    assert options.flatten is False
    assert options.full_path is False
    assert options.ignore_paths == ALWAYS_IGNORE
    assert options.prepend_path is True
    assert options.file_type is FileType.FILE
    assert options.include_parent_dir is False
    assert options.allow_symlinks is False
    assert options.depth == 0


def test_always_ignore_cannot_be_removed():
    options = LsdirpOptions(ignore_paths=[])
    assert options.ignore_paths == ("**/node_modules", "**/.git")


def test_ignore_paths_are_merged_without_duplicates():
    options = LsdirpOptions(ignore_paths=["**/src", "**/.git", "**/src", "*.log"])
    assert options.ignore_paths == ("**/node_modules", "**/.git", "**/src", "*.log")


def test_single_ignore_pattern_string():
    assert merge_ignore_paths("**/dist") == ("**/node_modules", "**/.git", "**/dist")


def test_replace_keeps_ignore_paths_stable():
    options = LsdirpOptions(ignore_paths=["**/dist"])
    assert LsdirpOptions.create(options, flatten=True).ignore_paths == options.ignore_paths


def test_path_like_root():
    assert LsdirpOptions(root=Path("tests") / "sample_dir").root == str(Path("tests") / "sample_dir")


def test_empty_root_means_current_directory():
    assert LsdirpOptions(root="").root == "."


@pytest.mark.parametrize(
    "value,expected",
    [
        ("file", FileType.FILE),
        ("File", FileType.FILE),
        ("DIRECTORY", FileType.DIRECTORY),
        (FileType.DIRECTORY, FileType.DIRECTORY),
    ],
)
def test_parse_file_type(value, expected):
    assert parse_file_type(value) is expected


@pytest.mark.parametrize("value", ["symlink", FileType.SYMLINK, "folder", 1])
def test_invalid_file_type(value):
    with pytest.raises(InvalidArgumentError):
        LsdirpOptions(file_type=value)


@pytest.mark.parametrize("depth", [-1, 1.5, "2", True])
def test_invalid_depth(depth):
    with pytest.raises(InvalidArgumentError):
        LsdirpOptions(depth=depth)


def test_invalid_root():
    with pytest.raises(InvalidArgumentError):
        LsdirpOptions(root=42)


def test_create_with_overrides():
    base = LsdirpOptions(root="tests")
    options = LsdirpOptions.create(base, depth=2, file_type="directory", flatten=None)

    assert options.root == "tests"
    assert options.depth == 2
    assert options.file_type is FileType.DIRECTORY
    assert options.flatten is False
    assert base.depth == 0


def test_create_without_base():
    assert LsdirpOptions.create(flatten=True) == LsdirpOptions(flatten=True)


def test_create_rejects_unknown_options():
    with pytest.raises(InvalidArgumentError, match="fullPath"):
        LsdirpOptions.create(fullPath=True)


def test_options_are_immutable():
    options = LsdirpOptions()
    with pytest.raises(AttributeError):
        options.depth = 2


@pytest.mark.parametrize(
    "flatten,prepend_path,expected",
    [(True, True, True), (True, False, False), (False, True, False), (False, False, False)],
)
def test_returns_list(flatten, prepend_path, expected):
    assert LsdirpOptions(flatten=flatten, prepend_path=prepend_path).returns_list is expected
