"""Resolved configuration for a single lsdirp call.

Options are an immutable record built fresh for every call. Each field has an
explicit default, and validation and normalisation happen once in
``__post_init__``, so the traversal code can rely on well-formed values.
"""

import os
from dataclasses import dataclass, replace
from typing import Any, Iterable, Optional, Tuple, Union

from lsdirp.exceptions import InvalidArgumentError
from lsdirp.types import FileType, PathType

# Always ignored at any depth; callers can only add to this list
ALWAYS_IGNORE: Tuple[str, ...] = ("**/node_modules", "**/.git")


def merge_ignore_paths(patterns: Union[str, Iterable[str], None]) -> Tuple[str, ...]:
    """Merge caller ignore patterns with the built-in ones.

    The built-ins come first, caller patterns follow in their original order,
    and duplicates are dropped.

    Args:
        patterns: Caller supplied patterns. A single string is treated as one pattern.

    Returns:
        The merged, deduplicated patterns.

    Example:
        >>> merge_ignore_paths(["**/dist", "**/.git", "**/dist"])
        ('**/node_modules', '**/.git', '**/dist')
        >>> merge_ignore_paths(None)
        ('**/node_modules', '**/.git')
    """
    if patterns is None:
        patterns = ()
    elif isinstance(patterns, str):
        patterns = (patterns,)

    merged = list(ALWAYS_IGNORE)
    for pattern in patterns:
        if pattern not in merged:
            merged.append(pattern)
    return tuple(merged)


def parse_file_type(value: Union[str, FileType]) -> FileType:
    """Convert a file type option into a FileType usable as a traversal target.

    Strings are matched case-insensitively, so ``"File"`` and ``"directory"``
    are both accepted.

    Raises:
        InvalidArgumentError: If the value does not name a file or directory target.

    Example:
        >>> parse_file_type("Directory")
        <FileType.DIRECTORY: 'directory'>
    """
    if isinstance(value, str):
        try:
            value = FileType(value.lower())
        except ValueError:
            raise InvalidArgumentError(f"Invalid file_type: {value!r}. Must be one of: 'file', 'directory'")
    if not isinstance(value, FileType) or value is FileType.SYMLINK:
        raise InvalidArgumentError(f"Invalid file_type: {value!r}. Must be one of: 'file', 'directory'")
    return value


@dataclass(frozen=True)
class LsdirpOptions:
    """Options controlling what lsdirp lists and how results are shaped.

    Attributes:
        root: Base directory joined in front of every root specification.
        flatten: Return a flat list instead of a directory mapping. Only honoured
            when prepend_path is enabled.
        full_path: Resolve paths to absolute form instead of cwd-relative form.
        ignore_paths: Glob patterns to ignore. Always contains ALWAYS_IGNORE.
        prepend_path: Prefix listed entries with their directory path. When False,
            entries are bare names and the mapping is always returned.
        file_type: Which entry kind is collected, FileType.FILE or FileType.DIRECTORY.
        include_parent_dir: Include each visited directory itself in flattened
            directory listings.
        allow_symlinks: Follow symbolic links, guarding against cycles.
        depth: Levels of nesting to collect below each root; 0 means unbounded.

    Example:
        >>> options = LsdirpOptions(ignore_paths=["**/dist"], file_type="directory")
        >>> options.ignore_paths
        ('**/node_modules', '**/.git', '**/dist')
        >>> options.file_type
        <FileType.DIRECTORY: 'directory'>
    """

    root: PathType = "."
    flatten: bool = False
    full_path: bool = False
    ignore_paths: Tuple[str, ...] = ALWAYS_IGNORE
    prepend_path: bool = True
    file_type: FileType = FileType.FILE
    include_parent_dir: bool = False
    allow_symlinks: bool = False
    depth: int = 0

    def __post_init__(self) -> None:
        try:
            root = os.fspath(self.root)
        except TypeError:
            raise InvalidArgumentError(f"Invalid root: {self.root!r}. Must be a path")
        if not isinstance(root, str):
            raise InvalidArgumentError(f"Invalid root: {self.root!r}. Must be a text path")

        if isinstance(self.depth, bool) or not isinstance(self.depth, int) or self.depth < 0:
            raise InvalidArgumentError(f"Invalid depth: {self.depth!r}. Must be a non-negative integer")

        # Frozen dataclass: normalised values are written through object.__setattr__
        object.__setattr__(self, "root", root or os.curdir)
        object.__setattr__(self, "ignore_paths", merge_ignore_paths(self.ignore_paths))
        object.__setattr__(self, "file_type", parse_file_type(self.file_type))

    @classmethod
    def create(cls, options: Optional["LsdirpOptions"] = None, **overrides: Any) -> "LsdirpOptions":
        """Build options from an existing instance and keyword overrides.

        Overrides set to None keep the current value, so callers can pass through
        optional settings without checking each one.

        Raises:
            InvalidArgumentError: If an override names an unknown option or a value
                fails validation.

        Example:
            >>> base = LsdirpOptions(root="tests")
            >>> LsdirpOptions.create(base, flatten=True, depth=None).root
            'tests'
        """
        if options is None:
            options = cls()
        unknown = sorted(set(overrides) - set(cls.__dataclass_fields__))
        if unknown:
            raise InvalidArgumentError(f"Unknown option(s): {', '.join(unknown)}")
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(options, **changes)

    @property
    def returns_list(self) -> bool:
        """Whether a call with these options returns a flat list."""
        return self.flatten and self.prepend_path
