"""Ignore rules compiled from glob patterns with .gitignore semantics."""

from typing import Iterable, List, Optional

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from lsdirp.exceptions import PatternError

from .base_rules import BaseExclusionRules


def compile_pattern(pattern: object) -> GitWildMatchPattern:
    """Compile a single glob pattern, raising PatternError on bad input.

    Args:
        pattern: The pattern to compile. Must be a non-empty string.

    Returns:
        The compiled pathspec pattern.

    Raises:
        PatternError: If the pattern is not a non-empty string or is malformed.

    Example:
        >>> compile_pattern("**/*.js").include
        True
        >>> compile_pattern("")
        Traceback (most recent call last):
        ...
        lsdirp.exceptions.PatternError: Invalid pattern: '' (patterns must be non-empty strings)
    """
    if not isinstance(pattern, str) or not pattern.strip():
        raise PatternError(pattern, "patterns must be non-empty strings")
    try:
        return GitWildMatchPattern(pattern)
    except ValueError as e:
        raise PatternError(pattern, str(e)) from e


def strip_relative_prefix(path: str) -> str:
    """Remove leading ``./`` and ``../`` segments from a relative path.

    Recursive ``**`` tokens never match a leading dot segment, so relative paths
    are reduced to their meaningful part before matching.

    Example:
        >>> strip_relative_prefix("./tests/sample_dir/src")
        'tests/sample_dir/src'
        >>> strip_relative_prefix("../../lib/a.js")
        'lib/a.js'
        >>> strip_relative_prefix(".")
        ''
        >>> strip_relative_prefix(".env")
        '.env'
    """
    segments = path.split("/")
    index = 0
    while index < len(segments) and segments[index] in (".", ".."):
        index += 1
    return "/".join(segments[index:])


class GlobExclusionRules(BaseExclusionRules):
    """Ignore rules compiled once from a list of glob patterns.

    Patterns use .gitignore syntax through the pathspec library: ``*``, ``?``,
    character classes, ``**`` across directories, and anchoring for patterns
    containing a slash. A pattern naming a directory also excludes everything
    below it.

    In relative mode (the default) leading ``./`` and ``../`` segments are
    stripped from every path before matching. In absolute mode paths are
    matched as given, so ignore patterns must either be absolute or start
    with ``**/``.

    Attributes:
        patterns (List[str]): The source patterns, in the order given.
        absolute (bool): Whether paths are matched in absolute mode.
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GlobExclusionRules(["**/node_modules", "**/.git"])
        >>> rules.exclude("./node_modules")
        True
        >>> rules.exclude("./tests/sample_dir/.git/HEAD")
        True
        >>> rules.exclude("./src/index.ts")
        False
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None, absolute: bool = False):
        """Initialize GlobExclusionRules.

        Args:
            patterns: Glob patterns to compile. Defaults to no patterns.
            absolute: Match paths in absolute mode. Defaults to False.

        Raises:
            PatternError: If any pattern is not a non-empty string or is malformed.
        """
        self.absolute = absolute
        self.patterns: List[str] = []
        self.spec = PathSpec([])

        if patterns is not None:
            compiled = []
            for pattern in patterns:
                compiled.append(compile_pattern(pattern))
                self.patterns.append(pattern)
            self.spec = PathSpec(compiled)

    def exclude(self, path: str) -> bool:
        """Check if a path matches any of the compiled patterns.

        Args:
            path: The path to check, using forward slashes as separators.

        Returns:
            bool: True if the path matches. An empty path (e.g. ``.`` in relative
                mode) never matches.
        """
        if not self.absolute:
            path = strip_relative_prefix(path)
        if not path or path == "/":
            return False
        return bool(self.spec.match_file(path))
