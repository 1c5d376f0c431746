"""Interpretation of root specifications.

A root specification is either a plain path or a glob pattern. It is split into
a literal base directory, where traversal starts, and a glob remainder, which
selects entries below that base and decides how deep the traversal goes.
"""

import logging
import os
import warnings
from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional

from wcmatch import glob as wcglob

from lsdirp.exceptions import InvalidArgumentError, NegatedRootWarning
from lsdirp.options import LsdirpOptions

logger = logging.getLogger(__name__)

GLOB_CHARS = frozenset("*?[{")
EXTGLOB_OPENERS = ("@(", "+(", "!(")
NEGATION_CHAR = "!"

ROOT_GLOB_FLAGS = wcglob.GLOBSTAR | wcglob.EXTGLOB | wcglob.BRACE


class PatternScan(NamedTuple):
    """Decomposition of a root specification.

    Attributes:
        base: Leading path segments without glob characters.
        glob: Remaining segments, empty for a plain path.
        negated: Whether the root started with the negation character.
    """

    base: str
    glob: str
    negated: bool


def has_magic(segment: str) -> bool:
    """Return True if a path segment contains glob characters or an extended pattern."""
    return any(char in GLOB_CHARS for char in segment) or any(opener in segment for opener in EXTGLOB_OPENERS)


def scan_pattern(pattern: str) -> PatternScan:
    """Split a root specification into literal base and glob remainder.

    Example:
        >>> scan_pattern("src/**/file.js")
        PatternScan(base='src', glob='**/file.js', negated=False)
        >>> scan_pattern("tests/sample_dir")
        PatternScan(base='tests/sample_dir', glob='', negated=False)
        >>> scan_pattern("/var/log/*.log")
        PatternScan(base='/var/log', glob='*.log', negated=False)
        >>> scan_pattern("!src/**")
        PatternScan(base='src', glob='**', negated=True)
        >>> scan_pattern("utils/!(*.js)")
        PatternScan(base='utils', glob='!(*.js)', negated=False)
    """
    # "!(...)" is an extended pattern rather than a negated root
    negated = pattern.startswith(NEGATION_CHAR) and not pattern.startswith("!(")
    if negated:
        pattern = pattern[1:]

    segments = pattern.split("/")
    for index, segment in enumerate(segments):
        if has_magic(segment):
            base = "/".join(segments[:index])
            glob = "/".join(segments[index:])
            break
    else:
        base, glob = pattern, ""

    if not base and pattern.startswith("/"):
        base = "/"
    return PatternScan(base, glob, negated)


def is_globstar(glob: str) -> bool:
    """Return True if a glob remainder matches across directory boundaries."""
    return "**" in glob


def glob_depth(glob: str) -> int:
    """Return how many directory levels a glob remainder without ``**`` spans.

    Example:
        >>> glob_depth("*.ts")
        1
        >>> glob_depth("*/index.ts")
        2
    """
    return len([segment for segment in glob.split("/") if segment])


def to_posix_path(path: str) -> str:
    """Normalise host path separators to forward slashes."""
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    return path


def resolve_base_path(base: str, options: LsdirpOptions) -> str:
    """Join a literal base with the configured root and resolve it.

    The result is absolute when ``full_path`` is set and relative to the current
    working directory otherwise, with forward slashes in both cases.

    Example:
        >>> resolve_base_path("src", LsdirpOptions(root="tests/sample_dir"))
        'tests/sample_dir/src'
        >>> resolve_base_path("", LsdirpOptions())
        '.'
    """
    joined = os.path.join(str(options.root), base) if base else str(options.root)
    if options.full_path:
        path = os.path.abspath(joined)
    else:
        path = os.path.relpath(joined)
    return to_posix_path(path) or os.curdir


def allow_all(path: str) -> bool:
    return True


def compile_glob(glob: str) -> Callable[[str], bool]:
    """Compile a glob remainder into a predicate over base-relative paths.

    Matching follows shell conventions through wcmatch: ``**`` spans directories,
    extended patterns such as ``!(*.js)`` and ``@(a|b)`` are recognised, and
    braces expand. Names starting with a dot are only matched by a pattern that
    spells out the dot, so ``**`` skips ``.env`` while ``{**/*,**/.*}`` lists it.
    A pattern naming a directory does not select the entries inside it.

    Example:
        >>> is_path_allowed = compile_glob("**/!(*.ts)")
        >>> is_path_allowed("sub_dir/notes.txt"), is_path_allowed("sub_dir/helper.ts")
        (True, False)
        >>> compile_glob("**")(".env")
        False
    """
    matcher = wcglob.compile(glob, flags=ROOT_GLOB_FLAGS)

    def is_path_allowed(path: str) -> bool:
        return bool(matcher.match(path))

    return is_path_allowed


@dataclass(frozen=True)
class RootMatcher:
    """Traversal plan for a single root specification.

    Attributes:
        spec: The root specification as given.
        base_path: Resolved directory where traversal starts.
        glob: Glob remainder matched against paths relative to base_path.
        depth: Levels to descend below base_path; 0 means unbounded.
        is_path_allowed: Predicate over paths relative to base_path.
    """

    spec: str
    base_path: str
    glob: str
    depth: int
    is_path_allowed: Callable[[str], bool] = allow_all

    @property
    def is_recursive(self) -> bool:
        return self.depth != 1


def interpret_root(spec: str, options: LsdirpOptions) -> Optional[RootMatcher]:
    """Resolve a root specification into a RootMatcher.

    Args:
        spec: A path or glob pattern.
        options: Resolved options for the call.

    Returns:
        The matcher, or None if the root is negated and must be skipped.

    Raises:
        InvalidArgumentError: If spec is not a non-empty string.
    """
    if not isinstance(spec, str) or not spec:
        raise InvalidArgumentError(f"Root specification must be a non-empty string: {spec!r}")

    scan = scan_pattern(to_posix_path(spec))
    if scan.negated:
        warnings.warn(NegatedRootWarning(spec), stacklevel=3)
        return None

    base_path = resolve_base_path(scan.base, options)
    if not scan.glob:
        matcher = RootMatcher(spec, base_path, "", options.depth)
    elif is_globstar(scan.glob):
        matcher = RootMatcher(spec, base_path, scan.glob, 0, compile_glob(scan.glob))
    else:
        matcher = RootMatcher(spec, base_path, scan.glob, glob_depth(scan.glob), compile_glob(scan.glob))

    logger.debug("Root %r starts at %r (glob %r, depth %d)", spec, matcher.base_path, matcher.glob, matcher.depth)
    return matcher
