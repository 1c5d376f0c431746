"""Recursive directory listing with glob patterns.

This package lists the files or directories under one or more paths or glob
patterns, honouring ignore patterns, depth limits and symlink cycles, and
returns them grouped by directory or as a flat list.
"""

from importlib.metadata import PackageNotFoundError, version

from lsdirp.exceptions import InvalidArgumentError, NegatedRootWarning, PatternError
from lsdirp.lsdirp import lsdirp
from lsdirp.options import ALWAYS_IGNORE, LsdirpOptions
from lsdirp.types import FileType

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("lsdirp")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "ALWAYS_IGNORE",
    "FileType",
    "InvalidArgumentError",
    "LsdirpOptions",
    "NegatedRootWarning",
    "PatternError",
    "lsdirp",
]
