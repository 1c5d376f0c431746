"""Recursive listing of files and directories from paths and glob patterns.

This module provides the lsdirp() entry point, which resolves each root
pattern, walks the matching directories, and returns either a mapping of
directories to their matching children or a flat list of paths.
"""

import logging
from typing import Any, Iterable, List, Optional, Union

from lsdirp.directory_walker.cycle_guard import SymlinkCycleGuard
from lsdirp.directory_walker.directory_walker import DirectoryWalker
from lsdirp.exceptions import InvalidArgumentError
from lsdirp.exclusion_rules.glob_rules import GlobExclusionRules
from lsdirp.options import LsdirpOptions
from lsdirp.result_map import shape_result
from lsdirp.root_pattern import interpret_root
from lsdirp.types import ResultMap

logger = logging.getLogger(__name__)


def lsdirp(
    root_specs: Iterable[str], options: Optional[LsdirpOptions] = None, **overrides: Any
) -> Union[ResultMap, List[str]]:
    """List the entries under one or more paths or glob patterns.

    Roots are processed in order, each to completion before the next. All roots
    share one ignore filter and, when symlinks are followed, one cycle guard, both
    created for this call only.

    Args:
        root_specs: Paths or glob patterns, resolved against ``options.root``.
        options: Options for the call. Defaults to LsdirpOptions().
        **overrides: Individual option values applied on top of ``options``,
            e.g. ``flatten=True`` or ``file_type="directory"``.

    Returns:
        A flat list of paths when both ``flatten`` and ``prepend_path`` are set,
        otherwise a mapping of every visited directory to its matching children,
        in traversal order.

    Raises:
        InvalidArgumentError: If root_specs is not a sequence of non-empty strings
            or an option is invalid.
        PatternError: If an ignore pattern is malformed.
        PermissionError: If a directory cannot be listed.
        OSError: For any other filesystem error except a missing root, which
            simply contributes nothing.

    Warns:
        NegatedRootWarning: For each root starting with ``!``; the root is skipped.

    Example:
        >>> lsdirp(["src"], root="tests/sample_dir")  # doctest: +SKIP
        {'tests/sample_dir/src': ['tests/sample_dir/src/index.ts', ...]}
        >>> lsdirp(["src/**/*.ts"], root="tests/sample_dir", flatten=True)  # doctest: +SKIP
        ['tests/sample_dir/src/index.ts', 'tests/sample_dir/src/sub_dir/helper.ts']
    """
    if isinstance(root_specs, (str, bytes)):
        raise InvalidArgumentError(f"Root specifications must be a sequence of strings, not {root_specs!r}")

    options = LsdirpOptions.create(options, **overrides)
    exclusion_rules = GlobExclusionRules(options.ignore_paths, absolute=options.full_path)
    cycle_guard = SymlinkCycleGuard() if options.allow_symlinks else None
    result: ResultMap = {}

    for spec in root_specs:
        matcher = interpret_root(spec, options)
        if matcher is None:
            continue

        walker = DirectoryWalker(
            matcher,
            exclusion_rules,
            file_type=options.file_type,
            prepend_path=options.prepend_path,
            cycle_guard=cycle_guard,
        )
        try:
            walker.walk(result)
        except OSError as e:
            logger.error("Unable to list %r: %s", spec, e)
            raise

    return shape_result(result, options)
