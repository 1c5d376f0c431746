"""Shaping of traversal results into the form returned to callers."""

from typing import List, Set, Union

from lsdirp.options import LsdirpOptions
from lsdirp.types import FileType, ResultMap


def flatten_result(result: ResultMap, include_parent_dirs: bool = False) -> List[str]:
    """Concatenate the child lists of a result mapping in key order.

    Args:
        result: Mapping of directories to their matching children.
        include_parent_dirs: Also list each directory key, just before its
            children. The output is then deduplicated, keeping first occurrences,
            so a directory that is both a key and a listed child appears once.

    Returns:
        The flattened paths.

    Example:
        >>> result = {"src": ["src/sub"], "src/sub": ["src/sub/deep"], "src/sub/deep": []}
        >>> flatten_result(result)
        ['src/sub', 'src/sub/deep']
        >>> flatten_result(result, include_parent_dirs=True)
        ['src', 'src/sub', 'src/sub/deep']
    """
    if not include_parent_dirs:
        return [path for children in result.values() for path in children]

    paths: List[str] = []
    seen: Set[str] = set()
    for directory, children in result.items():
        for path in (directory, *children):
            if path not in seen:
                seen.add(path)
                paths.append(path)
    return paths


def shape_result(result: ResultMap, options: LsdirpOptions) -> Union[ResultMap, List[str]]:
    """Return the mapping or its flattened form, as the options request.

    A flat list is only produced when both ``flatten`` and ``prepend_path`` are
    set; bare names cannot be flattened meaningfully. Parent directories are only
    included for directory listings.
    """
    if not options.returns_list:
        return result
    include_parent_dirs = options.include_parent_dir and options.file_type is FileType.DIRECTORY
    return flatten_result(result, include_parent_dirs=include_parent_dirs)
