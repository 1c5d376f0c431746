"""Depth-first directory walker producing an ordered directory mapping.

This module provides the DirectoryWalker class, which lists the entries under a
single root, applying ignore rules, the root's glob, a depth limit, and the
symlink policy of the call.
"""

import errno
import logging
import os
import posixpath
import stat
from typing import List, Optional, Tuple

from lsdirp.directory_walker.cycle_guard import SymlinkCycleGuard
from lsdirp.directory_walker.file_identifier import FileIdentifier
from lsdirp.exclusion_rules.base_rules import BaseExclusionRules
from lsdirp.root_pattern import RootMatcher
from lsdirp.types import FileType, ResultMap

logger = logging.getLogger(__name__)


class DirectoryWalker:
    """Walks the tree below a root and collects matching entries per directory.

    Each visited directory is registered in the result mapping before its entries
    are scanned, so iterating the mapping always yields a directory before any of
    its descendants. Entries are processed in the order the filesystem returns
    them; no sorting is applied.

    For every entry the walker applies, in order:

    1. The ignore rules, on the entry path and, for directories, the bare name.
    2. The type rule. Files are listed when the target type is FILE and the glob
       accepts them. Directories are listed when the target type is DIRECTORY and
       the glob accepts them, and are descended while depth remains.
    3. For symbolic links, only when a cycle guard is present: the link itself is
       recorded by device and inode, a link seen before is skipped, and otherwise
       the link is treated as its target's type.

    Attributes:
        matcher (RootMatcher): Base path, glob predicate and depth for this root.
        exclusion_rules (Optional[BaseExclusionRules]): Ignore rules shared by all roots.
        file_type (FileType): Which entry kind is listed.
        prepend_path (bool): List entries as ``dir/name`` rather than ``name``.
        cycle_guard (Optional[SymlinkCycleGuard]): Guard shared by all roots of the
            call; symlinks are skipped when None.

    Example:
        >>> from lsdirp.options import LsdirpOptions
        >>> from lsdirp.root_pattern import interpret_root
        >>> matcher = interpret_root("src", LsdirpOptions())  # doctest: +SKIP
        >>> DirectoryWalker(matcher, None).walk()  # doctest: +SKIP
        {'src': ['src/main.py'], 'src/utils': ['src/utils/helpers.py']}
    """

    def __init__(
        self,
        matcher: RootMatcher,
        exclusion_rules: Optional[BaseExclusionRules] = None,
        *,
        file_type: FileType = FileType.FILE,
        prepend_path: bool = True,
        cycle_guard: Optional[SymlinkCycleGuard] = None,
    ) -> None:
        self.matcher = matcher
        self.exclusion_rules = exclusion_rules
        self.file_type = file_type
        self.prepend_path = prepend_path
        self.cycle_guard = cycle_guard

    @property
    def follow_symlinks(self) -> bool:
        return self.cycle_guard is not None

    def walk(self, result: Optional[ResultMap] = None) -> ResultMap:
        """Walk the tree below the matcher's base path.

        Args:
            result: Mapping to add directories to. A new one is created if omitted.

        Returns:
            The mapping, with one key per visited directory. A base path that does
            not exist adds nothing.

        Raises:
            NotADirectoryError: If the base path is not a directory.
            PermissionError: If the base path cannot be examined or a directory
                cannot be listed.
        """
        if result is None:
            result = {}

        base_path = self.matcher.base_path
        if self._is_ignored(base_path, posixpath.basename(base_path.rstrip("/")), True):
            logger.debug("Skipping ignored root %s", base_path)
            return result

        try:
            os.stat(base_path)
        except FileNotFoundError:
            logger.debug("Nothing to list: %s does not exist", base_path)
            return result

        self._enter(base_path, "", self.matcher.depth, result)
        return result

    def _enter(self, dir_path: str, relative_dir: str, remaining_depth: int, result: ResultMap) -> None:
        """Register a directory, then scan it and process its entries."""
        children: List[str] = []
        result[dir_path] = children

        with os.scandir(dir_path) as it:
            entries = list(it)

        for entry in entries:
            name = entry.name
            path = posixpath.join(dir_path, name)
            relative_path = posixpath.join(relative_dir, name) if relative_dir else name

            entry_type = self._get_entry_type(entry)
            link_id: Optional[FileIdentifier] = None
            if entry_type is FileType.SYMLINK:
                if not self.follow_symlinks:
                    continue
                resolved = self._resolve_symlink(entry, path)
                if resolved is None:
                    continue
                link_id, entry_type = resolved
            if entry_type is None:
                continue

            is_dir = entry_type is FileType.DIRECTORY
            if self._is_ignored(path, name, is_dir):
                continue

            if link_id is not None and self.cycle_guard is not None and not self.cycle_guard.visit(link_id):
                logger.debug("Skipping already visited symlink %s", path)
                continue

            if entry_type is self.file_type and self._is_allowed(relative_path, is_dir):
                children.append(path if self.prepend_path else name)

            # A remaining depth of 1 means this directory is the last level collected
            if is_dir and remaining_depth != 1:
                self._enter(path, relative_path, max(remaining_depth - 1, 0), result)

    def _get_entry_type(self, entry: os.DirEntry) -> Optional[FileType]:
        """Classify an entry without following symlinks.

        Returns:
            The entry type, or None for fifos, sockets, devices and the like.
        """
        if entry.is_symlink():
            return FileType.SYMLINK
        if entry.is_dir(follow_symlinks=False):
            return FileType.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return FileType.FILE
        return None

    def _resolve_symlink(self, entry: os.DirEntry, path: str) -> Optional[Tuple[FileIdentifier, Optional[FileType]]]:
        """Get a symlink's own identity and the type of its target.

        Returns:
            The link identifier and target type, or None for a dangling or
            self-referencing link.
        """
        link_stat = entry.stat(follow_symlinks=False)
        try:
            target_stat = entry.stat(follow_symlinks=True)
        except OSError as e:
            if e.errno not in (errno.ENOENT, errno.ELOOP):
                raise
            logger.debug("Skipping unresolvable symlink %s: %s", path, e)
            return None

        target_type: Optional[FileType] = None
        if stat.S_ISDIR(target_stat.st_mode):
            target_type = FileType.DIRECTORY
        elif stat.S_ISREG(target_stat.st_mode):
            target_type = FileType.FILE
        return FileIdentifier.from_stat(link_stat), target_type

    def _is_ignored(self, path: str, name: str, is_dir: bool) -> bool:
        if self.exclusion_rules is None:
            return False
        return self.exclusion_rules.exclude_entry(path, name, is_dir)

    def _is_allowed(self, relative_path: str, is_dir: bool) -> bool:
        is_path_allowed = self.matcher.is_path_allowed
        if is_path_allowed(relative_path):
            return True
        # Directory-only globs such as "*/" need the trailing slash to match
        return is_dir and is_path_allowed(relative_path + "/")
