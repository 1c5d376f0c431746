"""Symlink cycle guard scoped to a single lsdirp call."""

from typing import Set

from lsdirp.directory_walker.file_identifier import FileIdentifier


class SymlinkCycleGuard:
    """Records the symbolic links already followed during one traversal.

    A guard is created by lsdirp() for each call that follows symlinks and is
    passed to every walker of that call. Once a link has been recorded, any
    later encounter with it is skipped, so cyclic link graphs terminate.

    Example:
        >>> guard = SymlinkCycleGuard()
        >>> link = FileIdentifier(2049, 1234)
        >>> guard.visit(link)
        True
        >>> guard.visit(FileIdentifier(2049, 1234))
        False
        >>> len(guard)
        1
    """

    def __init__(self) -> None:
        self._visited: Set[FileIdentifier] = set()

    def visit(self, identifier: FileIdentifier) -> bool:
        """Record an identifier.

        Returns:
            True if the identifier was new, False if it had already been recorded.
        """
        if identifier in self._visited:
            return False
        self._visited.add(identifier)
        return True

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._visited

    def __len__(self) -> int:
        return len(self._visited)
