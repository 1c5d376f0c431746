from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for ignore rules.

    Concrete rules decide whether a path should be left out of a listing. The
    directory walker consults them through exclude_entry(), which checks both
    the full path of an entry and, for directories, its bare name, so that a
    directory is only descended when both forms clear the filter.

    Example:
        >>> from lsdirp.exclusion_rules.glob_rules import GlobExclusionRules
        >>> rules = GlobExclusionRules(["**/*.pyc"])
        >>> rules.exclude("pkg/test.pyc")
        True
        >>> rules.exclude("pkg/test.py")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded based on the loaded rules.

        Args:
            path (str): The path to check, using forward slashes as separators.

        Returns:
            bool: True if the path should be excluded, False if it should be included.

        Example:
            >>> class SuffixRules(BaseExclusionRules):
            ...     def exclude(self, path: str) -> bool:
            ...         return path.endswith(".tmp")
            >>> SuffixRules().exclude("build/temp.tmp")
            True
            >>> SuffixRules().exclude("main.py")
            False
        """
        pass

    def exclude_entry(self, path: str, name: str, is_dir: bool = False) -> bool:
        """
        Determine if a directory entry should be skipped.

        Files are checked by path only. Directories are checked by path, by path
        with a trailing slash (so directory-only patterns such as ``build/`` apply),
        and by bare name.

        Args:
            path (str): Path of the entry as it would be listed.
            name (str): Bare name of the entry.
            is_dir (bool): Whether the entry is (or resolves to) a directory.

        Returns:
            bool: True if any checked form is excluded.
        """
        if self.exclude(path):
            return True
        if not is_dir:
            return False
        return self.exclude(path.rstrip("/") + "/") or self.exclude(name)
