"""File identifier for uniquely identifying filesystem entries by device and inode."""

import os
from typing import Any


class FileIdentifier:
    """Class for uniquely identifying an entry by its device and inode.

    The combination of device ID and inode number identifies a file, directory,
    or symbolic link on the host. The symlink cycle guard records these pairs.

    Attributes:
        device_id (int): The device ID from stat information.
        inode_number (int): The inode number from stat information.

    Note:
        On Windows, inode numbers might be handled differently than on Unix systems,
        but Python's os.stat implementation provides values that can be used
        for uniquely identifying files.
    """

    def __init__(self, device_id: int, inode_number: int):
        """Initialize a FileIdentifier.

        Args:
            device_id: The st_dev value of the entry.
            inode_number: The st_ino value of the entry.
        """
        self.device_id = device_id
        self.inode_number = inode_number

    @classmethod
    def from_stat(cls, stat_result: os.stat_result) -> "FileIdentifier":
        """Create an identifier from the result of a stat or lstat call.

        Args:
            stat_result: Stat information for the entry. For a symbolic link this
                is the lstat result, which identifies the link rather than its target.

        Returns:
            A FileIdentifier holding the device and inode of the entry.
        """
        return cls(stat_result.st_dev, stat_result.st_ino)

    def __eq__(self, other: Any) -> bool:
        """Compare with another identifier.

        Args:
            other: The object to compare with.

        Returns:
            True if other is a FileIdentifier for the same device and inode.
        """
        if not isinstance(other, FileIdentifier):
            return False
        return self.device_id == other.device_id and self.inode_number == other.inode_number

    def __hash__(self) -> int:
        """Hash the identifier so it can be stored in sets.

        Returns:
            A hash of the device and inode pair.
        """
        return hash((self.device_id, self.inode_number))

    def __repr__(self) -> str:
        """Return a representation showing the device and inode.

        Returns:
            A string of the form ``FileIdentifier(device_id=..., inode_number=...)``.
        """
        return f"FileIdentifier(device_id={self.device_id}, inode_number={self.inode_number})"
