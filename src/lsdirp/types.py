from enum import Enum
from os import PathLike
from typing import Dict, List, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Ordered mapping of each visited directory to its directly matching children
ResultMap = Dict[str, List[str]]


class FileType(Enum):
    """Enumeration of entry types encountered during traversal.

    FILE and DIRECTORY double as the target type selected by the ``file_type``
    option; SYMLINK only classifies directory entries and is never a valid target.

    Attributes:
        FILE: Regular file
        DIRECTORY: Directory
        SYMLINK: Symbolic link
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
