"""
Directory listing for jout.

Listings are sorted by full path string. The parallel strategy slices the
sorted file list into chunks, so the order decides how work is divided.
"""

import os
from pathlib import Path
from typing import Optional, Union

from .exceptions import DirectoryTraversalError
from .logging_config import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]


def _walk(root: PathLike):
    """os.walk that raises instead of silently skipping unreadable directories."""

    def _raise(error: OSError) -> None:
        raise DirectoryTraversalError(Path(error.filename or root), error.strerror or str(error))

    if not os.path.isdir(root):
        raise DirectoryTraversalError(Path(root), "not a directory")

    return os.walk(root, onerror=_raise, followlinks=False)


def list_files(root: PathLike, suffix: Optional[str] = None) -> list[str]:
    """
    List every regular file under a directory tree.

    Args:
        root: Directory to walk
        suffix: Keep only paths ending with this suffix (case-sensitive);
                None or "" keeps everything

    Returns:
        File paths sorted ascending

    Raises:
        DirectoryTraversalError: If the tree cannot be walked
    """
    files = []
    for dirpath, _dirnames, filenames in _walk(root):
        for name in filenames:
            path = os.path.join(dirpath, name)
            if suffix and not path.endswith(suffix):
                continue
            if not os.path.isfile(path):
                continue
            files.append(path)

    files.sort()
    logger.debug("Listed %d files under %s", len(files), root)
    return files


def list_directories(root: PathLike) -> list[str]:
    """
    List a directory and all of its descendant directories.

    Args:
        root: Directory to walk

    Returns:
        Directory paths sorted ascending, root included

    Raises:
        DirectoryTraversalError: If the tree cannot be walked
    """
    directories = [dirpath for dirpath, _dirnames, _filenames in _walk(root)]
    directories.sort()
    logger.debug("Listed %d directories under %s", len(directories), root)
    return directories
