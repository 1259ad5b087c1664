"""Size and nesting statistics over a list of class files."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .logging_config import get_logger

logger = get_logger(__name__)

SIZE_UNKNOWN = -1


class ClassKind(Enum):
    """How a class file name marks nesting: Foo, Foo$Bar or Foo$1."""

    TOP_LEVEL = "top_level"
    INNER = "inner"
    ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class OutputStats:
    """Aggregate figures for a compiled output directory.

    Attributes:
        total_size_bytes: Sum of file sizes, or SIZE_UNKNOWN (-1) when a
            size lookup failed
        file_count: Number of class files listed
        inner_class_count: Files named Outer$Name
        anonymous_class_count: Files named Outer$<digit>...
    """

    total_size_bytes: int = 0
    file_count: int = 0
    inner_class_count: int = 0
    anonymous_class_count: int = 0

    @property
    def top_level_class_count(self) -> int:
        return self.file_count - self.inner_class_count - self.anonymous_class_count

    @property
    def size_known(self) -> bool:
        return self.total_size_bytes != SIZE_UNKNOWN

    @property
    def total_size_kb(self) -> float:
        return self.total_size_bytes / 1024.0


def classify_class_file(path: str) -> ClassKind:
    """Classify by the character following the first '$' in the path."""
    idx = path.find("$")
    if idx == -1:
        return ClassKind.TOP_LEVEL
    following = path[idx + 1 : idx + 2]
    if following.isdecimal():
        return ClassKind.ANONYMOUS
    return ClassKind.INNER


def analyze_output(files: Sequence[str]) -> OutputStats:
    """Compute size and class counts for the given class files.

    Sizes come from file metadata. If any lookup fails the total size is
    reported as SIZE_UNKNOWN and no further sizes are read; the counts
    always cover the whole listing.
    """
    inner = 0
    anonymous = 0
    for path in files:
        kind = classify_class_file(path)
        if kind is ClassKind.INNER:
            inner += 1
        elif kind is ClassKind.ANONYMOUS:
            anonymous += 1

    total_size = 0
    for path in files:
        try:
            total_size += os.stat(path).st_size
        except OSError as e:
            logger.warning("Cannot read size of %s: %s; total size unknown", path, e)
            total_size = SIZE_UNKNOWN
            break

    return OutputStats(
        total_size_bytes=total_size,
        file_count=len(files),
        inner_class_count=inner,
        anonymous_class_count=anonymous,
    )
