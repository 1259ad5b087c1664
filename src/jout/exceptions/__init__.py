"""Exception hierarchy for jout."""

from .analysis import (
    AnalysisError,
    DirectoryTraversalError,
    ProcessError,
)
from .base import JoutError
from .config import (
    ConfigurationError,
    DisassemblerNotFoundError,
    InvalidConfigError,
    InvalidPathError,
    PathError,
    UsageError,
)

__all__ = [
    "JoutError",
    "AnalysisError",
    "DirectoryTraversalError",
    "ProcessError",
    "ConfigurationError",
    "UsageError",
    "InvalidConfigError",
    "PathError",
    "InvalidPathError",
    "DisassemblerNotFoundError",
]
