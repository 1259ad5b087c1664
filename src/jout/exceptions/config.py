"""Configuration and invocation exceptions: usage, paths, settings."""

from pathlib import Path
from typing import Any

from .base import JoutError


class ConfigurationError(JoutError):
    """Base class for configuration-related errors."""

    pass


class UsageError(ConfigurationError):
    """Raised when the command line is malformed."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid usage: {reason}", details={"reason": reason})
        self.reason = reason


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value}",
            details={"key": key, "value": str(value), "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class PathError(ConfigurationError):
    """Base class for missing inputs and tools."""

    pass


class InvalidPathError(PathError):
    """Raised when a provided path is invalid."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid path: {path}", details={"path": str(path), "reason": reason})
        self.path = path
        self.reason = reason


class DisassemblerNotFoundError(PathError):
    """Raised when the javap executable cannot be found."""

    def __init__(self, executable: Path):
        super().__init__(
            f"Disassembler not found: {executable}",
            details={"executable": str(executable)},
        )
        self.executable = executable
