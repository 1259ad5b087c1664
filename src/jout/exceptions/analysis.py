"""Analysis-related exceptions: directory traversal and disassembler runs."""

from pathlib import Path
from typing import Optional, Sequence

from .base import JoutError


class AnalysisError(JoutError):
    """Base class for analysis-related errors."""
    pass


class DirectoryTraversalError(AnalysisError):
    """Raised when a directory tree cannot be walked."""

    def __init__(self, directory: Path, reason: str):
        super().__init__(
            f"Cannot traverse directory: {directory}",
            details={"directory": str(directory), "reason": reason},
        )
        self.directory = directory
        self.reason = reason


class ProcessError(AnalysisError):
    """Raised when the disassembler cannot be run or exits with an error.

    ``exit_code`` is None when the process never started or was killed
    before exiting on its own.
    """

    def __init__(
        self,
        command: Sequence[str],
        reason: str,
        exit_code: Optional[int] = None,
        output: str = "",
    ):
        details = {"executable": command[0] if command else "", "reason": reason}
        if exit_code is not None:
            details["exit_code"] = str(exit_code)

        super().__init__("Failed to gather bytecode information", details=details)
        self.command = list(command)
        self.reason = reason
        self.exit_code = exit_code
        self.output = output
