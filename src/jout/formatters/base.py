"""Base formatter interface for jout output rendering."""

from abc import ABC, abstractmethod

from ..models import BytecodeReport


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    def render(self, report: BytecodeReport) -> None:
        """Print the formatted report to stdout."""
        print(self.format(report))

    @abstractmethod
    def format(self, report: BytecodeReport) -> str:
        """Return formatted string representation of the report."""
