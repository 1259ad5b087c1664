"""Plain-text report with fixed-width labels."""

from .base import BaseFormatter
from ..models import BytecodeReport

LABEL_WIDTH = 41


def _line(label: str, value: object) -> str:
    return f"{label.ljust(LABEL_WIDTH)}: {value}"


class TextFormatter(BaseFormatter):
    """Render the six report lines, one figure per line."""

    def format(self, report: BytecodeReport) -> str:
        output = report.output
        size = f"{output.total_size_kb:.1f}" if output.size_known else "unknown"
        lines = [
            _line("Total output size is in kilobytes", size),
            _line("Total amount of output files", output.file_count),
            _line("Total amount of inner output classes", output.inner_class_count),
            _line("Total amount of anonymous output classes", output.anonymous_class_count),
            _line("Total amount of bytecode instructions", report.bytecode.instruction_count),
            _line("Total amount of new allocations", report.bytecode.allocation_count),
        ]
        return "\n".join(lines)
