"""JSON formatter for jout."""

import json

from .base import BaseFormatter
from ..models import BytecodeReport


class JsonFormatter(BaseFormatter):
    """Render the report as a JSON object."""

    def format(self, report: BytecodeReport) -> str:
        output = report.output
        data = {
            "output_dir": report.output_dir,
            "total_size_bytes": output.total_size_bytes if output.size_known else None,
            "file_count": output.file_count,
            "top_level_class_count": output.top_level_class_count,
            "inner_class_count": output.inner_class_count,
            "anonymous_class_count": output.anonymous_class_count,
            "instruction_count": report.bytecode.instruction_count,
            "allocation_count": report.bytecode.allocation_count,
            "strategy": report.strategy,
            "invocations": report.invocations,
        }
        return json.dumps(data, indent=2)
