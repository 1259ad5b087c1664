"""Tests for report formatters."""

import json

import pytest

from jout.analyzer import OutputStats
from jout.disassembly import DisassemblyResult
from jout.formatters import JsonFormatter, TextFormatter
from jout.models import BytecodeReport


@pytest.fixture
def report():
    return BytecodeReport(
        output_dir="out",
        output=OutputStats(
            total_size_bytes=2560, file_count=7, inner_class_count=2, anonymous_class_count=1
        ),
        bytecode=DisassemblyResult(instruction_count=1234, allocation_count=56),
        strategy="parallel",
        invocations=1,
    )


class TestTextFormatter:
    def test_report_lines(self, report):
        assert TextFormatter().format(report).splitlines() == [
            "Total output size is in kilobytes        : 2.5",
            "Total amount of output files             : 7",
            "Total amount of inner output classes     : 2",
            "Total amount of anonymous output classes : 1",
            "Total amount of bytecode instructions    : 1234",
            "Total amount of new allocations          : 56",
        ]

    def test_unknown_size(self, report):
        unknown = BytecodeReport(
            output_dir="out",
            output=OutputStats(-1, 7, 2, 1),
            bytecode=report.bytecode,
            strategy="batch",
            invocations=1,
        )
        first = TextFormatter().format(unknown).splitlines()[0]
        assert first == "Total output size is in kilobytes        : unknown"

    def test_render_prints(self, report, capsys):
        TextFormatter().render(report)
        assert "Total amount of new allocations          : 56" in capsys.readouterr().out


class TestJsonFormatter:
    def test_fields(self, report):
        data = json.loads(JsonFormatter().format(report))
        assert data["total_size_bytes"] == 2560
        assert data["file_count"] == 7
        assert data["top_level_class_count"] == 4
        assert data["instruction_count"] == 1234
        assert data["allocation_count"] == 56
        assert data["strategy"] == "parallel"
        assert data["invocations"] == 1

    def test_unknown_size_is_null(self, report):
        unknown = BytecodeReport("out", OutputStats(-1, 1, 0, 0), report.bytecode, "batch", 1)
        assert json.loads(JsonFormatter().format(unknown))["total_size_bytes"] is None
