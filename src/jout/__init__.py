"""
jout - statistics for compiled JVM output

Walks a directory of .class files, runs the JDK's javap disassembler over
them and reports output size, inner/anonymous class counts and the number
of bytecode and allocation instructions.
"""

__version__ = "0.1.0"

from .analyzer import ClassKind, OutputStats, analyze_output, classify_class_file
from .core import analyze
from .disassembly import DisassemblyResult, parse_disassembly
from .models import BytecodeReport

__all__ = [
    "analyze",  # Main entry point
    "analyze_output",
    "classify_class_file",
    "parse_disassembly",
    "BytecodeReport",
    "ClassKind",
    "DisassemblyResult",
    "OutputStats",
]
