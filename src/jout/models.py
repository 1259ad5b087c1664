"""Result model handed from the analysis to the formatters."""

from dataclasses import dataclass

from .analyzer import OutputStats
from .disassembly import DisassemblyResult


@dataclass(frozen=True)
class BytecodeReport:
    """Everything jout found out about one output directory."""

    output_dir: str
    output: OutputStats
    bytecode: DisassemblyResult
    strategy: str
    invocations: int
