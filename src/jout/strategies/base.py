"""Base class for the ways of driving javap over an output directory."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..config import JoutConfig
from ..disassembly import DisassemblyResult, parse_disassembly
from ..exceptions import ProcessError
from ..logging_config import get_logger
from ..shell import CommandResult, run_command

logger = get_logger(__name__)

Runner = Callable[..., CommandResult]


class DisassemblyStrategy(ABC):
    """Runs javap over class files and totals the instructions it prints.

    Attributes:
        invocations: Number of javap processes started by the last collect()
    """

    name: str = ""

    def __init__(
        self,
        disassembler: Path,
        config: Optional[JoutConfig] = None,
        runner: Runner = run_command,
    ):
        self.disassembler = disassembler
        self.config = config or JoutConfig()
        self.runner = runner
        self.invocations = 0

    @abstractmethod
    def collect(self, root: str, class_files: Sequence[str]) -> DisassemblyResult:
        """Disassemble everything under root and return the totals.

        Args:
            root: Output directory that was listed
            class_files: Sorted class files found under root

        Raises:
            ProcessError: If any javap run fails
        """

    def build_command(self, targets: Sequence[str]) -> list[str]:
        """javap followed by its flags and the targets."""
        return [str(self.disassembler), *self.config.disassembler_flags, *targets]

    def disassemble(self, targets: Sequence[str]) -> DisassemblyResult:
        """Run javap once over targets and parse what it printed."""
        command = self.build_command(targets)
        result = self.runner(command, timeout=self.config.timeout_seconds)
        if not result.ok:
            logger.debug("javap output:\n%s", result.output)
            raise ProcessError(
                command,
                "disassembler exited with an error",
                exit_code=result.exit_code,
                output=result.output,
            )
        return parse_disassembly(result.output)
