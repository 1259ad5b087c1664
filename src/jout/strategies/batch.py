"""A single javap process over one class-file pattern per directory."""

from __future__ import annotations

import glob
import os
from typing import Sequence

from ..disassembly import DisassemblyResult
from ..file_ops import list_directories
from ..logging_config import get_logger
from .base import DisassemblyStrategy

logger = get_logger(__name__)


class DirectoryBatchStrategy(DisassemblyStrategy):
    """Disassemble the whole tree in one javap run.

    Every directory contributes the pattern ``<dir>/*<suffix>``, matching the
    class files directly inside it. Listing every directory makes the run
    cover the tree recursively. No shell sits between jout and javap, so the
    patterns are expanded here before the process is spawned.
    """

    name = "batch"

    def directory_patterns(self, root: str) -> list[str]:
        return [
            os.path.join(glob.escape(directory), f"*{self.config.class_suffix}")
            for directory in list_directories(root)
        ]

    def expand_patterns(self, patterns: Sequence[str]) -> list[str]:
        targets = []
        for pattern in patterns:
            targets.extend(sorted(p for p in glob.glob(pattern) if os.path.isfile(p)))
        return targets

    def collect(self, root: str, class_files: Sequence[str]) -> DisassemblyResult:
        self.invocations = 0
        patterns = self.directory_patterns(root)
        targets = self.expand_patterns(patterns)
        if not targets:
            logger.info("No class files under %s; nothing to disassemble", root)
            return DisassemblyResult()

        logger.info("Disassembling %d files from %d directories", len(targets), len(patterns))
        self.invocations = 1
        return self.disassemble(targets)
