"""One javap process per chunk of class files, run on a thread pool."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Sequence, TypeVar

from ..disassembly import DisassemblyResult
from ..logging_config import get_logger
from .base import DisassemblyStrategy

logger = get_logger(__name__)

T = TypeVar("T")


def slice_into_chunks(items: Sequence[T], chunk_size: int) -> list[list[T]]:
    """Split items into consecutive chunks of chunk_size.

    The last chunk holds the remainder and may be smaller.
    """
    if chunk_size < 1:
        raise ValueError("chunk_size must be at least 1")
    return [list(items[i : i + chunk_size]) for i in range(0, len(items), chunk_size)]


class ParallelFileStrategy(DisassemblyStrategy):
    """Pass class files to javap directly, splitting large outputs.

    Below the parallel threshold a single javap run covers every file.
    At or above it the sorted file list is cut into chunks of threshold
    files, each chunk is disassembled by its own javap process, and the
    per-chunk results are summed once every run has finished.
    """

    name = "parallel"

    def collect(self, root: str, class_files: Sequence[str]) -> DisassemblyResult:
        self.invocations = 0
        if not class_files:
            logger.info("No class files under %s; nothing to disassemble", root)
            return DisassemblyResult()

        threshold = self.config.parallel_threshold
        if len(class_files) < threshold:
            self.invocations = 1
            return self.disassemble(class_files)

        chunks = slice_into_chunks(class_files, threshold)
        max_workers = min(self.config.workers or threshold, len(chunks))
        logger.info(
            "Disassembling %d files in %d chunks on %d workers",
            len(class_files),
            len(chunks),
            max_workers,
        )

        results = []
        executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="javap")
        try:
            futures = [executor.submit(self.disassemble, chunk) for chunk in chunks]
            self.invocations = len(futures)
            for future in as_completed(futures):
                results.append(future.result())
        except BaseException:
            executor.shutdown(wait=False, cancel_futures=True)
            raise
        executor.shutdown(wait=True)

        return DisassemblyResult.total(results)
