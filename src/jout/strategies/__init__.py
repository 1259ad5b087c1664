"""Strategies for running javap over an output directory."""

from .base import DisassemblyStrategy, Runner
from .batch import DirectoryBatchStrategy
from .parallel import ParallelFileStrategy, slice_into_chunks

STRATEGY_REGISTRY = {
    ParallelFileStrategy.name: ParallelFileStrategy,
    DirectoryBatchStrategy.name: DirectoryBatchStrategy,
}


def get_strategy(name: str) -> type[DisassemblyStrategy]:
    """Look up a strategy class by its config name."""
    try:
        return STRATEGY_REGISTRY[name]
    except KeyError:
        raise ValueError(f"Unknown strategy: {name}") from None


__all__ = [
    "DisassemblyStrategy",
    "DirectoryBatchStrategy",
    "ParallelFileStrategy",
    "Runner",
    "STRATEGY_REGISTRY",
    "get_strategy",
    "slice_into_chunks",
]
