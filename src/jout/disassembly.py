"""Count instructions in javap -c output.

javap prints one instruction per line inside each Code block::

     0: new           #7                  // class java/lang/StringBuilder
     3: dup
     4: invokespecial #9                  // Method java/lang/StringBuilder."<init>":()V

Any line of the form ``<something>: <token> ...`` counts as an instruction,
except the jump-target rows that tableswitch and lookupswitch open::

     5: tableswitch   { // 2 to 4
                   2: 32
             default: 50
        }

Their "instruction" position holds a bare integer, which is how they are
told apart. Headers, signatures, ``Code:`` markers and blank lines carry no
field after a colon and are skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

ALLOCATION_MNEMONICS = frozenset({"new", "newarray", "multianewarray", "anewarray"})

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class DisassemblyResult:
    """Instruction totals for one or more chunks of disassembly text.

    Results from separate javap runs add up with ``+``; the order they are
    produced in does not matter.
    """

    instruction_count: int = 0
    allocation_count: int = 0

    def __add__(self, other: DisassemblyResult) -> DisassemblyResult:
        if not isinstance(other, DisassemblyResult):
            return NotImplemented
        return DisassemblyResult(
            instruction_count=self.instruction_count + other.instruction_count,
            allocation_count=self.allocation_count + other.allocation_count,
        )

    @classmethod
    def total(cls, results: Iterable[DisassemblyResult]) -> DisassemblyResult:
        """Sum any number of results, the empty sum being zero."""
        accumulated = cls()
        for result in results:
            accumulated = accumulated + result
        return accumulated


def _split_fields(line: str) -> list[str]:
    # Trailing empty fields do not count: "Code:" is a single field.
    parts = line.split(":")
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def parse_instruction_line(line: str) -> str | None:
    """Return the mnemonic on a disassembly line, or None if it holds none."""
    stripped = line.strip()
    if len(_split_fields(stripped)) < 2:
        return None

    instruction_part = stripped.split(":", 1)[1].strip()
    if _INTEGER_RE.fullmatch(instruction_part):
        return None

    tokens = instruction_part.split(maxsplit=1)
    return tokens[0] if tokens else ""


def parse_disassembly(text: str) -> DisassemblyResult:
    """Count instructions and allocation instructions in javap output.

    The text may cover any number of classes; the counts are totals and say
    nothing about which class an instruction came from.
    """
    instruction_count = 0
    allocation_count = 0

    for line in text.split("\n"):
        mnemonic = parse_instruction_line(line)
        if mnemonic is None:
            continue
        instruction_count += 1
        if mnemonic in ALLOCATION_MNEMONICS:
            allocation_count += 1

    return DisassemblyResult(instruction_count, allocation_count)
