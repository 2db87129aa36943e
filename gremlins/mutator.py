"""Mutant statuses, mutation types, source positions and the mutant protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class Status(Enum):
    """Outcome of a mutant.

    NOT_COVERED: found but not covered by tests.
    RUNNABLE: covered by tests, so it can be run.
    LIVED: tested, and the tests still passed.
    KILLED: tested, and the tests failed.
    """

    NOT_COVERED = 0
    RUNNABLE = 1
    SKIPPED = 2
    LIVED = 3
    KILLED = 4
    NOT_VIABLE = 5
    TIMED_OUT = 6

    def __str__(self) -> str:
        return _STATUS_LABELS[self]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_STATUS_LABELS = {
    Status.NOT_COVERED: "NOT COVERED",
    Status.RUNNABLE: "RUNNABLE",
    Status.SKIPPED: "SKIPPED",
    Status.LIVED: "LIVED",
    Status.KILLED: "KILLED",
    Status.NOT_VIABLE: "NOT VIABLE",
    Status.TIMED_OUT: "TIMED OUT",
}


class MutantType(Enum):
    """Category of a mutation applied to a token."""

    ARITHMETIC_BASE = 0
    CONDITIONALS_BOUNDARY = 1
    CONDITIONALS_NEGATION = 2
    INCREMENT_DECREMENT = 3
    INVERT_ASSIGNMENTS = 4
    INVERT_BITWISE = 5
    INVERT_BITWISE_ASSIGNMENTS = 6
    INVERT_LOGICAL = 7
    INVERT_LOOP_CTRL = 8
    INVERT_NEGATIVES = 9
    REMOVE_SELF_ASSIGNMENTS = 10

    def __str__(self) -> str:
        return _TYPE_LABELS[self]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_TYPE_LABELS = {
    MutantType.ARITHMETIC_BASE: "ARITHMETIC_BASE",
    MutantType.CONDITIONALS_BOUNDARY: "CONDITIONALS_BOUNDARY",
    MutantType.CONDITIONALS_NEGATION: "CONDITIONALS_NEGATION",
    MutantType.INCREMENT_DECREMENT: "INCREMENT_DECREMENT",
    MutantType.INVERT_ASSIGNMENTS: "INVERT_ASSIGNMENTS",
    MutantType.INVERT_BITWISE: "INVERT_BITWISE",
    MutantType.INVERT_BITWISE_ASSIGNMENTS: "INVERT_BWASSIGN",
    MutantType.INVERT_LOGICAL: "INVERT_LOGICAL",
    MutantType.INVERT_LOOP_CTRL: "INVERT_LOOPCTRL",
    MutantType.INVERT_NEGATIVES: "INVERT_NEGATIVES",
    MutantType.REMOVE_SELF_ASSIGNMENTS: "REMOVE_SELF_ASSIGNMENTS",
}

# The order in which mutation types are enumerated.
TYPES: tuple[MutantType, ...] = (
    MutantType.ARITHMETIC_BASE,
    MutantType.CONDITIONALS_BOUNDARY,
    MutantType.CONDITIONALS_NEGATION,
    MutantType.INVERT_ASSIGNMENTS,
    MutantType.INVERT_BITWISE,
    MutantType.INVERT_BITWISE_ASSIGNMENTS,
    MutantType.INCREMENT_DECREMENT,
    MutantType.INVERT_LOGICAL,
    MutantType.INVERT_LOOP_CTRL,
    MutantType.INVERT_NEGATIVES,
    MutantType.REMOVE_SELF_ASSIGNMENTS,
)


@dataclass(frozen=True)
class Position:
    """A location in a source file; line and column start at 1."""

    filename: str
    line: int
    column: int
    offset: int = 0

    @property
    def is_valid(self) -> bool:
        return self.line > 0

    def __str__(self) -> str:
        text = self.filename
        if self.is_valid:
            if text:
                text += ":"
            text += str(self.line)
            if self.column:
                text += f":{self.column}"
        return text or "-"


@runtime_checkable
class Mutator(Protocol):
    """A possible mutation of the source code."""

    type: MutantType
    status: Status
    position: Position
    pos: int
    pkg: str
    workdir: str

    def apply(self) -> None:
        """Apply the mutation to the source code."""

    def rollback(self) -> None:
        """Undo the mutation, restoring the original source."""