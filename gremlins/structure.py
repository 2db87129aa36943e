"""Data structures of the JSON findings file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any

from gremlins.mutator import MutantType


@dataclass
class Mutation:
    """A single mutation in the findings file."""

    type: str
    status: str
    line: int
    column: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "status": self.status,
            "line": self.line,
            "column": self.column,
        }


@dataclass
class OutputFile:
    """A source file and the mutations found in it."""

    filename: str
    mutations: list[Mutation] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "file_name": self.filename,
            "mutations": [m.to_dict() for m in self.mutations],
        }


_STAT_FIELDS = {
    MutantType.ARITHMETIC_BASE: "arithmetic_base",
    MutantType.CONDITIONALS_NEGATION: "conditionals_negation",
    MutantType.CONDITIONALS_BOUNDARY: "conditionals_boundary",
    MutantType.INCREMENT_DECREMENT: "increment_decrement",
    MutantType.INVERT_ASSIGNMENTS: "invert_assignments",
    MutantType.INVERT_BITWISE: "invert_bitwise",
    MutantType.INVERT_BITWISE_ASSIGNMENTS: "invert_bitwise_assignments",
    MutantType.INVERT_LOGICAL: "invert_logical",
    MutantType.INVERT_LOOP_CTRL: "invert_loop_ctrl",
    MutantType.INVERT_NEGATIVES: "invert_negatives",
    MutantType.REMOVE_SELF_ASSIGNMENTS: "remove_self_assignments",
}


@dataclass
class MutatorStatistics:
    """Number of mutants found for each mutation type."""

    arithmetic_base: int = 0
    conditionals_negation: int = 0
    conditionals_boundary: int = 0
    increment_decrement: int = 0
    invert_assignments: int = 0
    invert_bitwise: int = 0
    invert_bitwise_assignments: int = 0
    invert_logical: int = 0
    invert_loop_ctrl: int = 0
    invert_negatives: int = 0
    remove_self_assignments: int = 0

    def count(self, mutant_type: MutantType) -> None:
        """Add one mutant of the given type."""
        name = _STAT_FIELDS[mutant_type]
        setattr(self, name, getattr(self, name) + 1)

    def to_dict(self) -> dict[str, int]:
        """The counts, leaving out types with no mutants."""
        return {f.name: value for f in fields(self) if (value := getattr(self, f.name))}


@dataclass
class OutputResult:
    """The whole content of the findings file."""

    go_module: str = ""
    files: list[OutputFile] = field(default_factory=list)
    test_efficacy: float = 0.0
    mutations_coverage: float = 0.0
    mutants_total: int = 0
    mutants_killed: int = 0
    mutants_lived: int = 0
    mutants_not_viable: int = 0
    mutants_not_covered: int = 0
    elapsed_time: float = 0.0
    mutator_statistics: MutatorStatistics = field(default_factory=MutatorStatistics)

    def to_dict(self) -> dict[str, Any]:
        return {
            "go_module": self.go_module,
            "files": [f.to_dict() for f in self.files],
            "test_efficacy": self.test_efficacy,
            "mutations_coverage": self.mutations_coverage,
            "mutants_total": self.mutants_total,
            "mutants_killed": self.mutants_killed,
            "mutants_lived": self.mutants_lived,
            "mutants_not_viable": self.mutants_not_viable,
            "mutants_not_covered": self.mutants_not_covered,
            "elapsed_time": self.elapsed_time,
            "mutator_statistics": self.mutator_statistics.to_dict(),
        }

    def to_json(self) -> str:
        """Compact JSON text of the result."""
        return json.dumps(self.to_dict(), separators=(",", ":"))


def _mutation_from(data: dict[str, Any]) -> Mutation:
    return Mutation(
        type=data.get("type", ""),
        status=data.get("status", ""),
        line=int(data.get("line", 0)),
        column=int(data.get("column", 0)),
    )


def _file_from(data: dict[str, Any]) -> OutputFile:
    return OutputFile(
        filename=data.get("file_name", ""),
        mutations=[_mutation_from(m) for m in data.get("mutations") or []],
    )


def _statistics_from(data: dict[str, Any]) -> MutatorStatistics:
    known = {f.name for f in fields(MutatorStatistics)}
    return MutatorStatistics(**{k: int(v) for k, v in data.items() if k in known})


def load_output(text: str) -> OutputResult:
    """Parse the JSON text of a findings file.

    Missing keys take their zero value and unknown keys are ignored.
    Raises ValueError if the text is not a JSON object.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("findings must be a JSON object")
    return OutputResult(
        go_module=data.get("go_module", ""),
        files=[_file_from(f) for f in data.get("files") or []],
        test_efficacy=float(data.get("test_efficacy", 0.0)),
        mutations_coverage=float(data.get("mutations_coverage", 0.0)),
        mutants_total=int(data.get("mutants_total", 0)),
        mutants_killed=int(data.get("mutants_killed", 0)),
        mutants_lived=int(data.get("mutants_lived", 0)),
        mutants_not_viable=int(data.get("mutants_not_viable", 0)),
        mutants_not_covered=int(data.get("mutants_not_covered", 0)),
        elapsed_time=float(data.get("elapsed_time", 0.0)),
        mutator_statistics=_statistics_from(data.get("mutator_statistics") or {}),
    )