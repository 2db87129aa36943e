"""Printing of mutants filtered by status."""

from __future__ import annotations

from dataclasses import dataclass

from gremlins import log, report
from gremlins.mutator import Mutator, Status


class InvalidFilterError(ValueError):
    """The statuses filter holds a letter that names no status."""

    def __init__(self) -> None:
        super().__init__("invalid statuses filter, only 'lctkvsr' letters allowed")


_LETTERS = {
    "l": Status.LIVED,
    "c": Status.NOT_COVERED,
    "t": Status.TIMED_OUT,
    "k": Status.KILLED,
    "v": Status.NOT_VIABLE,
    "s": Status.SKIPPED,
    "r": Status.RUNNABLE,
}


def parse_filter(s: str) -> frozenset[Status] | None:
    """Statuses named by the letters of ``s``; None when ``s`` is empty."""
    if not s:
        return None
    try:
        return frozenset(_LETTERS[letter] for letter in s)
    except KeyError:
        raise InvalidFilterError() from None


@dataclass(frozen=True)
class MutantLogger:
    """Prints mutants whose status is in the filter, or all when it is None."""

    filter: frozenset[Status] | None = None

    def mutant(self, m: Mutator) -> None:
        if self.filter is None or m.status in self.filter:
            report.mutant(m)


def new_logger(output_statuses: str = "") -> MutantLogger:
    """Build a logger from a filter string; an invalid one is reported and ignored."""
    try:
        statuses = parse_filter(output_statuses)
    except InvalidFilterError as err:
        log.infof("output-statuses filter not applied: %s\n", err)
        statuses = None
    return MutantLogger(filter=statuses)