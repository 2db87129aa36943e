"""Summaries of mutation testing runs: console report, findings file and thresholds."""

from __future__ import annotations

import os
import sys
from collections import Counter
from dataclasses import dataclass, field
from datetime import timedelta
from enum import IntEnum
from typing import Sequence

from gremlins import log
from gremlins.mutator import Mutator, Status
from gremlins.structure import Mutation, MutatorStatistics, OutputFile, OutputResult

_RED = "31"
_GREEN = "32"
_YELLOW = "33"
_HI_BLACK = "90"
_HI_GREEN = "92"


def _use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(sys.stdout, "isatty", None)
    try:
        return bool(isatty and isatty())
    except (OSError, ValueError):
        return False


def _paint(code: str, value: object) -> str:
    text = str(value)
    if _use_color():
        return f"\x1b[{code}m{text}\x1b[0m"
    return text


class ExitCode(IntEnum):
    """Process exit codes for failed quality thresholds."""

    EFFICACY_THRESHOLD = 10
    MUTANT_COVERAGE_THRESHOLD = 11


class ExitError(Exception):
    """Raised when a run ends below one of the configured thresholds."""

    def __init__(self, code: ExitCode) -> None:
        self.code = code
        super().__init__(_EXIT_MESSAGES[code])

    @property
    def exit_code(self) -> int:
        return int(self.code)


_EXIT_MESSAGES = {
    ExitCode.EFFICACY_THRESHOLD: "below efficacy-threshold",
    ExitCode.MUTANT_COVERAGE_THRESHOLD: "below mutant coverage-threshold",
}


@dataclass
class Results:
    """The mutants to report and the time it took to find and test them."""

    mutants: Sequence[Mutator] = field(default_factory=list)
    elapsed: timedelta = field(default_factory=timedelta)
    module: str = ""


@dataclass(frozen=True)
class ReportSettings:
    """Options that shape the report.

    A threshold of zero disables the corresponding check.
    """

    dry_run: bool = False
    output: str = ""
    threshold_efficacy: float = 0.0
    threshold_mcoverage: float = 0.0


_UNITS = (
    ("year", 365 * 24 * 3600 * 1_000_000),
    ("week", 7 * 24 * 3600 * 1_000_000),
    ("day", 24 * 3600 * 1_000_000),
    ("hour", 3600 * 1_000_000),
    ("minute", 60 * 1_000_000),
    ("second", 1_000_000),
    ("millisecond", 1_000),
    ("microsecond", 1),
)


def format_elapsed(elapsed: timedelta | float) -> str:
    """Human readable duration limited to its two largest non-zero units."""
    if not isinstance(elapsed, timedelta):
        elapsed = timedelta(seconds=elapsed)
    micros = elapsed // timedelta(microseconds=1)
    sign = "-" if micros < 0 else ""
    remaining = abs(micros)
    parts = []
    for name, size in _UNITS:
        value, remaining = divmod(remaining, size)
        if value:
            parts.append(f"{value} {name}" if value == 1 else f"{value} {name}s")
    if not parts:
        return "0 seconds"
    return sign + " ".join(parts[:2])


class _Report:
    def __init__(self, results: Results, settings: ReportSettings) -> None:
        self.settings = settings
        self.module = results.module
        self.elapsed = (
            results.elapsed
            if isinstance(results.elapsed, timedelta)
            else timedelta(seconds=results.elapsed)
        )
        self.files: dict[str, list[Mutation]] = {}
        self.statistics = MutatorStatistics()
        self.counts: Counter[Status] = Counter()

        for m in results.mutants:
            pos = m.position
            self.files.setdefault(pos.filename, []).append(
                Mutation(
                    type=str(m.type),
                    status=str(m.status),
                    line=pos.line,
                    column=pos.column,
                )
            )
            self.counts[m.status] += 1
            self.statistics.count(m.type)

        self.efficacy = 0.0
        self.coverage = 0.0
        killed = self.counts[Status.KILLED]
        lived = self.counts[Status.LIVED]
        not_covered = self.counts[Status.NOT_COVERED]
        runnable = self.counts[Status.RUNNABLE]
        if not settings.dry_run:
            if killed > 0:
                self.efficacy = killed / (killed + lived) * 100
            if killed + lived > 0:
                self.coverage = (killed + lived) / (killed + lived + not_covered) * 100
        elif runnable > 0:
            self.coverage = runnable / (runnable + not_covered) * 100

    def report_findings(self) -> None:
        if self.settings.dry_run:
            self._dry_run_report()
        else:
            self._full_run_report()
        self._file_report()

    def _dry_run_report(self) -> None:
        log.infoln("")
        log.infof("Dry run completed in %s\n", format_elapsed(self.elapsed))
        log.infof(
            "Runnable: %s, Not covered: %s\n",
            _paint(_GREEN, self.counts[Status.RUNNABLE]),
            _paint(_YELLOW, self.counts[Status.NOT_COVERED]),
        )
        log.infof("Mutator coverage: %.2f%%\n", self.coverage)

    def _full_run_report(self) -> None:
        log.infoln("")
        log.infof("Mutation testing completed in %s\n", format_elapsed(self.elapsed))
        log.infof(
            "Killed: %s, Lived: %s, Not covered: %s\n",
            _paint(_HI_GREEN, self.counts[Status.KILLED]),
            _paint(_RED, self.counts[Status.LIVED]),
            _paint(_YELLOW, self.counts[Status.NOT_COVERED]),
        )
        log.infof(
            "Timed out: %s, Not viable: %s, Skipped: %s\n",
            _paint(_GREEN, self.counts[Status.TIMED_OUT]),
            _paint(_HI_BLACK, self.counts[Status.NOT_VIABLE]),
            _paint(_HI_BLACK, self.counts[Status.SKIPPED]),
        )
        log.infof("Test efficacy: %.2f%%\n", self.efficacy)
        log.infof("Mutator coverage: %.2f%%\n", self.coverage)

    def _file_report(self) -> None:
        output = self.settings.output
        if not output:
            return
        killed = self.counts[Status.KILLED]
        lived = self.counts[Status.LIVED]
        not_viable = self.counts[Status.NOT_VIABLE]
        result = OutputResult(
            go_module=self.module,
            files=[
                OutputFile(filename=name, mutations=list(mutations))
                for name, mutations in self.files.items()
            ],
            test_efficacy=self.efficacy,
            mutations_coverage=self.coverage,
            mutants_total=lived + killed + not_viable,
            mutants_killed=killed,
            mutants_lived=lived,
            mutants_not_viable=not_viable,
            mutants_not_covered=self.counts[Status.NOT_COVERED],
            elapsed_time=self.elapsed.total_seconds(),
            mutator_statistics=self.statistics,
        )
        try:
            with open(output, "w", encoding="utf-8") as f:
                f.write(result.to_json())
        except OSError as err:
            log.errorf("impossible to write file: %s\n", err)

    def assess(self) -> None:
        if self.settings.dry_run:
            return
        et = float(self.settings.threshold_efficacy)
        if et > 0 and self.efficacy <= et:
            raise ExitError(ExitCode.EFFICACY_THRESHOLD)
        ct = float(self.settings.threshold_mcoverage)
        if ct > 0 and self.coverage <= ct:
            raise ExitError(ExitCode.MUTANT_COVERAGE_THRESHOLD)


def do(results: Results, settings: ReportSettings | None = None) -> None:
    """Report the results and check them against the thresholds.

    Output goes through :mod:`gremlins.log`, which must be initialised.
    Raises ExitError when a threshold is not met.
    """
    settings = settings or ReportSettings()
    if not results.mutants:
        log.infoln("\nNo results to report.")
        return
    rep = _Report(results, settings)
    rep.report_findings()
    rep.assess()


_STATUS_COLORS = {
    Status.KILLED: _HI_GREEN,
    Status.RUNNABLE: _HI_GREEN,
    Status.LIVED: _RED,
    Status.NOT_COVERED: _YELLOW,
    Status.TIMED_OUT: _GREEN,
    Status.NOT_VIABLE: _HI_BLACK,
    Status.SKIPPED: _HI_BLACK,
}


def mutant(m: Mutator) -> None:
    """Log one mutant's status, type and position, right-aligning the status."""
    label = str(m.status)
    padding = " " * max(0, 12 - len(label))
    status = _paint(_STATUS_COLORS[m.status], label)
    log.infof("%s%s %s at %s\n", padding, status, m.type, m.position)