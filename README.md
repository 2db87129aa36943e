# gremlins

This package reports the results of a mutation testing run. You give it the
mutants that were found and tested in a code base. It then does four things:

- prints one line per mutant, optionally filtered by status;
- prints a run summary with test efficacy and mutator coverage;
- checks both figures against thresholds;
- can write the findings to a JSON file.

## Installation

```
pip install .
```

The package has no runtime dependencies.

## Modules

### `gremlins.mutator`

- `Status` is an enum of mutant outcomes. Printed, its members read `NOT COVERED`, `RUNNABLE`,
  `SKIPPED`, `LIVED`, `KILLED`, `NOT VIABLE` and `TIMED OUT`.
- `MutantType` is an enum of mutation categories. Printed, its members read `ARITHMETIC_BASE`,
  `CONDITIONALS_BOUNDARY`, `CONDITIONALS_NEGATION`, `INCREMENT_DECREMENT`,
  `INVERT_ASSIGNMENTS`, `INVERT_BITWISE`, `INVERT_BWASSIGN`, `INVERT_LOGICAL`,
  `INVERT_LOOPCTRL`, `INVERT_NEGATIVES` and `REMOVE_SELF_ASSIGNMENTS`.
  `TYPES` lists them in their enumeration order.
- `Position(filename, line, column, offset=0)` is printed as
  `file:line:column`.
- `Mutator` is the protocol a mutant implements. It has these attributes:
  - `type`, `status` and `position`;
  - `pos`, `pkg` and `workdir`.
  It also has the methods `apply()` and `rollback()`.

### `gremlins.log`

This module is the output sink, shared by the whole process.

- `init(out, e_out)` sets the sink up with a text stream for information and
  one for errors. Until it is called with both streams, logging does nothing.
  Calling it again has no effect; `reset()` drops the current sink.
- `infof(fmt, *args)` and `infoln(message)` write information.
- `errorf(fmt, *args)` and `errorln(message)` write to the error stream,
  prefixed by `ERROR: `. The prefix is red when that stream is a terminal.
- `set_silent(True)` suppresses information messages. Errors are still
  written.

### `gremlins.report`

- `do(results, settings=None)` logs a summary of a `Results`. `Results` has
  three fields:
  - `mutants`;
  - `elapsed`, a `timedelta`;
  - `module`.

  If there are no mutants, `do` logs `No results to report.` instead.
- `ReportSettings` has four fields:
  - `dry_run` switches to the dry-run summary (runnable and not covered
    mutants, and coverage). No thresholds are checked in a dry run.
  - `threshold_efficacy` is the efficacy threshold.
  - `threshold_mcoverage` is the mutator coverage threshold.
  - `output` is a path. When it is set, the findings are written there as
    JSON. If the file cannot be written, an error is logged and the run goes
    on.

  A threshold of zero disables its check. When test efficacy or mutator
  coverage is at or below its threshold, `do` raises `ExitError`. Its
  `code` is an `ExitCode`: `EFFICACY_THRESHOLD` (10) or
  `MUTANT_COVERAGE_THRESHOLD` (11). `exit_code` gives the code as an int.
- `mutant(m)` logs one mutant's status (right-aligned), type and position.
- `format_elapsed(elapsed)` renders a duration in its two largest non-zero
  units, for example `2 minutes 22 seconds`.

Counts and statuses are coloured when standard output is a terminal and
`NO_COLOR` is not set.

### `gremlins.logger`

- `parse_filter(s)` turns status letters into a set of `Status` values:
  - `l` lived, `c` not covered, `t` timed out, `k` killed;
  - `v` not viable, `s` skipped, `r` runnable.

  An empty string gives `None`. An unknown letter raises
  `InvalidFilterError`, a `ValueError`.
- `new_logger(output_statuses="")` builds a `MutantLogger`. An invalid filter
  is reported through the log and then ignored.
- `MutantLogger.mutant(m)` logs the mutant if its status passes the filter.
  With no filter, every mutant is logged.

### `gremlins.structure`

This module holds the JSON findings format: `OutputResult`, `OutputFile`,
`Mutation` and `MutatorStatistics`.

- Each of these classes has `to_dict()`.
- `OutputResult.to_json()` gives compact JSON.
- `load_output(text)` reads findings back. Missing keys take zero values.
  Text that is not a JSON object raises `ValueError`.
- `MutatorStatistics` leaves out mutation types that have no mutants.

## Example

```python
import sys
from dataclasses import dataclass
from datetime import timedelta

from gremlins import log
from gremlins.logger import new_logger
from gremlins.mutator import MutantType, Position, Status
from gremlins.report import ExitError, Results, ReportSettings, do


@dataclass
class Mutant:
    type: MutantType
    status: Status
    position: Position
    pos: int = 0
    pkg: str = ""
    workdir: str = ""

    def apply(self) -> None: ...
    def rollback(self) -> None: ...


log.init(sys.stdout, sys.stderr)

mutants = [
    Mutant(MutantType.CONDITIONALS_NEGATION, Status.KILLED, Position("a.go", 12, 3)),
    Mutant(MutantType.CONDITIONALS_NEGATION, Status.LIVED, Position("a.go", 20, 5)),
]

logger = new_logger("lc")  # show only lived and not covered mutants
for m in mutants:
    logger.mutant(m)

settings = ReportSettings(threshold_efficacy=80, output="findings.json")
try:
    do(Results(mutants=mutants, elapsed=timedelta(minutes=2, seconds=22),
               module="example.com/module"), settings)
except ExitError as err:
    sys.exit(err.exit_code)
```

A full-run summary looks like this:

```

Mutation testing completed in 2 minutes 22 seconds
Killed: 1, Lived: 1, Not covered: 1
Timed out: 1, Not viable: 1, Skipped: 1
Test efficacy: 50.00%
Mutator coverage: 66.67%
```

## What this package does not do

It does not generate mutants, apply them to source code or run test suites.
Those jobs belong to the `Mutator` objects you pass in. The package has no
command-line program; it is used as a library.

## Tests

The tests use pytest, which is installed with the `test` extra
(`pip install .[test]`).