import pytest

from gremlins.mutator import TYPES, MutantType, Position, Status


@pytest.mark.parametrize(
    "status, expected",
    [
        (Status.NOT_COVERED, "NOT COVERED"),
        (Status.RUNNABLE, "RUNNABLE"),
        (Status.LIVED, "LIVED"),
        (Status.KILLED, "KILLED"),
        (Status.NOT_VIABLE, "NOT VIABLE"),
        (Status.TIMED_OUT, "TIMED OUT"),
        (Status.SKIPPED, "SKIPPED"),
    ],
)
def test_status_string(status, expected):
    assert str(status) == expected
    assert f"{status}" == expected


@pytest.mark.parametrize(
    "mutant_type, expected",
    [
        (MutantType.CONDITIONALS_BOUNDARY, "CONDITIONALS_BOUNDARY"),
        (MutantType.CONDITIONALS_NEGATION, "CONDITIONALS_NEGATION"),
        (MutantType.INCREMENT_DECREMENT, "INCREMENT_DECREMENT"),
        (MutantType.INVERT_LOGICAL, "INVERT_LOGICAL"),
        (MutantType.INVERT_NEGATIVES, "INVERT_NEGATIVES"),
        (MutantType.ARITHMETIC_BASE, "ARITHMETIC_BASE"),
        (MutantType.INVERT_LOOP_CTRL, "INVERT_LOOPCTRL"),
        (MutantType.INVERT_ASSIGNMENTS, "INVERT_ASSIGNMENTS"),
        (MutantType.INVERT_BITWISE, "INVERT_BITWISE"),
        (MutantType.INVERT_BITWISE_ASSIGNMENTS, "INVERT_BWASSIGN"),
        (MutantType.REMOVE_SELF_ASSIGNMENTS, "REMOVE_SELF_ASSIGNMENTS"),
    ],
)
def test_type_string(mutant_type, expected):
    assert str(mutant_type) == expected
    assert f"{mutant_type}" == expected


def test_types_labels_cover_every_mutant_type_once():
    labels = [str(MutantType(t)) for t in TYPES]
    assert len(labels) == len(set(labels))
    assert sorted(labels) == sorted(
        [
            "ARITHMETIC_BASE",
            "CONDITIONALS_BOUNDARY",
            "CONDITIONALS_NEGATION",
            "INVERT_ASSIGNMENTS",
            "INVERT_BITWISE",
            "INVERT_BWASSIGN",
            "INCREMENT_DECREMENT",
            "INVERT_LOGICAL",
            "INVERT_LOOPCTRL",
            "INVERT_NEGATIVES",
            "REMOVE_SELF_ASSIGNMENTS",
        ]
    )


def test_position_string_full():
    pos = Position(filename="aFolder/aFile.go", line=12, column=3)
    assert str(pos) == "aFolder/aFile.go:12:3"


def test_position_string_without_column():
    assert str(Position(filename="aFile.go", line=12, column=0)) == "aFile.go:12"


def test_position_string_without_filename():
    assert str(Position(filename="", line=12, column=3)) == "12:3"


def test_position_string_invalid():
    assert str(Position(filename="", line=0, column=0)) == "-"
    assert str(Position(filename="aFile.go", line=0, column=3)) == "aFile.go"