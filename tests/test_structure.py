import json

import pytest

from gremlins.mutator import MutantType
from gremlins.structure import (
    Mutation,
    MutatorStatistics,
    OutputFile,
    OutputResult,
    load_output,
)


def _sample_result():
    stats = MutatorStatistics()
    stats.count(MutantType.CONDITIONALS_NEGATION)
    stats.count(MutantType.ARITHMETIC_BASE)
    return OutputResult(
        go_module="example.com/go/module",
        files=[
            OutputFile(
                filename="file1.go",
                mutations=[
                    Mutation(type="CONDITIONALS_NEGATION", status="KILLED", line=10, column=3),
                    Mutation(type="ARITHMETIC_BASE", status="LIVED", line=20, column=8),
                ],
            )
        ],
        test_efficacy=50.0,
        mutations_coverage=100.0,
        mutants_total=2,
        mutants_killed=1,
        mutants_lived=1,
        elapsed_time=142.123,
        mutator_statistics=stats,
    )


def test_empty_statistics_serialise_to_empty_dict():
    assert MutatorStatistics().to_dict() == {}


def test_count_only_reports_counted_types():
    stats = MutatorStatistics()
    stats.count(MutantType.INVERT_LOGICAL)
    stats.count(MutantType.INVERT_LOGICAL)
    assert stats.to_dict() == {"invert_logical": 2}


def test_every_type_has_its_own_statistic():
    stats = MutatorStatistics()
    for mutant_type in MutantType:
        stats.count(mutant_type)
    counts = stats.to_dict()
    assert len(counts) == len(MutantType)
    assert set(counts.values()) == {1}
    assert "invert_bitwise_assignments" in counts
    assert "invert_loop_ctrl" in counts


def test_output_key_order():
    keys = list(json.loads(_sample_result().to_json()))
    assert keys == [
        "go_module",
        "files",
        "test_efficacy",
        "mutations_coverage",
        "mutants_total",
        "mutants_killed",
        "mutants_lived",
        "mutants_not_viable",
        "mutants_not_covered",
        "elapsed_time",
        "mutator_statistics",
    ]


def test_to_json_is_compact():
    text = _sample_result().to_json()
    assert text.startswith('{"go_module":"example.com/go/module","files":[{"file_name":"file1.go"')
    assert ": " not in text


def test_file_and_mutation_keys():
    file_dict = _sample_result().files[0].to_dict()
    assert list(file_dict) == ["file_name", "mutations"]
    assert list(file_dict["mutations"][0]) == ["type", "status", "line", "column"]


def test_round_trip():
    result = _sample_result()
    assert load_output(result.to_json()) == result


def test_load_missing_keys_take_zero_values():
    assert load_output("{}") == OutputResult()


def test_load_ignores_unknown_keys():
    text = json.dumps({"go_module": "example.com/m", "extra": 1, "mutator_statistics": {"other": 3}})
    loaded = load_output(text)
    assert loaded.go_module == "example.com/m"
    assert loaded.mutator_statistics == MutatorStatistics()


def test_load_rejects_non_object():
    with pytest.raises(ValueError):
        load_output("[]")


def test_load_rejects_invalid_json():
    with pytest.raises(ValueError):
        load_output("{not json")