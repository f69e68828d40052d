import io
import random

import pytest

from listbench import benchmark
from listbench.benchmark import (
    CSV_HEADER,
    CSV_PATH,
    RunStatistics,
    case_mix,
    csv_row,
    main,
    populate,
    run_experiment,
    run_performance_tests,
    summarize,
    write_cases,
)
from listbench.runners import MAX_VALUE, OperationMix, ProgramType


@pytest.fixture
def small_workload(monkeypatch):
    monkeypatch.setattr(benchmark, "INITIAL_SIZE", 20)
    monkeypatch.setattr(benchmark, "OPERATIONS", 40)
    monkeypatch.setattr(benchmark, "NUM_RUNS", 2)


def test_case_mixes_match_source_fractions():
    assert case_mix(1) == OperationMix(member=0.99, insert=0.005, delete=0.005)
    assert case_mix(2) == OperationMix(member=0.9, insert=0.05, delete=0.05)
    assert case_mix(3) == OperationMix(member=0.5, insert=0.25, delete=0.25)


def test_unknown_case_uses_case_one():
    assert case_mix(7) == case_mix(1)
    assert case_mix(0) == case_mix(1)


def test_populate_has_exact_distinct_sorted_values():
    values = populate(200, random.Random(3))
    items = list(values)
    assert len(values) == 200
    assert items == sorted(set(items))
    assert all(0 <= v < MAX_VALUE for v in items)


def test_populate_is_deterministic_for_seed():
    first = list(populate(50, random.Random(9)))
    second = list(populate(50, random.Random(9)))
    other = list(populate(50, random.Random(10)))
    assert len(first) == 50
    assert first == second
    assert first != other


def test_populate_rejects_impossible_size():
    with pytest.raises(ValueError):
        populate(MAX_VALUE + 1, random.Random(0))
    with pytest.raises(ValueError):
        populate(-1, random.Random(0))


def test_summarize_known_series():
    stats = summarize([2, 4, 4, 4, 5, 5, 7, 9])
    assert stats.average == pytest.approx(5.0)
    assert stats.std_dev == pytest.approx(2.0)
    assert stats.minimum == 2
    assert stats.maximum == 9
    assert stats.runs == 8


def test_summarize_interval_is_symmetric():
    stats = summarize([10, 14, 17, 30])
    assert stats.ci_lower + stats.ci_upper == pytest.approx(2 * stats.average)
    assert stats.ci_upper - stats.ci_lower == pytest.approx(2 * stats.margin_error)
    assert stats.ci_lower < stats.average < stats.ci_upper


def test_summarize_constant_series():
    stats = summarize([7, 7, 7])
    assert stats.std_dev == 0
    assert stats.margin_error == 0
    assert stats.required_samples() == 0


def test_summarize_empty_raises():
    with pytest.raises(ValueError):
        summarize([])


def test_required_samples_grows_with_spread():
    narrow = RunStatistics(average=100.0, std_dev=5.0, minimum=90, maximum=110, runs=30)
    wide = RunStatistics(average=100.0, std_dev=20.0, minimum=60, maximum=140, runs=30)
    assert narrow.required_samples() < wide.required_samples()
    assert narrow.required_samples() >= 1


def test_required_samples_zero_mean_raises():
    stats = RunStatistics(average=0.0, std_dev=1.0, minimum=0, maximum=2, runs=3)
    with pytest.raises(ValueError):
        stats.required_samples()


def test_csv_row_format():
    stats = RunStatistics(average=12.5, std_dev=0.0, minimum=10, maximum=15, runs=4)
    assert csv_row(ProgramType.MUTEX, 2, stats, 4) == "Mutex,2,12.50,0.00,10,15,12.50,12.50,4"


def test_csv_row_program_names():
    stats = RunStatistics(average=1.0, std_dev=0.0, minimum=1, maximum=1, runs=1)
    assert csv_row(0, 1, stats, 1).startswith("Serial,1,")
    assert csv_row(2, 3, stats, 8).startswith("RWLock,3,")
    assert csv_row(9, 1, stats, 1).startswith("Unknown,1,")


@pytest.mark.parametrize("program_type", list(ProgramType))
def test_run_experiment_returns_elapsed(small_workload, program_type):
    elapsed = run_experiment(3, 2, program_type, random.Random(1))
    assert isinstance(elapsed, int) and elapsed >= 0


def test_run_experiment_rejects_bad_program_type(small_workload):
    with pytest.raises(ValueError):
        run_experiment(1, 1, 5, random.Random(1))


def test_write_cases_writes_one_row_per_case(small_workload):
    fp = io.StringIO()
    results = write_cases(fp, 2, 1, ProgramType.SERIAL)
    lines = fp.getvalue().splitlines()
    assert [line.split(",")[:2] for line in lines] == [["Serial", "1"], ["Serial", "2"], ["Serial", "3"]]
    assert all(line.endswith(",1") for line in lines)
    assert [s.runs for s in results] == [2, 2, 2]
    assert all(s.minimum <= s.average <= s.maximum for s in results)


def test_write_cases_rejects_zero_runs(small_workload):
    with pytest.raises(ValueError):
        write_cases(io.StringIO(), 0, 1, ProgramType.SERIAL)


def test_run_performance_tests_threaded_covers_thread_counts(small_workload):
    fp = io.StringIO()
    results = run_performance_tests(ProgramType.MUTEX, fp, 1)
    rows = [line.split(",") for line in fp.getvalue().splitlines()]
    assert len(results) == 12
    assert [int(row[-1]) for row in rows] == [1] * 3 + [2] * 3 + [4] * 3 + [8] * 3
    assert {row[0] for row in rows} == {"Mutex"}


def test_run_performance_tests_serial_single_thread(small_workload):
    fp = io.StringIO()
    run_performance_tests(ProgramType.SERIAL, fp, 1)
    rows = fp.getvalue().splitlines()
    assert len(rows) == 3
    assert all(row.endswith(",1") for row in rows)


def test_main_without_arguments_fails(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


@pytest.mark.parametrize("arg", ["3", "-1", "abc"])
def test_main_invalid_program_type(arg, capsys):
    assert main([arg]) == 1
    assert "Invalid program type" in capsys.readouterr().out


def test_main_appends_with_single_header(small_workload, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["0"]) == 0
    assert main(["0"]) == 0
    lines = (tmp_path / CSV_PATH).read_text(encoding="utf-8").splitlines()
    assert lines[0] == CSV_HEADER
    assert lines.count(CSV_HEADER) == 1
    assert len(lines) == 7