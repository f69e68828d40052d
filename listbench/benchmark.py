"""Repeated benchmark runs over the sorted list, with statistics written to CSV."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

from listbench.linkedlist import SortedLinkedList
from listbench.runners import MAX_VALUE, OperationMix, ProgramType, run_threads

INITIAL_SIZE = 1000
OPERATIONS = 10000
NUM_RUNS = 30
THREAD_COUNTS = (1, 2, 4, 8)
CSV_PATH = "performance_results_all_test.csv"
CSV_HEADER = (
    "ProgramType,Case,Average(us),StdDev(us),Min(us),Max(us),"
    "95% CI Lower(us),95% CI Upper(us),Thread Count"
)

_Z_95 = 1.96
_REQUIRED_ACCURACY = 0.05

_CASE_MIXES = {
    1: OperationMix(member=0.99, insert=0.005, delete=0.005),
    2: OperationMix(member=0.9, insert=0.05, delete=0.05),
    3: OperationMix(member=0.5, insert=0.25, delete=0.25),
}

_PROGRAM_NAMES = {
    ProgramType.SERIAL: "Serial",
    ProgramType.MUTEX: "Mutex",
    ProgramType.RWLOCK: "RWLock",
}


@dataclass(frozen=True)
class RunStatistics:
    """Summary of a series of timings in microseconds."""

    average: float
    std_dev: float
    minimum: int
    maximum: int
    runs: int

    @property
    def margin_error(self) -> float:
        """Half-width of the 95% confidence interval of the mean."""
        return _Z_95 * self.std_dev / math.sqrt(self.runs)

    @property
    def ci_lower(self) -> float:
        return self.average - self.margin_error

    @property
    def ci_upper(self) -> float:
        return self.average + self.margin_error

    def required_samples(self) -> int:
        """Samples needed for a 95% interval within 5% of the mean."""
        if self.std_dev == 0:
            return 0
        if self.average == 0:
            raise ValueError("cannot size a sample relative to a zero mean")
        accuracy = _REQUIRED_ACCURACY * self.average
        return math.ceil(((_Z_95 * self.std_dev) / accuracy) ** 2)


def case_mix(case_num: int) -> OperationMix:
    """Operation fractions for a test case; unknown cases use case 1."""
    return _CASE_MIXES.get(case_num, _CASE_MIXES[1])


def populate(n: int, rng: random.Random) -> SortedLinkedList:
    """A sorted list holding exactly ``n`` distinct random values."""
    if not 0 <= n <= MAX_VALUE:
        raise ValueError(f"cannot hold {n} distinct values below {MAX_VALUE}")
    values = SortedLinkedList()
    while len(values) < n:
        values.insert(rng.randrange(MAX_VALUE))
    return values


def run_experiment(
    case_num: int,
    thread_count: int,
    program_type: ProgramType | int,
    rng: random.Random | None = None,
) -> int:
    """Populate a list and time one workload on it; return elapsed microseconds."""
    values = populate(INITIAL_SIZE, rng or random.Random())
    return run_threads(values, OPERATIONS, case_mix(case_num), thread_count, program_type)


def summarize(times: Iterable[int]) -> RunStatistics:
    """Mean, population standard deviation, minimum and maximum of the timings."""
    samples = list(times)
    if not samples:
        raise ValueError("no timings to summarize")
    count = len(samples)
    average = sum(samples) / count
    variance = sum((t - average) ** 2 for t in samples) / count
    return RunStatistics(
        average=average,
        std_dev=math.sqrt(variance),
        minimum=min(samples),
        maximum=max(samples),
        runs=count,
    )


def _program_name(program_type: ProgramType | int) -> str:
    try:
        return _PROGRAM_NAMES[ProgramType(program_type)]
    except ValueError:
        return "Unknown"


def csv_row(
    program_type: ProgramType | int, case_num: int, stats: RunStatistics, thread_count: int
) -> str:
    """One CSV line, without a line ending, for a case's statistics."""
    return (
        f"{_program_name(program_type)},{case_num},{stats.average:.2f},{stats.std_dev:.2f},"
        f"{stats.minimum},{stats.maximum},{stats.ci_lower:.2f},{stats.ci_upper:.2f},"
        f"{thread_count}"
    )


def write_cases(
    fp: TextIO, num_runs: int, thread_count: int, program_type: ProgramType | int
) -> list[RunStatistics]:
    """Run every case ``num_runs`` times, report it and append its CSV row."""
    if num_runs < 1:
        raise ValueError("num_runs must be at least 1")
    results = []
    for case_num in (1, 2, 3):
        print(f"\n--- Case {case_num} ---")
        times = []
        for run in range(1, num_runs + 1):
            print(f"Run {run}/{num_runs}: ", end="")
            times.append(run_experiment(case_num, thread_count, program_type))
        stats = summarize(times)

        print(f"\nCase {case_num} Results:")
        print(
            f"Average time: {stats.average:.2f} us, StdDev: {stats.std_dev:.2f} us, "
            f"Min: {stats.minimum} us, Max: {stats.maximum} us"
        )
        print(f"95% CI: {stats.average:.2f} ± {stats.margin_error:.2f} us")
        print(f"Range: [{stats.ci_lower:.2f}, {stats.ci_upper:.2f}] us")
        if stats.average:
            print(f"Required samples for 95% CI within 5%: {stats.required_samples()}")

        fp.write(csv_row(program_type, case_num, stats, thread_count) + "\n")
        results.append(stats)
    return results


def run_performance_tests(
    program_type: ProgramType | int, fp: TextIO, num_runs: int | None = None
) -> list[RunStatistics]:
    """Run all cases for the program type, over every thread count it uses."""
    runs = NUM_RUNS if num_runs is None else num_runs
    kind = ProgramType(program_type)
    print("\n=== PERFORMANCE TESTING ===")
    thread_counts = (1,) if kind is ProgramType.SERIAL else THREAD_COUNTS
    results = []
    for thread_count in thread_counts:
        results.extend(write_cases(fp, runs, thread_count, kind))
    print("\nResults saved to performance_results.csv files")
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: benchmark one program type and append to the CSV file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: listbench <program_type>")
        print("0 = Serial, 1 = Mutex, 2 = RWLock")
        return 1

    try:
        program_type = ProgramType(int(args[0]))
    except ValueError:
        print("Invalid program type. Must be 0, 1, or 2.")
        return 1

    try:
        fp = open(CSV_PATH, "a", encoding="utf-8", newline="")
    except OSError:
        print("Error opening file")
        return 1

    with fp:
        if fp.tell() == 0:
            fp.write(CSV_HEADER + "\n")
        run_performance_tests(program_type, fp)
    return 0


if __name__ == "__main__":
    sys.exit(main())