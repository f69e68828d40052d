"""Standalone serial benchmark over an unsorted linked list with head insertion."""

from __future__ import annotations

import random
import sys
import time
from collections.abc import Iterable, Iterator, Sequence

from listbench.benchmark import RunStatistics, case_mix, summarize
from listbench.runners import MAX_VALUE, Operation

INITIAL_SIZE = 1000
OPERATIONS = 10000
NUM_RUNS = 30


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: int, next_node: _Node | None = None) -> None:
        self.data = data
        self.next = next_node


class UnsortedLinkedList:
    """Duplicate-free singly linked list that adds new values at the head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def member(self, value: int) -> bool:
        """Return True if ``value`` is in the list."""
        return any(item == value for item in self)

    def insert(self, value: int) -> bool:
        """Put ``value`` at the head; return False if it was already present."""
        if self.member(value):
            return False
        self._head = _Node(value, self._head)
        self._size += 1
        return True

    def delete(self, value: int) -> bool:
        """Remove ``value``; return False if it was not present."""
        pred: _Node | None = None
        curr = self._head
        while curr is not None and curr.data != value:
            pred, curr = curr, curr.next
        if curr is None:
            return False
        if pred is None:
            self._head = curr.next
        else:
            pred.next = curr.next
        self._size -= 1
        return True

    def is_unique(self, value: int) -> bool:
        """Return True if ``value`` is not yet in the list."""
        return not self.member(value)

    def clear(self) -> None:
        """Drop every node."""
        self._head = None
        self._size = 0

    def __iter__(self) -> Iterator[int]:
        curr = self._head
        while curr is not None:
            yield curr.data
            curr = curr.next

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.member(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def operation_counts(case_num: int, m: int) -> dict[Operation, int]:
    """Number of member, insert and delete operations for a case."""
    if m < 0:
        raise ValueError("operation count must be non-negative")
    mix = case_mix(case_num)
    return {
        Operation.MEMBER: int(m * mix.member),
        Operation.INSERT: int(m * mix.insert),
        Operation.DELETE: int(m * mix.delete),
    }


def serial_run(case_num: int, rng: random.Random | None = None) -> int:
    """Populate a list and time one serial workload; return elapsed microseconds."""
    rng = rng or random.Random()
    if INITIAL_SIZE > MAX_VALUE:
        raise ValueError(f"cannot hold {INITIAL_SIZE} distinct values below {MAX_VALUE}")
    m = OPERATIONS
    counts = operation_counts(case_num, m)

    values = UnsortedLinkedList()
    while len(values) < INITIAL_SIZE:
        candidate = rng.randrange(MAX_VALUE)
        if values.is_unique(candidate):
            values.insert(candidate)

    print(f"Initial list populated with {INITIAL_SIZE} unique values")
    print(
        f"Starting {m} operations: {counts[Operation.MEMBER]} Member, "
        f"{counts[Operation.INSERT]} Insert, {counts[Operation.DELETE]} Delete"
    )

    done = dict.fromkeys(Operation, 0)
    target = min(m, sum(counts.values()))
    total = 0
    start = time.perf_counter_ns()
    while total < target:
        value = rng.randrange(MAX_VALUE)
        choice = rng.randrange(3)
        if choice == 0 and done[Operation.INSERT] < counts[Operation.INSERT]:
            values.insert(value)
            op = Operation.INSERT
        elif choice == 1 and done[Operation.DELETE] < counts[Operation.DELETE]:
            values.delete(value)
            op = Operation.DELETE
        elif done[Operation.MEMBER] < counts[Operation.MEMBER]:
            values.member(value)
            op = Operation.MEMBER
        else:
            continue
        done[op] += 1
        total += 1
    elapsed = (time.perf_counter_ns() - start) // 1000

    print(
        f"Operations completed: {done[Operation.MEMBER]} Member, "
        f"{done[Operation.INSERT]} Insert, {done[Operation.DELETE]} Delete"
    )
    print(f"Serial execution time: {elapsed} microseconds")

    values.clear()
    return elapsed


def run_performance_tests(num_runs: int | None = None) -> list[RunStatistics]:
    """Run each case repeatedly and print its statistics."""
    runs = NUM_RUNS if num_runs is None else num_runs
    if runs < 1:
        raise ValueError("num_runs must be at least 1")
    print("\n=== PERFORMANCE TESTING ===")
    results = []
    for case_num in (1, 2, 3):
        print(f"\n--- Case {case_num} ---")
        times = []
        for run in range(1, runs + 1):
            print(f"Run {run}/{runs}: ", end="")
            times.append(serial_run(case_num))
        stats = summarize(times)

        print(f"\nCase {case_num} Results:")
        print(f"Average time: {stats.average:.2f} microseconds")
        print(f"Standard deviation: {stats.std_dev:.2f} microseconds")
        print(f"Min time: {stats.minimum} microseconds")
        print(f"Max time: {stats.maximum} microseconds")
        print(
            f"95% Confidence interval: {stats.average:.2f} ± "
            f"{stats.margin_error:.2f} microseconds"
        )
        print(f"Range: [{stats.ci_lower:.2f}, {stats.ci_upper:.2f}] microseconds")
        results.append(stats)
    return results


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: run the unsorted-list serial benchmark."""
    print("Serial Linked List Performance Test")
    print("====================================")
    run_performance_tests()
    return 0


if __name__ == "__main__":
    sys.exit(main())