"""Workload runners that drive a sorted linked list serially or from threads."""

from __future__ import annotations

import random
import threading
import time
from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass
from enum import Enum, IntEnum

from listbench.linkedlist import SortedLinkedList
from listbench.rwlock import ReadWriteLock

MAX_VALUE = 65536


class ProgramType(IntEnum):
    SERIAL = 0
    MUTEX = 1
    RWLOCK = 2


class Operation(Enum):
    INSERT = 0
    DELETE = 1
    MEMBER = 2


@dataclass(frozen=True)
class OperationMix:
    """Fractions of member, insert and delete operations in a workload."""

    member: float
    insert: float
    delete: float

    def __post_init__(self) -> None:
        if min(self.member, self.insert, self.delete) < 0:
            raise ValueError("operation fractions must be non-negative")


def _check_m(m: int) -> None:
    if m < 0:
        raise ValueError("operation count must be non-negative")


def serial_operation_counts(mix: OperationMix, m: int) -> dict[Operation, int]:
    """Counts for the serial runner; deletes take whatever remains of ``m``."""
    _check_m(m)
    members = int(m * mix.member)
    inserts = int(m * mix.insert)
    return {
        Operation.MEMBER: members,
        Operation.INSERT: inserts,
        Operation.DELETE: m - members - inserts,
    }


def thread_operation_counts(mix: OperationMix, m: int, thread_count: int) -> dict[Operation, int]:
    """Counts of each operation one worker thread performs."""
    _check_m(m)
    if thread_count < 1:
        raise ValueError("thread_count must be at least 1")
    return {
        Operation.MEMBER: int(mix.member * m / thread_count),
        Operation.INSERT: int(mix.insert * m / thread_count),
        Operation.DELETE: int(mix.delete * m / thread_count),
    }


def shuffled_operations(
    mix: OperationMix, m: int, thread_count: int, rng: random.Random
) -> list[Operation]:
    """One thread's operations in random order."""
    counts = thread_operation_counts(mix, m, thread_count)
    ops = [op for op in (Operation.MEMBER, Operation.INSERT, Operation.DELETE) for _ in range(counts[op])]
    rng.shuffle(ops)
    return ops


def _apply(values: SortedLinkedList, op: Operation, value: int) -> None:
    if op is Operation.INSERT:
        values.insert(value)
    elif op is Operation.DELETE:
        values.delete(value)
    else:
        values.member(value)


def _elapsed_us(start_ns: int) -> int:
    return (time.perf_counter_ns() - start_ns) // 1000


def run_serial(
    values: SortedLinkedList, m: int, mix: OperationMix, rng: random.Random | None = None
) -> int:
    """Run ``m`` random operations on one thread; return elapsed microseconds.

    The list is emptied afterwards.
    """
    rng = rng or random.Random()
    counts = serial_operation_counts(mix, m)
    done = dict.fromkeys(Operation, 0)
    print(f"Running in serial mode with {m} operations")

    start = time.perf_counter_ns()
    total = 0
    while total < m:
        value = rng.randrange(MAX_VALUE)
        choice = rng.randrange(3)
        if choice == 0 and done[Operation.INSERT] < counts[Operation.INSERT]:
            op = Operation.INSERT
        elif choice == 1 and done[Operation.DELETE] < counts[Operation.DELETE]:
            op = Operation.DELETE
        elif done[Operation.MEMBER] < counts[Operation.MEMBER]:
            op = Operation.MEMBER
        else:
            continue
        _apply(values, op, value)
        done[op] += 1
        total += 1
    elapsed = _elapsed_us(start)

    values.clear()
    return elapsed


def _run_threaded(
    values: SortedLinkedList,
    m: int,
    mix: OperationMix,
    thread_count: int,
    guard_for: Callable[[Operation], AbstractContextManager],
) -> int:
    thread_operation_counts(mix, m, thread_count)

    def worker() -> None:
        rng = random.Random()
        for op in shuffled_operations(mix, m, thread_count, rng):
            value = rng.randrange(MAX_VALUE)
            with guard_for(op):
                _apply(values, op, value)

    threads = [threading.Thread(target=worker) for _ in range(thread_count)]
    start = time.perf_counter_ns()
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    elapsed = _elapsed_us(start)

    values.clear()
    return elapsed


def run_mutex(values: SortedLinkedList, m: int, mix: OperationMix, thread_count: int) -> int:
    """Run the workload from several threads behind one mutex; return elapsed microseconds."""
    lock = threading.Lock()
    print(f"Running in mutex mode with {thread_count} threads and {m} operations")
    return _run_threaded(values, m, mix, thread_count, lambda op: lock)


def run_rwlock(values: SortedLinkedList, m: int, mix: OperationMix, thread_count: int) -> int:
    """Run the workload with a readers-writer lock; return elapsed microseconds."""
    rwlock = ReadWriteLock()
    print(f"Running in read-write lock mode with {thread_count} threads and {m} operations")

    def guard_for(op: Operation) -> AbstractContextManager:
        return rwlock.read_locked() if op is Operation.MEMBER else rwlock.write_locked()

    return _run_threaded(values, m, mix, thread_count, guard_for)


def run_threads(
    values: SortedLinkedList,
    m: int,
    mix: OperationMix,
    thread_count: int,
    program_type: ProgramType | int,
) -> int:
    """Run the workload in the given mode; return elapsed microseconds."""
    kind = ProgramType(program_type)
    if kind is ProgramType.SERIAL:
        return run_serial(values, m, mix)
    if kind is ProgramType.MUTEX:
        return run_mutex(values, m, mix, thread_count)
    return run_rwlock(values, m, mix, thread_count)