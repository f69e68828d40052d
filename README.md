# listbench

Measure how long a linked list takes to serve a mix of member, insert and
delete operations. The work runs on one thread, on several threads behind a
single mutex, or on several threads behind a readers-writer lock.

Each experiment fills a sorted linked list with 1000 distinct random values
in `[0, 65536)` and then performs 10000 operations in one of three mixes:

| Case | Member | Insert | Delete |
|------|--------|--------|--------|
| 1    | 99%    | 0.5%   | 0.5%   |
| 2    | 90%    | 5%     | 5%     |
| 3    | 50%    | 25%    | 25%    |

Every case is run 30 times. For each case the program prints the average,
the standard deviation, the minimum, the maximum and the 95% confidence
interval of the elapsed time in microseconds. It also prints how many
samples would bring the interval within 5% of the mean.

## Installation

```
pip install .
```

## Running the benchmark

```
listbench <program_type>
```

`program_type` selects the mode:

- `0`: serial, one thread
- `1`: mutex, with 1, 2, 4 and 8 threads
- `2`: read-write lock, with 1, 2, 4 and 8 threads

The command prints a usage message and exits with status 1 in two cases:
when no argument is given, and when the argument is not 0, 1 or 2.

Results are appended to `performance_results_all_test.csv` in the current
directory. A header row is written when the file is empty. The columns are:

```
ProgramType,Case,Average(us),StdDev(us),Min(us),Max(us),95% CI Lower(us),95% CI Upper(us),Thread Count
```

To compare the three modes in a single file, run them one after another:

```
listbench 0
listbench 1
listbench 2
```

In the serial mode the operation kind is drawn at random until each kind's
quota is used up. The delete quota is whatever remains of the 10000
operations. In the threaded modes each thread gets its share of every kind,
shuffles that share, and performs it. Member operations take the read lock
and inserts and deletes take the write lock.

## The unsorted serial variant

```
listbench-unsorted
```

This runs the same three cases against `UnsortedLinkedList`, a list that
pushes new values at the front. It uses a single thread and prints the
statistics for each case. It writes no file.

## Using the pieces directly

```python
from listbench.linkedlist import SortedLinkedList

items = SortedLinkedList([5, 1, 3])
items.insert(4)      # True
items.insert(4)      # False: already present
items.delete(1)      # True
print(list(items))   # [3, 4, 5]
print(3 in items)    # True
print(len(items))    # 3
```

Other modules:

- `listbench.rwlock.ReadWriteLock` is a readers-writer lock. It offers
  `acquire_read`/`release_read`, `acquire_write`/`release_write`, and the
  context managers `read_locked()` and `write_locked()`. While a writer is
  waiting, new readers are held back. Releasing a lock that is not held
  raises `RuntimeError`.
- `listbench.runners` provides `OperationMix`, `ProgramType`, `Operation`,
  `run_serial`, `run_mutex`, `run_rwlock`, and `run_threads(values, m, mix,
  thread_count, program_type)`. Each runner returns the elapsed time in
  microseconds and empties the list afterwards.
- `listbench.benchmark` provides `case_mix`, `populate`, `run_experiment`,
  `summarize` (which returns a `RunStatistics`), `csv_row`, `write_cases`
  and `run_performance_tests`.

## Tests

```
pip install .[test]
pytest
```