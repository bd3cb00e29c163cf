# cpumarks

CPU benchmark workloads in pure Python. Each one checks its own results
against known values, so a run tells you how long the work took and also
whether it was computed correctly.

- **Dhrystone**: the synthetic integer benchmark (version 2.2), with a
  check of every global and local value at the end of the run, and a
  command that runs it.
- **CoreMark workloads**: the linked-list, matrix and number-parsing
  state-machine workloads, and the 16-bit CRC helpers that fold their
  results into checksums.

## Installing

```
pip install .
```

Nothing outside the standard library is needed. To run the tests:

```
pip install .[test]
pytest
```

## Running Dhrystone from the command line

```
cpumarks-dhrystone
cpumarks-dhrystone 10000
```

The optional argument is the number of runs through the loop (default
500000). The command prints the report. It exits with status 0 when every
check passed, 1 when a check failed, and 2 when the number of runs is less
than 1.

## Using Dhrystone from Python

```python
from cpumarks.dhrystone_main import run_dhrystone, verify, format_report

result = run_dhrystone(1000)
problems = verify(result, 1000)   # empty list when every value is right
print(format_report(result, 1000))
```

`run_dhrystone` returns a `DhrystoneResult` with the final global state
(a `cpumarks.dhrystone.Dhrystone`), the final local values and the
elapsed time in milliseconds. `verify` returns one pair of diagnostic
lines for each value that differs from the expected one.

The procedures themselves live in `cpumarks.dhrystone`: the `Ident`
enumeration, the `Record` type, the `Dhrystone` class with `proc_1` to
`proc_6`, `proc_8`, `func_1` and `func_2`, and the free functions
`proc_7` and `func_3`.

## Using the CoreMark workloads

- `cpumarks.crc`: `crcu8`, `crcu16`, `crc16`, `crcu32` fold values into a
  16-bit CRC; `parseval` reads a decimal or `0x` hex number with an
  optional `K` or `M` suffix.
- `cpumarks.coremark_state`: `init_state(size, seed)` builds the input
  block; `bench_state(...)` runs the state machine over it, corrupts it,
  runs again and undoes the corruption, and returns a CRC.
- `cpumarks.coremark_matrix`: `init_matrix(blksize, seed)` returns a
  `MatrixParams`; `bench_matrix(params, seed, crc)` runs one pass of the
  matrix operations and folds the result into `crc`.
- `cpumarks.coremark_list`: `list_init(blksize, seed)` builds the list;
  `bench_list(res, finder_idx)` runs one pass over a `CoreResults` and
  returns a 16-bit checksum, leaving the list in its original order.

```python
from cpumarks.coremark_list import CoreResults, bench_list, list_init
from cpumarks.coremark_matrix import init_matrix
from cpumarks.coremark_state import init_state
from cpumarks.crc import crcu16

size = 666
res = CoreResults(seed1=0, seed2=0, seed3=0x66, size=size)
res.list_head = list_init(size, res.seed1)
res.matrix = init_matrix(size, res.seed1 | (res.seed2 << 16))
res.state = init_state(size, res.seed1)

crc = crcu16(bench_list(res, 1), 0)
crc = crcu16(bench_list(res, -1), crc)
```

During a pass, `bench_list` also updates `res.crc`, and records the first
matrix and state checksums in `res.crcmatrix` and `res.crcstate`.

## What the package does not do

- There is no CoreMark command and no CoreMark driver: nothing picks the
  seeds, splits the memory between the workloads, times the iterations,
  compares the CRCs with the known values or prints a score. The
  workloads above have to be put together by the caller, as in the
  example.
- There is no micro-benchmark suite. `cpumarks.micro` holds no
  workloads.

Pure Python runs far slower than compiled code, so timings are only
comparable between runs of this package. Use a small number of runs for
quick checks.