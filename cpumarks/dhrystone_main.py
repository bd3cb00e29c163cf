"""Dhrystone driver: run the measurement loop, check the globals and report."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

from cpumarks.dhrystone import SOME_STRING, Dhrystone, Ident, proc_7

VERSION = "C, Version 2.2"
NUMBER_OF_RUNS = 500000

STRING_1 = "DHRYSTONE PROGRAM, 1'ST STRING"
STRING_2 = "DHRYSTONE PROGRAM, 2'ND STRING"
STRING_3 = "DHRYSTONE PROGRAM, 3'RD STRING"

REFERENCE_MARKS = 880900
REFERENCE_RUNS = 500000
REFERENCE_LINE = "                   vs. 100000 Marks (i7-7700K @ 4.20GHz)"
SEPARATOR = "=" * 50
_SHOULD_BE = "        should be:   "


def _uptime_ms() -> int:
    return time.monotonic_ns() // 1_000_000


def _c_div(a: int, b: int) -> int:
    """Integer division truncated toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass
class DhrystoneResult:
    """Global state and final local values after the measurement loop."""

    state: Dhrystone
    int_1_loc: int
    int_2_loc: int
    int_3_loc: int
    enum_loc: Ident
    str_1_loc: str
    str_2_loc: str
    user_time_ms: int


def run_dhrystone(number_of_runs: int = NUMBER_OF_RUNS) -> DhrystoneResult:
    """Execute the Dhrystone loop ``number_of_runs`` times and time it."""
    if number_of_runs < 1:
        raise ValueError("number of runs must be at least 1")

    d = Dhrystone()
    str_1_loc = STRING_1
    int_1_loc = int_2_loc = int_3_loc = 0
    enum_loc = Ident.IDENT_1
    str_2_loc = ""

    begin = _uptime_ms()
    for run_index in range(1, number_of_runs + 1):
        d.proc_5()
        d.proc_4()
        int_1_loc = 2
        int_2_loc = 3
        str_2_loc = STRING_2
        enum_loc = Ident.IDENT_2
        d.bool_glob = not d.func_2(str_1_loc, str_2_loc)
        while int_1_loc < int_2_loc:
            int_3_loc = 5 * int_1_loc - int_2_loc
            int_3_loc = proc_7(int_1_loc, int_2_loc)
            int_1_loc += 1
        d.proc_8(d.arr_1_glob, d.arr_2_glob, int_1_loc, int_3_loc)
        d.proc_1(d._glob())
        for code in range(ord("A"), ord(d.ch_2_glob) + 1):
            if enum_loc == d.func_1(chr(code), "C"):
                enum_loc = d.proc_6(Ident.IDENT_1)
                str_2_loc = STRING_3
                int_2_loc = run_index
                d.int_glob = run_index
        int_2_loc = int_2_loc * int_1_loc
        int_1_loc = _c_div(int_2_loc, int_3_loc)
        int_2_loc = 7 * (int_2_loc - int_3_loc) - int_1_loc
        int_1_loc = d.proc_2(int_1_loc)
    end = _uptime_ms()

    return DhrystoneResult(
        state=d,
        int_1_loc=int_1_loc,
        int_2_loc=int_2_loc,
        int_3_loc=int_3_loc,
        enum_loc=enum_loc,
        str_1_loc=str_1_loc,
        str_2_loc=str_2_loc,
        user_time_ms=end - begin,
    )


def verify(result: DhrystoneResult, number_of_runs: int) -> List[str]:
    """Compare the final values with the expected ones.

    Returns the diagnostic lines for every mismatch; an empty list means
    the run passed.
    """
    state = result.state
    glob = state._glob()
    nxt = state.next_ptr_glob
    checks = [
        ("Int_Glob:            ", state.int_glob, 5, None),
        ("Bool_Glob:           ", int(state.bool_glob), 1, None),
        ("Ch_1_Glob:           ", state.ch_1_glob, "A", None),
        ("Ch_2_Glob:           ", state.ch_2_glob, "B", None),
        ("Arr_1_Glob[8]:       ", state.arr_1_glob[8], 7, None),
        ("Arr_2_Glob[8][7]:    ", state.arr_2_glob[8][7], number_of_runs + 10,
         "Number_Of_Runs + 10"),
        ("Ptr_Glob->Discr:             ", int(glob.discr), 0, None),
        ("Ptr_Glob->Enum_Comp:         ", int(glob.enum_comp), 2, None),
        ("Ptr_Glob->Int_Comp:          ", glob.int_comp, 17, None),
        ("Ptr_Glob->Str_Comp:          ", glob.str_comp, SOME_STRING, None),
        ("Next_Ptr_Glob->Discr:             ", int(nxt.discr), 0, None),
        ("Next_Ptr_Glob->Enum_Comp:         ", int(nxt.enum_comp), 1, None),
        ("Next_Ptr_Glob->Int_Comp:          ", nxt.int_comp, 18, None),
        ("Next_Ptr_Glob->Str_Comp:          ", nxt.str_comp, SOME_STRING, None),
        ("Int_1_Loc:           ", result.int_1_loc, 5, None),
        ("Int_2_Loc:           ", result.int_2_loc, 13, None),
        ("Int_3_Loc:           ", result.int_3_loc, 7, None),
        ("Enum_Loc:            ", int(result.enum_loc), 1, None),
        ("Str_1_Loc:           ", result.str_1_loc, STRING_1, None),
        ("Str_2_Loc:           ", result.str_2_loc, STRING_2, None),
    ]
    lines: List[str] = []
    for label, actual, expected, expected_text in checks:
        if actual != expected:
            lines.append(f"{label}{actual}")
            shown = expected if expected_text is None else expected_text
            lines.append(f"{_SHOULD_BE}{shown}")
    return lines


def _marks(user_time_ms: int, number_of_runs: int) -> Optional[int]:
    if user_time_ms <= 0:
        return None
    return REFERENCE_MARKS // user_time_ms * number_of_runs // REFERENCE_RUNS


def format_report(result: DhrystoneResult, number_of_runs: int) -> str:
    """Render the benchmark's text output for a finished run."""
    mismatches = verify(result, number_of_runs)
    passed = not mismatches
    marks = _marks(result.user_time_ms, number_of_runs)
    shown = "n/a" if marks is None else str(marks)
    lines = [
        f"Dhrystone Benchmark, Version {VERSION}",
        f"Trying {number_of_runs} runs through Dhrystone.",
        *mismatches,
        f"Finished in {result.user_time_ms} ms",
        SEPARATOR,
        f"Dhrystone {'PASS' if passed else 'FAIL'}         {shown} Marks",
        REFERENCE_LINE,
    ]
    return "\n".join(lines) + "\n"


def main(argv=None) -> int:
    """Run Dhrystone from the command line; 0 on pass, 1 on failure."""
    parser = argparse.ArgumentParser(prog="dhrystone", description="Run the Dhrystone benchmark.")
    parser.add_argument("runs", nargs="?", type=int, default=NUMBER_OF_RUNS,
                        help="number of runs through the loop")
    args = parser.parse_args(sys.argv[1:] if argv is None else argv)
    try:
        result = run_dhrystone(args.runs)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    sys.stdout.write(format_report(result, args.runs))
    return 0 if not verify(result, args.runs) else 1


if __name__ == "__main__":
    sys.exit(main())