"""Dhrystone 2.2 synthetic workload: the record, the globals and the procedures."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

ARRAY_SIZE = 50
SOME_STRING = "DHRYSTONE PROGRAM, SOME STRING"


class Ident(IntEnum):
    """The five-valued enumeration used throughout the benchmark."""

    IDENT_1 = 0
    IDENT_2 = 1
    IDENT_3 = 2
    IDENT_4 = 3
    IDENT_5 = 4


@dataclass(eq=False)
class Record:
    """A benchmark record; only the first variant of the union is ever used."""

    ptr_comp: Optional["Record"] = field(default=None, repr=False)
    discr: Ident = Ident.IDENT_1
    enum_comp: Ident = Ident.IDENT_1
    int_comp: int = 0
    str_comp: str = ""

    def assign_from(self, other: "Record") -> None:
        """Copy every field of ``other`` into this record."""
        self.ptr_comp = other.ptr_comp
        self.discr = other.discr
        self.enum_comp = other.enum_comp
        self.int_comp = other.int_comp
        self.str_comp = other.str_comp


def proc_7(int_1_par_val: int, int_2_par_val: int) -> int:
    """Return ``int_2_par_val + int_1_par_val + 2``."""
    int_loc = int_1_par_val + 2
    return int_2_par_val + int_loc


def func_3(enum_par_val: Ident) -> bool:
    """True when the value is ``IDENT_3``."""
    return enum_par_val == Ident.IDENT_3


class Dhrystone:
    """Global state of the benchmark and the procedures that operate on it."""

    def __init__(self) -> None:
        self.next_ptr_glob = Record()
        self.ptr_glob: Optional[Record] = Record(
            ptr_comp=self.next_ptr_glob,
            discr=Ident.IDENT_1,
            enum_comp=Ident.IDENT_3,
            int_comp=40,
            str_comp=SOME_STRING,
        )
        self.int_glob = 0
        self.bool_glob = False
        self.ch_1_glob = "\0"
        self.ch_2_glob = "\0"
        self.arr_1_glob: List[int] = [0] * ARRAY_SIZE
        self.arr_2_glob: List[List[int]] = [[0] * ARRAY_SIZE for _ in range(ARRAY_SIZE)]
        self.arr_2_glob[8][7] = 10

    def _glob(self) -> Record:
        if self.ptr_glob is None:
            raise ValueError("global record pointer is not set")
        return self.ptr_glob

    def proc_1(self, ptr_val_par: Record) -> None:
        """Shuffle the record chain hanging off ``ptr_val_par``."""
        glob = self._glob()
        next_record = ptr_val_par.ptr_comp
        if next_record is None:
            raise ValueError("record has no successor")
        next_record.assign_from(glob)
        ptr_val_par.int_comp = 5
        next_record.int_comp = ptr_val_par.int_comp
        next_record.ptr_comp = ptr_val_par.ptr_comp
        next_record.ptr_comp = self.proc_3()
        if next_record.discr == Ident.IDENT_1:
            next_record.int_comp = 6
            next_record.enum_comp = self.proc_6(ptr_val_par.enum_comp)
            next_record.ptr_comp = glob.ptr_comp
            next_record.int_comp = proc_7(next_record.int_comp, 10)
        else:
            source = ptr_val_par.ptr_comp
            if source is None:
                raise ValueError("record has no successor")
            ptr_val_par.assign_from(source)

    def proc_2(self, int_par: int) -> int:
        """Return the updated value of the reference parameter.

        The loop only ends once ``ch_1_glob`` is ``'A'``; otherwise it
        could never finish, so that case is reported as an error.
        """
        int_loc = int_par + 10
        while True:
            if self.ch_1_glob == "A":
                int_loc -= 1
                return int_loc - self.int_glob
            raise RuntimeError("proc_2 cannot terminate unless ch_1_glob is 'A'")

    def proc_3(self) -> Optional[Record]:
        """Return the global record's successor and update its integer field."""
        glob = self._glob()
        result = glob.ptr_comp
        glob.int_comp = proc_7(10, self.int_glob)
        return result

    def proc_4(self) -> None:
        bool_loc = self.ch_1_glob == "A"
        self.bool_glob = bool_loc or self.bool_glob
        self.ch_2_glob = "B"

    def proc_5(self) -> None:
        self.ch_1_glob = "A"
        self.bool_glob = False

    def proc_6(self, enum_val_par: Ident) -> Ident:
        """Map an enumeration value to another; returns the new reference value."""
        result = Ident(enum_val_par)
        if not func_3(enum_val_par):
            result = Ident.IDENT_4
        if enum_val_par == Ident.IDENT_1:
            result = Ident.IDENT_1
        elif enum_val_par == Ident.IDENT_2:
            result = Ident.IDENT_1 if self.int_glob > 100 else Ident.IDENT_4
        elif enum_val_par == Ident.IDENT_3:
            result = Ident.IDENT_2
        elif enum_val_par == Ident.IDENT_5:
            result = Ident.IDENT_3
        return result

    def proc_8(self, arr_1: List[int], arr_2: List[List[int]],
               int_1_par_val: int, int_2_par_val: int) -> None:
        """Write into the one- and two-dimensional arrays in place."""
        int_loc = int_1_par_val + 5
        arr_1[int_loc] = int_2_par_val
        arr_1[int_loc + 1] = arr_1[int_loc]
        arr_1[int_loc + 30] = int_loc
        row = arr_2[int_loc]
        for int_index in range(int_loc, int_loc + 2):
            row[int_index] = int_loc
        row[int_loc - 1] += 1
        arr_2[int_loc + 20][int_loc] = arr_1[int_loc]
        self.int_glob = 5

    def func_1(self, ch_1_par_val: str, ch_2_par_val: str) -> Ident:
        """``IDENT_1`` if the characters differ; otherwise record the first and return ``IDENT_2``."""
        ch_1_loc = ch_1_par_val
        ch_2_loc = ch_1_loc
        if ch_2_loc != ch_2_par_val:
            return Ident.IDENT_1
        self.ch_1_glob = ch_1_loc
        return Ident.IDENT_2

    def func_2(self, str_1_par_ref: str, str_2_par_ref: str) -> bool:
        """Compare two strings; True (and ``int_glob`` updated) when the first is greater."""
        int_loc = 2
        ch_loc = ""
        while int_loc <= 2:
            if self.func_1(str_1_par_ref[int_loc], str_2_par_ref[int_loc + 1]) == Ident.IDENT_1:
                ch_loc = "A"
                int_loc += 1
            else:
                raise ValueError("func_2 cannot terminate for these strings")
        if "W" <= ch_loc < "Z":
            int_loc = 7
        if ch_loc == "R":
            return True
        if str_1_par_ref > str_2_par_ref:
            int_loc += 7
            self.int_glob = int_loc
            return True
        return False