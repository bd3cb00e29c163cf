import pytest

from cpumarks.dhrystone import Dhrystone, Ident, Record, func_3, proc_7

STR_1 = "DHRYSTONE PROGRAM, 1'ST STRING"
STR_2 = "DHRYSTONE PROGRAM, 2'ND STRING"


@pytest.fixture
def dhry():
    return Dhrystone()


def test_initial_state(dhry):
    assert dhry.ptr_glob.ptr_comp is dhry.next_ptr_glob
    assert dhry.ptr_glob.enum_comp == Ident.IDENT_3
    assert dhry.ptr_glob.int_comp == 40
    assert dhry.ptr_glob.str_comp == "DHRYSTONE PROGRAM, SOME STRING"
    assert dhry.arr_2_glob[8][7] == 10


def test_proc_7():
    assert proc_7(2, 3) == 7
    assert proc_7(10, 5) == 17


def test_func_3():
    assert func_3(Ident.IDENT_3) is True
    assert func_3(Ident.IDENT_1) is False


@pytest.mark.parametrize("value,expected", [
    (Ident.IDENT_1, Ident.IDENT_1),
    (Ident.IDENT_3, Ident.IDENT_2),
    (Ident.IDENT_4, Ident.IDENT_4),
    (Ident.IDENT_5, Ident.IDENT_3),
])
def test_proc_6(dhry, value, expected):
    assert dhry.proc_6(value) == expected


def test_proc_6_ident_2_depends_on_int_glob(dhry):
    assert dhry.proc_6(Ident.IDENT_2) == Ident.IDENT_4
    dhry.int_glob = 101
    assert dhry.proc_6(Ident.IDENT_2) == Ident.IDENT_1


def test_func_1(dhry):
    assert dhry.func_1("H", "R") == Ident.IDENT_1
    assert dhry.ch_1_glob == "\0"
    assert dhry.func_1("C", "C") == Ident.IDENT_2
    assert dhry.ch_1_glob == "C"


def test_func_2_in_order(dhry):
    assert dhry.func_2(STR_1, STR_2) is False
    assert dhry.int_glob == 0


def test_func_2_greater_updates_int_glob(dhry):
    assert dhry.func_2(STR_2, STR_1) is True
    assert dhry.int_glob == 10


def test_func_2_non_terminating_raises(dhry):
    with pytest.raises(ValueError):
        dhry.func_2("AAAAAA", "AAAAAA")


def test_proc_8(dhry):
    dhry.proc_8(dhry.arr_1_glob, dhry.arr_2_glob, 3, 7)
    assert dhry.arr_1_glob[8] == 7
    assert dhry.arr_1_glob[9] == 7
    assert dhry.arr_1_glob[38] == 8
    assert dhry.arr_2_glob[8][8] == 8
    assert dhry.arr_2_glob[8][9] == 8
    assert dhry.arr_2_glob[8][7] == 11
    assert dhry.arr_2_glob[28][8] == 7
    assert dhry.int_glob == 5


def test_proc_1_matches_reference_checks(dhry):
    dhry.int_glob = 5
    dhry.proc_1(dhry.ptr_glob)
    glob, nxt = dhry.ptr_glob, dhry.next_ptr_glob
    assert glob.discr == Ident.IDENT_1
    assert glob.enum_comp == Ident.IDENT_3
    assert glob.int_comp == 17
    assert nxt.discr == Ident.IDENT_1
    assert nxt.enum_comp == Ident.IDENT_2
    assert nxt.int_comp == 18
    assert nxt.str_comp == "DHRYSTONE PROGRAM, SOME STRING"
    assert nxt.ptr_comp is nxt


def test_proc_2(dhry):
    dhry.ch_1_glob = "A"
    dhry.int_glob = 5
    assert dhry.proc_2(1) == 5


def test_proc_2_without_a_raises(dhry):
    with pytest.raises(RuntimeError):
        dhry.proc_2(1)


def test_proc_3(dhry):
    dhry.int_glob = 5
    assert dhry.proc_3() is dhry.next_ptr_glob
    assert dhry.ptr_glob.int_comp == 17


def test_proc_3_without_global_raises(dhry):
    dhry.ptr_glob = None
    with pytest.raises(ValueError):
        dhry.proc_3()


def test_proc_5_then_proc_4(dhry):
    dhry.bool_glob = True
    dhry.proc_5()
    assert dhry.ch_1_glob == "A"
    assert dhry.bool_glob is False
    dhry.proc_4()
    assert dhry.ch_2_glob == "B"
    assert dhry.bool_glob is True


def test_record_assign_from_copies_all_fields():
    target = Record()
    other = Record()
    source = Record(ptr_comp=other, discr=Ident.IDENT_2, enum_comp=Ident.IDENT_5,
                    int_comp=9, str_comp="x")
    target.assign_from(source)
    assert target.ptr_comp is other
    assert (target.discr, target.enum_comp, target.int_comp, target.str_comp) == (
        Ident.IDENT_2, Ident.IDENT_5, 9, "x")