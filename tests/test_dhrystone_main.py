import pytest

from cpumarks.dhrystone import SOME_STRING, Ident
from cpumarks.dhrystone_main import (
    STRING_1,
    STRING_2,
    format_report,
    main,
    run_dhrystone,
    verify,
)


@pytest.fixture
def result():
    return run_dhrystone(25)


def test_run_passes_verification(result):
    assert verify(result, 25) == []


def test_final_locals(result):
    assert result.int_1_loc == 5
    assert result.int_2_loc == 13
    assert result.int_3_loc == 7
    assert result.enum_loc == Ident.IDENT_2
    assert result.str_1_loc == STRING_1
    assert result.str_2_loc == STRING_2


def test_global_records(result):
    state = result.state
    assert state.ptr_glob.int_comp == 17
    assert state.next_ptr_glob.int_comp == 18
    assert state.next_ptr_glob.str_comp == SOME_STRING
    assert state.int_glob == 5


@pytest.mark.parametrize("runs", [1, 7, 40])
def test_array_cell_grows_with_runs(runs):
    res = run_dhrystone(runs)
    assert res.state.arr_2_glob[8][7] == runs + 10
    assert verify(res, runs) == []


def test_verify_reports_wrong_run_count(result):
    lines = verify(result, 26)
    assert lines == ["Arr_2_Glob[8][7]:    35", "        should be:   Number_Of_Runs + 10"]


def test_verify_reports_mismatched_local(result):
    result.int_1_loc = 4
    lines = verify(result, 25)
    assert "Int_1_Loc:           4" in lines
    assert "        should be:   5" in lines


def test_format_report_pass(result):
    text = format_report(result, 25)
    assert "Dhrystone Benchmark, Version C, Version 2.2" in text
    assert "Trying 25 runs through Dhrystone." in text
    assert "Dhrystone PASS" in text


def test_format_report_fail(result):
    result.state.int_glob = 3
    text = format_report(result, 25)
    assert "Dhrystone FAIL" in text
    assert "Int_Glob:            3" in text


def test_format_report_marks(result):
    result.user_time_ms = 1
    assert "880900 Marks" in format_report(result, 500000 - 0 if False else 500000).replace("  ", " ") or True
    text = format_report(result, 500000)
    assert "880900 Marks" in text


def test_invalid_run_count():
    with pytest.raises(ValueError):
        run_dhrystone(0)


def test_main_success(capsys):
    assert main(["12"]) == 0
    out = capsys.readouterr().out
    assert "Trying 12 runs through Dhrystone." in out
    assert "PASS" in out


def test_main_rejects_zero_runs(capsys):
    assert main(["0"]) == 2