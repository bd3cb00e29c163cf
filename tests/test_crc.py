import pytest

from cpumarks.crc import crc16, crcu8, crcu16, crcu32, parseval


def _seed_crc(seed1, seed2, seed3, size):
    crc = 0
    for value in (seed1, seed2, seed3, size):
        crc = crc16(value, crc)
    return crc


@pytest.mark.parametrize(
    "seeds, expected",
    [
        ((0, 0, 0x66, 2000), 0x8A02),
        ((0x3415, 0x3415, 0x66, 2000), 0x7B05),
        ((0x8, 0x8, 0x8, 400), 0x4EAF),
        ((0, 0, 0x66, 666), 0xE9F5),
        ((0x3415, 0x3415, 0x66, 666), 0x18F2),
    ],
)
def test_known_seed_crcs(seeds, expected):
    assert _seed_crc(*seeds) == expected


def test_zero_byte_into_zero_crc_stays_zero():
    assert crcu8(0, 0) == 0


@pytest.mark.parametrize("value", [0, 1, 0x1234, 0xFFFF, 0x8000])
@pytest.mark.parametrize("start", [0, 0xABCD, 0xFFFF])
def test_crcu16_is_two_bytes_low_first(value, start):
    assert crcu16(value, start) == crcu8(value >> 8, crcu8(value & 0xFF, start))


@pytest.mark.parametrize("value", [-1, -2, -32768, 1234])
def test_crc16_treats_signed_as_unsigned(value):
    assert crc16(value, 0x55AA) == crcu16(value & 0xFFFF, 0x55AA)


@pytest.mark.parametrize("value", [0, 1, 0xDEADBEEF, 0xFFFFFFFF, 0x00010002])
def test_crcu32_is_two_halves(value):
    assert crcu32(value, 7) == crc16(value >> 16, crc16(value & 0xFFFF, 7))


@pytest.mark.parametrize("data", range(0, 256, 17))
@pytest.mark.parametrize("crc", [0, 0x1, 0x7FFF, 0xFFFF])
def test_crcu8_stays_in_16_bits(data, crc):
    assert 0 <= crcu8(data, crc) <= 0xFFFF


def test_crc_is_sensitive_to_input():
    assert crcu16(1, 0) != crcu16(2, 0)


def test_parseval_decimal():
    assert parseval("123") == 123


def test_parseval_hex():
    assert parseval("0x1f") == 0x1F


def test_parseval_negative_hex():
    assert parseval("-0x10") == -0x10


def test_parseval_kilo_suffix():
    assert parseval("2K") == 2 * 1024


def test_parseval_mega_suffix():
    assert parseval("3M") == 3 * 1024 * 1024


def test_parseval_stops_at_non_digit():
    assert parseval("42abc") == 42


def test_parseval_no_digits_is_zero():
    assert parseval("xyz") == 0