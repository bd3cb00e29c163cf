"""16-bit CRC helpers and seed-value parsing used by the CoreMark workloads."""

_U16 = 0xFFFF
_U32 = 0xFFFFFFFF


def _to_s32(value: int) -> int:
    value &= _U32
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


def crcu8(data: int, crc: int) -> int:
    """Fold one byte into a 16-bit CRC (reflected polynomial 0xA001)."""
    data &= 0xFF
    crc &= _U16
    for _ in range(8):
        mix = (data & 1) ^ (crc & 1)
        data >>= 1
        if mix:
            crc ^= 0x4002
        crc >>= 1
        if mix:
            crc |= 0x8000
        else:
            crc &= 0x7FFF
    return crc


def crcu16(newval: int, crc: int) -> int:
    """Fold an unsigned 16-bit value into the CRC, low byte first."""
    newval &= _U16
    crc = crcu8(newval & 0xFF, crc)
    return crcu8(newval >> 8, crc)


def crc16(newval: int, crc: int) -> int:
    """Fold a signed 16-bit value into the CRC."""
    return crcu16(newval & _U16, crc)


def crcu32(newval: int, crc: int) -> int:
    """Fold a 32-bit value into the CRC, low half first."""
    newval &= _U32
    crc = crc16(newval & _U16, crc)
    return crc16(newval >> 16, crc)


def parseval(text: str) -> int:
    """Parse a decimal or ``0x`` hex number with optional ``K``/``M`` suffix.

    Parsing stops at the first character that is not a digit; a string
    without digits yields 0. The result is a signed 32-bit value.
    """
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    hexmode = text.startswith("0x")
    if hexmode:
        text = text[2:]
    digits = "0123456789abcdef" if hexmode else "0123456789"
    base = 16 if hexmode else 10

    value = 0
    pos = 0
    while pos < len(text) and text[pos] in digits:
        value = value * base + digits.index(text[pos])
        pos += 1

    suffix = text[pos:pos + 1]
    if suffix == "K":
        value *= 1024
    elif suffix == "M":
        value *= 1024 * 1024

    if negative:
        value = -value
    return _to_s32(value)