"""CoreMark state-machine workload: classify comma-separated number tokens."""

from enum import IntEnum

from cpumarks.crc import crcu32


class CoreState(IntEnum):
    """States of the number-recognising machine."""

    START = 0
    INVALID = 1
    S1 = 2
    S2 = 3
    INT = 4
    FLOAT = 5
    EXPONENT = 6
    SCIENTIFIC = 7


NUM_CORE_STATES = len(CoreState)

_INT_PATTERNS = (b"5012", b"1234", b"-874", b"+122")
_FLOAT_PATTERNS = (b"35.54400", b".1234500", b"-110.700", b"+0.64400")
_SCI_PATTERNS = (b"5.500e+3", b"-.123e-2", b"-87e+832", b"+0.6e-12")
_ERR_PATTERNS = (b"T0.3e-1F", b"-T.T++Tq", b"1T3.4e4z", b"34.0e-T^")

_COMMA = ord(",")
_DOT = ord(".")
_SIGNS = (ord("+"), ord("-"))
_EXP = (ord("e"), ord("E"))


def _to_s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _isdigit(ch: int) -> bool:
    return 0x30 <= ch <= 0x39


def _pattern_for(seed: int) -> bytes:
    kind = seed & 0x7
    index = (seed >> 3) & 0x3
    if kind <= 2:
        return _INT_PATTERNS[index]
    if kind <= 4:
        return _FLOAT_PATTERNS[index]
    if kind <= 6:
        return _SCI_PATTERNS[index]
    return _ERR_PATTERNS[index]


def init_state(size: int, seed: int) -> bytearray:
    """Build a zero-terminated input block of ``size`` bytes from the seed."""
    if size < 1:
        raise ValueError("state block size must be at least 1")
    block = bytearray(size)
    limit = size - 1
    total = 0
    pending = b""
    seed = _to_s16(seed)
    while total + len(pending) + 1 < limit:
        if pending:
            end = total + len(pending)
            block[total:end] = pending
            block[end] = _COMMA
            total = end + 1
        seed = _to_s16(seed + 1)
        pending = _pattern_for(seed)
    return block


def state_transition(data, pos: int, transition_count: list) -> tuple:
    """Scan one token starting at ``pos``.

    Counts transitions into ``transition_count`` (indexed by state) and
    returns ``(final_state, next_pos)``.
    """
    state = CoreState.START
    end = len(data)
    while pos < end and data[pos] != 0 and state is not CoreState.INVALID:
        ch = data[pos]
        pos += 1
        if ch == _COMMA:
            break
        if state is CoreState.START:
            if _isdigit(ch):
                state = CoreState.INT
            elif ch in _SIGNS:
                state = CoreState.S1
            elif ch == _DOT:
                state = CoreState.FLOAT
            else:
                state = CoreState.INVALID
                transition_count[CoreState.INVALID] += 1
            transition_count[CoreState.START] += 1
        elif state is CoreState.S1:
            if _isdigit(ch):
                state = CoreState.INT
            elif ch == _DOT:
                state = CoreState.FLOAT
            else:
                state = CoreState.INVALID
            transition_count[CoreState.S1] += 1
        elif state is CoreState.INT:
            if ch == _DOT:
                state = CoreState.FLOAT
                transition_count[CoreState.INT] += 1
            elif not _isdigit(ch):
                state = CoreState.INVALID
                transition_count[CoreState.INT] += 1
        elif state is CoreState.FLOAT:
            if ch in _EXP:
                state = CoreState.S2
                transition_count[CoreState.FLOAT] += 1
            elif not _isdigit(ch):
                state = CoreState.INVALID
                transition_count[CoreState.FLOAT] += 1
        elif state is CoreState.S2:
            state = CoreState.EXPONENT if ch in _SIGNS else CoreState.INVALID
            transition_count[CoreState.S2] += 1
        elif state is CoreState.EXPONENT:
            state = CoreState.SCIENTIFIC if _isdigit(ch) else CoreState.INVALID
            transition_count[CoreState.EXPONENT] += 1
        elif state is CoreState.SCIENTIFIC:
            if not _isdigit(ch):
                state = CoreState.INVALID
                transition_count[CoreState.INVALID] += 1
    return state, pos


def _run_machine(memblock, final_counts, track_counts) -> None:
    pos = 0
    end = len(memblock)
    while pos < end and memblock[pos] != 0:
        state, pos = state_transition(memblock, pos, track_counts)
        final_counts[state] += 1


def _corrupt(memblock, blksize: int, key: int, step: int) -> None:
    key &= 0xFF
    for pos in range(0, min(blksize, len(memblock)), step):
        if memblock[pos] != _COMMA:
            memblock[pos] ^= key


def bench_state(blksize, memblock, seed1, seed2, step, crc) -> int:
    """Run the machine over the block, corrupt it, run again, and undo.

    The block is restored exactly when ``seed1`` equals ``seed2``.
    Returns the CRC of the final-state and transition counts.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    final_counts = [0] * NUM_CORE_STATES
    track_counts = [0] * NUM_CORE_STATES

    _run_machine(memblock, final_counts, track_counts)
    _corrupt(memblock, blksize, seed1, step)
    _run_machine(memblock, final_counts, track_counts)
    _corrupt(memblock, blksize, seed2, step)

    for final, track in zip(final_counts, track_counts):
        crc = crcu32(final, crc)
        crc = crcu32(track, crc)
    return crc