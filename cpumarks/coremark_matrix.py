"""CoreMark matrix workload on flat row-major lists of fixed-width integers."""

from dataclasses import dataclass, field

from cpumarks.crc import crc16


def _to_s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def _to_s32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x1_0000_0000 if value & 0x8000_0000 else value


def _c_mod(a: int, b: int) -> int:
    """Remainder truncated toward zero, as integer ``%`` does in C."""
    rem = abs(a) % abs(b)
    return -rem if a < 0 else rem


def _bit_extract(x: int, low: int, width: int) -> int:
    return (x >> low) & ((1 << width) - 1)


@dataclass
class MatrixParams:
    """Square matrices of dimension ``n``: inputs ``a``, ``b`` and result ``c``."""

    n: int
    a: list = field(default_factory=list)
    b: list = field(default_factory=list)
    c: list = field(default_factory=list)


def init_matrix(blksize: int, seed: int) -> MatrixParams:
    """Choose a dimension that fits ``blksize`` bytes and fill A and B from the seed."""
    if blksize < 1:
        raise ValueError("matrix block size must be at least 1")
    seed = _to_s32(seed) or 1

    side = 0
    used = 0
    while used < blksize:
        side += 1
        used = side * side * 2 * 4
    n = side - 1

    a = []
    b = []
    for order in range(1, n * n + 1):
        seed = _c_mod(_to_s32(order * seed), 65536)
        val = _to_s16((seed + order) & 0xFFFF)
        b.append(val)
        a.append(_to_s16(val + order) & 0xFF)
    return MatrixParams(n=n, a=a, b=b, c=[0] * (n * n))


def matrix_add_const(n, a, val) -> None:
    """Add ``val`` to every element of ``a`` in place (16-bit wrap)."""
    for k in range(n * n):
        a[k] = _to_s16(a[k] + val)


def matrix_mul_const(n, c, a, val) -> None:
    """Store ``a * val`` into ``c``."""
    for k in range(n * n):
        c[k] = _to_s32(a[k] * val)


def matrix_mul_vect(n, c, a, b) -> None:
    """Store the product of ``a`` and the vector held in the first ``n`` entries of ``b`` into ``c[:n]``."""
    vector = b[:n]
    for i in range(n):
        row = a[i * n:(i + 1) * n]
        c[i] = _to_s32(sum(x * y for x, y in zip(row, vector)))


def matrix_mul_matrix(n, c, a, b) -> None:
    """Store the matrix product ``a @ b`` into ``c``."""
    columns = [b[j::n][:n] for j in range(n)]
    for i in range(n):
        row = a[i * n:(i + 1) * n]
        for j, column in enumerate(columns):
            c[i * n + j] = _to_s32(sum(x * y for x, y in zip(row, column)))


def matrix_mul_matrix_bitextract(n, c, a, b) -> None:
    """Like a matrix product, but each term contributes the product of two bit fields."""
    columns = [b[j::n][:n] for j in range(n)]
    for i in range(n):
        row = a[i * n:(i + 1) * n]
        for j, column in enumerate(columns):
            acc = 0
            for x, y in zip(row, column):
                term = _to_s32(x * y)
                acc += _bit_extract(term, 2, 4) * _bit_extract(term, 5, 7)
            c[i * n + j] = _to_s32(acc)


def matrix_sum(n, c, clipval) -> int:
    """Score ``c``: +1 per rising element, +10 and reset each time the running sum exceeds ``clipval``."""
    tmp = 0
    prev = 0
    ret = 0
    for cur in c[:n * n]:
        tmp = _to_s32(tmp + cur)
        if tmp > clipval:
            ret += 10
            tmp = 0
        elif cur > prev:
            ret += 1
        prev = cur
    return _to_s16(ret)


def matrix_test(n, c, a, b, val) -> int:
    """Run every matrix operation once and return a CRC of their sums; ``a`` ends unchanged."""
    val = _to_s16(val)
    clipval = _to_s16(0xF000 | val)
    crc = 0

    matrix_add_const(n, a, val)
    matrix_mul_const(n, c, a, val)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_mul_vect(n, c, a, b)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_mul_matrix(n, c, a, b)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_mul_matrix_bitextract(n, c, a, b)
    crc = crc16(matrix_sum(n, c, clipval), crc)
    matrix_add_const(n, a, _to_s16(-val))
    return _to_s16(crc)


def bench_matrix(params: MatrixParams, seed: int, crc: int) -> int:
    """Fold the result of one :func:`matrix_test` pass into ``crc``."""
    result = matrix_test(params.n, params.c, params.a, params.b, _to_s16(seed))
    return crc16(result, crc)