"""CoreMark linked-list workload: find, reverse, sort and checksum a list in place."""

from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional

from cpumarks.coremark_matrix import MatrixParams, bench_matrix
from cpumarks.coremark_state import bench_state
from cpumarks.crc import crc16, crcu16

ID_LIST = 1 << 0
ID_MATRIX = 1 << 1
ID_STATE = 1 << 2
ALL_ALGORITHMS_MASK = ID_LIST | ID_MATRIX | ID_STATE
NUM_ALGORITHMS = 3

# Bytes budgeted per list item: room for two 64-bit pointers plus the data cell.
_BYTES_PER_ITEM = 16 + 4


def _to_s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


@dataclass
class ListData:
    """Payload of a list cell: a 16-bit data word and the original index."""

    data16: int = 0
    idx: int = 0


@dataclass(eq=False)
class ListNode:
    """Singly linked list cell."""

    info: ListData
    next: Optional["ListNode"] = field(default=None, repr=False)

    def __iter__(self) -> Iterator["ListNode"]:
        """Yield this node and every node after it."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


@dataclass
class CoreResults:
    """Inputs, working data and CRC outputs of one CoreMark context."""

    seed1: int = 0
    seed2: int = 0
    seed3: int = 0
    size: int = 0
    iterations: int = 0
    execs: int = ALL_ALGORITHMS_MASK
    list_head: Optional[ListNode] = None
    matrix: Optional[MatrixParams] = None
    state: Optional[bytearray] = None
    crc: int = 0
    crclist: int = 0
    crcmatrix: int = 0
    crcstate: int = 0
    err: int = 0


CompareFunc = Callable[[ListData, ListData, Optional[CoreResults]], int]


def calc_func(info: ListData, res: CoreResults) -> int:
    """Return the 7-bit value of ``info``, computing and caching it if needed.

    Bit 7 of the data word marks a cached result. Otherwise bits 0-2 select
    the state or matrix workload, bits 3-6 its parameter, and the result is
    folded into ``res.crc`` before being cached in the low byte.
    """
    data = _to_s16(info.data16)
    if (data >> 7) & 1:
        return data & 0x007F

    flag = data & 0x7
    dtype = (data >> 3) & 0xF
    dtype |= dtype << 4
    if flag == 0:
        if res.state is None:
            raise ValueError("state workload data is not initialised")
        dtype = max(dtype, 0x22)
        retval = _to_s16(bench_state(res.size, res.state, res.seed1, res.seed2,
                                     dtype, res.crc))
        if res.crcstate == 0:
            res.crcstate = retval & 0xFFFF
    elif flag == 1:
        if res.matrix is None:
            raise ValueError("matrix workload data is not initialised")
        retval = _to_s16(bench_matrix(res.matrix, dtype, res.crc))
        if res.crcmatrix == 0:
            res.crcmatrix = retval & 0xFFFF
    else:
        retval = data

    res.crc = crcu16(retval, res.crc)
    retval &= 0x007F
    info.data16 = _to_s16((data & 0xFF00) | 0x0080 | retval)
    return retval


def cmp_complex(a: ListData, b: ListData, res: Optional[CoreResults]) -> int:
    """Order cells by their computed data values."""
    val1 = calc_func(a, res)
    val2 = calc_func(b, res)
    return val1 - val2


def cmp_idx(a: ListData, b: ListData, res: Optional[CoreResults]) -> int:
    """Order cells by index; with no results context, also restore their data words."""
    if res is None:
        for cell in (a, b):
            cell.data16 = _to_s16((cell.data16 & 0xFF00) | (0x00FF & (cell.data16 >> 8)))
    return a.idx - b.idx


def list_find(head: Optional[ListNode], info: ListData) -> Optional[ListNode]:
    """Find the first cell matching ``info.idx`` or, if that is negative, the low data byte."""
    if info.idx >= 0:
        return next((node for node in (head or ()) if node.info.idx == info.idx), None)
    return next(
        (node for node in (head or ()) if (node.info.data16 & 0xFF) == info.data16),
        None,
    )


def list_reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    reversed_head = None
    while head is not None:
        following = head.next
        head.next = reversed_head
        reversed_head = head
        head = following
    return reversed_head


def list_remove(item: ListNode) -> ListNode:
    """Unlink the cell after ``item``, swapping payloads so ``item`` keeps the next one's data.

    Returns the unlinked cell, which now holds ``item``'s former payload.
    """
    removed = item.next
    if removed is None:
        raise ValueError("cannot remove past the end of the list")
    item.info, removed.info = removed.info, item.info
    item.next = removed.next
    removed.next = None
    return removed


def list_undo_remove(item_removed: ListNode, item_modified: ListNode) -> ListNode:
    """Reverse a :func:`list_remove`, relinking the removed cell after ``item_modified``."""
    item_removed.info, item_modified.info = item_modified.info, item_removed.info
    item_removed.next = item_modified.next
    item_modified.next = item_removed
    return item_removed


def list_mergesort(head: Optional[ListNode], cmp: CompareFunc,
                   res: Optional[CoreResults]) -> Optional[ListNode]:
    """Sort the list with a stable bottom-up merge sort and return the new head."""
    insize = 1
    while True:
        p = head
        head = None
        tail: Optional[ListNode] = None
        nmerges = 0

        while p is not None:
            nmerges += 1
            q: Optional[ListNode] = p
            psize = 0
            for _ in range(insize):
                psize += 1
                q = q.next
                if q is None:
                    break
            qsize = insize

            while psize > 0 or (qsize > 0 and q is not None):
                if psize == 0:
                    chosen, q = q, q.next
                    qsize -= 1
                elif qsize == 0 or q is None:
                    chosen, p = p, p.next
                    psize -= 1
                elif cmp(p.info, q.info, res) <= 0:
                    chosen, p = p, p.next
                    psize -= 1
                else:
                    chosen, q = q, q.next
                    qsize -= 1

                if tail is not None:
                    tail.next = chosen
                else:
                    head = chosen
                tail = chosen
            p = q

        if tail is not None:
            tail.next = None
        if nmerges <= 1:
            return head
        insize *= 2


def list_init(blksize: int, seed: int) -> ListNode:
    """Build the benchmark list for a block of ``blksize`` bytes.

    The list starts with a head cell (index 0) and ends with a sentinel cell
    (index 0x7fff); the items between get seed-dependent data and indexes,
    and the list is returned sorted by index.
    """
    size = blksize // _BYTES_PER_ITEM - 2
    if size < 3:
        raise ValueError("list block size is too small")
    seed = _to_s16(seed)

    head = ListNode(ListData(data16=_to_s16(0x8080), idx=0))
    capacity = size - 2
    inserted = 0

    def insert(data16: int, idx: int) -> None:
        nonlocal inserted
        if inserted >= capacity:
            return
        head.next = ListNode(ListData(data16=data16, idx=idx), head.next)
        inserted += 1

    insert(_to_s16(0xFFFF), 0x7FFF)
    for i in range(size):
        datpat = (seed ^ i) & 0xF
        dat = (datpat << 3) | (i & 0x7)
        insert(_to_s16((dat << 8) | dat), 0x7FFF)

    counter = 1
    node = head.next
    while node.next is not None:
        if counter < size // 5:
            node.info.idx = counter
            counter += 1
        else:
            pat = (counter ^ seed) & 0xFFFF
            counter += 1
            node.info.idx = 0x3FFF & (((counter & 0x07) << 8) | pat)
        node = node.next

    return list_mergesort(head, cmp_idx, None)


def bench_list(res: CoreResults, finder_idx: int) -> int:
    """Run one pass of the list workload and return its 16-bit checksum.

    The list is searched, reversed and reshuffled, sorted by data, partially
    removed and restored; at the end it is back in its original order.
    """
    head = res.list_head
    if head is None:
        raise ValueError("list workload data is not initialised")

    retval = 0
    found = 0
    missed = 0
    info = ListData(data16=0, idx=_to_s16(finder_idx))

    for i in range(max(_to_s16(res.seed3), 0)):
        info.data16 = i & 0xFF
        this_find = list_find(head, info)
        head = list_reverse(head)
        if this_find is None:
            missed += 1
            retval += (head.next.info.data16 >> 8) & 1
        else:
            found += 1
            if this_find.info.data16 & 0x1:
                retval += (this_find.info.data16 >> 9) & 1
            if this_find.next is not None:
                moved = this_find.next
                this_find.next = moved.next
                moved.next = head.next
                head.next = moved
        if info.idx >= 0:
            info.idx = _to_s16(info.idx + 1)
        retval &= 0xFFFF

    retval = (retval + found * 4 - missed) & 0xFFFF

    if finder_idx > 0:
        head = list_mergesort(head, cmp_complex, res)
    remover = list_remove(head.next)

    finder = list_find(head, info)
    if finder is None:
        finder = head.next
    for _ in finder or ():
        retval = crc16(head.info.data16, retval)

    list_undo_remove(remover, head.next)
    head = list_mergesort(head, cmp_idx, None)

    for _ in head.next or ():
        retval = crc16(head.info.data16, retval)
    return retval