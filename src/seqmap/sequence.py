"""
Growable Sequences (slices)

A Slice is a lightweight view over a shared Buffer:

    (buffer, offset, length, capacity)

    - buffer:   the backing storage, a fixed-size list of cells
    - offset:   first cell of the buffer that belongs to this view
    - length:   number of visible elements
    - capacity: cells available from offset to the end of the buffer

Several slices may alias the same buffer. Writes through any of them are
visible through all the others. An append that exceeds capacity allocates
a new buffer, so the returned slice is detached from every earlier view.
Callers must always keep the slice returned by append().

The nil slice has no buffer at all. It has length 0 and capacity 0 and
is the only slice for which `is_nil` is True.

ARCHITECTURAL RULE:
    Slice headers are immutable. Only buffer cells change.
    Every bounds check happens before any cell is written.
"""

from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from seqmap.errors import InvalidArgumentError, OutOfRangeError
from seqmap.zero import register_zero, zero_value


logger = logging.getLogger(__name__)

# Below this capacity append() doubles; above it growth slows to ~1.25x.
GROWTH_THRESHOLD = 256


@dataclass(eq=False)
class Buffer:
    """Backing storage shared by every slice that aliases it."""

    cells: List[Any]

    @property
    def size(self) -> int:
        return len(self.cells)


def _zeros(kind: type, count: int) -> List[Any]:
    return [zero_value(kind) for _ in range(count)]


@dataclass(frozen=True, eq=False)
class Slice:
    """
    A view over a sub-range of a Buffer.

    Construct with make(), Slice.of() or Slice.nil() rather than directly.

    Properties:
        kind: Element kind, used for zero-valued cells
        buffer: Shared backing storage (None for the nil slice)
        offset: Index of the first visible cell in buffer
        length: Number of visible elements
        capacity: Cells available from offset to the end of buffer

    Equality (==) compares elements, like slices_equal(). A nil slice
    and an empty slice are equal; use `is_nil` to tell them apart.
    """

    kind: type = object
    buffer: Optional[Buffer] = None
    offset: int = 0
    length: int = 0
    capacity: int = 0

    @classmethod
    def nil(cls, kind: type = object) -> "Slice":
        """Return the uninitialized slice of `kind`."""
        return cls(kind=kind)

    @classmethod
    def of(cls, kind: type, *values: Any) -> "Slice":
        """Build a slice literal; length and capacity both equal len(values)."""
        cells = list(values)
        return cls(kind=kind, buffer=Buffer(cells), offset=0, length=len(cells), capacity=len(cells))

    @property
    def is_nil(self) -> bool:
        return self.buffer is None

    def _check_index(self, i: int) -> int:
        i = operator.index(i)
        if i < 0 or i >= self.length:
            raise OutOfRangeError(f"index out of range [{i}] with length {self.length}")
        return self.offset + i

    def index_get(self, i: int) -> Any:
        return self.buffer.cells[self._check_index(i)]

    def index_set(self, i: int, value: Any) -> None:
        self.buffer.cells[self._check_index(i)] = value

    def subrange(self, low: int = 0, high: Optional[int] = None) -> "Slice":
        return subrange(self, low, high)

    def to_list(self) -> List[Any]:
        """Copy the visible elements into a new list."""
        if self.buffer is None:
            return []
        return self.buffer.cells[self.offset:self.offset + self.length]

    def shares_buffer(self, other: "Slice") -> bool:
        """True if both slices are views over the same backing storage."""
        return self.buffer is not None and self.buffer is other.buffer

    def __getitem__(self, key):
        if isinstance(key, slice):
            if key.step is not None:
                raise InvalidArgumentError("slices do not support a step")
            return subrange(self, 0 if key.start is None else key.start, key.stop)
        return self.index_get(key)

    def __setitem__(self, key, value) -> None:
        if isinstance(key, slice):
            raise TypeError("cannot assign to a sub-range; use copy()")
        self.index_set(key, value)

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Slice):
            return NotImplemented
        return slices_equal(self, other)

    __hash__ = None

    def __repr__(self) -> str:
        if self.is_nil:
            return f"Slice.nil({self.kind.__name__})"
        return f"Slice({self.kind.__name__}, {self.to_list()!r}, cap={self.capacity})"


register_zero(Slice, Slice.nil)


def make(length: int, capacity: Optional[int] = None, kind: type = str) -> Slice:
    """
    Allocate a slice of `length` zero-valued elements.

    Args:
        length: Number of visible elements
        capacity: Size of the backing buffer (defaults to length)
        kind: Element kind

    Returns:
        A slice owning a fresh buffer

    Raises:
        InvalidArgumentError: If a size is negative or capacity < length
    """
    if capacity is None:
        capacity = length
    if length < 0:
        raise InvalidArgumentError(f"makeslice: len out of range ({length})")
    if capacity < 0 or capacity < length:
        raise InvalidArgumentError(f"makeslice: cap out of range (len={length}, cap={capacity})")
    return Slice(kind=kind, buffer=Buffer(_zeros(kind, capacity)), offset=0, length=length, capacity=capacity)


def cap(s: Slice) -> int:
    return s.capacity


def grow_capacity(old_capacity: int, needed: int) -> int:
    """Pick the capacity of a reallocated buffer that must hold `needed` elements."""
    doubled = old_capacity * 2
    if needed > doubled:
        return needed
    if old_capacity < GROWTH_THRESHOLD:
        return doubled
    new_capacity = old_capacity
    while new_capacity < needed:
        new_capacity += (new_capacity + 3 * GROWTH_THRESHOLD) // 4
    return new_capacity


def append(s: Slice, *values: Any) -> Slice:
    """
    Return `s` extended by `values`.

    If the spare capacity of `s` fits the values they are written into
    the shared buffer and the result aliases `s`. Otherwise a new buffer
    is allocated and the result no longer shares storage with `s`.
    """
    if not values:
        return s
    needed = s.length + len(values)
    if needed <= s.capacity:
        start = s.offset + s.length
        s.buffer.cells[start:start + len(values)] = values
        return Slice(kind=s.kind, buffer=s.buffer, offset=s.offset, length=needed, capacity=s.capacity)

    new_capacity = grow_capacity(s.capacity, needed)
    logger.debug("append: reallocating buffer, cap %d -> %d (len %d)", s.capacity, new_capacity, needed)
    cells = s.to_list()
    cells.extend(values)
    cells.extend(_zeros(s.kind, new_capacity - needed))
    return Slice(kind=s.kind, buffer=Buffer(cells), offset=0, length=needed, capacity=new_capacity)


def copy(dst: Slice, src: Slice) -> int:
    """
    Copy elements from `src` into `dst`.

    Copies min(len(dst), len(src)) elements and returns that count.
    Overlapping views of one buffer are handled; dst is never resized.
    """
    count = min(dst.length, src.length)
    if count == 0:
        return 0
    staged = src.buffer.cells[src.offset:src.offset + count]
    dst.buffer.cells[dst.offset:dst.offset + count] = staged
    return count


def subrange(s: Slice, low: int = 0, high: Optional[int] = None) -> Slice:
    """
    Return the view s[low:high] without copying.

    The view shares the buffer of `s`, so its capacity runs to the end of
    that buffer: cap(view) == cap(s) - low.

    Raises:
        OutOfRangeError: Unless 0 <= low <= high <= len(s)
    """
    low = operator.index(low)
    high = s.length if high is None else operator.index(high)
    if high < 0 or high > s.length:
        raise OutOfRangeError(f"slice bounds out of range [:{high}] with length {s.length}")
    if low < 0 or low > high:
        raise OutOfRangeError(f"slice bounds out of range [{low}:{high}]")
    if s.is_nil:
        return s
    return Slice(kind=s.kind, buffer=s.buffer, offset=s.offset + low, length=high - low, capacity=s.capacity - low)


def slices_equal(a: Slice, b: Slice) -> bool:
    """True if both slices have the same length and equal elements in order."""
    if a.length != b.length:
        return False
    return all(x == y for x, y in zip(a.to_list(), b.to_list()))
