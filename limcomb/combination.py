"""
# Combinations of a multiset of small integers.

The generator here enumerates each distinct sorted sub-multiset of a fixed
multiset exactly once. Repeated values are treated as indistinguishable, so
choosing "the first 0" or "the second 0" never yields two combinations.

Combinations are represented by strictly increasing positions into the sorted
multiset. A position list is kept in canonical form: within each block of equal
values, chosen positions are always a prefix of the block. Advancing a slot
jumps straight to the start of the next block, which skips every position list
that would reproduce an already emitted value sequence.
"""

import logging
from collections.abc import Iterable, Iterator
from enum import Enum

from .metrics import COUNTERS

logger = logging.getLogger(__name__)
counter = COUNTERS[__name__]


class Mode(Enum):
    """Interpretation of a requested combination size."""

    EXACT = "exact"
    MIN = "min"  # at least size
    MAX = "max"  # at most size


def working_sizes(size: int, total: int, mode: Mode) -> range:
    """
    Returns the combination lengths that are valid for a requested `size` over
    a multiset of `total` items, in the order they are enumerated.
    """
    assert 0 <= size <= total
    if mode is Mode.EXACT:
        return range(size, size + 1)
    if mode is Mode.MIN:
        return range(max(1, size), total + 1)
    if mode is Mode.MAX:
        return range(min(1, size), size + 1)
    raise ValueError(f"Unknown mode: {mode}")


class IndexCombinationGenerator:
    """
    Lazy cursor over distinct combinations of a multiset of integers.

    Combinations are emitted shortest first, then lexicographically. The first
    combination is available via `.current()` right after construction; call
    `.next()` to advance until it returns False.
    """

    def __init__(self, items: Iterable[int], size: int, mode: Mode) -> None:
        self._items: tuple[int, ...] = tuple(sorted(items))
        n = len(self._items)
        if size < 0:
            raise ValueError(f"Expected nonnegative size, got {size}")
        if size > n:
            raise ValueError(f"Cannot choose {size} from {n} items")
        self._size = size
        self._mode = mode

        # _skip[p] is the first position holding a value larger than _items[p].
        self._skip: list[int] = [n] * n
        for p in range(n - 2, -1, -1):
            if self._items[p] == self._items[p + 1]:
                self._skip[p] = self._skip[p + 1]
            else:
                self._skip[p] = p + 1

        lengths = working_sizes(size, n, mode)
        if not lengths:
            raise ValueError(f"No {mode.value} {size} combinations of {n} items")
        self._lengths = iter(lengths)
        self._positions: list[int] = []
        self._exhausted = False
        self._start_length()

    @property
    def items(self) -> tuple[int, ...]:
        """The sorted multiset combinations are drawn from."""
        return self._items

    @property
    def size(self) -> int:
        return self._size

    @property
    def mode(self) -> Mode:
        return self._mode

    def current(self) -> tuple[int, ...]:
        """Returns the current combination as a non-decreasing tuple."""
        return tuple(self._items[p] for p in self._positions)

    def next(self) -> bool:
        """
        Advances to the next combination. Returns True if there is one, False
        if enumeration is exhausted.
        """
        counter["generator.next"] += 1
        if self._exhausted:
            return False
        if self._advance():
            return True
        return self._start_length()

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        """Iterates over the current and all remaining combinations."""
        if self._exhausted:
            return
        yield self.current()
        while self.next():
            yield self.current()

    def _start_length(self) -> bool:
        length = next(self._lengths, None)
        if length is None:
            counter["generator.exhausted"] += 1
            self._exhausted = True
            return False
        self._positions = list(range(length))
        return True

    def _advance(self) -> bool:
        positions = self._positions
        n = len(self._items)
        length = len(positions)
        for i in range(length - 1, -1, -1):
            q = self._skip[positions[i]]
            if q + length - i <= n:
                positions[i:] = range(q, q + length - i)
                return True
        return False
