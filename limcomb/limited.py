"""
# Combinations of limited but typed resources.

For available resources A:2, B:1, C:1 the following combinations are possible:
```
max size 1: A, B, C
max size 2: AA, AB, AC, BC
max size 3: AAB, AAC, ABC
```
Atom types are mapped to small integers so that the core combinatorics in
combination.py compares ints rather than arbitrary caller objects.

Example:
```
counts = {"A": 2, "B": 1, "C": 1}
combinations = LimitedCombination(counts, total_number_of_atoms(counts), Mode.MAX)
for combination in combinations:
    print("".join(combination))
```
"""

import logging
from collections.abc import Iterator, Mapping
from typing import Any, Generic, TypeVar

from immutables import Map

from .combination import IndexCombinationGenerator, Mode
from .metrics import COUNTERS

logger = logging.getLogger(__name__)
counter = COUNTERS[__name__]

# Atom types must be hashable and totally ordered.
A = TypeVar("A")


def total_number_of_atoms(availability: Mapping[Any, int]) -> int:
    """Returns the sum of available counts over all atom types."""
    return sum(availability.values())


class LimitedCombination(Generic[A]):
    """
    Lazy cursor over distinct combinations of typed atoms with limited
    availability.

    Args:
        availability: Mapping from atom type to the number of available atoms
            of that type.
        size: Requested combination size, interpreted according to `mode`.
            Sizes larger than the total number of atoms are clamped.
        mode: Whether `size` is an exact, minimum, or maximum size.
    """

    total_number_of_atoms = staticmethod(total_number_of_atoms)

    def __init__(self, availability: Mapping[A, int], size: int, mode: Mode) -> None:
        counter["limited.init"] += 1
        for atom, count in availability.items():
            if count < 0:
                raise ValueError(f"Expected nonnegative count for {atom!r}, got {count}")
        total = total_number_of_atoms(availability)
        if not availability or total == 0:
            raise ValueError(
                "No atoms to generate combinations from, check for empty map"
            )
        if size < 0:
            raise ValueError(f"Expected nonnegative size, got {size}")
        if size > total:
            logger.debug(f"Clamping size {size} to total number of atoms {total}")
            counter["limited.clamp"] += 1
            size = total

        self._availability: Map[A, int] = Map(availability)
        self._size = size
        self._mode = mode

        # Assign type indices in sorted key order.
        self._atoms: tuple[A, ...] = tuple(sorted(self._availability))
        items: list[int] = []
        for index, atom in enumerate(self._atoms):
            items.extend([index] * self._availability[atom])
        self._generator = IndexCombinationGenerator(items, size, mode)

    @property
    def availability(self) -> Map[A, int]:
        return self._availability

    @property
    def size(self) -> int:
        """The requested size, after clamping."""
        return self._size

    @property
    def mode(self) -> Mode:
        return self._mode

    def current(self) -> tuple[A, ...]:
        """Returns the current combination, sorted by atom type."""
        return self._to_atoms(self._generator.current())

    def next(self) -> bool:
        """
        Advances to the next combination. Returns True if there is another
        valid combination, False if enumeration is exhausted.
        """
        return self._generator.next()

    def __iter__(self) -> Iterator[tuple[A, ...]]:
        """Iterates over the current and all remaining combinations."""
        for indices in self._generator:
            yield self._to_atoms(indices)

    def _to_atoms(self, indices: tuple[int, ...]) -> tuple[A, ...]:
        return tuple(sorted(self._atoms[i] for i in indices))

    def __repr__(self) -> str:
        counts = ", ".join(f"{a!r}: {self._availability[a]}" for a in self._atoms)
        return (
            f"{type(self).__name__}({{{counts}}}, size={self._size}, "
            f"mode={self._mode.name})"
        )


def limited_combinations(
    availability: Mapping[A, int], size: int, mode: Mode
) -> Iterator[tuple[A, ...]]:
    """Generate all combinations of typed atoms with limited availability."""
    yield from LimitedCombination(availability, size, mode)
