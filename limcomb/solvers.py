"""
# Enumerating bounded combinations with Z3.

A combination of typed atoms is determined by how many atoms of each type it
uses. This module encodes those counts as Z3 integers and enumerates every
model, blocking each one after it is found. The encoding shares nothing with
the positional algorithm in combination.py, so it serves as an independent
check of that algorithm.
"""

import logging
from collections.abc import Iterator, Sequence

import z3

from .combination import Mode, working_sizes
from .metrics import COUNTERS

logger = logging.getLogger(__name__)
counter = COUNTERS[__name__]


def combination_constraints(
    counts: Sequence[int], size: int, mode: Mode
) -> tuple[list[z3.ArithRef], list[z3.BoolRef]]:
    """
    Encode combinations of a multiset with the given per-type counts.

    Args:
        counts: Number of available atoms of each type.
        size: Requested combination size; clamped to the total.
        mode: Interpretation of the size.

    Returns:
        Tuple of:
        - One Z3 integer per type, the number of atoms of that type used
        - The list of constraints on those integers
    """
    total = sum(counts)
    lengths = working_sizes(min(size, total), total, mode)
    xs = [z3.Int(f"x{i}") for i in range(len(counts))]
    constraints: list[z3.BoolRef] = []
    for x, count in zip(xs, counts, strict=True):
        constraints.append(0 <= x)
        constraints.append(x <= count)
    length = z3.Sum(xs) if xs else z3.IntVal(0)
    constraints.append(lengths.start <= length)
    constraints.append(length <= lengths.stop - 1)
    return xs, constraints


def combination_solver(
    counts: Sequence[int], size: int, mode: Mode, *, timeout_ms: int
) -> tuple[list[z3.ArithRef], z3.Solver]:
    """Returns the count variables and a fresh solver holding their constraints."""
    xs, constraints = combination_constraints(counts, size, mode)
    solver = z3.Solver()
    solver.set(timeout=timeout_ms)
    solver.add(*constraints)
    return xs, solver


def iter_solver_combinations(
    counts: Sequence[int],
    size: int,
    mode: Mode,
    *,
    timeout_ms: int = 1000,
) -> Iterator[tuple[int, ...]]:
    """
    Enumerate per-type count vectors of all valid combinations, in no
    particular order.

    Raises:
        TimeoutError: if Z3 fails to decide a query within `timeout_ms`.
    """
    counter["iter_solver_combinations"] += 1
    xs, solver = combination_solver(counts, size, mode, timeout_ms=timeout_ms)
    while True:
        result = solver.check()
        if result == z3.unsat:
            return
        if result == z3.unknown:
            raise TimeoutError(f"Z3 timed out after {timeout_ms}ms")
        if result != z3.sat:
            raise ValueError(f"Z3 returned unexpected result: {result}")
        counter["model"] += 1
        model = solver.model()
        values = tuple(model.eval(x, model_completion=True).as_long() for x in xs)
        logger.debug(f"Found model {values}")
        yield values
        if not xs:
            return
        # Block this model.
        solver.add(z3.Or([x != v for x, v in zip(xs, values, strict=True)]))
