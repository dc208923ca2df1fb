from collections.abc import Iterator, Sequence

from .combination import Mode, working_sizes


def bounded_partitions(total: int, bounds: Sequence[int]) -> Iterator[tuple[int, ...]]:
    """
    Generate all partitions of `total` into `len(bounds)` parts, where each part
    is between zero and its bound. The constraints are:
    ```
    total == sum(part)
    all(0 <= count <= bound for count, bound in zip(part, bounds))
    ```
    """
    if not bounds:
        if total == 0:
            yield ()
        return
    bound = bounds[0]
    assert bound >= 0
    rest = sum(bounds[1:])
    for count in range(max(0, total - rest), min(bound, total) + 1):
        for part in bounded_partitions(total - count, bounds[1:]):
            yield (count,) + part


def count_bounded_partitions(total: int, bounds: Sequence[int]) -> int:
    """
    Count `bounded_partitions(total, bounds)` without enumerating, as the
    coefficient of `x**total` in `prod(1 + x + ... + x**b for b in bounds)`.
    """
    if total < 0:
        return 0
    coeffs = [1] + [0] * total
    for bound in bounds:
        # Multiply by (1 + x + ... + x**bound) via a running window sum.
        new = [0] * (total + 1)
        window = 0
        for k in range(total + 1):
            window += coeffs[k]
            if k > bound:
                window -= coeffs[k - bound - 1]
            new[k] = window
        coeffs = new
    return coeffs[total]


def count_combinations(counts: Sequence[int], size: int, mode: Mode) -> int:
    """
    Count distinct combinations of a multiset with the given per-type counts,
    for a requested size under a size mode. Oversize requests are clamped.
    """
    total = sum(counts)
    size = min(size, total)
    return sum(
        count_bounded_partitions(length, counts)
        for length in working_sizes(size, total, mode)
    )
