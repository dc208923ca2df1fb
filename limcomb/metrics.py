"""
# Event counters for profiling enumeration.

Each module binds `counter = COUNTERS[__name__]` and increments named events.
"""

import logging
from collections import Counter, defaultdict

logger = logging.getLogger(__name__)

COUNTERS: defaultdict[str, Counter[str]] = defaultdict(Counter)


def log_counters(level: int = logging.INFO) -> None:
    """Log all nonzero counters, grouped by module."""
    lines = []
    for name, counter in sorted(COUNTERS.items()):
        for key, count in sorted(counter.items()):
            if count:
                lines.append(f"{name}.{key} = {count}")
    if lines:
        logger.log(level, "Counters:\n" + "\n".join(lines))


def reset_counters() -> None:
    """Zero out all counters, for testing."""
    for counter in COUNTERS.values():
        counter.clear()
