"""
# Named event counters, one `Counter` per module.

Modules bind `counter = COUNTERS[__name__]` and increment events by name.
"""

import logging
from collections import Counter, defaultdict

logger = logging.getLogger(__name__)

COUNTERS: defaultdict[str, Counter[str]] = defaultdict(Counter)


def log_counters(level: int = logging.INFO) -> None:
    """Log all nonzero counters, grouped by module."""
    lines = []
    for module, counter in sorted(COUNTERS.items()):
        for name, count in sorted(counter.items()):
            if count:
                lines.append(f"{module}\t{name}\t{count}")
    if lines:
        logger.log(level, "Counters:\n" + "\n".join(lines))


def reset_counters() -> None:
    """Zero all counters, keeping the per-module objects bound elsewhere."""
    for counter in COUNTERS.values():
        counter.clear()
