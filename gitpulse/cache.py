"""
Cache Layer - Time-based memoization of the change count.

Word diffs are the expensive part of a refresh, so the change count is
recomputed at most once per update interval. Expiry is the only
invalidation.
"""

from __future__ import annotations

from typing import Callable, Optional

ChangeCounter = Callable[[str], int]


class ChangeCache:
    """Holds the last change count and when it was computed."""

    def __init__(self, counter: ChangeCounter):
        self.counter = counter
        self.value: Optional[int] = None
        self.last_update: float = 0.0

    def is_stale(self, now: float, interval: float) -> bool:
        return self.value is None or now - self.last_update >= interval

    def get(self, directory: str, now: float, interval: float) -> int:
        """Return the cached count, recomputing it once the interval elapsed.

        Args:
            directory: Directory handed to the counter on recompute
            now: Current timestamp in seconds
            interval: Seconds a computed value stays fresh

        Returns:
            int: The current change count
        """
        if self.is_stale(now, interval):
            self.value = self.counter(directory)
            self.last_update = now
        return self.value
