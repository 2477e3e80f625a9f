"""PositionTracker: bounded fix history with an averaged current position.

Threading model:
    One ingestion thread calls ``record`` while any number of other threads
    call ``current_position``. A single lock guards the history. Readers copy
    the history under the lock and average the copy outside it, so a reader
    never sees a history between eviction and append, and a slow average
    never delays ingestion.
"""

import threading
from collections import deque

from positioning.nmea.types import Fix
from positioning.tracker.spherical import spherical_mean

__all__ = ["PositionTracker"]


class PositionTracker:
    """Thread-safe rolling window of the most recent fixes.

    The history holds at most ``capacity`` fixes in arrival order. Recording
    into a full history evicts the oldest fix first. With a capacity of zero
    nothing is retained and the current position is always None.

    Usage::

        tracker = PositionTracker(capacity=10)
        fix = parse_sentence(line)
        if fix is not None:
            tracker.record(fix)
        position = tracker.current_position()  # None until the first fix

    Args:
        capacity: Maximum number of fixes kept (N >= 0).

    Raises:
        ValueError: If ``capacity`` is negative.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._history: deque[Fix] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        """Maximum number of fixes kept in the history."""
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._history)

    def record(self, fix: Fix) -> None:
        """Append ``fix`` as the newest entry, evicting the oldest when full."""
        with self._lock:
            self._history.append(fix)

    def history(self) -> tuple[Fix, ...]:
        """Return a snapshot of the history, oldest first."""
        with self._lock:
            return tuple(self._history)

    def current_position(self) -> Fix | None:
        """Return the spherical average of the history, or None if it is empty.

        A history of one fix returns that fix unchanged. Calls with no
        intervening ``record`` return equal results.
        """
        return spherical_mean(self.history())
