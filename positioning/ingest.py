"""Background ingestion: raw lines in, recorded fixes out."""

import logging
import threading
from collections.abc import Callable, Iterable

from positioning.nmea import Fix, parse_sentence
from positioning.tracker import PositionTracker

__all__ = ["IngestionThread", "run_ingest_loop"]

_LOGGER = logging.getLogger(__name__)


def run_ingest_loop(
    lines: Iterable[str],
    tracker: PositionTracker,
    stop_event: threading.Event | None = None,
    on_fix: Callable[[Fix], None] | None = None,
) -> int:
    """Parse lines and record every position fix into ``tracker``.

    The loop returns when ``lines`` is exhausted, when the source raises
    ``EOFError`` (how ``NMEAReader`` reports cancellation), or when
    ``stop_event`` is set. The event is checked before each line, so a stop
    never interrupts a ``record`` half way.

    Args:
        lines: Any iterable of raw NMEA lines.
        tracker: Tracker receiving the parsed fixes.
        stop_event: Optional event requesting the loop to stop.
        on_fix: Optional callback invoked after each fix is recorded.

    Returns:
        Number of fixes recorded.
    """
    count = 0
    try:
        for line in lines:
            if stop_event is not None and stop_event.is_set():
                break
            fix = parse_sentence(line)
            if fix is None:
                continue
            tracker.record(fix)
            count += 1
            if on_fix is not None:
                on_fix(fix)
    except EOFError:
        _LOGGER.debug("Line source closed")
    return count


class IngestionThread:
    """Run ``run_ingest_loop`` on a background thread with an explicit stop.

    ``stop()`` sets the stop event and, when the line source has a
    ``cancel()`` method (as ``NMEAReader`` does), calls it so a read blocked
    on the source returns immediately.

    Usage::

        tracker = PositionTracker(capacity=10)
        with NMEAReader() as reader:
            ingestion = IngestionThread(reader, tracker)
            ingestion.start()
            ...
            ingestion.stop()

    Args:
        lines: Iterable of raw NMEA lines.
        tracker: Tracker receiving the parsed fixes.
        on_fix: Optional callback invoked after each fix is recorded.
    """

    def __init__(
        self,
        lines: Iterable[str],
        tracker: PositionTracker,
        on_fix: Callable[[Fix], None] | None = None,
    ) -> None:
        self._lines = lines
        self._tracker = tracker
        self._on_fix = on_fix
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name="nmea-ingestion", daemon=True
        )
        self.fix_count = 0

    def _run(self) -> None:
        _LOGGER.info("Ingestion started")
        self.fix_count = run_ingest_loop(
            self._lines, self._tracker, self._stop_event, self._on_fix
        )
        _LOGGER.info("Ingestion stopped after %d fixes", self.fix_count)

    def start(self) -> None:
        self._thread.start()

    def is_alive(self) -> bool:
        return self._thread.is_alive()

    def stop(self, timeout: float | None = None) -> None:
        """Signal the loop to stop, cancel the source, and wait for the thread."""
        self._stop_event.set()
        cancel = getattr(self._lines, "cancel", None)
        if callable(cancel):
            cancel()
        if self._thread.is_alive():
            self._thread.join(timeout)
