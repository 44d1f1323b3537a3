from __future__ import annotations

"""
Timing Sink Service.

Observability collaborator injected into the loader. The loader only calls
start()/end() at fixed points; what happens to the resulting marks (logged,
recorded, dropped) is decided by the sink the caller passes in.
"""

import logging
import time
from typing import Callable, Dict, List, Optional

from batchjson.domain.batch_models import TimingEvent

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# BASE SINK
# -----------------------------------------------------------------------------

class TimingSink:
    """
    Base timer that turns start/end calls into TimingEvent objects.

    Subclasses only decide what to do with an event by overriding emit().
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.perf_counter
        self._started: Dict[str, float] = {}

    def start(self, label: str) -> None:
        """Open a timing mark. Restarting an open label resets its instant."""
        self._started[label] = self._clock()
        self.emit(TimingEvent(label=label, phase="start"))

    def end(self, label: str) -> float:
        """
        Close a timing mark.

        Args:
            label: The label previously passed to start().

        Returns:
            float: Elapsed milliseconds, 0.0 if the label was never started.
        """
        began = self._started.pop(label, None)
        if began is None:
            logger.warning(f"Timer '{label}' was ended without being started.")
            elapsed_ms = 0.0
        else:
            elapsed_ms = (self._clock() - began) * 1000.0
        self.emit(TimingEvent(label=label, phase="end", elapsed_ms=elapsed_ms))
        return elapsed_ms

    def emit(self, event: TimingEvent) -> None:
        raise NotImplementedError


# -----------------------------------------------------------------------------
# CONCRETE SINKS
# -----------------------------------------------------------------------------

class LoggingTimingSink(TimingSink):
    """Writes marks to a logger, end marks in the '<label>: <ms>ms' shape."""

    def __init__(
            self,
            target: Optional[logging.Logger] = None,
            clock: Optional[Callable[[], float]] = None,
    ) -> None:
        super().__init__(clock)
        self._logger = target or logger

    def emit(self, event: TimingEvent) -> None:
        if event.phase == "start":
            self._logger.debug(f"{event.label}: started")
        else:
            self._logger.info(f"{event.label}: {event.elapsed_ms:.3f}ms")


class RecordingTimingSink(TimingSink):
    """Keeps every mark in memory, in emission order."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        super().__init__(clock)
        self.events: List[TimingEvent] = []

    def emit(self, event: TimingEvent) -> None:
        self.events.append(event)

    def durations(self) -> Dict[str, float]:
        """Map each ended label to its last elapsed time."""
        return {
            e.label: e.elapsed_ms
            for e in self.events
            if e.phase == "end" and e.elapsed_ms is not None
        }


class NullTimingSink(TimingSink):
    """Measures but discards every mark."""

    def emit(self, event: TimingEvent) -> None:
        return None
