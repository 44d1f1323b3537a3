from __future__ import annotations

"""
Unit tests for the Timing Sink service.

A fake clock makes every duration deterministic.
"""

import logging
from typing import List

import pytest

from batchjson.core.services.timing import (
    LoggingTimingSink,
    NullTimingSink,
    RecordingTimingSink,
)
from batchjson.domain.batch_models import TimingEvent


class FakeClock:
    """Returns the queued instants (seconds) one per call."""

    def __init__(self, *instants: float) -> None:
        self._instants: List[float] = list(instants)

    def __call__(self) -> float:
        return self._instants.pop(0)


def test_recording_sink_emits_start_and_end_with_elapsed():
    sink = RecordingTimingSink(clock=FakeClock(1.0, 1.25))

    sink.start("job")
    elapsed = sink.end("job")

    assert elapsed == pytest.approx(250.0)
    assert sink.events == [
        TimingEvent(label="job", phase="start"),
        TimingEvent(label="job", phase="end", elapsed_ms=pytest.approx(250.0)),
    ]


def test_nested_labels_are_timed_independently():
    sink = RecordingTimingSink(clock=FakeClock(0.0, 0.1, 0.3, 1.0))

    sink.start("batch")
    sink.start("file")
    sink.end("file")
    sink.end("batch")

    durations = sink.durations()
    assert durations["file"] == pytest.approx(200.0)
    assert durations["batch"] == pytest.approx(1000.0)
    assert [e.phase for e in sink.events] == ["start", "start", "end", "end"]


def test_end_without_start_reports_zero_and_warns(caplog):
    sink = RecordingTimingSink(clock=FakeClock(5.0))

    with caplog.at_level(logging.WARNING, logger="batchjson.core.services.timing"):
        elapsed = sink.end("never-started")

    assert elapsed == 0.0
    assert sink.events[-1].elapsed_ms == 0.0
    assert "never-started" in caplog.text


def test_logging_sink_writes_console_timer_shape(caplog):
    target = logging.getLogger("test.timing")
    sink = LoggingTimingSink(target=target, clock=FakeClock(2.0, 2.0125))

    with caplog.at_level(logging.DEBUG, logger="test.timing"):
        sink.start("PARSING FILES")
        sink.end("PARSING FILES")

    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["PARSING FILES: started", "PARSING FILES: 12.500ms"]
    assert caplog.records[0].levelno == logging.DEBUG
    assert caplog.records[1].levelno == logging.INFO


def test_null_sink_still_measures():
    sink = NullTimingSink(clock=FakeClock(0.0, 0.002))

    sink.start("x")
    assert sink.end("x") == pytest.approx(2.0)
