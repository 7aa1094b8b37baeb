# tests/unit/core/test_logging_layer.py
# Target: masscompare/core/logging_layer.py
# Deterministic: all timestamps are fixed literals.

from datetime import datetime, timedelta, timezone

import pytest

from masscompare.core.domain import ComparisonOutcome
from masscompare.core.logging_layer import (
    EVENT_FILE_ERROR,
    EVENT_FILE_MISMATCH,
    Event,
    EventFilter,
    EventLogger,
    LoggingError,
    _compute_hash,
    _make_event_id,
)


_T0 = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


def _at(seconds: int) -> datetime:
    return _T0 + timedelta(seconds=seconds)


# =============================================================================
# SECTION 1 -- Internal helpers
# =============================================================================

class TestHelpers:

    def test_event_id_format(self):
        assert _make_event_id(1) == "EVT-0000000000000001"

    def test_hash_is_deterministic(self):
        h1 = _compute_hash("EVT-1", "T", _T0, {"b": 2, "a": 1})
        h2 = _compute_hash("EVT-1", "T", _T0, {"a": 1, "b": 2})
        assert h1 == h2
        assert len(h1) == 64

    def test_hash_depends_on_type(self):
        assert _compute_hash("EVT-1", "T", _T0, {}) != _compute_hash("EVT-1", "U", _T0, {})


# =============================================================================
# SECTION 2 -- log_event
# =============================================================================

class TestLogEvent:

    def test_returns_sequential_ids(self):
        logger = EventLogger()
        assert logger.log_event("T", {}, _T0) == "EVT-0000000000000001"
        assert logger.log_event("T", {}, _T0) == "EVT-0000000000000002"
        assert logger.event_count() == 2

    def test_payload_is_copied(self):
        logger = EventLogger()
        data = {"k": 1}
        logger.log_event("T", data, _T0)
        data["k"] = 2
        assert logger.query_events(EventFilter())[0].data == {"k": 1}

    def test_empty_type_rejected(self):
        with pytest.raises(LoggingError):
            EventLogger().log_event("", {}, _T0)

    def test_none_timestamp_rejected(self):
        with pytest.raises(LoggingError, match="caller-supplied"):
            EventLogger().log_event("T", {}, None)  # type: ignore[arg-type]

    def test_non_datetime_timestamp_rejected(self):
        with pytest.raises(LoggingError, match="datetime"):
            EventLogger().log_event("T", {}, "2024-01-01")  # type: ignore[arg-type]

    def test_non_dict_data_rejected(self):
        with pytest.raises(LoggingError, match="dict"):
            EventLogger().log_event("T", [1, 2], _T0)  # type: ignore[arg-type]

    def test_stored_event_fields(self):
        logger = EventLogger()
        logger.log_event("T", {"x": 1}, _T0)
        event = logger.query_events(EventFilter())[0]
        assert isinstance(event, Event)
        assert event.type == "T"
        assert event.timestamp == _T0
        assert event.hash == _compute_hash(event.id, "T", _T0, {"x": 1})


# =============================================================================
# SECTION 3 -- log_outcome
# =============================================================================

class TestLogOutcome:

    def test_mismatch_logged(self):
        logger = EventLogger()
        event_id = logger.log_outcome(ComparisonOutcome.mismatch("A/x"), _T0)
        event = logger.query_events(EventFilter())[0]
        assert event.id == event_id
        assert event.type == EVENT_FILE_MISMATCH
        assert event.data == {"path": "A/x"}

    def test_error_logged_with_message(self):
        logger = EventLogger()
        logger.log_outcome(ComparisonOutcome.error("A/x", "boom"), _T0)
        event = logger.query_events(EventFilter())[0]
        assert event.type == EVENT_FILE_ERROR
        assert event.data == {"path": "A/x", "message": "boom"}

    def test_match_not_logged(self):
        logger = EventLogger()
        assert logger.log_outcome(ComparisonOutcome.match("A/x"), _T0) is None
        assert logger.event_count() == 0

    def test_none_outcome_rejected(self):
        with pytest.raises(LoggingError):
            EventLogger().log_outcome(None, _T0)  # type: ignore[arg-type]


# =============================================================================
# SECTION 4 -- query_events / get_event_stream
# =============================================================================

class TestQueries:

    def _populated(self) -> EventLogger:
        logger = EventLogger()
        logger.log_event("A", {}, _at(0))
        logger.log_event("B", {}, _at(10))
        logger.log_event("A", {}, _at(20))
        logger.log_event("B", {}, _at(30))
        return logger

    def test_filter_by_type(self):
        events = self._populated().query_events(EventFilter(event_type="A"))
        assert [e.timestamp for e in events] == [_at(0), _at(20)]

    def test_filter_by_time_window_inclusive(self):
        events = self._populated().query_events(
            EventFilter(start_time=_at(10), end_time=_at(20)),
        )
        assert [e.type for e in events] == ["B", "A"]

    def test_limit_keeps_oldest(self):
        events = self._populated().query_events(EventFilter(limit=2))
        assert [e.timestamp for e in events] == [_at(0), _at(10)]

    def test_none_filter_rejected(self):
        with pytest.raises(LoggingError):
            EventLogger().query_events(None)  # type: ignore[arg-type]

    def test_stream_from_start_time(self):
        stream = self._populated().get_event_stream(_at(15))
        assert [e.timestamp for e in stream] == [_at(20), _at(30)]

    def test_stream_rejects_non_datetime(self):
        with pytest.raises(LoggingError):
            list(EventLogger().get_event_stream(15))  # type: ignore[arg-type]
