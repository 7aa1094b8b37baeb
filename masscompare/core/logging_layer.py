# masscompare/core/logging_layer.py
# Event Logging Layer
# masscompare v1.0.0
#
# Scope: Event-sourced run log for directory comparisons.
# Zero tolerance for lost events. No file IO. No global mutable state.
# All timestamps are caller-supplied. All hashes are deterministic.
#
# Canonical import:
#   from masscompare.core.logging_layer import EventLogger, Event, EventFilter
#
# Threading: an EventLogger is NOT shared with worker threads. The
# orchestrator logs from its own thread after every worker has joined.

# ===========================================================================
# SECTION 1 -- STDLIB IMPORTS
# ===========================================================================

import hashlib
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional

# ===========================================================================
# SECTION 2 -- INTERNAL DEPENDENCIES
# ===========================================================================

from masscompare.core.domain import ComparisonOutcome, OutcomeKind

# ===========================================================================
# SECTION 3 -- CONSTANTS
# ===========================================================================

EVENT_RUN_STARTED:   str = "RUN_STARTED"
EVENT_RUN_COMPLETED: str = "RUN_COMPLETED"
EVENT_FILE_MISMATCH: str = "FILE_MISMATCH"
EVENT_FILE_ERROR:    str = "FILE_ERROR"

_OUTCOME_EVENT_TYPES: Dict[OutcomeKind, str] = {
    OutcomeKind.MISMATCH: EVENT_FILE_MISMATCH,
    OutcomeKind.ERROR:    EVENT_FILE_ERROR,
}

# Field separator used inside the hash preimage.
_HASH_SEP: str = "|"

# ===========================================================================
# SECTION 4 -- DATACLASSES: Event, EventFilter
# ===========================================================================

@dataclass
class Event:
    """
    Record of a single run event.

    Fields
    ------
    id        : Deterministic identifier derived from the instance counter.
    type      : Category string (RUN_STARTED, FILE_MISMATCH, FILE_ERROR,
                RUN_COMPLETED, or any caller-defined type).
    timestamp : Caller-supplied datetime. Never generated internally.
    data      : Key-value payload, stored as given (shallow copy).
    hash      : SHA-256 hex digest over (id, type, timestamp, data).
    """
    id: str
    type: str
    timestamp: datetime
    data: Dict[str, Any]
    hash: str


@dataclass
class EventFilter:
    """
    Filter specification for EventLogger.query_events().

    All fields are optional. Omitted fields apply no constraint.
    """
    event_type: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    limit: Optional[int] = None


# ===========================================================================
# SECTION 5 -- INTERNAL HELPERS
# ===========================================================================

def _compute_hash(
    event_id: str,
    event_type: str,
    timestamp: datetime,
    data: Dict[str, Any],
) -> str:
    """
    Deterministic SHA-256 hex digest for an event.

    Preimage: event_id | event_type | timestamp.isoformat() | repr(sorted items)
    Sorting the items makes the digest independent of dict insertion order.
    """
    sorted_items: str = repr(sorted(data.items()))
    preimage: str = (
        event_id
        + _HASH_SEP
        + event_type
        + _HASH_SEP
        + timestamp.isoformat()
        + _HASH_SEP
        + sorted_items
    )
    return hashlib.sha256(preimage.encode("utf-8", errors="replace")).hexdigest()


def _make_event_id(counter: int) -> str:
    """Format: "EVT-{counter:016d}". Zero-padded for lexicographic order."""
    return "EVT-{:016d}".format(counter)


# ===========================================================================
# SECTION 6 -- EventLogger
# ===========================================================================

class EventLogger:
    """
    Event-sourced run log with deterministic per-event hashes.

    Storage
    -------
    Events are held in an instance-level list (_store). No file IO.
    Each EventLogger instance is fully independent.

    Zero lost events
    ----------------
    log_event() raises LoggingError on any invalid input instead of
    silently discarding the event.
    """

    def __init__(self) -> None:
        self._store: List[Event] = []
        self._counter: int = 0

    # -----------------------------------------------------------------------
    # SECTION 6.1 -- log_event
    # -----------------------------------------------------------------------

    def log_event(self, event_type: str, data: Dict[str, Any], timestamp: datetime) -> str:
        """
        Record one event. Return the assigned event ID.

        Raises
        ------
        LoggingError : If event_type is empty, data is not a dict, or
                       timestamp is not a datetime.
        """
        if not event_type:
            raise LoggingError("event_type must be a non-empty string")
        if not isinstance(data, dict):
            raise LoggingError(
                "data must be a dict; got: {}".format(type(data))
            )
        if timestamp is None:
            raise LoggingError("timestamp must be caller-supplied; None is not permitted")
        if not isinstance(timestamp, datetime):
            raise LoggingError(
                "timestamp must be a datetime instance; got: {}".format(type(timestamp))
            )

        self._counter += 1
        event_id: str = _make_event_id(self._counter)
        payload: Dict[str, Any] = dict(data)
        event_hash: str = _compute_hash(event_id, event_type, timestamp, payload)

        self._store.append(Event(
            id=event_id,
            type=event_type,
            timestamp=timestamp,
            data=payload,
            hash=event_hash,
        ))
        return event_id

    # -----------------------------------------------------------------------
    # SECTION 6.2 -- log_outcome
    # -----------------------------------------------------------------------

    def log_outcome(self, outcome: ComparisonOutcome, timestamp: datetime) -> Optional[str]:
        """
        Log a non-matching outcome as FILE_MISMATCH or FILE_ERROR.

        MATCH outcomes are not logged; None is returned for them.
        """
        if outcome is None:
            raise LoggingError("outcome must not be None")
        event_type = _OUTCOME_EVENT_TYPES.get(outcome.kind)
        if event_type is None:
            return None
        data: Dict[str, Any] = {"path": outcome.path}
        if outcome.message:
            data["message"] = outcome.message
        return self.log_event(event_type, data, timestamp)

    # -----------------------------------------------------------------------
    # SECTION 6.3 -- query_events
    # -----------------------------------------------------------------------

    def query_events(self, filter: EventFilter) -> List[Event]:
        """
        Return the events matching filter, oldest first.

        Filtering order: event_type, start_time (inclusive),
        end_time (inclusive), then limit truncation.
        """
        if filter is None:
            raise LoggingError("filter must not be None")

        results: List[Event] = []
        for event in self._store:
            if filter.event_type is not None and event.type != filter.event_type:
                continue
            if filter.start_time is not None and event.timestamp < filter.start_time:
                continue
            if filter.end_time is not None and event.timestamp > filter.end_time:
                continue
            results.append(event)

        if filter.limit is not None:
            results = results[: filter.limit]

        return results

    # -----------------------------------------------------------------------
    # SECTION 6.4 -- get_event_stream
    # -----------------------------------------------------------------------

    def get_event_stream(self, start_time: datetime) -> Iterator[Event]:
        """Yield events with timestamp >= start_time in insertion order."""
        if start_time is None:
            raise LoggingError("start_time must be caller-supplied; None is not permitted")
        if not isinstance(start_time, datetime):
            raise LoggingError(
                "start_time must be a datetime instance; got: {}".format(type(start_time))
            )
        for event in self._store:
            if event.timestamp >= start_time:
                yield event

    def event_count(self) -> int:
        return len(self._store)


# ===========================================================================
# SECTION 7 -- EXCEPTIONS
# ===========================================================================

class LoggingError(Exception):
    """
    Raised by EventLogger when an invariant is violated.

    Never silently swallowed. Callers must handle or propagate.
    """
