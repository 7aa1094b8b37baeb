# masscompare/core/__init__.py
# Comparison engine leaves: data model, errors, buffer comparison,
# streaming pair and event log.

from masscompare.core.domain import (
    FilePairJob,
    OutcomeKind,
    ComparisonOutcome,
    CompareParameters,
    DirectoryComparisonReport,
)
from masscompare.core.exceptions import (
    CompareError,
    InvalidPathError,
    DirectoryAccessError,
    CompareValidationError,
    ComparisonCancelledError,
)
from masscompare.core.buffer_comparator import BufferComparator, compare_buffers
from masscompare.core.streaming_pair import (
    BufferSet,
    StreamingFilePair,
    compare_streams,
    compare_files,
)
from masscompare.core.logging_layer import EventLogger, Event, EventFilter, LoggingError
