# masscompare/__init__.py
# Streaming, concurrent content comparison of two directories.
#
# Standard import pattern:
#   from masscompare import compare_directories, CompareParameters
#
# CLI:
#   python -m masscompare.run_compare DIR_A DIR_B

__version__ = "1.0.0"

from masscompare.core.domain import (
    CompareParameters,
    ComparisonOutcome,
    DirectoryComparisonReport,
    FilePairJob,
    OutcomeKind,
)
from masscompare.core.exceptions import (
    CompareError,
    ComparisonCancelledError,
    CompareValidationError,
    DirectoryAccessError,
    InvalidPathError,
)
from masscompare.core.streaming_pair import StreamingFilePair, compare_files
from masscompare.worker.file_worker import FileComparisonWorker
from masscompare.orchestrator.directory import (
    DirectoryComparisonOrchestrator,
    compare_directories,
)

__all__ = [
    "__version__",
    # Data model
    "CompareParameters",
    "ComparisonOutcome",
    "DirectoryComparisonReport",
    "FilePairJob",
    "OutcomeKind",
    # Errors
    "CompareError",
    "ComparisonCancelledError",
    "CompareValidationError",
    "DirectoryAccessError",
    "InvalidPathError",
    # Engine
    "StreamingFilePair",
    "compare_files",
    "FileComparisonWorker",
    "DirectoryComparisonOrchestrator",
    "compare_directories",
]
