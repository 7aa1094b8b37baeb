# =============================================================================
# masscompare v1.0.0 -- COMPARISON ENGINE
# File:   masscompare/core/domain.py
# =============================================================================
#
# SCOPE
# -----
# Frozen domain dataclasses shared by the worker and orchestrator layers:
#   FilePairJob, OutcomeKind, ComparisonOutcome, CompareParameters,
#   DirectoryComparisonReport.
#
# No I/O. No comparison logic. No threads.
#
# DEPENDENCIES
# ------------
#   stdlib:    dataclasses, enum, typing
#   internal:  masscompare.core.exceptions, masscompare.utils.constants
#
# VALIDATION PHILOSOPHY
# ---------------------
# CompareParameters is validated fail-fast in __post_init__. There is no
# silent coercion: every violation raises CompareValidationError with the
# field name and the offending value.
#
# INVARIANTS
# ----------
#   ComparisonOutcome.path is always path A of the job.
#   MATCH outcomes carry an empty message; ERROR outcomes a non-empty one.
#   DirectoryComparisonReport.entries never contains a MATCH outcome.
#   DirectoryComparisonReport.total_files >= len(entries).
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from masscompare.core.exceptions import CompareValidationError
from masscompare.utils.constants import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_MAX_WORKERS,
    DEFAULT_STRICT_SIZE,
    DEFAULT_THREADED,
)


# =============================================================================
# FilePairJob
# =============================================================================

@dataclass(frozen=True)
class FilePairJob:
    """
    One comparison unit: the same filename under directory A and directory B.

    Created once per entry of A by the orchestrator and consumed by exactly
    one worker.
    """
    path_a: str
    path_b: str


# =============================================================================
# ComparisonOutcome
# =============================================================================

class OutcomeKind(Enum):
    MATCH    = "MATCH"
    MISMATCH = "MISMATCH"
    ERROR    = "ERROR"


@dataclass(frozen=True)
class ComparisonOutcome:
    """
    Terminal classification of one file-pair comparison.

    Fields:
      kind    -- OutcomeKind.
      path    -- Path A of the job the outcome belongs to.
      message -- Error description. Empty for MATCH and MISMATCH.

    Build instances through match(), mismatch() and error().
    """
    kind:    OutcomeKind
    path:    str
    message: str = ""

    @classmethod
    def match(cls, path: str) -> "ComparisonOutcome":
        return cls(kind=OutcomeKind.MATCH, path=path)

    @classmethod
    def mismatch(cls, path: str) -> "ComparisonOutcome":
        return cls(kind=OutcomeKind.MISMATCH, path=path)

    @classmethod
    def error(cls, path: str, message: str) -> "ComparisonOutcome":
        if not message:
            message = "Unknown error"
        return cls(kind=OutcomeKind.ERROR, path=path, message=message)

    @property
    def is_match(self) -> bool:
        return self.kind is OutcomeKind.MATCH

    def render(self) -> str:
        """
        Report line for this outcome.

        MISMATCH -> "<path>"
        ERROR    -> "<message>: <path>"
        MATCH    -> "" (matches are never reported)
        """
        if self.kind is OutcomeKind.MISMATCH:
            return self.path
        if self.kind is OutcomeKind.ERROR:
            return self.message + ": " + self.path
        return ""


# =============================================================================
# CompareParameters
# =============================================================================

@dataclass(frozen=True)
class CompareParameters:
    """
    Run configuration for a directory comparison.

    Fields:
      chunk_size   -- Bytes per read; capacity of each of the four buffers
                      of a file pair. int >= 1.
      threaded     -- True: fork-join over all files. False: one file at a
                      time. Output semantics are identical.
      max_workers  -- None for one worker per file, else an int >= 1 that
                      bounds the number of concurrent file comparisons.
      strict_size  -- True: sizes must match before streaming.
                      False: only size(A) > size(B) is rejected up front and
                      a shorter A is compared as a prefix of B.

    Raises:
      CompareValidationError on any invalid field.
    """
    chunk_size:  int           = DEFAULT_CHUNK_SIZE
    threaded:    bool          = DEFAULT_THREADED
    max_workers: Optional[int] = DEFAULT_MAX_WORKERS
    strict_size: bool          = DEFAULT_STRICT_SIZE

    def __post_init__(self) -> None:
        # bool is an int subclass; reject it explicitly for numeric fields.
        if isinstance(self.chunk_size, bool) or not isinstance(self.chunk_size, int):
            raise CompareValidationError("chunk_size", self.chunk_size, "must be an int")
        if self.chunk_size < 1:
            raise CompareValidationError("chunk_size", self.chunk_size, "must be >= 1")

        if not isinstance(self.threaded, bool):
            raise CompareValidationError("threaded", self.threaded, "must be a bool")

        if self.max_workers is not None:
            if isinstance(self.max_workers, bool) or not isinstance(self.max_workers, int):
                raise CompareValidationError(
                    "max_workers", self.max_workers, "must be None or an int"
                )
            if self.max_workers < 1:
                raise CompareValidationError("max_workers", self.max_workers, "must be >= 1")

        if not isinstance(self.strict_size, bool):
            raise CompareValidationError("strict_size", self.strict_size, "must be a bool")


# =============================================================================
# DirectoryComparisonReport
# =============================================================================

@dataclass(frozen=True)
class DirectoryComparisonReport:
    """
    Folded result of one directory comparison.

    Fields:
      dir_a        -- Directory A as given by the caller.
      dir_b        -- Directory B as given by the caller.
      total_files  -- Number of outcomes produced (one per entry of A).
      entries      -- Tuple of MISMATCH and ERROR outcomes. Order is not
                      part of the contract.
    """
    dir_a:       str
    dir_b:       str
    total_files: int
    entries:     Tuple[ComparisonOutcome, ...]

    @property
    def passed(self) -> bool:
        return len(self.entries) == 0

    @property
    def mismatches(self) -> Tuple[ComparisonOutcome, ...]:
        return tuple(e for e in self.entries if e.kind is OutcomeKind.MISMATCH)

    @property
    def errors(self) -> Tuple[ComparisonOutcome, ...]:
        return tuple(e for e in self.entries if e.kind is OutcomeKind.ERROR)

    def lines(self) -> Tuple[str, ...]:
        return tuple(e.render() for e in self.entries)
