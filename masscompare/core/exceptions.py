# =============================================================================
# masscompare v1.0.0 -- COMPARISON ENGINE
# File:   masscompare/core/exceptions.py
# =============================================================================
#
# SCOPE
# -----
# Defines the exception hierarchy for the comparison engine.
# All exceptions are pure value objects: no side effects, no logging,
# no I/O of any kind.
#
# EXCEPTION HIERARCHY
# -------------------
#   CompareError(Exception)                      -- base; never raised directly
#     InvalidPathError(CompareError)             -- file cannot be sized/opened
#     DirectoryAccessError(CompareError)         -- directory A not enumerable
#     CompareValidationError(CompareError)       -- invalid parameter value
#     ComparisonCancelledError(CompareError)     -- cancel flag observed
#
# Size and content mismatches are NOT exceptions. They are Mismatch outcomes
# (see masscompare.core.domain.ComparisonOutcome).
#
# PROPAGATION
# -----------
#   InvalidPathError, ComparisonCancelledError and any unexpected exception
#   are caught at the FileComparisonWorker boundary and become Error outcomes.
#   DirectoryAccessError and CompareValidationError propagate to the caller.
#
# MESSAGE CONTRACT
# ----------------
# Every exception message is deterministic, ASCII-safe and non-empty.
# =============================================================================

from __future__ import annotations

from typing import Any


# =============================================================================
# BASE EXCEPTION
# =============================================================================

class CompareError(Exception):
    """
    Base class for all comparison engine exceptions.

    Never raised directly. Use a concrete subclass.

    Attributes:
        message:  Human-readable description. Always non-empty.
        path:     Filesystem path the error refers to, or empty string
                  if the error is not tied to a path.
    """

    def __init__(self, message: str, path: str = "") -> None:
        if not isinstance(message, str) or not message:
            raise ValueError(
                "CompareError: message must be a non-empty string"
            )
        if not isinstance(path, str):
            raise ValueError(
                "CompareError: path must be a string"
            )
        super().__init__(message)
        self.message: str = message
        self.path:    str = path

    def __repr__(self) -> str:
        return (
            self.__class__.__name__
            + "(path=" + repr(self.path)
            + ", message=" + repr(self.message)
            + ")"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompareError):
            return NotImplemented
        return (
            type(self) is type(other)
            and self.path == other.path
            and self.message == other.message
        )


# =============================================================================
# CONCRETE EXCEPTIONS
# =============================================================================

class InvalidPathError(CompareError):
    """
    Raised when one side of a file pair cannot be sized or opened for reading.

    Message format:
        "Path to file <side> was invalid"

    The offending path is kept on the exception, not in the message, so the
    report line reads "<message>: <path A>" like every other error line.

    Args:
        side:  "A" or "B".
        path:  The path that could not be opened.
    """

    def __init__(self, side: str, path: str) -> None:
        if side not in ("A", "B"):
            raise ValueError(
                "InvalidPathError: side must be 'A' or 'B'"
            )
        super().__init__(
            message="Path to file " + side + " was invalid",
            path=path,
        )
        self.side: str = side


class DirectoryAccessError(CompareError):
    """
    Raised when directory A itself cannot be enumerated.

    This is the only fatal condition of a directory comparison. There is no
    per-file recovery for it, so it propagates out of the orchestrator.
    """

    def __init__(self, path: str, reason: str = "") -> None:
        message = "Directory could not be enumerated: " + path
        if reason:
            message += " (" + reason + ")"
        super().__init__(message=message, path=path)
        self.reason: str = reason


class CompareValidationError(CompareError):
    """
    Raised when a CompareParameters field violates its constraint.

    Message format:
        "CompareValidationError: field '<field_name>' violates constraint
         '<constraint>': got <value>."
    """

    def __init__(self, field_name: str, value: Any, constraint: str) -> None:
        if not field_name:
            raise ValueError(
                "CompareValidationError: field_name must be a non-empty string"
            )
        if not isinstance(constraint, str) or not constraint:
            raise ValueError(
                "CompareValidationError: constraint must be a non-empty string"
            )
        message = (
            "CompareValidationError: field '"
            + field_name
            + "' violates constraint '"
            + constraint
            + "': got "
            + repr(value)
            + "."
        )
        super().__init__(message=message)
        self.field_name: str = field_name
        self.value:      Any = value
        self.constraint: str = constraint


class ComparisonCancelledError(CompareError):
    """Raised by a streaming pair when the shared cancel flag is set."""

    def __init__(self, path: str = "") -> None:
        super().__init__(message="Comparison cancelled", path=path)
