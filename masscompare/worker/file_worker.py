# masscompare/worker/file_worker.py
# FileComparisonWorker -- one FilePairJob in, one ComparisonOutcome out.
#
# WRK-01: run() never raises. Every failure becomes an ERROR outcome so
#         nothing unwinds into the orchestrator's join.
# WRK-02: Size pre-check before any stream is opened. size(A) > size(B) is
#         always a MISMATCH. size(A) < size(B) is a MISMATCH only in strict
#         mode; otherwise A is streamed as a prefix of B.
# WRK-03: A file that cannot be sized or opened, or is not a regular file
#         (FIFO, socket, device), is an ERROR outcome carrying path A and
#         "Path to file <side> was invalid". Opening a FIFO would block.
# WRK-04: Outcome path is always path A.

from __future__ import annotations

import os
import stat
import threading
from typing import Optional

from masscompare.core.domain import CompareParameters, ComparisonOutcome, FilePairJob
from masscompare.core.exceptions import CompareError, InvalidPathError
from masscompare.core.streaming_pair import compare_files


def _file_size(path: str, side: str) -> int:
    try:
        st = os.stat(path)
    except OSError as exc:
        raise InvalidPathError(side, path) from exc
    if not stat.S_ISREG(st.st_mode):
        raise InvalidPathError(side, path)
    return st.st_size


def describe_failure(exc: BaseException) -> str:
    """
    Description used in ERROR outcomes.

    CompareError subclasses carry their own message. Anything else is
    rendered as "<ExceptionType>: <text>" or just the type name.
    """
    if isinstance(exc, CompareError):
        return exc.message
    text = str(exc)
    name = type(exc).__name__
    return f"{name}: {text}" if text else name


class FileComparisonWorker:
    """
    Turns a FilePairJob into a ComparisonOutcome (WRK-01).

    The worker holds only immutable configuration and may be shared by any
    number of threads.

    Args:
        params:        CompareParameters (chunk_size, strict_size are used).
        cancel_event:  Optional shared flag forwarded to the streaming pair.
    """

    def __init__(
        self,
        params:       Optional[CompareParameters] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self._params       = params if params is not None else CompareParameters()
        self._cancel_event = cancel_event

    @property
    def params(self) -> CompareParameters:
        return self._params

    def run(self, job: FilePairJob) -> ComparisonOutcome:
        try:
            return self._compare(job)
        except Exception as exc:  # noqa: BLE001 -- WRK-01
            return ComparisonOutcome.error(job.path_a, describe_failure(exc))

    def _compare(self, job: FilePairJob) -> ComparisonOutcome:
        # WRK-02
        size_a = _file_size(job.path_a, "A")
        size_b = _file_size(job.path_b, "B")
        if size_a > size_b:
            return ComparisonOutcome.mismatch(job.path_a)
        if self._params.strict_size and size_a != size_b:
            return ComparisonOutcome.mismatch(job.path_a)

        identical = compare_files(
            job.path_a,
            job.path_b,
            chunk_size=self._params.chunk_size,
            strict=self._params.strict_size,
            cancel_event=self._cancel_event,
        )
        if identical:
            return ComparisonOutcome.match(job.path_a)
        return ComparisonOutcome.mismatch(job.path_a)


def compare_file_pair(
    path_a: str,
    path_b: str,
    params: Optional[CompareParameters] = None,
) -> ComparisonOutcome:
    return FileComparisonWorker(params).run(FilePairJob(path_a=path_a, path_b=path_b))
