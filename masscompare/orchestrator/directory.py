# masscompare/orchestrator/directory.py
# Version: 1.0.0
# DirectoryComparisonOrchestrator -- fan-out of one worker per file.
#
# Pipeline:
#   1. Enumerate the immediate file entries of directory A. Subdirectories
#      are skipped (non-recursive).
#   2. Build one FilePairJob per entry (same name under directory B).
#   3. Run every job: fork-join over a thread pool, or one at a time in
#      sequential mode. Each job writes into its own pre-reserved slot.
#   4. Join. Fold the slots: drop MATCH, keep MISMATCH and ERROR.
#   5. Log the run (after the join, on the calling thread only).
#
# ORC-01: Exactly one outcome per file entry of A. No job is dropped.
# ORC-02: Per-file failures never escape a worker. The only fatal condition
#         is directory A not being enumerable (DirectoryAccessError).
# ORC-03: Directory B is not checked; a missing counterpart surfaces as an
#         ERROR outcome when the worker opens it.
# ORC-04: Threaded and sequential modes yield the same set of entries.
#         Entry order is not part of the contract.
# ORC-05: max_workers=None starts one worker per file. Large directories
#         should pass an explicit bound.
#
# Standard import:
#   from masscompare.orchestrator.directory import compare_directories

from __future__ import annotations

import os
import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import List, Optional

from masscompare.core.domain import (
    CompareParameters,
    ComparisonOutcome,
    DirectoryComparisonReport,
    FilePairJob,
)
from masscompare.core.exceptions import DirectoryAccessError
from masscompare.core.logging_layer import (
    EVENT_RUN_COMPLETED,
    EVENT_RUN_STARTED,
    EventLogger,
)
from masscompare.worker.file_worker import FileComparisonWorker


_SEPARATORS = tuple({os.sep, "/"} | ({os.altsep} if os.altsep else set()))


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def join_path(directory: str, name: str) -> str:
    """Join with a single separator, inserted only if directory lacks one."""
    if directory.endswith(_SEPARATORS):
        return directory + name
    return directory + os.sep + name


def list_entry_names(directory: str) -> List[str]:
    """
    Names of the immediate non-directory entries of directory, sorted.

    Subdirectories are skipped; the comparison is not recursive.

    Raises DirectoryAccessError if the directory cannot be enumerated.
    """
    try:
        with os.scandir(directory) as it:
            names = [entry.name for entry in it if not entry.is_dir()]
    except OSError as exc:
        raise DirectoryAccessError(directory, exc.strerror or type(exc).__name__) from exc
    names.sort()
    return names


def build_jobs(dir_a: str, dir_b: str, names: List[str]) -> List[FilePairJob]:
    return [
        FilePairJob(path_a=join_path(dir_a, name), path_b=join_path(dir_b, name))
        for name in names
    ]


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------

class DirectoryComparisonOrchestrator:
    """
    Compares every entry of directory A against the same name in directory B.

    Args:
        params:        CompareParameters. Defaults apply when None.
        logger:        Optional EventLogger receiving the run events.
        cancel_event:  Optional shared flag. Once set, pairs still streaming
                       stop at their next iteration with an ERROR outcome.

    Method:
      compare(dir_a, dir_b) -> DirectoryComparisonReport
      run_jobs(jobs) -> List[ComparisonOutcome]   (one outcome per job, in job order)
    """

    def __init__(
        self,
        params:       Optional[CompareParameters] = None,
        logger:       Optional[EventLogger] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> None:
        self._params = params if params is not None else CompareParameters()
        self._logger = logger
        self._worker = FileComparisonWorker(self._params, cancel_event=cancel_event)

    @property
    def params(self) -> CompareParameters:
        return self._params

    def run_jobs(self, jobs: List[FilePairJob]) -> List[ComparisonOutcome]:
        # One reserved slot per job; each worker writes only its own slot.
        slots: List[Optional[ComparisonOutcome]] = [None] * len(jobs)

        if not jobs:
            return []

        if not self._params.threaded:
            for i, job in enumerate(jobs):
                slots[i] = self._worker.run(job)
            return slots  # type: ignore[return-value]

        def _run_into_slot(index: int) -> None:
            slots[index] = self._worker.run(jobs[index])

        pool_size = self._params.max_workers or len(jobs)
        with ThreadPoolExecutor(max_workers=pool_size,
                                thread_name_prefix="compare") as pool:
            futures = [pool.submit(_run_into_slot, i) for i in range(len(jobs))]
        # Executor exit joined every worker.

        for i, future in enumerate(futures):
            exc = future.exception()
            if exc is not None or slots[i] is None:
                # Unreachable while FileComparisonWorker.run() holds WRK-01;
                # keep ORC-01 regardless.
                slots[i] = ComparisonOutcome.error(
                    jobs[i].path_a,
                    type(exc).__name__ if exc is not None else "Worker produced no outcome",
                )
        return slots  # type: ignore[return-value]

    def compare(self, dir_a: str, dir_b: str) -> DirectoryComparisonReport:
        names = list_entry_names(dir_a)
        jobs = build_jobs(dir_a, dir_b, names)

        started_at = _now_utc()
        outcomes = self.run_jobs(jobs)
        finished_at = _now_utc()

        report = DirectoryComparisonReport(
            dir_a=dir_a,
            dir_b=dir_b,
            total_files=len(outcomes),
            entries=tuple(o for o in outcomes if not o.is_match),
        )
        if self._logger is not None:
            self._log_run(report, started_at, finished_at)
        return report

    def _log_run(
        self,
        report:      DirectoryComparisonReport,
        started_at:  datetime,
        finished_at: datetime,
    ) -> None:
        self._logger.log_event(
            EVENT_RUN_STARTED,
            {
                "dir_a":       report.dir_a,
                "dir_b":       report.dir_b,
                "threaded":    self._params.threaded,
                "max_workers": self._params.max_workers,
                "chunk_size":  self._params.chunk_size,
                "strict_size": self._params.strict_size,
            },
            started_at,
        )
        for outcome in report.entries:
            self._logger.log_outcome(outcome, finished_at)
        self._logger.log_event(
            EVENT_RUN_COMPLETED,
            {
                "total_files": report.total_files,
                "mismatches":  len(report.mismatches),
                "errors":      len(report.errors),
            },
            finished_at,
        )


def compare_directories(
    dir_a:        str,
    dir_b:        str,
    params:       Optional[CompareParameters] = None,
    logger:       Optional[EventLogger] = None,
    cancel_event: Optional[threading.Event] = None,
) -> DirectoryComparisonReport:
    """
    Compare every entry of dir_a with the same-named entry of dir_b.

    Raises
    ------
    DirectoryAccessError
        dir_a cannot be enumerated. Per-file problems never raise; they
        appear in the report as ERROR entries.
    """
    orchestrator = DirectoryComparisonOrchestrator(
        params=params,
        logger=logger,
        cancel_event=cancel_event,
    )
    return orchestrator.compare(dir_a, dir_b)
