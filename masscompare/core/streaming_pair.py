# masscompare/core/streaming_pair.py
# StreamingFilePair -- double-buffered read/compare pipeline for one file pair.
#
# Each side owns a BufferSet of two equal-capacity buffers. The BACK buffer
# holds the chunk being compared; the FRONT buffer is being filled with the
# next chunk at the same time. After each iteration the roles are swapped by
# relabelling (index flip), never by copying.
#
# SFP-01: The four buffers of a pair share one capacity (chunk_size).
# SFP-02: Every prefetch read submitted in an iteration is drained before
#         that iteration ends, on mismatch and on exception too. No read can
#         target a buffer after it is swapped or released.
# SFP-03: Buffers and the prefetch executor are scoped with `with`; they are
#         released on every exit path.
# SFP-04: Only validly-filled bytes are compared: the tail comparison is
#         bounded by the byte counts the last reads reported.
# SFP-05: The loop ends as soon as either side returns a short chunk
#         (end of data).
#
# The prefetch executor is private to one pair. Cross-file concurrency lives
# in masscompare.orchestrator and is unrelated to it.

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, wait
from typing import BinaryIO, Callable, List, Optional

from masscompare.core.buffer_comparator import BufferComparator
from masscompare.core.exceptions import ComparisonCancelledError, InvalidPathError
from masscompare.utils.constants import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_STRICT_SIZE,
    PREFETCH_THREADS,
)


# ---------------------------------------------------------------------------
# BufferSet
# ---------------------------------------------------------------------------

class BufferSet:
    """
    Front/back buffer pair for one side of a comparison.

    Owned exclusively by the StreamingFilePair that created it. Use as a
    context manager; leaving the block releases both buffers and any later
    access to front/back raises RuntimeError.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1; got {capacity}")
        self._capacity = capacity
        self._buffers: List[bytearray] = [bytearray(capacity), bytearray(capacity)]
        self._views: List[memoryview] = [memoryview(buf) for buf in self._buffers]
        self._back = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def released(self) -> bool:
        return not self._views

    @property
    def back(self) -> memoryview:
        self._ensure_live()
        return self._views[self._back]

    @property
    def front(self) -> memoryview:
        self._ensure_live()
        return self._views[1 - self._back]

    def swap(self) -> None:
        """Relabel front as back and back as front. No data is copied."""
        self._ensure_live()
        self._back = 1 - self._back

    def release(self) -> None:
        for view in self._views:
            view.release()
        self._views = []
        self._buffers = []

    def _ensure_live(self) -> None:
        if not self._views:
            raise RuntimeError("BufferSet used after release")

    def __enter__(self) -> "BufferSet":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _read_chunk(stream: BinaryIO, view: memoryview) -> int:
    """
    Fill view from stream. Return the number of bytes read.

    Keeps reading until the view is full or the stream reports end of data,
    so a short return always means end of stream.
    """
    filled = 0
    size = len(view)
    while filled < size:
        n = stream.readinto(view[filled:])
        if not n:
            break
        filled += n
    return filled


def _open_side(path: str, side: str) -> BinaryIO:
    try:
        return open(path, "rb")
    except OSError as exc:
        raise InvalidPathError(side, path) from exc


# ---------------------------------------------------------------------------
# StreamingFilePair
# ---------------------------------------------------------------------------

class StreamingFilePair:
    """
    Compares two open binary streams chunk by chunk.

    The caller is responsible for the size pre-check; see
    masscompare.worker.file_worker.

    Args:
        stream_a, stream_b: Readable binary streams supporting readinto().
        chunk_size:         Capacity of each of the four buffers (SFP-01).
        strict:             True: the final byte counts must be equal.
                            False: a shorter stream is compared as a prefix
                            of the longer one.
        cancel_event:       Optional shared flag, checked between iterations.
        comparator:         Callable(a, b, length) -> bool.

    Method:
      identical() -> bool
    """

    def __init__(
        self,
        stream_a:     BinaryIO,
        stream_b:     BinaryIO,
        chunk_size:   int = DEFAULT_CHUNK_SIZE,
        strict:       bool = DEFAULT_STRICT_SIZE,
        cancel_event: Optional[threading.Event] = None,
        comparator:   Optional[Callable[..., bool]] = None,
    ) -> None:
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1; got {chunk_size}")
        self._stream_a     = stream_a
        self._stream_b     = stream_b
        self._chunk_size   = chunk_size
        self._strict       = strict
        self._cancel_event = cancel_event
        self._comparator   = comparator if comparator is not None else BufferComparator()

    def _check_cancelled(self) -> None:
        if self._cancel_event is not None and self._cancel_event.is_set():
            raise ComparisonCancelledError()

    def identical(self) -> bool:
        """
        Stream both sides to the end or to the first difference.

        Returns True iff every compared byte is equal (and, in strict mode,
        both streams ended at the same length).
        """
        chunk   = self._chunk_size
        compare = self._comparator

        with BufferSet(chunk) as side_a, BufferSet(chunk) as side_b, \
                ThreadPoolExecutor(max_workers=PREFETCH_THREADS,
                                   thread_name_prefix="prefetch") as prefetch:
            # Prime both back buffers.
            n_a = _read_chunk(self._stream_a, side_a.back)
            n_b = _read_chunk(self._stream_b, side_b.back)

            while n_a == chunk and n_b == chunk:
                self._check_cancelled()

                read_a = prefetch.submit(_read_chunk, self._stream_a, side_a.front)
                read_b = prefetch.submit(_read_chunk, self._stream_b, side_b.front)
                try:
                    same = compare(side_a.back, side_b.back, chunk)
                finally:
                    # SFP-02
                    wait((read_a, read_b))

                if not same:
                    return False

                n_a = read_a.result()
                n_b = read_b.result()
                side_a.swap()
                side_b.swap()

            # Tail chunk (SFP-04).
            if self._strict and n_a != n_b:
                return False
            return compare(side_a.back, side_b.back, min(n_a, n_b))


def compare_streams(
    stream_a:     BinaryIO,
    stream_b:     BinaryIO,
    chunk_size:   int = DEFAULT_CHUNK_SIZE,
    strict:       bool = DEFAULT_STRICT_SIZE,
    cancel_event: Optional[threading.Event] = None,
) -> bool:
    return StreamingFilePair(
        stream_a,
        stream_b,
        chunk_size=chunk_size,
        strict=strict,
        cancel_event=cancel_event,
    ).identical()


def compare_files(
    path_a:       str,
    path_b:       str,
    chunk_size:   int = DEFAULT_CHUNK_SIZE,
    strict:       bool = DEFAULT_STRICT_SIZE,
    cancel_event: Optional[threading.Event] = None,
) -> bool:
    """
    Open both paths in binary mode and stream-compare them.

    Raises:
        InvalidPathError: side "A" or "B" could not be opened for reading.
    """
    with _open_side(path_a, "A") as stream_a, _open_side(path_b, "B") as stream_b:
        return compare_streams(
            stream_a,
            stream_b,
            chunk_size=chunk_size,
            strict=strict,
            cancel_event=cancel_event,
        )
