# masscompare/core/buffer_comparator.py
# BufferComparator -- exact byte-for-byte comparison of two buffer regions.
#
# Innermost hot path of the engine. Pure: no I/O, no side effects, and no
# copy of buffer data (comparison runs on memoryview slices).
#
# CMP-01: compare_buffers(a, b, 0) is True for any a, b.
# CMP-02: Only bytes [0, length) are inspected. Bytes past length may hold
#         stale data from an earlier chunk and are never read.
# CMP-03: A negative length, or a length past the end of either buffer,
#         is a programmer error and raises ValueError.

from typing import Union

Buffer = Union[bytes, bytearray, memoryview]


def _as_view(buf: Buffer) -> memoryview:
    view = buf if isinstance(buf, memoryview) else memoryview(buf)
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view


def compare_buffers(a: Buffer, b: Buffer, length: int) -> bool:
    """
    Return True iff the first `length` bytes of a and b are identical (CMP-01).

    Short-circuits on the first differing byte.
    """
    if length < 0:
        raise ValueError(f"length must be >= 0; got {length}")
    if length == 0:
        return True

    view_a = _as_view(a)
    view_b = _as_view(b)
    if length > len(view_a) or length > len(view_b):
        raise ValueError(
            f"length {length} exceeds buffer size "
            f"(a={len(view_a)}, b={len(view_b)})"
        )
    return view_a[:length] == view_b[:length]


class BufferComparator:
    """
    Callable wrapper around compare_buffers().

    Holds no state. Kept as an object so streaming pairs can be handed a
    different comparator in tests.

    Method:
      __call__(a, b, length) -> bool
    """

    def __call__(self, a: Buffer, b: Buffer, length: int) -> bool:
        return compare_buffers(a, b, length)
