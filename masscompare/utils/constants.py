# masscompare/utils/constants.py
# Version: 1.0.0
# Default sizing and behaviour constants for the comparison engine.
# CompareParameters reads its defaults from here; change them here only.
#
# Standard import pattern:
#   from masscompare.utils.constants import (
#       DEFAULT_CHUNK_SIZE,
#       DEFAULT_MAX_WORKERS,
#       DEFAULT_STRICT_SIZE,
#       DEFAULT_THREADED,
#       PREFETCH_THREADS,
#   )

from typing import Optional


# ---------------------------------------------------------------------------
# BUFFER SIZING
# ---------------------------------------------------------------------------
# One chunk per read. All four buffers of a file pair share this capacity.
# 32 KB (decimal) balances syscall count against peak memory per pair.

DEFAULT_CHUNK_SIZE: int = 32 * 1000

# Reads in flight per file pair: one per side.
PREFETCH_THREADS:   int = 2


# ---------------------------------------------------------------------------
# FAN-OUT
# ---------------------------------------------------------------------------
# None -> one worker per file in the directory (unbounded fork-join).

DEFAULT_MAX_WORKERS: Optional[int] = None
DEFAULT_THREADED:    bool          = True


# ---------------------------------------------------------------------------
# SIZE PRE-CHECK
# ---------------------------------------------------------------------------
# True  -> sizes must be equal before any byte is streamed.
# False -> only size(A) > size(B) is rejected up front; a shorter A is
#          streamed and compared as a prefix of B.

DEFAULT_STRICT_SIZE: bool = True


# ---------------------------------------------------------------------------
# CLI EXIT CODES
# ---------------------------------------------------------------------------

EXIT_OK:          int = 0
EXIT_DIFFERENCES: int = 1    # only with --fail-on-diff
EXIT_FATAL:       int = 2    # directory A unreadable / invalid parameters
