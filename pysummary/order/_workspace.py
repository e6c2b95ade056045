"""
Scoped scratch buffers for the median routines.

median() and median_abs_dev() must not reorder the caller's data, so
they work on a private float64 copy. Buffers are handed out by context
managers that release them on every exit path, including exceptions.
live_scratch_buffers() reports how many are currently checked out; it is
0 whenever no median computation is running.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Iterable, Iterator

import numpy as np
from numpy.typing import NDArray

from pysummary.core.capabilities import is_array_like
from pysummary.core.validation import check_1d, check_array

# Process-wide count across threads
_live_buffers = 0
_live_lock = threading.Lock()


def live_scratch_buffers() -> int:
    """Number of scratch buffers currently checked out."""
    return _live_buffers


@contextmanager
def _checked_out(buf: NDArray[np.float64]) -> Iterator[NDArray[np.float64]]:
    global _live_buffers
    with _live_lock:
        _live_buffers += 1
    try:
        yield buf
    finally:
        with _live_lock:
            _live_buffers -= 1


@contextmanager
def scratch_copy(data: Iterable[Any]) -> Iterator[NDArray[np.float64]]:
    """
    Yield a private float64 copy of `data`.

    Array-like input is copied in one step; any other iterable is drained
    with np.fromiter. The caller's data is never aliased.
    """
    if is_array_like(data):
        arr = check_array(data, 'data')
        check_1d(arr, 'data')
        buf = np.array(arr, dtype=np.float64, copy=True)
    else:
        buf = np.fromiter((float(e) for e in data), dtype=np.float64)

    with _checked_out(buf) as checked:
        yield checked


@contextmanager
def scratch_empty(n: int) -> Iterator[NDArray[np.float64]]:
    """Yield an uninitialised float64 buffer of length n."""
    with _checked_out(np.empty(n, dtype=np.float64)) as checked:
        yield checked
