"""
Lane splitting for batched accumulation.

A long array is viewed as `rows x n_lanes`: lane j holds the strided
sub-sequence data[j], data[j + n_lanes], data[j + 2*n_lanes], ...
Each lane is reduced independently (vectorised across lanes), the lane
results are merged, and the few elements that do not fill a whole row
are folded in one at a time. Only the accumulation order changes, never
the mathematical result.
"""

from __future__ import annotations

from typing import Any

from numpy.typing import NDArray

from pysummary.core.validation import check_lanes

# Default lane counts. Mean-only and sum updates are cheap enough to keep
# eight lanes busy; the mean+variance update carries twice the state.
MEAN_LANES = 8
MEAN_SD_LANES = 6
SUM_LANES = 8


def split_lanes(
    data: NDArray[Any],
    n_lanes: int,
) -> tuple[NDArray[Any] | None, NDArray[Any]]:
    """
    Split a 1D array into a lane block and a remainder.

    Lanes are used only when len(data) > 2 * n_lanes. The block then has
    (len(data) - 1) // n_lanes rows, so the remainder always holds between
    1 and n_lanes elements.

    Args:
        data: 1D array
        n_lanes: Number of lanes (columns of the block)

    Returns:
        (block, remainder): block has shape (rows, n_lanes), or is None if
        the input is too short to be worth splitting, in which case the
        remainder is the whole input.
    """
    check_lanes(n_lanes, 'n_lanes')

    n = data.shape[0]
    if n <= 2 * n_lanes:
        return None, data

    rows = (n - 1) // n_lanes
    split = rows * n_lanes
    return data[:split].reshape(rows, n_lanes), data[split:]
