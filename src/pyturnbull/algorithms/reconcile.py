"""Align the Turnbull NPMLE with the full grid of distinct bids.

The NPMLE only reports Turnbull intervals, so bids that are not the
right end of any Turnbull interval have no survival value of their own.
The reconciled step function covers every finite bid so that results
can be tabulated, plotted and integrated on one common grid.
"""

from __future__ import annotations

import numpy as np

from pyturnbull.core.result import NPMLEResult, SurvivorFunction
from pyturnbull.core.types import FloatArray

# Cumulative masses are rounded to this many decimals before 1 - cumsum
CUMSUM_DECIMALS = 12


def reconcile_survivor(npmle: NPMLEResult, bids: FloatArray) -> SurvivorFunction:
    """
    Build the survivor step function on every distinct bid.

    Walks the finite bids in increasing order in lockstep with the
    Turnbull interval right endpoints. The survival at a bid is
    1 - (total mass of intervals ending at or below it); a bid with no
    matching right endpoint carries the previous value forward. A point
    at bid 0 with survival exactly 1 is prepended.

    Args:
        npmle: NPMLE with sorted Turnbull intervals
        bids: Distinct Bid Set (the inf sentinel is ignored)

    Returns:
        SurvivorFunction over [0, b1, ..., bk]

    Example:
        >>> sf = reconcile_survivor(npmle, np.array([5.0, 10.0, 20.0, np.inf]))
        >>> sf.bids
        array([ 0.,  5., 10., 20.])
    """
    bids = np.asarray(bids, dtype=np.float64)
    grid = bids[np.isfinite(bids) & (bids > 0)]

    cumulative = np.round(np.cumsum(npmle.mass), CUMSUM_DECIMALS)
    ends = npmle.right_endpoints
    m = len(ends)

    survival = np.empty(len(grid) + 1)
    filled = np.zeros(len(grid) + 1, dtype=bool)
    survival[0] = 1.0

    j = 0
    dropped = 0.0
    for k, bid in enumerate(grid, start=1):
        matched = False
        while j < m and ends[j] <= bid:
            matched = matched or ends[j] == bid
            dropped = cumulative[j]
            j += 1
        survival[k] = 1.0 - dropped
        filled[k] = not matched

    sentinel = 1.0 - cumulative[-1] if m else 1.0

    # Rounding leaves at most a few ulps outside [0, 1]
    np.clip(survival, 0.0, 1.0, out=survival)
    sentinel = float(min(max(sentinel, 0.0), 1.0))

    grid = np.concatenate([[0.0], grid])
    for arr in (grid, survival, filled):
        arr.setflags(write=False)

    return SurvivorFunction(
        bids=grid,
        survival=survival,
        sentinel_survival=sentinel,
        filled=filled,
    )
