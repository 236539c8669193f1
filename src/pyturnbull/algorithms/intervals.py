"""Censoring intervals from double-bounded dichotomous-choice answers."""

from __future__ import annotations

import warnings

import numpy as np

from pyturnbull.core.exceptions import DataQualityWarning, ValueRangeError
from pyturnbull.core.result import CensoringIntervals
from pyturnbull.core.session import NO, YES, DoubleBoundedLog
from pyturnbull.core.types import FloatArray


def build_censoring_intervals(
    log: DoubleBoundedLog,
    stacklevel: int = 2,
) -> CensoringIntervals:
    """
    Convert each respondent's answers into a (left, right] WTP interval.

    Rule table (bid1 = first bid, bid2 = follow-up bid):

        answer1  answer2  left   right
        yes      yes      bid2   inf
        yes      no       bid1   bid2
        no       yes      bid2   bid1
        no       no       0      bid2

    Any other answer pattern (an unrecognized encoding) maps to the
    no-information interval (0, inf) and is reported with a
    DataQualityWarning rather than rejected.

    Args:
        log: DoubleBoundedLog with normalized answers
        stacklevel: Stack level of the DataQualityWarning, counted from
            this function (default: 2, the direct caller)

    Returns:
        CensoringIntervals with per-respondent bounds and the Distinct
        Bid Set

    Raises:
        ValueRangeError: If a follow-up bid is inconsistent with the first
            answer, giving left > right

    Example:
        >>> log = DoubleBoundedLog([10.0, 10.0], [20.0, 5.0], [1, 0], [0, 1])
        >>> ci = build_censoring_intervals(log)
        >>> list(zip(ci.left, ci.right))
        [(10.0, 20.0), (5.0, 10.0)]
    """
    bid1 = log.first_bid
    bid2 = log.second_bid
    a1 = log.answer1
    a2 = log.answer2

    yy = (a1 == YES) & (a2 == YES)
    yn = (a1 == YES) & (a2 == NO)
    ny = (a1 == NO) & (a2 == YES)
    nn = (a1 == NO) & (a2 == NO)

    left = np.where(yy | ny, bid2, np.where(yn, bid1, 0.0))
    right = np.where(yn | nn, bid2, np.where(ny, bid1, np.inf))

    unrecognized = ~(yy | yn | ny | nn)
    n_unrecognized = int(np.sum(unrecognized))
    if n_unrecognized:
        warnings.warn(
            f"{n_unrecognized} respondents have unrecognized answer codes; "
            f"their WTP interval is set to (0, inf).",
            DataQualityWarning,
            stacklevel=stacklevel,
        )

    inverted = left > right
    if np.any(inverted):
        rows = np.flatnonzero(inverted)
        row_msg = str(rows[:5].tolist()) + ("..." if len(rows) > 5 else "")
        raise ValueRangeError(
            f"Found {len(rows)} respondents whose follow-up bid contradicts the "
            f"first answer (left > right) in rows {row_msg}. "
            f"Hint: After 'yes' the second bid must be higher than the first, "
            f"after 'no' it must be lower."
        )

    left.setflags(write=False)
    right.setflags(write=False)
    bids = distinct_bids(left, right)

    return CensoringIntervals(
        left=left,
        right=right,
        bids=bids,
        num_unrecognized=n_unrecognized,
    )


def distinct_bids(left: FloatArray, right: FloatArray) -> FloatArray:
    """
    Sorted unique interval endpoints with an inf sentinel as last element.

    Args:
        left: Lower bounds
        right: Upper bounds (may contain inf)

    Returns:
        Strictly increasing array whose final element is inf
    """
    bids = np.unique(np.concatenate([np.asarray(left), np.asarray(right)]))
    if len(bids) == 0 or not np.isinf(bids[-1]):
        bids = np.append(bids, np.inf)
    bids.setflags(write=False)
    return bids
