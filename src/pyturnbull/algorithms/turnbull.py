"""Kaplan-Meier-Turnbull estimation for double-bounded CV data."""

from __future__ import annotations

import time

from pyturnbull.algorithms.intervals import build_censoring_intervals
from pyturnbull.algorithms.npmle import compute_npmle
from pyturnbull.algorithms.reconcile import reconcile_survivor
from pyturnbull.algorithms.wtp import summarize_wtp
from pyturnbull.core.result import TurnbullResult
from pyturnbull.core.session import DoubleBoundedLog


def turnbull_db(
    log: DoubleBoundedLog,
    tolerance: float = 1e-10,
    max_iterations: int = 10000,
) -> TurnbullResult:
    """
    Estimate the WTP distribution nonparametrically from double-bounded data.

    The pipeline:
    1. Build a (left, right] censoring interval for each respondent
    2. Estimate the Turnbull NPMLE over those intervals
    3. Reconcile the NPMLE with every distinct bid into a step function
    4. Integrate the step function for mean WTP and bracket the median

    A non-converged NPMLE does not stop the run; the result has
    converged=False and a ConvergenceWarning is emitted.

    Args:
        log: DoubleBoundedLog with one row per respondent
        tolerance: EM log-likelihood improvement threshold (default: 1e-10)
        max_iterations: Maximum EM iterations (default: 10000)

    Returns:
        TurnbullResult with intervals, NPMLE, survivor function and WTP

    Example:
        >>> import numpy as np
        >>> from pyturnbull import DoubleBoundedLog, turnbull_db
        >>> log = DoubleBoundedLog(
        ...     first_bid=[10.0, 10.0, 20.0],
        ...     second_bid=[20.0, 5.0, 40.0],
        ...     answer1=["yes", "no", "yes"],
        ...     answer2=["no", "yes", "yes"],
        ... )
        >>> result = turnbull_db(log)
        >>> print(result.summary(digits=3))
    """
    start_time = time.perf_counter()

    # Warnings from the stages point at the caller of turnbull_db
    intervals = build_censoring_intervals(log, stacklevel=3)
    npmle = compute_npmle(
        intervals.left,
        intervals.right,
        tolerance=tolerance,
        max_iterations=max_iterations,
        stacklevel=3,
    )
    survivor = reconcile_survivor(npmle, intervals.bids)
    wtp = summarize_wtp(survivor)

    computation_time = (time.perf_counter() - start_time) * 1000

    return TurnbullResult(
        intervals=intervals,
        npmle=npmle,
        survivor=survivor,
        wtp=wtp,
        num_dropped=log.num_dropped,
        computation_time_ms=computation_time,
    )
