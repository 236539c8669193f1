"""Turnbull NPMLE of a distribution from interval-censored observations.

Observation i is known to lie in (left[i], right[i]]; an observation with
left == right is exact. The NPMLE puts all of its mass on the Turnbull
intervals, the maximal cliques of overlapping observation intervals, and
the self-consistency EM algorithm distributes the mass among them.

References:
    Turnbull, B. W. (1976). The empirical distribution function with
    arbitrarily grouped, censored and truncated data. JRSS B 38(3).
"""

from __future__ import annotations

import warnings

import numpy as np

from pyturnbull._kernels import turnbull_em_kernel
from pyturnbull.core.exceptions import (
    ConvergenceWarning,
    DimensionError,
    InsufficientDataError,
    ValueRangeError,
)
from pyturnbull.core.result import NPMLEResult
from pyturnbull.core.types import FloatArray

# Endpoint tags. At equal sort keys a left end sorts before a right end so
# that intervals sharing a closed point intersect.
_LEFT = 0
_RIGHT = 1


def _left_open(left: FloatArray, right: FloatArray) -> np.ndarray:
    """1 where the left end is open, 0 for exact (point) observations."""
    return np.where(left == right, 0, 1)


def _turnbull(
    left: FloatArray, right: FloatArray
) -> tuple[FloatArray, np.ndarray, FloatArray]:
    """
    Locate Turnbull intervals by scanning the sorted endpoints.

    Each endpoint gets a key (value, eps): an open left end at x sorts
    as "just after x" (eps=1), closed ends sort at x (eps=0). A Turnbull
    interval starts at every left end that is immediately followed by a
    right end.

    Returns:
        Tuple of (t_left, t_left_eps, t_right)
    """
    n = len(left)
    values = np.concatenate([left, right])
    eps = np.concatenate([_left_open(left, right), np.zeros(n, dtype=np.int64)])
    tags = np.concatenate(
        [np.full(n, _LEFT, dtype=np.int64), np.full(n, _RIGHT, dtype=np.int64)]
    )

    order = np.lexsort((tags, eps, values))
    values, eps, tags = values[order], eps[order], tags[order]

    starts = np.flatnonzero((tags[:-1] == _LEFT) & (tags[1:] == _RIGHT))
    return values[starts], eps[starts], values[starts + 1]


def find_turnbull_intervals(left: FloatArray, right: FloatArray) -> FloatArray:
    """
    Find the Turnbull intervals (maximal cliques) of a set of intervals.

    These are the only places an NPMLE can put probability mass without
    contradicting an observation.

    Args:
        left: Lower bounds of the observation intervals
        right: Upper bounds (may be inf)

    Returns:
        m x 2 array of (left, right) pairs, sorted and disjoint

    Example:
        >>> find_turnbull_intervals(np.array([10.0, 5.0]), np.array([20.0, 10.0]))
        array([[ 5., 10.],
               [10., 20.]])
    """
    left, right = _as_interval_arrays(left, right)
    t_left, _, t_right = _turnbull(left, right)
    return np.column_stack([t_left, t_right])


def clique_matrix(left: FloatArray, right: FloatArray) -> tuple[FloatArray, FloatArray]:
    """
    Build the observation-by-Turnbull-interval containment matrix.

    Args:
        left: Lower bounds of the observation intervals
        right: Upper bounds (may be inf)

    Returns:
        Tuple of (intervals, alpha) where intervals is m x 2 and alpha is
        n x m with alpha[i, j] = 1.0 iff Turnbull interval j lies inside
        observation interval i
    """
    left, right = _as_interval_arrays(left, right)
    t_left, t_eps, t_right = _turnbull(left, right)
    l_eps = _left_open(left, right)

    # (left_i, l_eps_i) <= (t_left_j, t_eps_j), lexicographically
    starts_inside = (left[:, None] < t_left[None, :]) | (
        (left[:, None] == t_left[None, :]) & (l_eps[:, None] <= t_eps[None, :])
    )
    # Right ends are closed, so plain comparison suffices
    ends_inside = t_right[None, :] <= right[:, None]

    alpha = (starts_inside & ends_inside).astype(np.float64)
    return np.column_stack([t_left, t_right]), alpha


def compute_npmle(
    left: FloatArray,
    right: FloatArray,
    tolerance: float = 1e-10,
    max_iterations: int = 10000,
    stacklevel: int = 2,
) -> NPMLEResult:
    """
    Compute the Turnbull NPMLE for interval-censored data.

    The algorithm:
    1. Collapse identical observation intervals into weighted rows
    2. Find the Turnbull intervals and the containment matrix
    3. Run the EM self-consistency loop from a uniform start until the
       log-likelihood improves by less than `tolerance`

    If the loop reaches `max_iterations` first, the current estimate is
    returned with converged=False and a ConvergenceWarning is emitted.

    Args:
        left: Lower bounds of the observation intervals
        right: Upper bounds (may be inf)
        tolerance: Log-likelihood improvement threshold (default: 1e-10)
        max_iterations: Maximum EM iterations (default: 10000)
        stacklevel: Stack level of the ConvergenceWarning (default: 2)

    Returns:
        NPMLEResult with Turnbull intervals, masses and convergence info

    Raises:
        InsufficientDataError: If there are no observations
        ValueRangeError: If an interval has left > right

    Example:
        >>> result = compute_npmle(np.array([10.0, 5.0]), np.array([20.0, 10.0]))
        >>> result.mass
        array([0.5, 0.5])
    """
    left, right = _as_interval_arrays(left, right)

    pairs, counts = np.unique(np.column_stack([left, right]), axis=0, return_counts=True)
    intervals, alpha = clique_matrix(pairs[:, 0], pairs[:, 1])
    m = intervals.shape[0]

    if m == 1:
        return NPMLEResult(
            intervals=intervals,
            mass=np.ones(1),
            converged=True,
            iterations=0,
            log_likelihood=0.0,
            tolerance=tolerance,
        )

    p0 = np.full(m, 1.0 / m)
    p, iterations, converged, log_lik = turnbull_em_kernel(
        np.ascontiguousarray(alpha),
        counts.astype(np.float64),
        p0,
        int(max_iterations),
        float(tolerance),
    )
    p = p / p.sum()

    if not converged:
        warnings.warn(
            f"Turnbull EM did not converge within {max_iterations} iterations "
            f"(tolerance={tolerance}). Returning the last estimate.",
            ConvergenceWarning,
            stacklevel=stacklevel,
        )

    return NPMLEResult(
        intervals=intervals,
        mass=p,
        converged=bool(converged),
        iterations=int(iterations),
        log_likelihood=float(log_lik),
        tolerance=tolerance,
    )


def _as_interval_arrays(left, right) -> tuple[FloatArray, FloatArray]:
    """Validate and convert interval bounds to float64 arrays."""
    left = np.asarray(left, dtype=np.float64)
    right = np.asarray(right, dtype=np.float64)
    if left.ndim != 1 or left.shape != right.shape:
        raise DimensionError(
            f"left and right must be 1D arrays of equal length, got shapes "
            f"{left.shape} and {right.shape}."
        )
    if len(left) == 0:
        raise InsufficientDataError("Need at least one censoring interval.")
    if np.any(np.isnan(left)) or np.any(np.isnan(right)):
        raise ValueRangeError("Censoring intervals must not contain NaN bounds.")
    if np.any(left > right):
        raise ValueRangeError(
            f"Found {int(np.sum(left > right))} intervals with left > right."
        )
    return left, right
