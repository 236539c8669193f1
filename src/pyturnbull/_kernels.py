"""Numba JIT-compiled kernels for pyturnbull.

The EM self-consistency loop touches every (observation, Turnbull
interval) pair on every iteration, so it is compiled with Numba. All
functions use `@njit(cache=True)` to cache compiled code to disk,
avoiding recompilation overhead.
"""

from __future__ import annotations

import numpy as np
from numba import njit

# Observation masses below this are floored to keep log() and the
# M-step division finite.
MIN_DENOMINATOR = 1e-300


# =============================================================================
# TURNBULL EM (SELF-CONSISTENCY) ITERATION
# =============================================================================


@njit(cache=True)
def weighted_log_likelihood(
    alpha: np.ndarray, weights: np.ndarray, p: np.ndarray, out: np.ndarray
) -> float:
    """
    Compute observation masses and the weighted log-likelihood.

    Args:
        alpha: n x m clique matrix (1.0 where Turnbull interval j lies
            inside observation interval i)
        weights: Length-n observation counts
        p: Length-m probability vector
        out: Length-n buffer, filled with d_i = sum_j alpha[i, j] * p[j]

    Returns:
        sum_i weights[i] * log(d_i)
    """
    n, m = alpha.shape
    total = 0.0
    for i in range(n):
        d = 0.0
        for j in range(m):
            if alpha[i, j] > 0.0:
                d += p[j]
        if d < MIN_DENOMINATOR:
            d = MIN_DENOMINATOR
        out[i] = d
        total += weights[i] * np.log(d)
    return total


@njit(cache=True)
def turnbull_em_kernel(
    alpha: np.ndarray,
    weights: np.ndarray,
    p0: np.ndarray,
    max_iterations: int,
    tolerance: float,
) -> tuple[np.ndarray, int, bool, float]:
    """
    Run the Turnbull EM algorithm until the log-likelihood stops improving.

    Each iteration computes, for every observation i, the mass d_i of
    its censoring interval under the current estimate, then updates

        p_j <- p_j * sum_i w_i * alpha[i, j] / d_i / sum_i w_i

    which keeps p on the simplex. The loop stops when the weighted
    log-likelihood improves by less than `tolerance`, or after
    `max_iterations` updates.

    Args:
        alpha: n x m clique matrix as float64
        weights: Length-n observation counts
        p0: Length-m starting probabilities (positive, summing to 1)
        max_iterations: Hard cap on EM updates
        tolerance: Log-likelihood improvement threshold

    Returns:
        Tuple of (p, iterations, converged, log_likelihood)
    """
    n, m = alpha.shape
    total_weight = 0.0
    for i in range(n):
        total_weight += weights[i]

    p = p0.copy()
    denom = np.empty(n)
    new_p = np.empty(m)
    log_lik = -np.inf
    converged = False
    iterations = 0

    while iterations < max_iterations:
        current = weighted_log_likelihood(alpha, weights, p, denom)
        if current - log_lik < tolerance:
            log_lik = current
            converged = True
            break
        log_lik = current

        for j in range(m):
            acc = 0.0
            for i in range(n):
                if alpha[i, j] > 0.0:
                    acc += weights[i] / denom[i]
            new_p[j] = p[j] * acc / total_weight
        for j in range(m):
            p[j] = new_p[j]
        iterations += 1

    if not converged:
        log_lik = weighted_log_likelihood(alpha, weights, p, denom)

    return p, iterations, converged, log_lik
