"""Mean and median WTP from a reconciled survivor step function."""

from __future__ import annotations

import numpy as np

from pyturnbull.core.exceptions import InsufficientDataError
from pyturnbull.core.result import SurvivorFunction, WTPEstimate

# Nominal open upper bound for the median when survival never drops below
# one half, as a multiple of the largest bid.
MEDIAN_EXTRAPOLATION = 1.1


def kaplan_meier_mean(survivor: SurvivorFunction) -> float:
    """
    Kaplan-Meier (lower-bound) mean WTP.

    Sums (b[i+1] - b[i]) * s[i+1]: each bid interval is weighted by the
    survival at its upper end. The open interval above the largest bid
    contributes nothing, since the distribution is right-censored there.
    """
    b, s = survivor.bids, survivor.survival
    return float(np.sum(np.diff(b) * s[1:]))


def spearman_karber_mean(survivor: SurvivorFunction) -> float:
    """
    Spearman-Karber mean WTP.

    Trapezoidal version of the Kaplan-Meier sum: each bid interval is
    weighted by the average survival at its two ends.
    """
    b, s = survivor.bids, survivor.survival
    return float(np.sum(np.diff(b) * 0.5 * (s[:-1] + s[1:])))


def median_bounds(survivor: SurvivorFunction) -> tuple[float, float]:
    """
    Bracket the median WTP.

    Under interval censoring the median is only identified up to the
    bids around the point where survival crosses 0.5. For the upper
    bound the axis is extended by one point at 1.1 x the largest bid
    carrying the survival at the inf sentinel.

    Returns:
        Tuple of (largest bid with survival > 0.5, smallest bid with
        survival < 0.5)
    """
    top = MEDIAN_EXTRAPOLATION * survivor.max_bid
    axis = np.append(survivor.bids, top)
    surv = np.append(survivor.survival, survivor.sentinel_survival)

    # The lower bound is always an observed bid, never the extrapolated point
    above = np.flatnonzero(survivor.survival > 0.5)
    below = np.flatnonzero(surv < 0.5)
    lower = float(survivor.bids[above[-1]]) if len(above) else 0.0
    upper = float(axis[below[0]]) if len(below) else top
    return lower, upper


def summarize_wtp(survivor: SurvivorFunction) -> WTPEstimate:
    """
    Compute the WTP summary statistics of a survivor step function.

    Args:
        survivor: Reconciled survivor function starting at bid 0

    Returns:
        WTPEstimate with Kaplan-Meier mean, Spearman-Karber mean and
        median bounds

    Raises:
        InsufficientDataError: If the grid holds no positive bid

    Example:
        >>> est = summarize_wtp(survivor)
        >>> est.mean_km <= est.mean_sk
        True
    """
    if len(survivor.bids) < 2:
        raise InsufficientDataError(
            "Survivor function has no positive bids; cannot integrate WTP."
        )

    lower, upper = median_bounds(survivor)
    return WTPEstimate(
        mean_km=kaplan_meier_mean(survivor),
        mean_sk=spearman_karber_mean(survivor),
        median_lower=lower,
        median_upper=upper,
    )
