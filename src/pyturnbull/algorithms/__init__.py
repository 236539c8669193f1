"""Estimation stages, in pipeline order."""

from pyturnbull.algorithms.intervals import build_censoring_intervals, distinct_bids
from pyturnbull.algorithms.npmle import (
    clique_matrix,
    compute_npmle,
    find_turnbull_intervals,
)
from pyturnbull.algorithms.reconcile import reconcile_survivor
from pyturnbull.algorithms.wtp import (
    kaplan_meier_mean,
    median_bounds,
    spearman_karber_mean,
    summarize_wtp,
)
from pyturnbull.algorithms.turnbull import turnbull_db

__all__ = [
    # Interval builder
    "build_censoring_intervals",
    "distinct_bids",
    # NPMLE
    "find_turnbull_intervals",
    "clique_matrix",
    "compute_npmle",
    # Reconciler
    "reconcile_survivor",
    # Summarizer
    "kaplan_meier_mean",
    "spearman_karber_mean",
    "median_bounds",
    "summarize_wtp",
    # Pipeline
    "turnbull_db",
]
