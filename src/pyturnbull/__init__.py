"""
pyturnbull: Nonparametric WTP Estimation for Double-Bounded CV Data.

Kaplan-Meier-Turnbull survivor functions, mean and median willingness to
pay from double-bounded dichotomous-choice contingent-valuation surveys.
"""

from pyturnbull.core.session import DoubleBoundedLog
from pyturnbull.core.result import (
    CensoringIntervals,
    NPMLEResult,
    SurvivorFunction,
    WTPEstimate,
    TurnbullResult,
)
from pyturnbull.core.exceptions import (
    PyTurnbullError,
    DataError,
    DimensionError,
    ValueRangeError,
    MissingDataError,
    InsufficientDataError,
    DataQualityWarning,
    ConvergenceWarning,
)
from pyturnbull.algorithms.intervals import build_censoring_intervals, distinct_bids
from pyturnbull.algorithms.npmle import compute_npmle, find_turnbull_intervals
from pyturnbull.algorithms.reconcile import reconcile_survivor
from pyturnbull.algorithms.wtp import summarize_wtp
from pyturnbull.algorithms.turnbull import turnbull_db

__version__ = "0.1.0"

__all__ = [
    # Data structures
    "DoubleBoundedLog",
    # Result types
    "CensoringIntervals",
    "NPMLEResult",
    "SurvivorFunction",
    "WTPEstimate",
    "TurnbullResult",
    # Pipeline stages
    "build_censoring_intervals",
    "distinct_bids",
    "find_turnbull_intervals",
    "compute_npmle",
    "reconcile_survivor",
    "summarize_wtp",
    "turnbull_db",
    # Exceptions
    "PyTurnbullError",
    "DataError",
    "DimensionError",
    "ValueRangeError",
    "MissingDataError",
    "InsufficientDataError",
    # Warnings
    "DataQualityWarning",
    "ConvergenceWarning",
    # Convenience
    "estimate_wtp",
]


def estimate_wtp(
    df,
    formula: str = "R1 + R2 ~ BD1 + BD2",
    tolerance: float = 1e-10,
    max_iterations: int = 10000,
) -> TurnbullResult:
    """
    Convenience function to run turnbull_db() directly on a DataFrame.

    Args:
        df: pandas DataFrame with one row per respondent
        formula: "answer1 + answer2 ~ bid1 + bid2" column specification
        tolerance: EM log-likelihood improvement threshold
        max_iterations: Maximum EM iterations

    Returns:
        TurnbullResult
    """
    log = DoubleBoundedLog.from_dataframe(df, formula=formula)
    return turnbull_db(log, tolerance=tolerance, max_iterations=max_iterations)
