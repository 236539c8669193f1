"""Core data structures for pyturnbull."""

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

__all__ = [
    "DoubleBoundedLog",
    "CensoringIntervals",
    "NPMLEResult",
    "SurvivorFunction",
    "WTPEstimate",
    "TurnbullResult",
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
]
