"""Custom exceptions and warnings for pyturnbull.

All errors inherit from ValueError so that callers already catching
ValueError around data preparation keep working.

Exception Hierarchy:
    PyTurnbullError (ValueError)
    └── DataError
        ├── DimensionError
        ├── ValueRangeError
        ├── MissingDataError
        └── InsufficientDataError

Warning Classes:
    DataQualityWarning (UserWarning)
    ConvergenceWarning (UserWarning)
"""

from __future__ import annotations


# =============================================================================
# BASE EXCEPTION
# =============================================================================


class PyTurnbullError(ValueError):
    """Base exception for all pyturnbull errors.

    Example:
        >>> try:
        ...     result = turnbull_db(log)
        ... except PyTurnbullError as e:
        ...     print(f"pyturnbull error: {e}")
    """

    pass


# =============================================================================
# DATA EXCEPTIONS
# =============================================================================


class DataError(PyTurnbullError):
    """Raised when survey data cannot be turned into censoring intervals.

    This is fatal for an estimation run. Use the more specific subclasses
    when possible.

    Common causes:
        - Mismatched column lengths
        - Every row removed because of missing values
        - Bids that are zero, negative or infinite
    """

    pass


class DimensionError(DataError):
    """Raised when the response arrays have incompatible shapes.

    Common causes:
        - answer and bid columns of different lengths
        - 2D input where one value per respondent is expected
        - A formula that does not name exactly two answers and two bids

    Example:
        >>> DoubleBoundedLog([10, 20], [20], [1, 0], [1, 1])
        DimensionError: All response fields must have the same length...
    """

    pass


class ValueRangeError(DataError):
    """Raised when values are outside their admissible range.

    Common causes:
        - Non-positive or infinite bids
        - A follow-up bid on the wrong side of the first bid, which
          produces a censoring interval with left > right
    """

    pass


class MissingDataError(DataError):
    """Raised when missing values are found and nan_policy='raise'.

    The default policy ('warn') drops the affected rows instead and
    reports how many were removed.

    Example:
        >>> DoubleBoundedLog(bid1, bid2, ans1, ans2, nan_policy="raise")
        MissingDataError: Found 3 rows with missing values...
    """

    pass


class InsufficientDataError(DataError):
    """Raised when no usable respondents remain.

    Example:
        >>> DoubleBoundedLog([np.nan], [20.0], [1], [0])
        InsufficientDataError: No respondents left after removing 1 rows...
    """

    pass


# =============================================================================
# WARNINGS
# =============================================================================


class DataQualityWarning(UserWarning):
    """Warning for data issues that don't prevent estimation.

    Emitted when:
        - Rows with missing values are dropped (nan_policy='warn')
        - Answers use an unrecognized encoding and are mapped to the
          no-information interval (0, inf)

    Example:
        >>> import warnings
        >>> warnings.filterwarnings('error', category=DataQualityWarning)
    """

    pass


class ConvergenceWarning(UserWarning):
    """Warning emitted when the NPMLE EM loop hits its iteration cap.

    The estimate is still returned and summarized; the result carries
    converged=False so the condition can be surfaced to end users.
    Consider raising max_iterations or loosening the tolerance.
    """

    pass
