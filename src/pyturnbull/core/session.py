"""Core data container for double-bounded contingent-valuation responses.

A DoubleBoundedLog holds one row per respondent: the first bid offered,
the follow-up bid, and the yes/no answer to each. Answer encodings are
normalized here, once, so that the estimation code only ever sees the
codes 1 (yes), 0 (no) and -1 (unrecognized).
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Any, Literal

import numpy as np
from numpy.typing import NDArray

from pyturnbull.core.exceptions import (
    DataQualityWarning,
    DimensionError,
    InsufficientDataError,
    MissingDataError,
    ValueRangeError,
)
from pyturnbull.core.types import AnswerArray

YES = 1
NO = 0
UNRECOGNIZED = -1

_YES_STRINGS = frozenset({"yes", "y", "true", "1"})
_NO_STRINGS = frozenset({"no", "n", "false", "0"})


def _is_missing(value: Any) -> bool:
    """True for None, NaN and NA-like scalars such as pandas.NA."""
    if value is None:
        return True
    try:
        return bool(value != value)
    except TypeError:
        # pandas.NA refuses conversion to bool
        return True


def _answer_code(value: Any) -> int:
    """Map one raw answer to YES, NO or UNRECOGNIZED."""
    if isinstance(value, (bool, np.bool_)):
        return YES if value else NO
    if isinstance(value, (int, float, np.integer, np.floating)):
        if value == 1:
            return YES
        if value == 0:
            return NO
        return UNRECOGNIZED
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _YES_STRINGS:
            return YES
        if text in _NO_STRINGS:
            return NO
    return UNRECOGNIZED


def normalize_answers(values: Any) -> tuple[AnswerArray, NDArray[np.bool_]]:
    """
    Normalize raw yes/no answers to int8 codes.

    Accepts bools, 0/1 numbers and "yes"/"no" style strings (factor
    labels in the original survey exports). Anything else is coded -1
    so that it degrades to the no-information interval downstream.

    Args:
        values: 1-D array-like of raw answers

    Returns:
        Tuple of (codes, missing_mask)
    """
    raw = np.asarray(values, dtype=object)
    if raw.ndim != 1:
        raise DimensionError(
            f"Answers must be a 1D array with one value per respondent, "
            f"got {raw.ndim}D with shape {raw.shape}."
        )
    missing = np.array([_is_missing(v) for v in raw], dtype=bool)
    codes = np.array(
        [NO if m else _answer_code(v) for v, m in zip(raw, missing)],
        dtype=np.int8,
    )
    return codes, missing


@dataclass
class DoubleBoundedLog:
    """
    Responses to a double-bounded dichotomous-choice survey.

    Each respondent was asked whether they would pay first_bid; the
    follow-up second_bid is higher after a "yes" and lower after a "no".

    Attributes:
        first_bid: Bid offered in the first question, one per respondent
        second_bid: Follow-up bid offered in the second question
        answer1: Answer to the first bid (bool, 0/1 or "yes"/"no")
        answer2: Answer to the second bid
        nan_policy: What to do with rows that have missing values:
            'warn' drops them with a DataQualityWarning (default),
            'drop' drops them silently, 'raise' raises MissingDataError
        metadata: Optional dictionary for additional attributes

    Properties:
        num_respondents: Number of rows kept
        num_dropped: Number of rows removed because of missing values

    Example:
        >>> log = DoubleBoundedLog(
        ...     first_bid=[10.0, 10.0],
        ...     second_bid=[20.0, 5.0],
        ...     answer1=["yes", "no"],
        ...     answer2=["no", "yes"],
        ... )
        >>> log.num_respondents
        2
    """

    first_bid: Any
    second_bid: Any
    answer1: Any
    answer2: Any
    nan_policy: Literal["raise", "warn", "drop"] = field(default="warn", repr=False)
    metadata: dict[str, Any] = field(default_factory=dict)

    num_dropped: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Normalize answers, handle missing rows and validate bids."""
        first = np.asarray(self.first_bid, dtype=np.float64)
        second = np.asarray(self.second_bid, dtype=np.float64)
        if first.ndim != 1 or second.ndim != 1:
            raise DimensionError(
                f"Bids must be 1D arrays with one value per respondent, got shapes "
                f"{first.shape} and {second.shape}. "
                f"Hint: Use .ravel() on single-column frames."
            )

        ans1, missing1 = normalize_answers(self.answer1)
        ans2, missing2 = normalize_answers(self.answer2)

        lengths = {len(first), len(second), len(ans1), len(ans2)}
        if len(lengths) != 1:
            raise DimensionError(
                f"All response fields must have the same length, got "
                f"first_bid={len(first)}, second_bid={len(second)}, "
                f"answer1={len(ans1)}, answer2={len(ans2)}."
            )

        missing = np.isnan(first) | np.isnan(second) | missing1 | missing2
        keep = self._handle_missing(missing)

        self.first_bid = first[keep]
        self.second_bid = second[keep]
        self.answer1 = ans1[keep]
        self.answer2 = ans2[keep]

        self._validate()

        for arr in (self.first_bid, self.second_bid, self.answer1, self.answer2):
            arr.setflags(write=False)

    def _handle_missing(self, missing: NDArray[np.bool_]) -> NDArray[np.bool_]:
        """Apply nan_policy and return the mask of rows to keep.

        Raises:
            MissingDataError: If nan_policy='raise' and missing values found
            InsufficientDataError: If no rows are left
        """
        n_missing = int(np.sum(missing))
        n_total = len(missing)

        if n_missing:
            rows = np.flatnonzero(missing)
            row_msg = str(rows[:5].tolist()) + ("..." if len(rows) > 5 else "")
            if self.nan_policy == "raise":
                raise MissingDataError(
                    f"Found {n_missing} rows with missing values (rows: {row_msg}). "
                    f"Use nan_policy='drop' to remove affected rows, or "
                    f"nan_policy='warn' to drop with a warning."
                )
            if self.nan_policy == "warn":
                warnings.warn(
                    f"Missing values detected. {n_missing} rows are removed.",
                    DataQualityWarning,
                    stacklevel=4,
                )
            self.num_dropped = n_missing

        if n_total - n_missing == 0:
            raise InsufficientDataError(
                f"No respondents left after removing {n_missing} rows with missing "
                f"values (of {n_total}). "
                f"Hint: Check that the answer and bid columns are populated."
            )

        return ~missing

    def _validate(self) -> None:
        """Validate bid values."""
        bids = np.concatenate([self.first_bid, self.second_bid])
        invalid = ~np.isfinite(bids) | (bids <= 0)
        if np.any(invalid):
            positions = np.flatnonzero(invalid) % self.num_respondents
            pos_preview = sorted(set(positions.tolist()))[:5]
            raise ValueRangeError(
                f"Found {int(np.sum(invalid))} non-positive or infinite bids in rows "
                f"{pos_preview}. All bids must be finite and strictly positive (> 0). "
                f"Hint: Check for missing bids encoded as 0."
            )

    @property
    def num_respondents(self) -> int:
        """Number of respondents kept after missing-value handling."""
        return len(self.first_bid)

    @property
    def num_unrecognized(self) -> int:
        """Number of respondents with an answer in an unrecognized encoding."""
        return int(np.sum((self.answer1 == UNRECOGNIZED) | (self.answer2 == UNRECOGNIZED)))

    @classmethod
    def from_dataframe(
        cls,
        df: Any,  # pandas.DataFrame
        answer_cols: tuple[str, str] | None = None,
        bid_cols: tuple[str, str] | None = None,
        formula: str | None = None,
        nan_policy: Literal["raise", "warn", "drop"] = "warn",
    ) -> DoubleBoundedLog:
        """
        Create DoubleBoundedLog from a pandas DataFrame.

        Columns can be named directly or through a formula of the form
        "R1 + R2 ~ BD1 + BD2" (answers on the left, bids on the right).

        Args:
            df: DataFrame with one row per respondent
            answer_cols: (first answer, second answer) column names
            bid_cols: (first bid, second bid) column names
            formula: Alternative to answer_cols/bid_cols
            nan_policy: Missing-value policy, see class docstring

        Returns:
            DoubleBoundedLog instance

        Example:
            >>> import pandas as pd
            >>> df = pd.DataFrame({
            ...     'R1': ['yes', 'no'], 'R2': ['no', 'yes'],
            ...     'BD1': [10.0, 10.0], 'BD2': [20.0, 5.0],
            ... })
            >>> log = DoubleBoundedLog.from_dataframe(df, formula="R1 + R2 ~ BD1 + BD2")
        """
        if formula is not None:
            answer_cols, bid_cols = parse_formula(formula)
        if answer_cols is None or bid_cols is None:
            raise ValueError("Must provide answer_cols and bid_cols (or formula)")

        def column(name: str, as_object: bool) -> Any:
            series = df[name]
            if as_object:
                # NA-like markers (NaN, pd.NA) become None before normalization
                return series.astype(object).where(series.notna(), None).to_numpy()
            return series.to_numpy(dtype=np.float64, na_value=np.nan)

        return cls(
            first_bid=column(bid_cols[0], as_object=False),
            second_bid=column(bid_cols[1], as_object=False),
            answer1=column(answer_cols[0], as_object=True),
            answer2=column(answer_cols[1], as_object=True),
            nan_policy=nan_policy,
        )


def parse_formula(formula: str) -> tuple[tuple[str, str], tuple[str, str]]:
    """
    Split an "R1 + R2 ~ BD1 + BD2" formula into column names.

    Returns:
        Tuple of ((answer1, answer2), (bid1, bid2))

    Raises:
        DimensionError: If either side does not name exactly two columns
    """
    if formula.count("~") != 1:
        raise DimensionError(
            f"Formula must have the form 'y1 + y2 ~ bid1 + bid2', got {formula!r}."
        )
    lhs, rhs = formula.split("~")
    answers = tuple(term.strip() for term in lhs.split("+") if term.strip())
    bids = tuple(term.strip() for term in rhs.split("+") if term.strip())
    if len(answers) != 2:
        raise DimensionError(
            f"LHS variable in the formula must be like y1 + y2, got {lhs.strip()!r}."
        )
    if len(bids) != 2:
        raise DimensionError(
            f"RHS variable in the formula must be like bid1 + bid2, got {rhs.strip()!r}."
        )
    return (answers[0], answers[1]), (bids[0], bids[1])
