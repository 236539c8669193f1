"""Tests for custom exceptions and warnings in pyturnbull."""

import warnings

import numpy as np
import pytest

from pyturnbull import (
    ConvergenceWarning,
    DataError,
    DataQualityWarning,
    DimensionError,
    DoubleBoundedLog,
    InsufficientDataError,
    MissingDataError,
    PyTurnbullError,
    ValueRangeError,
    turnbull_db,
)


class TestExceptionHierarchy:
    """Test that exception hierarchy is correct."""

    def test_base_is_value_error(self):
        assert issubclass(PyTurnbullError, ValueError)

    def test_data_errors(self):
        assert issubclass(DataError, PyTurnbullError)
        for cls in (DimensionError, ValueRangeError, MissingDataError, InsufficientDataError):
            assert issubclass(cls, DataError)

    def test_warnings_hierarchy(self):
        assert issubclass(DataQualityWarning, UserWarning)
        assert issubclass(ConvergenceWarning, UserWarning)

    def test_catch_all_data_errors(self):
        with pytest.raises(DataError):
            DoubleBoundedLog([10.0, 20.0], [20.0], [1, 0], [1, 1])

    def test_catch_as_value_error(self):
        with pytest.raises(ValueError):
            DoubleBoundedLog([-10.0], [20.0], [1], [0])


class TestWarningControl:
    """Library warnings can be filtered or promoted like any warning."""

    def test_promote_convergence_warning(self, survey_log):
        with warnings.catch_warnings():
            warnings.simplefilter("error", ConvergenceWarning)
            with pytest.raises(ConvergenceWarning):
                turnbull_db(survey_log, max_iterations=1)

    def test_silence_data_quality_warning(self):
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", DataQualityWarning)
            log = DoubleBoundedLog([10.0, np.nan], [20.0, 5.0], [1, 0], [0, 1])
        assert log.num_dropped == 1

    def test_message_names_cause(self):
        with pytest.raises(InsufficientDataError) as exc_info:
            DoubleBoundedLog([np.nan, np.nan], [1.0, 2.0], [1, 1], [0, 0], nan_policy="drop")
        assert "2 rows" in str(exc_info.value)
