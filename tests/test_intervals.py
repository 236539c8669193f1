"""Tests for building censoring intervals from answer patterns."""

import numpy as np
import pytest

from pyturnbull import (
    DataQualityWarning,
    DoubleBoundedLog,
    ValueRangeError,
    build_censoring_intervals,
    distinct_bids,
)


class TestRuleTable:
    """Each answer pattern maps to its censoring interval."""

    @pytest.mark.parametrize(
        "answers, second, expected",
        [
            (("yes", "yes"), 20.0, (20.0, np.inf)),
            (("yes", "no"), 20.0, (10.0, 20.0)),
            (("no", "yes"), 5.0, (5.0, 10.0)),
            (("no", "no"), 5.0, (0.0, 5.0)),
        ],
    )
    def test_pattern(self, answers, second, expected):
        log = DoubleBoundedLog([10.0], [second], [answers[0]], [answers[1]])
        ci = build_censoring_intervals(log)

        assert ci.left[0] == expected[0]
        assert ci.right[0] == expected[1]

    def test_two_respondent_scenario(self, two_respondent_log):
        ci = build_censoring_intervals(two_respondent_log)

        assert ci.left.tolist() == [10.0, 5.0]
        assert ci.right.tolist() == [20.0, 10.0]
        assert ci.num_respondents == 2

    def test_left_never_exceeds_right(self, survey_log):
        ci = build_censoring_intervals(survey_log)
        assert np.all(ci.left <= ci.right)


class TestUnrecognizedAnswers:
    """Unrecognized encodings degrade to the no-information interval."""

    def test_fallback_interval(self):
        log = DoubleBoundedLog([10.0, 10.0], [20.0, 5.0], ["yes", "maybe"], ["no", "yes"])

        with pytest.warns(DataQualityWarning, match="unrecognized"):
            ci = build_censoring_intervals(log)

        assert (ci.left[1], ci.right[1]) == (0.0, np.inf)
        assert (ci.left[0], ci.right[0]) == (10.0, 20.0)
        assert ci.num_unrecognized == 1

    def test_second_answer_unrecognized(self):
        log = DoubleBoundedLog([10.0], [20.0], [1], [7])

        with pytest.warns(DataQualityWarning):
            ci = build_censoring_intervals(log)

        assert (ci.left[0], ci.right[0]) == (0.0, np.inf)


class TestInconsistentBids:
    """Follow-up bids on the wrong side of the first bid."""

    def test_yes_then_lower_bid(self):
        # yes to 10 must be followed by a higher bid
        log = DoubleBoundedLog([10.0], [5.0], ["yes"], ["no"])

        with pytest.raises(ValueRangeError, match="left > right"):
            build_censoring_intervals(log)

    def test_no_then_higher_bid(self):
        log = DoubleBoundedLog([10.0], [20.0], ["no"], ["yes"])

        with pytest.raises(ValueRangeError):
            build_censoring_intervals(log)


class TestDistinctBids:
    """Tests for the Distinct Bid Set."""

    def test_scenario_bid_set(self, two_respondent_log):
        ci = build_censoring_intervals(two_respondent_log)
        assert ci.bids.tolist() == [5.0, 10.0, 20.0, np.inf]
        assert ci.finite_bids.tolist() == [5.0, 10.0, 20.0]

    def test_sentinel_not_duplicated(self, all_yes_log):
        ci = build_censoring_intervals(all_yes_log)
        assert ci.bids.tolist() == [20.0, 40.0, 60.0, np.inf]

    def test_zero_included_for_no_no(self, all_no_log):
        ci = build_censoring_intervals(all_no_log)
        assert ci.bids.tolist() == [0.0, 5.0, 10.0, 15.0, np.inf]

    def test_strictly_increasing(self, survey_log):
        bids = build_censoring_intervals(survey_log).bids
        assert np.all(np.diff(bids) > 0)
        assert bids[-1] == np.inf

    def test_distinct_bids_function(self):
        bids = distinct_bids(np.array([10.0, 10.0, 0.0]), np.array([20.0, 20.0, 5.0]))
        assert bids.tolist() == [0.0, 5.0, 10.0, 20.0, np.inf]
