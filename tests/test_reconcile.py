"""Tests for reconciling the NPMLE with the full bid grid."""

import numpy as np
import pytest

from pyturnbull import NPMLEResult, compute_npmle, reconcile_survivor, turnbull_db


def make_npmle(intervals, mass) -> NPMLEResult:
    """Build an NPMLEResult directly from intervals and masses."""
    return NPMLEResult(
        intervals=np.array(intervals, dtype=np.float64),
        mass=np.array(mass, dtype=np.float64),
        converged=True,
        iterations=1,
        log_likelihood=0.0,
        tolerance=1e-10,
    )


class TestScenario:
    """Two respondents with intervals (10, 20] and (5, 10]."""

    def test_four_point_step_function(self):
        npmle = compute_npmle(np.array([10.0, 5.0]), np.array([20.0, 10.0]))
        sf = reconcile_survivor(npmle, np.array([5.0, 10.0, 20.0, np.inf]))

        assert sf.bids.tolist() == [0.0, 5.0, 10.0, 20.0]
        assert sf.survival.tolist() == [1.0, 1.0, 0.5, 0.0]
        assert sf.sentinel_survival == 0.0
        assert sf.filled.tolist() == [False, True, False, False]


class TestGapFilling:
    """Bids with no Turnbull right endpoint carry survival forward."""

    def test_carry_forward(self):
        npmle = make_npmle([[5.0, 10.0], [20.0, np.inf]], [0.3, 0.7])
        sf = reconcile_survivor(npmle, np.array([5.0, 10.0, 15.0, 20.0, np.inf]))

        assert sf.bids.tolist() == [0.0, 5.0, 10.0, 15.0, 20.0]
        assert sf.survival.tolist() == pytest.approx([1.0, 1.0, 0.7, 0.7, 0.7])
        assert sf.filled.tolist() == [False, True, False, True, True]
        assert sf.sentinel_survival == 0.0

    def test_every_bid_is_covered(self, survey_log):
        result = turnbull_db(survey_log)
        finite = result.intervals.finite_bids
        grid = result.survivor.bids

        assert set(finite.tolist()) <= set(grid.tolist())
        assert grid[0] == 0.0
        assert len(grid) == len(finite) + (0 if finite[0] == 0.0 else 1)

    def test_zero_bid_not_duplicated(self):
        npmle = make_npmle([[0.0, 5.0]], [1.0])
        sf = reconcile_survivor(npmle, np.array([0.0, 5.0, 10.0, np.inf]))

        assert sf.bids.tolist() == [0.0, 5.0, 10.0]
        assert sf.survival.tolist() == [1.0, 0.0, 0.0]


class TestNumericalPolicy:
    """Cumulative sums are rounded so survival stays within [0, 1]."""

    def test_drift_is_rounded_away(self):
        # Ten masses of 0.1 sum to 0.9999999999999999 without rounding
        intervals = [[float(i), float(i + 1)] for i in range(10)]
        npmle = make_npmle(intervals, [0.1] * 10)
        bids = np.append(np.arange(1.0, 11.0), np.inf)

        sf = reconcile_survivor(npmle, bids)

        assert sf.survival[-1] == 0.0
        assert sf.sentinel_survival == 0.0
        assert np.all((sf.survival >= 0.0) & (sf.survival <= 1.0))

    def test_starts_at_one_and_non_increasing(self, simulated_log):
        sf = turnbull_db(simulated_log).survivor

        assert sf.survival[0] == 1.0
        assert np.all(np.diff(sf.survival) <= 0)
        assert sf.sentinel_survival <= sf.survival[-1]


class TestStepFunctionEvaluation:
    """SurvivorFunction called as a right-continuous step function."""

    def test_call(self):
        npmle = compute_npmle(np.array([10.0, 5.0]), np.array([20.0, 10.0]))
        sf = reconcile_survivor(npmle, np.array([5.0, 10.0, 20.0, np.inf]))

        assert sf(-1.0) == 1.0
        assert sf(7.0) == 1.0
        assert sf(10.0) == 0.5
        assert sf(15.0) == 0.5
        assert sf(100.0) == 0.0
