"""
Pathological fixtures for EVALs - data designed to stress the estimator.

Each fixture targets a specific degenerate or numerically awkward case.
"""

import numpy as np
import pytest

from pyturnbull import DoubleBoundedLog


@pytest.fixture
def single_respondent_log():
    """n=1: one interval, one Turnbull interval."""
    return DoubleBoundedLog([10.0], [20.0], [1], [0])


@pytest.fixture
def extreme_bid_log():
    """Bids spanning 15 orders of magnitude."""
    return DoubleBoundedLog(
        first_bid=[1e-6, 1e-6, 1e9, 1e9],
        second_bid=[2e-6, 5e-7, 2e9, 5e8],
        answer1=[1, 0, 1, 0],
        answer2=[0, 1, 1, 0],
    )


@pytest.fixture
def many_cliques_log():
    """Forty disjoint brackets so that the mass is split forty ways."""
    first = np.arange(1.0, 41.0) * 10
    return DoubleBoundedLog(
        first_bid=first,
        second_bid=first + 5.0,
        answer1=np.ones(40, dtype=bool),
        answer2=np.zeros(40, dtype=bool),
    )


@pytest.fixture(params=[0, 1, 2, 3, 4])
def seeded_log(request, make_simulated_log):
    """Simulated surveys of varying size and seed."""
    return make_simulated_log(50 + 100 * request.param, seed=request.param)
