"""Pytest fixtures for pyturnbull tests."""

import numpy as np
import pytest

from pyturnbull import DoubleBoundedLog


@pytest.fixture
def two_respondent_log() -> DoubleBoundedLog:
    """
    Two respondents bracketing WTP on either side of a first bid of 10.

    Respondent 0: yes to 10, no to 20 -> WTP in (10, 20]
    Respondent 1: no to 10, yes to 5  -> WTP in (5, 10]
    """
    return DoubleBoundedLog(
        first_bid=[10.0, 10.0],
        second_bid=[20.0, 5.0],
        answer1=["yes", "no"],
        answer2=["no", "yes"],
    )


@pytest.fixture
def all_yes_log() -> DoubleBoundedLog:
    """Every respondent accepts both bids (WTP above every bid offered)."""
    return DoubleBoundedLog(
        first_bid=[10.0, 20.0, 30.0],
        second_bid=[20.0, 40.0, 60.0],
        answer1=[1, 1, 1],
        answer2=[1, 1, 1],
    )


@pytest.fixture
def all_no_log() -> DoubleBoundedLog:
    """Every respondent rejects both bids (no lower bound on WTP)."""
    return DoubleBoundedLog(
        first_bid=[10.0, 20.0, 30.0],
        second_bid=[5.0, 10.0, 15.0],
        answer1=[0, 0, 0],
        answer2=[0, 0, 0],
    )


@pytest.fixture
def survey_log() -> DoubleBoundedLog:
    """
    Twelve respondents over first bids 100/200/400.

    Follow-up bids double after "yes" and halve after "no", giving the
    distinct bids {0, 50, 100, 200, 400, 800, inf}.
    """
    first = np.array([100.0] * 4 + [200.0] * 4 + [400.0] * 4)
    answers = [
        (True, True), (True, False), (False, True), (True, True),
        (True, False), (False, True), (False, False), (True, True),
        (False, True), (False, False), (True, False), (False, False),
    ]
    a1 = np.array([a for a, _ in answers])
    a2 = np.array([b for _, b in answers])
    second = np.where(a1, first * 2, first / 2)
    return DoubleBoundedLog(first_bid=first, second_bid=second, answer1=a1, answer2=a2)


def simulate_log(n: int, seed: int = 0, scale: float = 300.0) -> DoubleBoundedLog:
    """Simulate double-bounded answers for exponential WTP."""
    rng = np.random.default_rng(seed)
    wtp = rng.exponential(scale, size=n)
    first = rng.choice([100.0, 200.0, 400.0, 800.0], size=n)
    a1 = wtp >= first
    second = np.where(a1, first * 2, first / 2)
    a2 = wtp >= second
    return DoubleBoundedLog(first_bid=first, second_bid=second, answer1=a1, answer2=a2)


@pytest.fixture
def simulated_log() -> DoubleBoundedLog:
    """500 simulated respondents with exponential WTP (mean 300)."""
    return simulate_log(500)


@pytest.fixture
def make_simulated_log():
    """Factory fixture: make_simulated_log(n, seed=0, scale=300.0)."""
    return simulate_log
