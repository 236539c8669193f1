"""Result dataclasses for Turnbull WTP estimation.

Each stage of the estimation builds one frozen result:

    - CensoringIntervals: per-respondent (left, right] bounds on WTP
    - NPMLEResult: Turnbull intervals with their estimated probability mass
    - SurvivorFunction: step survivor function on the full bid grid
    - WTPEstimate: Kaplan-Meier mean, Spearman-Karber mean, median bounds
    - TurnbullResult: all of the above for one estimation run
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray

from pyturnbull.core.display import ResultPlotMixin
from pyturnbull.core.mixins import ResultSummaryMixin
from pyturnbull.core.types import FloatArray, Interval


@dataclass(frozen=True)
class CensoringIntervals:
    """
    Censoring intervals derived from double-bounded responses.

    Respondent i's WTP is known to lie in (left[i], right[i]]. A right
    bound of inf means WTP exceeds every bid offered; a left bound of 0
    means there is no lower bound.

    Attributes:
        left: Lower bounds, one per respondent
        right: Upper bounds, one per respondent (may be inf)
        bids: Distinct Bid Set, sorted unique endpoints ending with inf
        num_unrecognized: Respondents mapped to the no-information
            interval (0, inf) because of an unrecognized answer encoding
    """

    left: FloatArray
    right: FloatArray
    bids: FloatArray
    num_unrecognized: int = 0

    @property
    def num_respondents(self) -> int:
        """Number of censoring intervals."""
        return len(self.left)

    @property
    def finite_bids(self) -> FloatArray:
        """Distinct Bid Set without the inf sentinel."""
        return self.bids[np.isfinite(self.bids)]

    def __len__(self) -> int:
        return self.num_respondents

    def __repr__(self) -> str:
        return (
            f"CensoringIntervals(n={self.num_respondents}, "
            f"distinct_bids={len(self.bids)})"
        )


@dataclass(frozen=True)
class NPMLEResult:
    """
    Nonparametric maximum-likelihood estimate for interval-censored data.

    Probability mass can only sit on the Turnbull intervals (maximal
    intersections of the censoring intervals). The EM self-consistency
    loop distributes mass over them.

    Attributes:
        intervals: m x 2 array of Turnbull intervals (left, right), sorted
        mass: Estimated probability of each Turnbull interval (sums to 1)
        converged: False if the EM loop stopped at max_iterations
        iterations: Number of EM iterations run
        log_likelihood: Log-likelihood at the returned estimate
        tolerance: Log-likelihood improvement threshold used
    """

    intervals: FloatArray
    mass: FloatArray
    converged: bool
    iterations: int
    log_likelihood: float
    tolerance: float

    @property
    def num_intervals(self) -> int:
        """Number of Turnbull intervals."""
        return len(self.mass)

    @property
    def right_endpoints(self) -> FloatArray:
        """Right endpoints of the Turnbull intervals."""
        return self.intervals[:, 1]

    def support(self) -> list[tuple[Interval, float]]:
        """Return (interval, mass) pairs in increasing interval order."""
        return [
            ((float(lo), float(hi)), float(p))
            for (lo, hi), p in zip(self.intervals, self.mass)
        ]

    def summary(self, digits: int = 4) -> str:
        """Return the estimated probabilities, noting non-convergence."""
        m = ResultSummaryMixin
        lines = []
        if not self.converged:
            lines.append("The optimization did not converge")
        probs = " ".join(m._format_number(float(p), digits) for p in self.mass)
        lines.append(f"\nProbability: {probs}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return dictionary representation for serialization."""
        return {
            "intervals": self.intervals.tolist(),
            "mass": self.mass.tolist(),
            "converged": self.converged,
            "iterations": self.iterations,
            "log_likelihood": self.log_likelihood,
            "tolerance": self.tolerance,
        }

    def __repr__(self) -> str:
        status = "converged" if self.converged else "not converged"
        return f"NPMLEResult({self.num_intervals} intervals, {status}, iter={self.iterations})"


@dataclass(frozen=True)
class SurvivorFunction:
    """
    Survivor step function of WTP over every distinct bid.

    Attributes:
        bids: 0 followed by every finite distinct bid, increasing
        survival: Probability that WTP exceeds each bid; survival[0] == 1
        sentinel_survival: Survival at the inf sentinel
        filled: True where the bid had no matching Turnbull interval right
            endpoint and the value was carried forward
    """

    bids: FloatArray
    survival: FloatArray
    sentinel_survival: float
    filled: NDArray[np.bool_]

    @property
    def max_bid(self) -> float:
        """Largest finite bid on the grid."""
        return float(self.bids[-1])

    def table(self) -> list[tuple[float, float]]:
        """Return (upper bid, survival) pairs including the inf sentinel."""
        rows = [(float(b), float(s)) for b, s in zip(self.bids, self.survival)]
        rows.append((float("inf"), float(self.sentinel_survival)))
        return rows

    def __call__(self, bid: float) -> float:
        """Evaluate the step function at an arbitrary bid."""
        if bid < 0:
            return 1.0
        idx = int(np.searchsorted(self.bids, bid, side="right")) - 1
        return float(self.survival[idx])

    def __len__(self) -> int:
        return len(self.bids)


@dataclass(frozen=True)
class WTPEstimate:
    """
    Summary statistics of the WTP distribution.

    Attributes:
        mean_km: Kaplan-Meier mean (lower-bound estimator)
        mean_sk: Spearman-Karber mean (trapezoidal)
        median_lower: Largest bid with survival still above 0.5
        median_upper: Smallest bid with survival below 0.5 (1.1 x the
            largest bid when survival never drops below 0.5)
    """

    mean_km: float
    mean_sk: float
    median_lower: float
    median_upper: float

    @property
    def median(self) -> tuple[float, float]:
        """Median bracket (lower, upper)."""
        return (self.median_lower, self.median_upper)

    def to_dict(self) -> dict[str, Any]:
        """Return dictionary representation for serialization."""
        return {
            "mean_km": self.mean_km,
            "mean_sk": self.mean_sk,
            "median_lower": self.median_lower,
            "median_upper": self.median_upper,
        }


@dataclass(frozen=True)
class TurnbullResult(ResultPlotMixin):
    """
    Result of a Kaplan-Meier-Turnbull estimation on double-bounded data.

    Attributes:
        intervals: Censoring intervals built from the responses
        npmle: Turnbull NPMLE with convergence diagnostics
        survivor: Reconciled survivor step function
        wtp: Mean and median WTP estimates
        num_dropped: Rows removed because of missing values
        computation_time_ms: Time taken in milliseconds
    """

    intervals: CensoringIntervals
    npmle: NPMLEResult
    survivor: SurvivorFunction
    wtp: WTPEstimate
    num_dropped: int
    computation_time_ms: float

    @property
    def converged(self) -> bool:
        """True if the NPMLE EM loop converged."""
        return self.npmle.converged

    @property
    def mean_wtp(self) -> float:
        """Kaplan-Meier mean WTP."""
        return self.wtp.mean_km

    @property
    def median_wtp(self) -> tuple[float, float]:
        """Median WTP bracket."""
        return self.wtp.median

    @property
    def num_respondents(self) -> int:
        """Number of respondents used in the estimation."""
        return self.intervals.num_respondents

    def summary(self, digits: int = 4) -> str:
        """Return human-readable summary report.

        Args:
            digits: Significant digits for every printed number
        """
        m = ResultSummaryMixin
        lines = [m._format_header("TURNBULL WTP ESTIMATION REPORT")]

        status = m._format_status(self.converged, "CONVERGED", "DID NOT CONVERGE")
        lines.append(f"\nStatus: {status}")

        lines.append(m._format_section("Data"))
        lines.append(m._format_metric("Respondents", self.num_respondents))
        lines.append(m._format_metric("Rows Removed (missing)", self.num_dropped))
        lines.append(m._format_metric("Distinct Bids", len(self.intervals.finite_bids)))
        lines.append(m._format_metric("Turnbull Intervals", self.npmle.num_intervals))
        lines.append(m._format_metric("EM Iterations", self.npmle.iterations))

        lines.append(m._format_section("Survival probability"))
        lines.append(m._format_table(("Upper", "Prob."), self.survivor.table(), digits))

        lines.append(m._format_section("WTP estimates"))
        lines.append(m._format_metric("Mean (Kaplan-Meier)", self.wtp.mean_km, digits=digits))
        lines.append(m._format_metric("Mean (Spearman-Karber)", self.wtp.mean_sk, digits=digits))
        lo = m._format_number(self.wtp.median_lower, digits)
        hi = m._format_number(self.wtp.median_upper, digits)
        lines.append(m._format_metric("Median in", f"[ {lo} , {hi} ]"))

        if not self.converged:
            lines.append(m._format_section("Interpretation"))
            lines.append("  The optimization did not converge; estimates use the last")
            lines.append("  EM iterate. Consider increasing max_iterations.")

        lines.append(m._format_footer(self.computation_time_ms))
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Return dictionary representation for serialization."""
        return {
            "num_respondents": self.num_respondents,
            "num_dropped": self.num_dropped,
            "converged": self.converged,
            "npmle": self.npmle.to_dict(),
            "survival": self.survivor.table(),
            **self.wtp.to_dict(),
            "computation_time_ms": self.computation_time_ms,
        }

    def __repr__(self) -> str:
        """Compact string representation."""
        flag = "" if self.converged else ", not converged"
        return (
            f"TurnbullResult(mean_km={self.wtp.mean_km:.4f}, "
            f"mean_sk={self.wtp.mean_sk:.4f}{flag}, {self.computation_time_ms:.2f}ms)"
        )
