"""Example: Kaplan-Meier-Turnbull WTP from a double-bounded survey.

Each respondent is asked whether they would pay a first bid. The follow-up
bid is doubled after "yes" and halved after "no". The answers bracket each
respondent's willingness to pay, and turnbull_db() turns the brackets into
a nonparametric survivor function.

This example shows how to:
- Build a DoubleBoundedLog from raw answers
- Estimate the survivor function and WTP statistics
- Detect a non-converged estimate
"""

import warnings

import numpy as np
from pyturnbull import ConvergenceWarning, DoubleBoundedLog, turnbull_db

# =============================================================================
# Example 1: Simulated survey
# =============================================================================

print("=" * 60)
print("Example 1: Simulated survey (exponential WTP, mean 300)")
print("=" * 60)

rng = np.random.default_rng(42)
n = 400
wtp = rng.exponential(300.0, size=n)
first = rng.choice([100.0, 200.0, 400.0, 800.0], size=n)
answer1 = wtp >= first
second = np.where(answer1, first * 2, first / 2)
answer2 = wtp >= second

log = DoubleBoundedLog(
    first_bid=first,
    second_bid=second,
    answer1=np.where(answer1, "yes", "no"),
    answer2=np.where(answer2, "yes", "no"),
)

result = turnbull_db(log)
print(result.summary(digits=4))
print()

# =============================================================================
# Example 2: Capped EM run
# =============================================================================

print("=" * 60)
print("Example 2: Iteration cap reached")
print("=" * 60)

with warnings.catch_warnings(record=True) as caught:
    warnings.simplefilter("always")
    capped = turnbull_db(log, max_iterations=3)

if not capped.converged:
    print(f"  Converged: {capped.converged} ({len(caught)} warning(s))")
    print(f"  Mean WTP (Kaplan-Meier, last iterate): {capped.wtp.mean_km:.2f}")
print(capped.npmle.summary(digits=3))

# =============================================================================
# Example 3: Plot (requires matplotlib)
# =============================================================================

try:
    fig, ax = result.plot(main="Turnbull survivor function")
    fig.savefig("turnbull_survival.png")
    print("\nSaved turnbull_survival.png")
except ImportError:
    print("\nInstall matplotlib to plot: pip install pyturnbull[viz]")
