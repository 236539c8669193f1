"""Plotting functions for Turnbull survivor functions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from pyturnbull.core.result import TurnbullResult


def plot_survivor_function(
    result: TurnbullResult,
    main: str = "",
    sub: str = "",
    xlab: str = "Bid",
    ylab: str = "Survival Probability",
    lwd: float = 3,
    lty: str = "-",
    figsize: tuple[int, int] = (8, 6),
    ax: Any = None,
) -> tuple[Any, Any]:
    """
    Step plot of bid against survival probability.

    The curve runs from bid 0 to 1.1 x the largest bid, where it takes the
    survival at the inf sentinel. Both axes cross at (0, 0) and the bid
    axis is ticked at every distinct bid.

    Args:
        result: TurnbullResult from turnbull_db()
        main: Title
        sub: Subtitle, drawn under the bid axis
        xlab: Label of the bid axis
        ylab: Label of the survival axis
        lwd: Line width
        lty: Matplotlib line style
        figsize: Figure size as (width, height)
        ax: Optional matplotlib axes to draw on

    Returns:
        Tuple of (figure, axes) matplotlib objects

    Example:
        >>> from pyturnbull import turnbull_db
        >>> from pyturnbull.viz import plot_survivor_function
        >>> fig, ax = plot_survivor_function(turnbull_db(log))
        >>> fig.savefig("survival.png")
    """
    import matplotlib.pyplot as plt

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.get_figure()

    survivor = result.survivor
    x = np.append(survivor.bids, 1.1 * survivor.max_bid)
    y = np.append(survivor.survival, survivor.sentinel_survival)

    ax.step(x, y, where="post", linewidth=lwd, linestyle=lty, color="black")

    ax.spines["left"].set_position("zero")
    ax.spines["bottom"].set_position("zero")
    ax.spines["right"].set_visible(False)
    ax.spines["top"].set_visible(False)
    ax.set_xticks(survivor.bids)
    ax.set_yticks(np.arange(0.0, 1.01, 0.2))
    ax.set_xlim(0, x[-1])
    ax.set_ylim(0, 1.05)

    ax.set_xlabel(f"{xlab}\n{sub}" if sub else xlab)
    ax.set_ylabel(ylab)
    if main:
        ax.set_title(main)

    return fig, ax
