"""Visualization utilities for Turnbull WTP estimation."""

__all__ = [
    "plot_survivor_function",
]


def plot_survivor_function(result, **kwargs):
    """
    Step plot of bid against survival probability.

    Args:
        result: TurnbullResult
        **kwargs: main, sub, xlab, ylab, lwd, lty, figsize, ax

    Returns:
        Tuple of (figure, axes)
    """
    from pyturnbull.viz.plots import plot_survivor_function as _plot

    return _plot(result, **kwargs)
