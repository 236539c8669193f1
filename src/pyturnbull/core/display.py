"""Display mixin adding plotting to result dataclasses.

matplotlib is imported lazily so the core package works without the
visualization extra installed.
"""

from __future__ import annotations

from typing import Any


class ResultPlotMixin:
    """Mixin providing plot() with lazy matplotlib import.

    Methods:
        plot: Draw the survivor step function of this result
    """

    def plot(self, kind: str = "auto", **kwargs) -> tuple[Any, Any]:
        """Create a visualization of this result.

        Args:
            kind: Type of plot to create:
                - 'auto': Survivor step function
                - 'survival': Survivor step function
            **kwargs: Additional arguments passed to the plotting function

        Returns:
            Tuple of (figure, axes) matplotlib objects

        Raises:
            ImportError: If matplotlib is not installed
            NotImplementedError: If the plot kind is not available
        """
        try:
            import matplotlib.pyplot  # noqa: F401
        except ImportError:
            raise ImportError(
                "Plotting requires matplotlib. Install with: pip install pyturnbull[viz]"
            )

        if kind in ("auto", "survival"):
            from pyturnbull.viz.plots import plot_survivor_function

            return plot_survivor_function(self, **kwargs)

        raise NotImplementedError(
            f"Plot kind '{kind}' not available for {self.__class__.__name__}"
        )
