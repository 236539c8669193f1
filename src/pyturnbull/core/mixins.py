"""Mixin classes for result dataclasses.

This module provides common formatting utilities for result summaries.
Numeric precision is always passed in explicitly by the caller.
"""

from __future__ import annotations

import math
from typing import Any


class ResultSummaryMixin:
    """Common formatting utilities for result summaries.

    Provides helper methods for generating human-readable summary reports
    with consistent formatting across all result types.
    """

    @staticmethod
    def _format_header(title: str, width: int = 80) -> str:
        """Format a section header.

        Args:
            title: Header title text
            width: Total width of the header

        Returns:
            Formatted header string with border
        """
        border = "=" * width
        padding = (width - len(title)) // 2
        centered_title = " " * padding + title
        return f"{border}\n{centered_title}\n{border}"

    @staticmethod
    def _format_number(value: float, digits: int = 4) -> str:
        """Format a number with a given count of significant digits.

        Infinite values print as "Inf", matching the bid table convention.
        """
        if math.isinf(value):
            return "Inf" if value > 0 else "-Inf"
        return f"{value:.{digits}g}"

    @staticmethod
    def _format_metric(label: str, value: Any, width: int = 40, digits: int = 4) -> str:
        """Format a metric label-value pair.

        Args:
            label: Metric name
            value: Metric value
            width: Total width for alignment
            digits: Significant digits for float values

        Returns:
            Formatted metric string
        """
        if isinstance(value, bool):
            formatted_value = "Yes" if value else "No"
        elif isinstance(value, float):
            formatted_value = ResultSummaryMixin._format_number(value, digits)
        elif value is None:
            formatted_value = "N/A"
        else:
            formatted_value = str(value)

        dots = "." * max(1, width - len(label) - len(formatted_value) - 2)
        return f"  {label} {dots} {formatted_value}"

    @staticmethod
    def _format_status(passed: bool, pass_text: str = "PASSED",
                       fail_text: str = "FAILED") -> str:
        """Format a pass/fail status indicator."""
        return pass_text if passed else fail_text

    @staticmethod
    def _format_footer(computation_time_ms: float, width: int = 80) -> str:
        """Format the report footer with computation time.

        Args:
            computation_time_ms: Time in milliseconds
            width: Total width of the footer

        Returns:
            Formatted footer string
        """
        border = "=" * width
        if computation_time_ms < 1000:
            time_str = f"{computation_time_ms:.2f} ms"
        else:
            time_str = f"{computation_time_ms / 1000:.2f} s"
        return f"\nComputation Time: {time_str}\n{border}"

    @staticmethod
    def _format_section(title: str) -> str:
        """Format a section subheader."""
        return f"\n{title}:\n{'-' * len(title)}"

    @staticmethod
    def _format_table(
        headers: tuple[str, ...],
        rows: list[tuple[Any, ...]],
        digits: int = 4,
    ) -> str:
        """Format rows of numbers as a right-aligned table with a row index.

        Args:
            headers: Column titles
            rows: Table rows (floats are formatted with `digits`)
            digits: Significant digits for float cells

        Returns:
            Formatted table string
        """
        def cell(value: Any) -> str:
            if isinstance(value, float):
                return ResultSummaryMixin._format_number(value, digits)
            return str(value)

        body = [[str(i + 1)] + [cell(v) for v in row] for i, row in enumerate(rows)]
        titles = [""] + list(headers)
        widths = [
            max([len(titles[c])] + [len(r[c]) for r in body]) for c in range(len(titles))
        ]

        lines = ["  " + "  ".join(t.rjust(w) for t, w in zip(titles, widths))]
        for r in body:
            lines.append("  " + "  ".join(v.rjust(w) for v, w in zip(r, widths)))
        return "\n".join(lines)
