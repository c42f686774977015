"""Mini README: Chart renderers for the expense tracker.

The ledger controller only knows the abstract ``ChartRenderer`` contract;
``MatplotlibChartRenderer`` is the bundled implementation and draws onto an
``SvgCanvas`` that interfaces embed or save.
"""

from .pie import (
    PIE,
    ChartHandle,
    ChartRenderer,
    ChartSlice,
    MatplotlibChart,
    MatplotlibChartRenderer,
    SvgCanvas,
)

__all__ = [
    "PIE",
    "ChartHandle",
    "ChartRenderer",
    "ChartSlice",
    "MatplotlibChart",
    "MatplotlibChartRenderer",
    "SvgCanvas",
]
