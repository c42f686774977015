"""Mini README: Chart rendering onto an SVG drawing surface.

Structure:
    * ChartSlice - one (label, value, colour) triple.
    * ChartHandle / ChartRenderer - abstract create/destroy contract.
    * SvgCanvas - drawing surface holding the latest SVG markup.
    * MatplotlibChartRenderer - draws pie charts with matplotlib figures.

Figures are built with ``matplotlib.figure.Figure`` directly rather than
pyplot so no global figure registry keeps old charts alive; destroying a
handle clears its figure and blanks the canvas.
"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

import matplotlib
from matplotlib.figure import Figure

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

PIE = "pie"
EMPTY_CHART_TEXT = "No transactions yet"


@dataclass(frozen=True, slots=True)
class ChartSlice:
    label: str
    value: float
    color: str


class ChartHandle(ABC):
    @abstractmethod
    def destroy(self) -> None:
        """Release the chart and clear what it drew."""


class ChartRenderer(ABC):
    """Build charts from scratch; incremental updates are never requested."""

    @abstractmethod
    def create(self, kind: str, slices: Sequence[ChartSlice]) -> ChartHandle:
        """Render ``slices`` as a chart of ``kind`` and return its handle."""


class SvgCanvas:
    """Drawing surface that keeps the markup of whatever was drawn last."""

    def __init__(self) -> None:
        self.markup = ""

    def draw(self, markup: str) -> None:
        self.markup = markup

    def clear(self) -> None:
        self.markup = ""


class MatplotlibChart(ChartHandle):
    """A rendered figure bound to the canvas it was drawn on."""

    def __init__(self, figure: Figure, canvas: SvgCanvas, slices: Sequence[ChartSlice]) -> None:
        self.figure: Optional[Figure] = figure
        self.canvas = canvas
        self.slices = tuple(slices)

    @property
    def destroyed(self) -> bool:
        return self.figure is None

    def destroy(self) -> None:
        if self.figure is None:
            return
        self.figure.clear()
        self.figure = None
        self.canvas.clear()


class MatplotlibChartRenderer(ChartRenderer):
    """Draw charts with matplotlib and write them onto an ``SvgCanvas``."""

    def __init__(self, canvas: SvgCanvas, *, size_inches: float = 4.0) -> None:
        self.canvas = canvas
        self.size_inches = size_inches

    def create(self, kind: str, slices: Sequence[ChartSlice]) -> MatplotlibChart:
        if kind != PIE:
            raise ValueError(f"Unsupported chart kind: {kind}")

        figure = Figure(figsize=(self.size_inches, self.size_inches), tight_layout=True)
        ax = figure.add_subplot()
        # Wedges need positive sizes; zero and negative amounts stay in the list only.
        drawable = [chart_slice for chart_slice in slices if chart_slice.value > 0]
        if drawable:
            ax.pie(
                [chart_slice.value for chart_slice in drawable],
                labels=[chart_slice.label for chart_slice in drawable],
                colors=[chart_slice.color for chart_slice in drawable],
                startangle=90,
                # Descriptions are plain text; "$...$" must not reach mathtext.
                textprops={"parse_math": False},
            )
            ax.set_aspect("equal")
        else:
            ax.text(0.5, 0.5, EMPTY_CHART_TEXT, ha="center", va="center", color="gray")
            ax.axis("off")

        buffer = io.StringIO()
        # Keep labels as <text> elements instead of outlined glyph paths.
        with matplotlib.rc_context({"svg.fonttype": "none"}):
            figure.savefig(buffer, format="svg")
        self.canvas.draw(buffer.getvalue())
        LOGGER.debug("Rendered pie chart with %s of %s slices", len(drawable), len(slices))
        return MatplotlibChart(figure, self.canvas, slices)
