"""Mini README: Shared fixtures and test doubles for the tracker tests.

Structure:
    * RecordingDisplay - LedgerDisplay that remembers every call.
    * RecordingChartRenderer - ChartRenderer logging create/destroy order.
    * StepClock - deterministic millisecond clock.
    * controller - LedgerController over a MemoryStore with the doubles.
"""

from __future__ import annotations

from typing import List, Sequence

import pytest

from expensetracker.charts import ChartHandle, ChartRenderer, ChartSlice
from expensetracker.ledger import (
    FormattedSummary,
    FormInputs,
    LedgerController,
    LedgerDisplay,
    LedgerRepository,
    MillisecondIdClock,
    TransactionRow,
)
from expensetracker.storage import MemoryStore


class RecordingDisplay(LedgerDisplay):
    def __init__(self) -> None:
        self.inputs = FormInputs()
        self.rows: List[TransactionRow] = []
        self.summary: FormattedSummary | None = None
        self.messages: List[str] = []
        self.clear_count = 0

    def read_inputs(self) -> FormInputs:
        return self.inputs

    def clear_inputs(self) -> None:
        self.clear_count += 1
        self.inputs = FormInputs(kind=self.inputs.kind)

    def show_transactions(self, rows: Sequence[TransactionRow]) -> None:
        self.rows = list(rows)

    def show_summary(self, summary: FormattedSummary) -> None:
        self.summary = summary

    def show_message(self, message: str) -> None:
        self.messages.append(message)


class RecordingChart(ChartHandle):
    def __init__(self, renderer: "RecordingChartRenderer", slices: Sequence[ChartSlice]) -> None:
        self.renderer = renderer
        self.slices = list(slices)
        self.destroyed = False

    def destroy(self) -> None:
        self.destroyed = True
        self.renderer.events.append("destroy")


class RecordingChartRenderer(ChartRenderer):
    def __init__(self) -> None:
        self.charts: List[RecordingChart] = []
        self.events: List[str] = []

    def create(self, kind: str, slices: Sequence[ChartSlice]) -> RecordingChart:
        assert kind == "pie"
        chart = RecordingChart(self, slices)
        self.charts.append(chart)
        self.events.append("create")
        return chart


class StepClock:
    """Returns a fixed time unless advanced, to provoke same-tick ids."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.now = start

    def __call__(self) -> int:
        return self.now


@pytest.fixture()
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture()
def chart_renderer() -> RecordingChartRenderer:
    return RecordingChartRenderer()


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def controller(display, chart_renderer, store, clock) -> LedgerController:
    ledger_controller = LedgerController(
        display,
        LedgerRepository(store),
        chart_renderer,
        palette=("red", "blue", "green"),
        id_clock=MillisecondIdClock(clock),
    )
    ledger_controller.initialize()
    return ledger_controller
