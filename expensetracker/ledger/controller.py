"""Mini README: The ledger controller driving list, summary and chart.

Structure:
    * LedgerController - owns the ordered transaction list, applies add and
      delete, persists after every mutation and re-renders everything.

Every public mutation follows the same path: change the list, save the
whole ledger, then rebuild the list rows, the summary and the chart from
scratch. Nothing is diffed. Collaborators are injected so the controller
runs the same way behind the web page, the console or a test double.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Union

from ..charts import PIE, ChartHandle, ChartRenderer, ChartSlice
from ..configuration import DEFAULT_PALETTE
from ..logging_utils import get_logger
from .display import LedgerDisplay, TransactionRow
from .ids import MillisecondIdClock
from .repository import LedgerFormatError, LedgerRepository
from .models import (
    LedgerSummary,
    Transaction,
    TransactionKind,
    TransactionValidationError,
    compute_summary,
    format_amount,
    parse_amount,
    parse_description,
)

LOGGER = get_logger(__name__)


class LedgerController:
    """Mediate every change to the ledger and keep the views in step."""

    def __init__(
        self,
        display: LedgerDisplay,
        repository: LedgerRepository,
        chart_renderer: ChartRenderer,
        *,
        palette: Sequence[str] = DEFAULT_PALETTE,
        id_clock: Optional[MillisecondIdClock] = None,
    ) -> None:
        if not palette:
            raise ValueError("The palette needs at least one colour.")
        self.display = display
        self.repository = repository
        self.chart_renderer = chart_renderer
        self.palette = tuple(palette)
        self.id_clock = id_clock or MillisecondIdClock()
        self._transactions: List[Transaction] = []
        self._chart: Optional[ChartHandle] = None

    @property
    def transactions(self) -> List[Transaction]:
        """Copy of the ledger in insertion order."""

        return list(self._transactions)

    def initialize(self) -> None:
        """Load the stored ledger, falling back to empty, and render."""

        try:
            loaded = self.repository.load()
        except LedgerFormatError as error:
            LOGGER.warning("Discarding stored ledger: %s", error)
            loaded = None
        self._transactions = loaded or []
        self.id_clock.observe(transaction.id for transaction in self._transactions)
        LOGGER.debug("Ledger initialised with %s transactions", len(self._transactions))
        self.render()

    def submit(self) -> Optional[Transaction]:
        """Add a transaction from whatever the form inputs currently hold."""

        inputs = self.display.read_inputs()
        return self.add_transaction(inputs.description, inputs.amount, inputs.kind)

    def add_transaction(
        self, description: str, raw_amount: str, kind: Union[TransactionKind, str]
    ) -> Optional[Transaction]:
        """Validate and append a transaction; ``None`` when input is rejected."""

        kind = kind if isinstance(kind, TransactionKind) else TransactionKind.from_str(kind)
        try:
            clean_description = parse_description(description)
            amount = parse_amount(raw_amount)
        except TransactionValidationError as error:
            LOGGER.warning(
                "Rejected transaction description=%r amount=%r", description, raw_amount
            )
            self.display.show_message(error.message)
            return None

        transaction = Transaction(
            id=self.id_clock.next_id(),
            description=clean_description,
            amount=amount,
            kind=kind,
            display_color=self.palette[len(self._transactions) % len(self.palette)],
        )
        self._transactions.append(transaction)
        LOGGER.info(
            "Added %s transaction %s (%s)", kind.value, transaction.id, format_amount(amount)
        )
        self._persist()
        self.render()
        self.display.clear_inputs()
        return transaction

    def delete_transaction(self, transaction_id: int) -> bool:
        """Remove the first transaction with ``transaction_id``; unknown ids are ignored."""

        removed = False
        for index, transaction in enumerate(self._transactions):
            if transaction.id == transaction_id:
                del self._transactions[index]
                removed = True
                break
        if removed:
            LOGGER.info("Deleted transaction %s", transaction_id)
        else:
            LOGGER.debug("No transaction %s to delete", transaction_id)
        self._persist()
        self.render()
        return removed

    def compute_summary(self) -> LedgerSummary:
        return compute_summary(self._transactions)

    def render(self) -> None:
        """Full render pass over list, summary and chart."""

        self.render_list()
        self.render_summary()
        self.render_chart()

    def render_list(self) -> None:
        rows = [
            TransactionRow(
                transaction_id=transaction.id,
                text=(
                    f"{transaction.description}: ${format_amount(transaction.amount)} "
                    f"({transaction.kind.value})"
                ),
                color=transaction.display_color,
            )
            for transaction in self._transactions
        ]
        self.display.show_transactions(rows)

    def render_summary(self) -> None:
        self.display.show_summary(self.compute_summary().formatted())

    def render_chart(self) -> None:
        """Tear down the previous chart and draw a new pie."""

        if self._chart is not None:
            self._chart.destroy()
            self._chart = None
        slices = [
            ChartSlice(
                label=transaction.description,
                value=transaction.amount,
                color=transaction.display_color,
            )
            for transaction in self._transactions
        ]
        self._chart = self.chart_renderer.create(PIE, slices)

    def snapshot(self) -> Dict[str, object]:
        """Transactions and formatted summary ready for JSON responses."""

        return {
            "transactions": [transaction.as_dict() for transaction in self._transactions],
            "summary": self.compute_summary().formatted().as_dict(),
        }

    def _persist(self) -> None:
        self.repository.save(self._transactions)
