"""Mini README: Abstract display surface the ledger controller renders into.

Structure:
    * FormInputs - raw text currently held by the entry form.
    * TransactionRow - one rendered list row bound to a transaction id.
    * LedgerDisplay - abstract interface implemented by the web page state
      and the console.

Implementations only hold or print what they are given; every decision
about what to show is made by the controller.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from .models import FormattedSummary


@dataclass(slots=True)
class FormInputs:
    """Contents of the description, amount and kind inputs."""

    description: str = ""
    amount: str = ""
    kind: str = "income"


@dataclass(frozen=True, slots=True)
class TransactionRow:
    """A list row; ``transaction_id`` is what its delete trigger reports."""

    transaction_id: int
    text: str
    color: str


class LedgerDisplay(ABC):
    """Base interface for anything the ledger can be rendered onto."""

    @abstractmethod
    def read_inputs(self) -> FormInputs:
        """Return the current text of the form inputs."""

    @abstractmethod
    def clear_inputs(self) -> None:
        """Blank the description and amount inputs."""

    @abstractmethod
    def show_transactions(self, rows: Sequence[TransactionRow]) -> None:
        """Replace the whole list with ``rows``."""

    @abstractmethod
    def show_summary(self, summary: FormattedSummary) -> None:
        """Write income, expenses and balance to their slots."""

    @abstractmethod
    def show_message(self, message: str) -> None:
        """Show a blocking message after rejected input."""
