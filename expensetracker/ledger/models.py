"""Mini README: Value types shared by the ledger, storage and interfaces.

Structure:
    * TransactionKind - enum representing income versus expense entries.
    * Transaction - dataclass storing one ledger entry.
    * TransactionValidationError - raised when form input is rejected.
    * parse_description / parse_amount - input gates used before insertion.
    * LedgerSummary / FormattedSummary - totals and their display strings.
    * compute_summary - pure aggregation over a sequence of transactions.
    * format_amount - prints amounts the way list rows show them.

Amounts are plain floats. Only the summary is rounded (to two decimals, for
display); stored amounts keep whatever the user typed.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable

DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

VALIDATION_MESSAGE = "Please enter a valid description and amount."


class TransactionValidationError(ValueError):
    """Raised when a description or amount fails the input gate."""

    def __init__(self, message: str = VALIDATION_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


class TransactionKind(str, Enum):
    """Enumerate the supported transaction categories."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Coerce arbitrary casing into a valid transaction kind."""

        try:
            normalised = value.strip().lower()
            return cls(normalised)
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error


@dataclass(slots=True)
class Transaction:
    """Represent a ledger entry and the colour of its chart slice."""

    id: int
    description: str
    amount: float
    kind: TransactionKind
    display_color: str

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction using the persisted record keys."""

        return {
            "id": self.id,
            "description": self.description,
            "amount": self.amount,
            "type": self.kind.value,
            "color": self.display_color,
        }

    @classmethod
    def from_dict(cls, record: Dict[str, object]) -> "Transaction":
        """Rebuild a transaction from a persisted record.

        Raises ``KeyError``, ``TypeError`` or ``ValueError`` when the record
        is missing fields or carries values of the wrong shape.
        """

        identifier = record["id"]
        amount = record["amount"]
        # bool is an int subclass but never a valid id or amount
        if isinstance(identifier, bool) or not isinstance(identifier, (int, float)):
            raise TypeError(f"Transaction id must be numeric, got {identifier!r}")
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            raise TypeError(f"Transaction amount must be numeric, got {amount!r}")
        description = record["description"]
        color = record["color"]
        if not isinstance(description, str) or not isinstance(color, str):
            raise TypeError("Transaction description and color must be strings")
        return cls(
            id=int(identifier),
            description=description,
            amount=float(amount),
            kind=TransactionKind.from_str(str(record["type"])),
            display_color=color,
        )


def parse_description(value: str) -> str:
    """Trim surrounding whitespace and reject empty descriptions."""

    description = (value or "").strip()
    if not description:
        raise TransactionValidationError()
    return description


def parse_amount(value: str) -> float:
    """Parse a finite ASCII decimal number (optional sign and exponent)."""

    text = (value or "").strip()
    if not DECIMAL_PATTERN.fullmatch(text):
        raise TransactionValidationError()
    amount = float(text)
    if not math.isfinite(amount):
        raise TransactionValidationError()
    return amount


def format_amount(amount: float) -> str:
    """Render ``1000.0`` as ``1000`` and ``3.5`` as ``3.5``."""

    if amount.is_integer():
        return str(int(amount))
    return repr(amount)


@dataclass(frozen=True, slots=True)
class FormattedSummary:
    """Summary values as two-decimal display strings."""

    total_income: str
    total_expenses: str
    balance: str

    def as_dict(self) -> Dict[str, str]:
        return {
            "total_income": self.total_income,
            "total_expenses": self.total_expenses,
            "balance": self.balance,
        }


@dataclass(frozen=True, slots=True)
class LedgerSummary:
    """Totals per kind and the resulting balance."""

    total_income: float
    total_expenses: float

    @property
    def balance(self) -> float:
        return self.total_income - self.total_expenses

    def formatted(self) -> FormattedSummary:
        return FormattedSummary(
            total_income=f"{self.total_income:.2f}",
            total_expenses=f"{self.total_expenses:.2f}",
            balance=f"{self.balance:.2f}",
        )


def compute_summary(transactions: Iterable[Transaction]) -> LedgerSummary:
    """Sum amounts by kind."""

    income = []
    expenses = []
    for transaction in transactions:
        if transaction.kind is TransactionKind.INCOME:
            income.append(transaction.amount)
        else:
            expenses.append(transaction.amount)
    return LedgerSummary(total_income=math.fsum(income), total_expenses=math.fsum(expenses))
