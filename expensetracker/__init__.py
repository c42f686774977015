"""Mini README: Core package initializer for the expense tracker.

This module exposes the handful of names most callers need: the ledger
controller and its value types, plus the logger factory. The web and
console interfaces live in ``expensetracker.interface``.
"""

from .ledger import LedgerController, Transaction, TransactionKind
from .logging_utils import get_logger

__all__ = ["LedgerController", "Transaction", "TransactionKind", "get_logger"]
