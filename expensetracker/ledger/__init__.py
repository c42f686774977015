"""Mini README: Transaction ledger and the controller that renders it.

The models module holds the value types and input gates, ``display``
describes the surface the ledger is drawn onto, and ``controller`` ties
storage, display and chart together.
"""

from .controller import LedgerController
from .display import FormInputs, LedgerDisplay, TransactionRow
from .ids import MillisecondIdClock
from .models import (
    VALIDATION_MESSAGE,
    FormattedSummary,
    LedgerSummary,
    Transaction,
    TransactionKind,
    TransactionValidationError,
    compute_summary,
)
from .repository import LedgerFormatError, LedgerRepository

__all__ = [
    "VALIDATION_MESSAGE",
    "FormInputs",
    "FormattedSummary",
    "LedgerController",
    "LedgerDisplay",
    "LedgerFormatError",
    "LedgerRepository",
    "LedgerSummary",
    "MillisecondIdClock",
    "Transaction",
    "TransactionKind",
    "TransactionRow",
    "TransactionValidationError",
    "compute_summary",
]
