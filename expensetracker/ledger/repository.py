"""Mini README: Serialise the ledger into a key-value store.

Structure:
    * LedgerFormatError - the stored blob is not a valid ledger.
    * LedgerRepository - ``save``/``load`` of the whole ledger under one key.

The blob is a JSON array of records with the keys ``id``, ``description``,
``amount``, ``type`` and ``color``, in ledger order. There is no version
field; changing the record shape needs a migration here.
"""

from __future__ import annotations

import json
from typing import Iterable, List, Optional

from .models import Transaction
from ..logging_utils import get_logger
from ..storage import KeyValueStore

LOGGER = get_logger(__name__)

DEFAULT_KEY = "transactions"


class LedgerFormatError(ValueError):
    """Raised when a stored ledger blob cannot be decoded."""


class LedgerRepository:
    """Read and write the full ledger as one serialised blob."""

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_KEY) -> None:
        self.store = store
        self.key = key

    @staticmethod
    def serialise(transactions: Iterable[Transaction]) -> str:
        return json.dumps([transaction.as_dict() for transaction in transactions])

    @staticmethod
    def deserialise(blob: str) -> List[Transaction]:
        """Decode a blob, raising ``LedgerFormatError`` on any malformed part."""

        try:
            records = json.loads(blob)
        except json.JSONDecodeError as error:
            raise LedgerFormatError(f"Stored ledger is not valid JSON: {error}") from error
        if not isinstance(records, list):
            raise LedgerFormatError("Stored ledger must be a JSON array")
        transactions = []
        for position, record in enumerate(records):
            if not isinstance(record, dict):
                raise LedgerFormatError(f"Record {position} is not an object")
            try:
                transactions.append(Transaction.from_dict(record))
            except (KeyError, TypeError, ValueError) as error:
                raise LedgerFormatError(f"Record {position} is invalid: {error}") from error
        return transactions

    def save(self, transactions: Iterable[Transaction]) -> None:
        self.store.set(self.key, self.serialise(transactions))

    def load(self) -> Optional[List[Transaction]]:
        """Return the stored ledger, or ``None`` when nothing was saved."""

        blob = self.store.get(self.key)
        if blob is None:
            LOGGER.debug("No ledger stored under '%s'", self.key)
            return None
        return self.deserialise(blob)
