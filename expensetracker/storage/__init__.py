"""Mini README: Key-value persistence for the expense tracker.

Stores hold string blobs addressed by key; ``expensetracker.ledger`` turns
the ledger into one such blob. Swap ``JsonFileStore`` for another
``KeyValueStore`` to persist elsewhere.
"""

from .store import JsonFileStore, KeyValueStore, MemoryStore

__all__ = ["JsonFileStore", "KeyValueStore", "MemoryStore"]
