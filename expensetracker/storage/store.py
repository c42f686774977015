"""Mini README: Key-value stores holding string blobs.

Structure:
    * KeyValueStore - abstract synchronous get/set interface.
    * MemoryStore - dict-backed store for tests and throwaway sessions.
    * JsonFileStore - one JSON object on disk mapping keys to strings.

``JsonFileStore`` plays the part browser local storage plays for a web page:
every ``set`` rewrites the whole document through a temporary file so a
crash never leaves half a document behind. A document that cannot be parsed
reads as an empty store.
"""

from __future__ import annotations

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class KeyValueStore(ABC):
    """Synchronous string store addressed by key."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the stored value or ``None`` when the key is absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""


class MemoryStore(KeyValueStore):
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileStore(KeyValueStore):
    """Persist keys and values as a single JSON object in ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read_document(self) -> Dict[str, str]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        try:
            document = json.loads(raw)
        except json.JSONDecodeError:
            LOGGER.warning("Ignoring unreadable store file %s", self.path)
            return {}
        if not isinstance(document, dict):
            LOGGER.warning("Ignoring store file %s without a top-level object", self.path)
            return {}
        return {str(key): value for key, value in document.items() if isinstance(value, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read_document().get(key)

    def set(self, key: str, value: str) -> None:
        document = self._read_document()
        document[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        handle, temp_name = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(handle, "w", encoding="utf-8") as stream:
                json.dump(document, stream, indent=2)
            os.replace(temp_name, self.path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise
        LOGGER.debug("Wrote key '%s' (%s chars) to %s", key, len(value), self.path)
