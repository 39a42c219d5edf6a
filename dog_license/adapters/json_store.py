"""
Application store on top of a key-value storage slot.

The slot holds a JSON array of application records (camelCase keys),
written and read as a whole on every operation.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

from ..infra.exceptions import CorruptedStorageError, handle_errors
from ..infra.logging import get_logger
from ..infra.serialization import Serializer
from ..ports.store import ApplicationStore, KeyValueStorage

logger = get_logger(__name__)

APPLICATIONS_KEY = "dogLicenseApplications"


class JsonApplicationStore(ApplicationStore):
    """Applications list kept in one local storage slot."""

    def __init__(self, storage: KeyValueStorage, key: str = APPLICATIONS_KEY):
        self._storage = storage
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    @handle_errors(logger=logger, operation="load_raw")
    def load_raw(self) -> List[Dict[str, Any]]:
        """The stored array as plain dicts; ``[]`` when the slot is empty."""
        raw = self._storage.get_item(self._key)
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CorruptedStorageError(f"Slot '{self._key}' is not valid JSON: {e}",
                                        operation="load", key=self._key) from e
        if not isinstance(data, list):
            raise CorruptedStorageError(f"Slot '{self._key}' does not hold a list",
                                        operation="load", key=self._key)
        return data

    @handle_errors(logger=logger, operation="save_raw")
    def save_raw(self, items: List[Dict[str, Any]]) -> None:
        self._storage.set_item(self._key, Serializer.dumps(items))

