"""
Store ports: abstract storage interfaces.

- KeyValueStorage: string -> string slots, shaped like browser localStorage
- ApplicationStore: the list of submitted applications
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Protocol

from pydantic import ValidationError as SchemaError

from ..domain import ApplicationRecord
from ..infra.exceptions import CorruptedStorageError
from ..infra.logging import get_logger

logger = get_logger(__name__)


class KeyValueStorage(Protocol):
    """Per-origin string storage."""

    def get_item(self, key: str) -> Optional[str]:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...

    def clear(self) -> None:
        ...

    def keys(self) -> List[str]:
        ...


class ApplicationStore(ABC):
    """Append-only list of applications, insertion order preserved.

    Entries already in the list are kept as stored: appends and lookups work
    on the raw dicts, and only the entry being returned is validated.
    """

    @abstractmethod
    def load_raw(self) -> List[Dict[str, Any]]:
        """The stored entries as plain dicts; empty list when nothing has been stored yet."""
        ...

    @abstractmethod
    def save_raw(self, items: List[Dict[str, Any]]) -> None:
        """Overwrite the slot with ``items``."""
        ...

    def load_all(self) -> List[ApplicationRecord]:
        """Every entry as a record; a malformed entry raises ``CorruptedStorageError``."""
        return [self._to_record(item, i) for i, item in enumerate(self.load_raw())]

    def save_all(self, records: List[ApplicationRecord]) -> None:
        self.save_raw([r.to_storage() for r in records])

    def append(self, record: ApplicationRecord) -> int:
        """Add ``record`` after the stored entries, leaving those untouched.

        Returns the new number of entries. Tracking numbers are not
        deduplicated; a collision is only logged.
        """
        items = self.load_raw()
        if any(_tracking_number(item) == record.tracking_number for item in items):
            logger.warning(f"tracking number {record.tracking_number} already exists in storage")
        items.append(record.to_storage())
        self.save_raw(items)
        return len(items)

    def find_by_tracking_number(self, tracking_number: str) -> Optional[ApplicationRecord]:
        """Linear, exact, case-sensitive search; unrelated entries are never validated."""
        for i, item in enumerate(self.load_raw()):
            if _tracking_number(item) == tracking_number:
                return self._to_record(item, i)
        return None

    @staticmethod
    def _to_record(item: Any, index: int) -> ApplicationRecord:
        try:
            return ApplicationRecord.from_storage(item)
        except SchemaError as e:
            raise CorruptedStorageError(f"Stored application #{index} is malformed: {e}",
                                        operation="load", index=index) from e


def _tracking_number(item: Any) -> Optional[str]:
    return item.get("trackingNumber") if isinstance(item, dict) else None
