"""
File-backed local storage.

Mirrors the browser ``localStorage`` contract: string keys, string values,
one store per origin, a fixed size quota. Everything lives in one JSON
object on disk.
"""
from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

from ..infra.exceptions import CorruptedStorageError, StorageQuotaExceededError, handle_errors
from ..infra.logging import get_logger
from ..infra.serialization import Serializer

logger = get_logger(__name__)

DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024


def _size_of(slots: Dict[str, str]) -> int:
    return sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in slots.items())


class LocalStorage:
    """String key-value storage persisted to a single JSON file."""

    def __init__(self, path: Path, quota_bytes: int = DEFAULT_QUOTA_BYTES):
        self._path = Path(path)
        self._quota = quota_bytes

    @property
    def path(self) -> Path:
        return self._path

    @property
    def quota_bytes(self) -> int:
        return self._quota

    def _read(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        text = self._path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise CorruptedStorageError(f"Local storage file is not valid JSON: {e}",
                                        operation="read", path=str(self._path)) from e
        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            raise CorruptedStorageError("Local storage file must map keys to strings",
                                        operation="read", path=str(self._path))
        return data

    def _write(self, slots: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(prefix=".local_storage.", dir=str(self._path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(Serializer.dumps(slots, indent=2, separators=(",", ": ")))
            os.replace(tmp, self._path)
        except BaseException:
            if os.path.exists(tmp):
                os.unlink(tmp)
            raise

    @handle_errors(logger=logger, operation="get_item")
    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(key)

    @handle_errors(logger=logger, operation="set_item")
    def set_item(self, key: str, value: str) -> None:
        slots = self._read()
        slots[key] = str(value)
        size = _size_of(slots)
        if size > self._quota:
            raise StorageQuotaExceededError(
                f"Setting '{key}' would use {size} bytes (quota {self._quota})",
                quota=self._quota, requested=size, operation="set_item", key=key,
            )
        self._write(slots)
        logger.debug(f"local storage: wrote '{key}' ({len(value)} chars)")

    @handle_errors(logger=logger, operation="remove_item")
    def remove_item(self, key: str) -> None:
        slots = self._read()
        if key in slots:
            del slots[key]
            self._write(slots)

    @handle_errors(logger=logger, operation="clear")
    def clear(self) -> None:
        self._write({})

    @handle_errors(logger=logger, operation="keys")
    def keys(self) -> List[str]:
        return list(self._read().keys())

    def used_bytes(self) -> int:
        return _size_of(self._read())
