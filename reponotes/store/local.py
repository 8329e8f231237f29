"""
Durable local key-value stores for the serialized notes mapping.

A store holds one string value under a fixed namespaced key. ``read_all``
returns None when nothing has been written yet; ``write_all`` replaces the
value synchronously, so a read straight after a write sees the new value.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Dict, Optional, Protocol

from ..exceptions import LocalStoreCorrupt, LocalStoreError

LOGGER = logging.getLogger(__name__)

DEFAULT_STORE_KEY = "reponotes:notes"


class DurableStore(Protocol):
    """Minimal durable store the note controller needs."""

    def read_all(self) -> Optional[str]: ...

    def write_all(self, data: str) -> None: ...


class MemoryStorage:
    """
    In-process store. Pass the same ``backing`` dict to several instances to
    simulate a reload within one process.
    """

    def __init__(
        self, key: str = DEFAULT_STORE_KEY, backing: Optional[Dict[str, str]] = None
    ):
        self.key = key
        self._data: Dict[str, str] = backing if backing is not None else {}

    def read_all(self) -> Optional[str]:
        return self._data.get(self.key)

    def write_all(self, data: str) -> None:
        self._data[self.key] = data


class FileStorage:
    """
    JSON file of namespaced string values.

    Other keys in the file are preserved across writes; every write replaces
    the file atomically and leaves it readable by the owner only.
    """

    def __init__(self, path: str, key: str = DEFAULT_STORE_KEY):
        self.path = os.path.abspath(os.path.expanduser(path))
        self.key = key
        LOGGER.debug("Initialized FileStorage at %s (key=%s)", self.path, self.key)

    def _read_container(self) -> Dict[str, object]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise LocalStoreError(f"Could not read {self.path}: {exc}") from exc
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise LocalStoreCorrupt(f"{self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise LocalStoreCorrupt(f"{self.path} does not hold a JSON object")
        return data

    def read_all(self) -> Optional[str]:
        value = self._read_container().get(self.key)
        if value is not None and not isinstance(value, str):
            raise LocalStoreCorrupt(f"Value for {self.key!r} is not a string")
        return value

    def write_all(self, data: str) -> None:
        try:
            container = self._read_container()
        except LocalStoreCorrupt:
            LOGGER.warning("Replacing unreadable store file %s", self.path)
            container = {}
        container[self.key] = data

        directory = os.path.dirname(self.path)
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=directory, prefix=".reponotes-", suffix=".tmp"
            )
        except OSError as exc:
            raise LocalStoreError(f"Could not write {self.path}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(container, f, ensure_ascii=False, indent=2)
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise LocalStoreError(f"Could not write {self.path}: {exc}") from exc
        LOGGER.debug("Wrote %d characters to %s", len(data), self.path)
