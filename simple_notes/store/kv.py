from __future__ import annotations

import logging
import os
import re
import uuid
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSettings

from simple_notes.errors import StorageReadError, StorageWriteError
from simple_notes.settings import APP_NAME

log = logging.getLogger(f"{APP_NAME}.storage")

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class KeyValueStore:
    """
    Durable string key-value storage.

    ``get`` returns None for a missing key. Failures surface as
    StorageReadError / StorageWriteError.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


def atomic_write_text(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """
    Atomic-ish file write:
    - write to temp file in same directory
    - fsync
    - replace()

    Prevents partial writes on crash/power loss.
    """
    path = Path(path)
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)

    tmp_path = parent / f".{path.name}.tmp-{uuid.uuid4().hex}"
    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


class JsonFileStore(KeyValueStore):
    """One ``<key>.json`` file per key under ``root``."""

    def __init__(self, root: Path):
        self.root = Path(root)

    def path_for(self, key: str) -> Path:
        safe = _UNSAFE_KEY_CHARS.sub("_", key).strip(".") or "_"
        return self.root / f"{safe}.json"

    def get(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise StorageReadError(f"cannot read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self.path_for(key)
        try:
            atomic_write_text(path, value)
        except (OSError, UnicodeEncodeError) as e:
            raise StorageWriteError(f"cannot write {path}: {e}") from e
        log.debug("Stored key=%s bytes=%d path=%s", key, len(value.encode("utf-8")), path)


class QSettingsStore(KeyValueStore):
    """Values kept in a QSettings object; every write is synced to disk."""

    def __init__(self, settings: QSettings, *, group: str = "storage"):
        self._settings = settings
        self._group = group

    def _full_key(self, key: str) -> str:
        return f"{self._group}/{key}" if self._group else key

    def get(self, key: str) -> Optional[str]:
        val = self._settings.value(self._full_key(key))
        if self._settings.status() != QSettings.Status.NoError:
            raise StorageReadError(f"QSettings read failed: status={self._settings.status()}")
        return None if val is None else str(val)

    def set(self, key: str, value: str) -> None:
        self._settings.setValue(self._full_key(key), value)
        self._settings.sync()
        status = self._settings.status()
        if status != QSettings.Status.NoError:
            raise StorageWriteError(f"QSettings write failed: status={status}")
