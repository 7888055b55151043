from __future__ import annotations

from dataclasses import dataclass

from PySide6.QtCore import QSettings


@dataclass(frozen=True)
class SettingsKeys:
    UI_GEOMETRY: str = "ui/geometry"
    STORAGE_BACKEND: str = "storage/backend"


STORAGE_BACKENDS = ("file", "qsettings")


def get_str(settings: QSettings, key: str, default: str) -> str:
    try:
        val = settings.value(key, default)
        return str(val) if val is not None else default
    except Exception:
        return default


def normalize_backend(name: str) -> str:
    name = (name or "").strip().lower()
    return name if name in STORAGE_BACKENDS else "file"
