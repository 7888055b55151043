from __future__ import annotations

import logging

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QMainWindow

from simple_notes.app_settings import SettingsKeys
from simple_notes.settings import APP_NAME


log = logging.getLogger(f"{APP_NAME}.ui")


class UiStateStore:
    """
    Saves/restores the main window geometry in QSettings.
    """
    def __init__(self, *, owner: QMainWindow, settings: QSettings, default_size: tuple[int, int] = (420, 640)):
        self._owner = owner
        self._settings = settings
        self._default_size = default_size

    def restore(self) -> None:
        try:
            geo = self._settings.value(SettingsKeys.UI_GEOMETRY)
            if geo:
                self._owner.restoreGeometry(geo)
            else:
                self._owner.resize(*self._default_size)
        except Exception:
            log.exception("Failed to restore UI state from QSettings")

    def save(self) -> None:
        try:
            self._settings.setValue(SettingsKeys.UI_GEOMETRY, self._owner.saveGeometry())
        except Exception:
            log.exception("Failed to save UI state to QSettings")
