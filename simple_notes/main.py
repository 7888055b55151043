from __future__ import annotations

import argparse
import logging
from pathlib import Path

from PySide6.QtCore import QSettings
from PySide6.QtWidgets import QApplication

from simple_notes.app_settings import STORAGE_BACKENDS, SettingsKeys, get_str, normalize_backend
from simple_notes.logging_setup import SESSION_ID, install_global_exception_hooks, setup_logging
from simple_notes.settings import APP_NAME, DATA_DIR
from simple_notes.store.kv import JsonFileStore, KeyValueStore, QSettingsStore
from simple_notes.ui.main_window import NotesWindow


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog=APP_NAME, description="Single-screen note taking")
    p.add_argument(
        "--data-dir",
        type=Path,
        default=DATA_DIR,
        help="Folder for the note store (file backend)",
    )
    p.add_argument(
        "--backend",
        choices=STORAGE_BACKENDS,
        default=None,
        help="Where notes are kept; remembered between runs",
    )
    p.add_argument("--log-level", default="INFO", help="Console log level")
    return p.parse_args(argv)


def build_store(backend: str, *, data_dir: Path, settings: QSettings) -> KeyValueStore:
    if backend == "qsettings":
        return QSettingsStore(settings)
    return JsonFileStore(data_dir)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    log = setup_logging(console_level=getattr(logging, str(args.log_level).upper(), logging.INFO))
    install_global_exception_hooks(log)

    app = QApplication([])
    settings = QSettings(APP_NAME, APP_NAME)

    backend = normalize_backend(args.backend or get_str(settings, SettingsKeys.STORAGE_BACKEND, "file"))
    settings.setValue(SettingsKeys.STORAGE_BACKEND, backend)
    store = build_store(backend, data_dir=args.data_dir, settings=settings)

    win = NotesWindow(store=store, settings=settings)
    win.show()
    log.info("Application started: backend=%s SID=%s", backend, SESSION_ID)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
