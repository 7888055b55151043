import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from PySide6.QtCore import QSettings

from simple_notes.errors import StorageReadError, StorageWriteError
from simple_notes.store.kv import JsonFileStore, MemoryStore, QSettingsStore, atomic_write_text


def test_memory_store():
    store = MemoryStore()
    assert store.get("k") is None
    store.set("k", "v")
    assert store.get("k") == "v"


def test_file_store_missing_key(tmp_path):
    assert JsonFileStore(tmp_path / "data").get("savedNotes") is None


def test_file_store_roundtrip(tmp_path):
    store = JsonFileStore(tmp_path / "data")
    store.set("savedNotes", '[{"id": "1", "title": "t", "content": "ü"}]')
    assert store.get("savedNotes") == '[{"id": "1", "title": "t", "content": "ü"}]'
    assert store.path_for("savedNotes") == tmp_path / "data" / "savedNotes.json"
    # no temp files left behind
    assert [p.name for p in (tmp_path / "data").iterdir()] == ["savedNotes.json"]


def test_file_store_key_is_sanitized(tmp_path):
    store = JsonFileStore(tmp_path)
    assert store.path_for("../evil/key").parent == tmp_path


def test_file_store_write_failure(tmp_path):
    blocker = tmp_path / "data"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(StorageWriteError):
        JsonFileStore(blocker).set("savedNotes", "[]")


def test_file_store_read_failure(tmp_path):
    store = JsonFileStore(tmp_path)
    store.path_for("savedNotes").mkdir()
    with pytest.raises(StorageReadError):
        store.get("savedNotes")


def test_atomic_write_replaces(tmp_path):
    path = tmp_path / "a.json"
    atomic_write_text(path, "one")
    atomic_write_text(path, "two")
    assert path.read_text(encoding="utf-8") == "two"


def test_qsettings_store_roundtrip(tmp_path):
    ini = str(tmp_path / "notes.ini")
    store = QSettingsStore(QSettings(ini, QSettings.IniFormat))
    assert store.get("savedNotes") is None

    value = '[{"id": "1", "title": "Oct 19, 2026, 02:30 PM", "content": "a, b"}]'
    store.set("savedNotes", value)

    reopened = QSettingsStore(QSettings(ini, QSettings.IniFormat))
    assert reopened.get("savedNotes") == value


def test_file_store_unencodable_value(tmp_path):
    store = JsonFileStore(tmp_path)
    with pytest.raises(StorageWriteError):
        store.set("savedNotes", '[{"id": "1", "title": "t", "content": "\ud800"}]')
    assert store.get("savedNotes") is None
    assert list(tmp_path.iterdir()) == []
