from .core import EditorMode, EditorState, Note
from .errors import (
    LoadDecodeError,
    NotesError,
    PersistenceWriteError,
    PreconditionViolation,
    StorageError,
    StorageReadError,
    StorageWriteError,
)
from .store import JsonFileStore, KeyValueStore, MemoryStore, NoteStoreController, QSettingsStore

__version__ = "0.1.0"

__all__ = ["EditorMode",
           "EditorState",
           "Note",
           "LoadDecodeError",
           "NotesError",
           "PersistenceWriteError",
           "PreconditionViolation",
           "StorageError",
           "StorageReadError",
           "StorageWriteError",
           "JsonFileStore",
           "KeyValueStore",
           "MemoryStore",
           "NoteStoreController",
           "QSettingsStore"
           ]
