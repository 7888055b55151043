from .kv import JsonFileStore, KeyValueStore, MemoryStore, QSettingsStore, atomic_write_text
from .controller import NoteStoreController

__all__ = ["JsonFileStore",
           "KeyValueStore",
           "MemoryStore",
           "QSettingsStore",
           "atomic_write_text",
           "NoteStoreController"
           ]
