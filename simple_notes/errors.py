from __future__ import annotations


class NotesError(Exception):
    """Base class for every error raised by simple_notes."""


class StorageError(NotesError):
    pass


class StorageReadError(StorageError):
    pass


class StorageWriteError(StorageError):
    pass


class LoadDecodeError(NotesError):
    """Stored note collection exists but is not a valid encoding."""


class PersistenceWriteError(NotesError):
    """
    A mutation was computed but could not be written to durable storage.

    By the time this is raised the in-memory collection has already been
    rolled back and the draft is untouched.
    """

    def __init__(self, operation: str, message: str | None = None):
        self.operation = operation
        super().__init__(message or f"Failed to {operation} note")


class PreconditionViolation(NotesError, ValueError):
    """Operation invoked outside its precondition; nothing was changed."""
