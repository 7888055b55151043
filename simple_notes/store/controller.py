from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from simple_notes.core.codec import decode_notes, encode_notes
from simple_notes.core.models import EditorMode, EditorState, Note, NoteId
from simple_notes.core.titles import format_title, generate_note_id, unique_note_id
from simple_notes.errors import (
    LoadDecodeError,
    PersistenceWriteError,
    PreconditionViolation,
    StorageReadError,
    StorageWriteError,
)
from simple_notes.settings import APP_NAME, STORAGE_KEY
from simple_notes.store.kv import KeyValueStore

log = logging.getLogger(f"{APP_NAME}.store")


class NoteStoreController:
    """
    Owns the persisted note collection and the single draft/editing slot.

    Every mutation is computed on a copy, written through to the store and
    only then made current. A failed write leaves the collection exactly as
    it was before the call and never touches the draft.
    """

    def __init__(
        self,
        store: KeyValueStore,
        *,
        key: str = STORAGE_KEY,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = generate_note_id,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self._store = store
        self._key = key
        self._clock = clock
        self._id_factory = id_factory
        self._on_change = on_change

        self._notes: list[Note] = []
        self._editor = EditorState()

    # ───────────────────────── state ─────────────────────────

    @property
    def notes(self) -> tuple[Note, ...]:
        return tuple(self._notes)

    @property
    def state(self) -> EditorState:
        return self._editor

    @property
    def draft(self) -> str:
        return self._editor.draft

    @property
    def editing_target(self) -> Optional[NoteId]:
        return self._editor.editing_target

    @property
    def mode(self) -> EditorMode:
        return self._editor.mode

    def get(self, note_id: NoteId) -> Optional[Note]:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    def set_draft(self, text: str) -> None:
        """Track the input surface. In-memory only."""
        if text == self._editor.draft:
            return
        self._editor = EditorState(draft=text, editing_target=self._editor.editing_target)
        self._changed()

    # ───────────────────────── operations ─────────────────────────

    def load(self) -> bool:
        """
        Populate the collection from durable storage. Never writes.

        Returns True when stored notes were applied. Missing data leaves the
        collection empty; unreadable or malformed data is logged and also
        leaves it empty.
        """
        try:
            raw = self._store.get(self._key)
            if raw is None:
                log.info("No stored notes under key=%s", self._key)
                return False
            notes = decode_notes(raw)
        except (StorageReadError, LoadDecodeError):
            log.exception("Failed to load notes: key=%s", self._key)
            return False

        self._notes = notes
        log.info("Loaded notes: count=%d", len(notes))
        self._changed()
        return True

    def save(self, draft: Optional[str] = None) -> Note:
        draft = self._editor.draft if draft is None else draft
        self._require_text(draft, "save")
        if self._editor.editing_target is not None:
            raise PreconditionViolation("save: a note is being edited, use update()")
        self.set_draft(draft)

        note = Note(
            id=unique_note_id({n.id for n in self._notes}, self._id_factory),
            title=format_title(self._clock()),
            content=draft,
        )
        self._commit("save", [*self._notes, note])

        self._editor = EditorState()
        log.info("Note saved: id=%s total=%d", note.id, len(self._notes))
        self._changed()
        return note

    def update(self, draft: Optional[str] = None) -> Note:
        draft = self._editor.draft if draft is None else draft
        self._require_text(draft, "update")
        target = self._editor.editing_target
        if target is None:
            raise PreconditionViolation("update: no note is being edited")
        if self.get(target) is None:
            raise PreconditionViolation(f"update: unknown note id {target!r}")
        self.set_draft(draft)

        updated = Note(id=target, title=format_title(self._clock()), content=draft)
        self._commit("update", [updated if n.id == target else n for n in self._notes])

        self._editor = EditorState()
        log.info("Note updated: id=%s", target)
        self._changed()
        return updated

    def delete(self, note_id: NoteId) -> None:
        if self.get(note_id) is None:
            raise PreconditionViolation(f"delete: unknown note id {note_id!r}")

        self._commit("delete", [n for n in self._notes if n.id != note_id])

        # не оставляем ссылку на удалённую заметку
        if self._editor.editing_target == note_id:
            self._editor = EditorState()
        log.info("Note deleted: id=%s total=%d", note_id, len(self._notes))
        self._changed()

    def begin_edit(self, note_id: NoteId) -> None:
        note = self.get(note_id)
        if note is None:
            raise PreconditionViolation(f"begin_edit: unknown note id {note_id!r}")
        self._editor = EditorState(draft=note.content, editing_target=note.id)
        log.debug("Editing note: id=%s", note_id)
        self._changed()

    def discard_draft(self) -> None:
        if self._editor == EditorState():
            return
        self._editor = EditorState()
        log.debug("Draft discarded")
        self._changed()

    # ───────────────────────── internal ─────────────────────────

    @staticmethod
    def _require_text(draft: str, operation: str) -> None:
        if not draft.strip():
            raise PreconditionViolation(f"{operation}: draft is empty")

    def _commit(self, operation: str, notes: list[Note]) -> None:
        """Write ``notes`` through to the store, then make them current."""
        try:
            self._store.set(self._key, encode_notes(notes))
        except StorageWriteError as e:
            log.exception("Failed to %s note, collection kept at %d notes", operation, len(self._notes))
            raise PersistenceWriteError(operation) from e
        self._notes = notes

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
