from __future__ import annotations

import logging

from PySide6.QtCore import QSettings
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from simple_notes.core.models import EditorMode
from simple_notes.errors import PersistenceWriteError, PreconditionViolation
from simple_notes.settings import APP_NAME
from simple_notes.store.controller import NoteStoreController
from simple_notes.store.kv import KeyValueStore
from simple_notes.ui.dialogs import (
    confirm_clear_note,
    confirm_delete_note,
    show_empty_note,
    show_error,
    show_success,
)
from simple_notes.ui.history_dialog import HistoryDialog
from simple_notes.ui.qt_utils import blocked_signals
from simple_notes.ui.ui_state import UiStateStore


log = logging.getLogger(f"{APP_NAME}.ui")


class NotesWindow(QMainWindow):
    def __init__(self, *, store: KeyValueStore, settings: QSettings):
        super().__init__()
        self.setWindowTitle("Simple Notes")

        self._settings = settings
        self._ui_state = UiStateStore(owner=self, settings=settings)

        self.controller = NoteStoreController(store, on_change=self._render)

        # Header: History | title | Save, Clear
        self.btn_history = QPushButton("History")
        self.title = QLabel()
        self.btn_save = QPushButton("Save")
        self.btn_clear = QPushButton("Clear")

        header = QHBoxLayout()
        header.addWidget(self.btn_history)
        header.addStretch(1)
        header.addWidget(self.title)
        header.addStretch(1)
        header.addWidget(self.btn_save)
        header.addWidget(self.btn_clear)

        self.editor = QPlainTextEdit()

        root = QWidget()
        layout = QVBoxLayout(root)
        layout.addLayout(header)
        layout.addWidget(self.editor, 1)
        self.setCentralWidget(root)

        act_save = QAction("Save", self)
        act_save.setShortcut(QKeySequence.StandardKey.Save)
        act_save.triggered.connect(self.save_current)
        self.addAction(act_save)

        self.btn_history.clicked.connect(self.open_history)
        self.btn_save.clicked.connect(self.save_current)
        self.btn_clear.clicked.connect(self.clear_current)
        self.editor.textChanged.connect(self._on_text_changed)

        self._ui_state.restore()
        self.controller.load()
        self._render()

    def closeEvent(self, event):  # type: ignore[override]
        self._ui_state.save()
        super().closeEvent(event)

    # ───────────────────────── rendering ─────────────────────────

    def _render(self) -> None:
        editing = self.controller.mode is EditorMode.EDITING
        self.title.setText("Edit Note" if editing else "Simple Notes")
        self.editor.setPlaceholderText("Edit your note..." if editing else "Write your note here...")

        draft = self.controller.draft
        if self.editor.toPlainText() != draft:
            with blocked_signals(self.editor):
                self.editor.setPlainText(draft)

        has_text = self.controller.state.has_text
        self.btn_save.setEnabled(has_text)
        self.btn_clear.setEnabled(has_text)

    def _on_text_changed(self) -> None:
        self.controller.set_draft(self.editor.toPlainText())

    # ───────────────────────── actions ─────────────────────────

    def save_current(self) -> None:
        if not self.controller.state.has_text:
            show_empty_note(self)
            return

        editing = self.controller.mode is EditorMode.EDITING
        try:
            if editing:
                self.controller.update()
            else:
                self.controller.save()
        except PersistenceWriteError:
            show_error(self, "Failed to update note" if editing else "Failed to save note")
            return
        except PreconditionViolation as e:
            log.warning("Save rejected: %s", e)
            return
        show_success(self, "Note updated successfully!" if editing else "Note saved successfully!")

    def clear_current(self) -> None:
        if self.controller.state.has_text and not confirm_clear_note(self):
            return
        self.controller.discard_draft()

    def delete_note(self, note_id: str) -> None:
        if not confirm_delete_note(self):
            return
        try:
            self.controller.delete(note_id)
        except PersistenceWriteError:
            show_error(self, "Failed to delete note")
        except PreconditionViolation as e:
            log.warning("Delete rejected: %s", e)

    def open_history(self) -> None:
        dlg = HistoryDialog(
            self,
            get_notes=lambda: self.controller.notes,
            on_open=self.controller.begin_edit,
            on_delete=self.delete_note,
        )
        dlg.exec()
