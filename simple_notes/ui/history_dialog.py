from __future__ import annotations

from typing import Callable, Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from simple_notes.core.models import Note


class HistoryDialog(QDialog):
    """
    "Saved Notes" list. Activating a row opens the note for editing and
    closes the dialog; the trash button next to a row asks the owner to
    delete it (the owner shows the confirmation).
    """

    def __init__(
        self,
        parent,
        *,
        get_notes: Callable[[], Sequence[Note]],
        on_open: Callable[[str], None],
        on_delete: Callable[[str], None],
    ):
        super().__init__(parent)
        self.setWindowTitle("Saved Notes")
        self.setModal(True)
        self.resize(420, 560)

        self._get_notes = get_notes
        self._on_open = on_open
        self._on_delete = on_delete

        self.listw = QListWidget()
        self.empty = QLabel("No saved notes yet")
        self.empty.setAlignment(Qt.AlignCenter)

        self.stack = QStackedWidget()
        self.stack.addWidget(self.listw)
        self.stack.addWidget(self.empty)

        btn_close = QPushButton("Close")
        btn_close.clicked.connect(self.reject)

        layout = QVBoxLayout(self)
        layout.addWidget(self.stack)
        footer = QHBoxLayout()
        footer.addStretch(1)
        footer.addWidget(btn_close)
        layout.addLayout(footer)

        self.listw.itemClicked.connect(self._open_item)

        self.reload()

    def reload(self) -> None:
        notes = list(self._get_notes())
        self.listw.clear()
        for note in notes:
            item = QListWidgetItem()
            item.setData(Qt.UserRole, note.id)
            row = self._build_row(note)
            item.setSizeHint(row.sizeHint())
            self.listw.addItem(item)
            self.listw.setItemWidget(item, row)
        self.stack.setCurrentWidget(self.listw if notes else self.empty)

    def _build_row(self, note: Note) -> QWidget:
        row = QWidget()
        layout = QHBoxLayout(row)
        layout.setContentsMargins(8, 4, 8, 4)
        title = QLabel(note.title)
        title.setToolTip(note.content[:200])
        btn_delete = QPushButton("Delete")
        btn_delete.setToolTip("Delete this note")
        btn_delete.clicked.connect(lambda _=False, nid=note.id: self._delete(nid))
        layout.addWidget(title, 1)
        layout.addWidget(btn_delete)
        return row

    def _open_item(self, item: QListWidgetItem) -> None:
        note_id = item.data(Qt.UserRole)
        if not note_id:
            return
        self._on_open(note_id)
        self.accept()

    def _delete(self, note_id: str) -> None:
        self._on_delete(note_id)
        self.reload()
