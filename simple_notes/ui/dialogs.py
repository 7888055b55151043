from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def _confirm_destructive(parent: QWidget, *, title: str, text: str, action: str) -> bool:
    msg = QMessageBox(parent)
    msg.setIcon(QMessageBox.Warning)
    msg.setWindowTitle(title)
    msg.setText(text)
    btn_cancel = msg.addButton("Cancel", QMessageBox.RejectRole)
    btn_action = msg.addButton(action, QMessageBox.DestructiveRole)
    msg.setDefaultButton(btn_cancel)
    msg.exec()
    return msg.clickedButton() == btn_action


def confirm_delete_note(parent: QWidget) -> bool:
    return _confirm_destructive(
        parent,
        title="Delete Note",
        text="Are you sure you want to delete this note?",
        action="Delete",
    )


def confirm_clear_note(parent: QWidget) -> bool:
    return _confirm_destructive(
        parent,
        title="Clear Note",
        text="Are you sure you want to clear the current note?",
        action="Clear",
    )


def show_success(parent: QWidget, text: str) -> None:
    QMessageBox.information(parent, "Success", text)


def show_error(parent: QWidget, text: str) -> None:
    QMessageBox.critical(parent, "Error", text)


def show_empty_note(parent: QWidget) -> None:
    QMessageBox.warning(parent, "Empty Note", "Please write something before saving")
