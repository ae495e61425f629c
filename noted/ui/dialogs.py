from __future__ import annotations

from PySide6.QtWidgets import QInputDialog, QLineEdit, QMessageBox, QWidget


def ask_title(parent: QWidget, *, caption: str, label: str, text: str = "") -> str | None:
    """Prompt for a note title. Returns None if the user cancelled."""
    value, ok = QInputDialog.getText(parent, caption, label, QLineEdit.Normal, text)
    if not ok:
        return None
    return value


def confirm_delete(parent: QWidget, title: str) -> bool:
    answer = QMessageBox.warning(
        parent,
        "Delete Note",
        f"Are you sure you want to delete '{title}'?",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No,
    )
    return answer == QMessageBox.Yes
