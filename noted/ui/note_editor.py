from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QKeyEvent, QTextCursor
from PySide6.QtWidgets import QPlainTextEdit

from noted.core.autoformat import FormatEdit
from noted.qt_utils import blocked_signals
from noted.session import EditSession


def _qt_pos(text: str, index: int) -> int:
    """Python str index -> QTextDocument position (UTF-16 code units)."""
    return len(text[:index].encode("utf-16-le")) // 2


def _py_index(text: str, pos: int) -> int:
    units = 0
    for i, ch in enumerate(text):
        if units >= pos:
            return i
        units += 2 if ord(ch) > 0xFFFF else 1
    return len(text)


def changed_span(old: str, new: str) -> tuple[int, int, str]:
    """(start, end, replacement) turning `old` into `new`; indices into `old`."""
    limit = min(len(old), len(new))
    start = 0
    while start < limit and old[start] == new[start]:
        start += 1
    tail = 0
    while tail < limit - start and old[-1 - tail] == new[-1 - tail]:
        tail += 1
    return start, len(old) - tail, new[start:len(new) - tail]


class NoteEditor(QPlainTextEdit):
    """
    Plain-text editor that routes Enter and Tab through the session's
    auto-format rules. Everything else is default QPlainTextEdit behavior.
    """

    # an auto-format edit was applied; textChanged is not emitted for it
    formatted = Signal()

    def __init__(self, session: EditSession, parent=None):
        super().__init__(parent)
        self._session = session
        self.setTabChangesFocus(False)
        self.setTabStopDistance(4 * self.fontMetrics().horizontalAdvance(" "))

    def set_text(self, text: str) -> None:
        """Replace the text without emitting textChanged."""
        with blocked_signals(self):
            self.setPlainText(text)
        self.moveCursor(QTextCursor.End)

    def _apply(self, edit: FormatEdit) -> None:
        old = self.toPlainText()
        cursor = self.textCursor()
        if edit.text != old:
            start, end, replacement = changed_span(old, edit.text)
            # the session already holds edit.text
            with blocked_signals(self):
                cursor.beginEditBlock()
                cursor.setPosition(_qt_pos(old, start))
                cursor.setPosition(_qt_pos(old, end), QTextCursor.KeepAnchor)
                cursor.insertText(replacement)
                cursor.endEditBlock()
        cursor.setPosition(_qt_pos(edit.text, edit.caret))
        self.setTextCursor(cursor)
        self.ensureCursorVisible()
        self.formatted.emit()

    def keyPressEvent(self, event: QKeyEvent) -> None:  # type: ignore[override]
        key = event.key()
        mods = event.modifiers() & ~Qt.KeypadModifier
        caret = _py_index(self.toPlainText(), self.textCursor().position())

        if key in (Qt.Key_Return, Qt.Key_Enter) and mods == Qt.NoModifier:
            edit = self._session.handle_enter(caret)
            if edit is not None:
                self._apply(edit)
                event.accept()
                return
        elif key == Qt.Key_Backtab or (key == Qt.Key_Tab and mods & Qt.ShiftModifier):
            edit = self._session.handle_tab(caret, reverse=True)
            if edit is not None:
                self._apply(edit)
            event.accept()
            return
        elif key == Qt.Key_Tab and mods == Qt.NoModifier:
            edit = self._session.handle_tab(caret)
            if edit is not None:
                self._apply(edit)
                event.accept()
                return

        super().keyPressEvent(event)
