from __future__ import annotations

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from noted.core.autoformat import FormatEdit, on_enter, on_tab
from noted.core.models import Note
from noted.core.text_stats import char_count, word_count
from noted.logging_setup import log
from noted.settings import (
    AUTOSAVE_DEBOUNCE_MS,
    SAVED_STATUS_MS,
    STATUS_READY,
    STATUS_SAVED,
)


class EditSession(QObject):
    """
    Binding between the editor and the note being edited.

    Unbound until `select()`; every content change goes through
    `edit_content()`, which writes the note and restarts the autosave
    debounce. When the debounce fires with no further edits, `saved` is
    emitted. Notes live only in memory, so "saved" is a status signal and
    nothing is written anywhere.
    """

    saved = Signal(str)
    status_changed = Signal(str)
    counts_changed = Signal(int, int)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        autosave_ms: int = AUTOSAVE_DEBOUNCE_MS,
        status_ms: int = SAVED_STATUS_MS,
    ):
        super().__init__(parent)
        self._note: Note | None = None
        self._text = ""
        self._words = 0
        self._chars = 0

        # Autosave debounce
        self.save_timer = QTimer(self)
        self.save_timer.setInterval(int(autosave_ms))
        self.save_timer.setSingleShot(True)
        self.save_timer.timeout.connect(self._on_save_timeout)

        # "Auto-saved" -> "Ready"
        self.status_timer = QTimer(self)
        self.status_timer.setInterval(int(status_ms))
        self.status_timer.setSingleShot(True)
        self.status_timer.timeout.connect(lambda: self.status_changed.emit(STATUS_READY))

        # note the pending autosave belongs to
        self._pending_note_id: str | None = None

    @property
    def note(self) -> Note | None:
        return self._note

    @property
    def is_bound(self) -> bool:
        return self._note is not None

    @property
    def text(self) -> str:
        return self._text

    @property
    def word_count(self) -> int:
        return self._words

    @property
    def char_count(self) -> int:
        return self._chars

    @property
    def autosave_pending(self) -> bool:
        return self.save_timer.isActive()

    def _stop_timers(self) -> None:
        if self.save_timer.isActive():
            self.save_timer.stop()
        if self.status_timer.isActive():
            self.status_timer.stop()
        self._pending_note_id = None

    def _recount(self) -> None:
        self._words = word_count(self._text)
        self._chars = char_count(self._text)
        self.counts_changed.emit(self._words, self._chars)

    def select(self, note: Note) -> None:
        self._stop_timers()
        self._note = note
        self._text = note.content
        self._recount()
        log.debug("Session bound: id=%s title=%s", note.note_id, note.title)

    def unbind(self) -> None:
        self._stop_timers()
        if self._note is not None:
            log.debug("Session unbound: id=%s", self._note.note_id)
        self._note = None
        self._text = ""
        self._recount()

    def edit_content(self, new_text: str) -> None:
        note = self._note
        if note is None:
            return
        new_text = new_text or ""
        self._text = new_text
        note.content = new_text
        note.touch()
        self._recount()

        self._pending_note_id = note.note_id
        self.save_timer.start()

    def handle_enter(self, caret: int) -> FormatEdit | None:
        if self._note is None:
            return None
        edit = on_enter(self._text, caret)
        if edit is not None:
            self.edit_content(edit.text)
        return edit

    def handle_tab(self, caret: int, reverse: bool = False) -> FormatEdit | None:
        if self._note is None:
            return None
        edit = on_tab(self._text, caret, reverse=reverse)
        if edit.text != self._text:
            self.edit_content(edit.text)
        return edit

    def shutdown(self) -> None:
        self._stop_timers()

    @Slot()
    def _on_save_timeout(self) -> None:
        note = self._note
        if note is None or self._pending_note_id != note.note_id:
            log.debug("Autosave skipped: note switched before timer fired")
            return
        self._pending_note_id = None
        log.debug("Autosave: id=%s chars=%d", note.note_id, self._chars)
        self.saved.emit(note.note_id)
        self.status_changed.emit(STATUS_SAVED)
        self.status_timer.start()
