from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout,
    QListWidget, QListWidgetItem, QLineEdit, QLabel, QPushButton,
    QFileDialog, QMessageBox, QSplitter, QMenu,
)

from noted.core.models import Note
from noted.core.samples import load_sample_notes
from noted.core.store import NoteStore
from noted.core.text_stats import format_counts
from noted.errors import NoteError, NothingToExportError
from noted.logging_setup import log
from noted.qt_utils import blocked_signals
from noted.services.export_service import export_notes
from noted.session import EditSession
from noted.settings import DEFAULT_EXPORT_NAME, NEW_NOTE_CONTENT, STATUS_READY
from noted.ui.dialogs import ask_title, confirm_delete
from noted.ui.note_editor import NoteEditor

NOTE_ID_ROLE = Qt.UserRole


class NotesWindow(QMainWindow):
    def __init__(self, store: NoteStore | None = None, *, load_samples: bool = True):
        super().__init__()
        log.info("Main window initialized")
        self.setWindowTitle("Noted")

        self.store = store if store is not None else NoteStore()
        self.session = EditSession(self)

        # UI

        self.search = QLineEdit()
        self.search.setPlaceholderText("Search notes... (Ctrl+F)")
        self.count_label = QLabel()
        self.listw = QListWidget()
        self.listw.setContextMenuPolicy(Qt.CustomContextMenu)

        self.new_button = QPushButton("+ New")
        self.export_button = QPushButton("Export")

        self.title_label = QLabel()
        self.date_label = QLabel()
        self.counts_label = QLabel()
        self.delete_button = QPushButton("Delete")

        self.editor = NoteEditor(self.session)

        left = QWidget()
        left_layout = QVBoxLayout(left)
        left_layout.setContentsMargins(8, 8, 8, 8)
        buttons = QHBoxLayout()
        buttons.addWidget(QLabel("Notes"))
        buttons.addStretch(1)
        buttons.addWidget(self.export_button)
        buttons.addWidget(self.new_button)
        left_layout.addLayout(buttons)
        left_layout.addWidget(self.search)
        left_layout.addWidget(self.count_label)
        left_layout.addWidget(self.listw)

        right = QWidget()
        right_layout = QVBoxLayout(right)
        right_layout.setContentsMargins(8, 8, 8, 8)
        header = QHBoxLayout()
        header.addWidget(self.title_label)
        header.addStretch(1)
        header.addWidget(self.delete_button)
        info = QHBoxLayout()
        info.addWidget(self.date_label)
        info.addStretch(1)
        info.addWidget(self.counts_label)
        right_layout.addLayout(header)
        right_layout.addLayout(info)
        right_layout.addWidget(self.editor)

        self.splitter = QSplitter(Qt.Horizontal)
        self.splitter.addWidget(left)
        self.splitter.addWidget(right)
        self.splitter.setStretchFactor(0, 1)
        self.splitter.setStretchFactor(1, 3)

        root = QWidget()
        root_layout = QHBoxLayout(root)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.addWidget(self.splitter)
        self.setCentralWidget(root)
        self.statusBar().addPermanentWidget(QLabel("Ctrl+N: New • Ctrl+F: Search • Del: Delete"))

        # Signals
        self.search.textChanged.connect(self._on_search_changed)
        self.listw.itemSelectionChanged.connect(self._on_select_note)
        self.listw.customContextMenuRequested.connect(self._show_context_menu)
        self.editor.textChanged.connect(self._on_text_changed)
        self.editor.formatted.connect(self._on_note_edited)
        self.new_button.clicked.connect(self.create_note)
        self.export_button.clicked.connect(self.export_all)
        self.delete_button.clicked.connect(self.delete_current_note)
        self.session.status_changed.connect(self.statusBar().showMessage)
        self.session.counts_changed.connect(self._on_counts_changed)

        self._build_shortcuts()
        self._clear_editor()

        if load_samples:
            load_sample_notes(self.store)
        self.refresh_list()
        if self.listw.count():
            self.listw.setCurrentRow(0)

    def closeEvent(self, event):  # type: ignore[override]
        # pending debounce must not fire against a torn-down window
        self.session.shutdown()
        super().closeEvent(event)

    def _build_shortcuts(self) -> None:
        act_new = QAction("New Note", self)
        act_new.setShortcut(QKeySequence.New)
        act_new.triggered.connect(self.create_note)

        act_search = QAction("Search", self)
        act_search.setShortcut(QKeySequence.Find)
        act_search.triggered.connect(self._focus_search)

        act_delete = QAction("Delete Note", self)
        act_delete.setShortcut(QKeySequence(Qt.Key_Delete))
        act_delete.triggered.connect(self._delete_from_list)

        for act in (act_new, act_search, act_delete):
            self.addAction(act)

    def _show_context_menu(self, pos) -> None:
        menu = QMenu(self)
        menu.addAction("Duplicate Note", self.duplicate_current_note)
        menu.addAction("Rename Note", self.rename_current_note)
        menu.addSeparator()
        menu.addAction("Delete Note", self.delete_current_note)
        menu.exec(self.listw.mapToGlobal(pos))

    def _focus_search(self) -> None:
        self.search.setFocus()
        self.search.selectAll()

    @property
    def current_note(self) -> Note | None:
        return self.session.note

    # ---- list ----

    def refresh_list(self) -> None:
        query = self.search.text()
        current = self.current_note

        with blocked_signals(self.listw):
            self.listw.clear()
            for note in self.store.search(query):
                item = QListWidgetItem(f"{note.title}\n{note.formatted_date()}")
                item.setData(NOTE_ID_ROLE, note.note_id)
                self.listw.addItem(item)
                if note is current:
                    self.listw.setCurrentItem(item)

        self.count_label.setText(f"{self.store.count()} notes")

    def _refresh_current_item(self) -> None:
        note = self.current_note
        if note is None:
            return
        for i in range(self.listw.count()):
            item = self.listw.item(i)
            if item.data(NOTE_ID_ROLE) == note.note_id:
                item.setText(f"{note.title}\n{note.formatted_date()}")
                return

    def _select_in_list(self, note: Note) -> None:
        for i in range(self.listw.count()):
            if self.listw.item(i).data(NOTE_ID_ROLE) == note.note_id:
                self.listw.setCurrentRow(i)
                return

    @Slot(str)
    def _on_search_changed(self, text: str) -> None:
        self.refresh_list()
        q = text.strip()
        self.statusBar().showMessage(f"Searching: {q}" if q else STATUS_READY)

    @Slot()
    def _on_select_note(self) -> None:
        items = self.listw.selectedItems()
        if not items:
            return
        note_id = items[0].data(NOTE_ID_ROLE)
        try:
            note = self.store.get(note_id)
        except NoteError:
            log.exception("Selected list item refers to a missing note: %s", note_id)
            self.refresh_list()
            return
        self.open_note(note)

    # ---- editor ----

    def open_note(self, note: Note) -> None:
        self.session.select(note)
        self.title_label.setText(note.title)
        self.date_label.setText(f"Modified: {note.formatted_date()}")
        self.editor.setEnabled(True)
        self.delete_button.setEnabled(True)
        self.editor.set_text(note.content)
        self.editor.setFocus()

    def _clear_editor(self) -> None:
        self.session.unbind()
        self.title_label.setText("Select a note to edit")
        self.date_label.setText("")
        self.counts_label.setText("")
        self.editor.set_text("")
        self.editor.setEnabled(False)
        self.delete_button.setEnabled(False)

    @Slot()
    def _on_text_changed(self) -> None:
        if not self.session.is_bound:
            return
        self.session.edit_content(self.editor.toPlainText())
        self._on_note_edited()

    @Slot()
    def _on_note_edited(self) -> None:
        note = self.current_note
        if note is None:
            return
        self.date_label.setText(f"Modified: {note.formatted_date()}")
        self._refresh_current_item()

    @Slot(int, int)
    def _on_counts_changed(self, words: int, chars: int) -> None:
        self.counts_label.setText(format_counts(words, chars) if self.session.is_bound else "")

    # ---- actions ----

    def create_note(self) -> None:
        title = ask_title(self, caption="New Note", label="Enter note title:")
        if title is None:
            return
        try:
            note = self.store.create(title, NEW_NOTE_CONTENT)
        except NoteError as e:
            QMessageBox.warning(self, "New Note", str(e))
            return
        self.refresh_list()
        self._select_in_list(note)
        self.statusBar().showMessage(f"Created: {note.title}")

    def duplicate_current_note(self) -> None:
        note = self.current_note
        if note is None:
            return
        copy = self.store.duplicate(note)
        self.refresh_list()
        self._select_in_list(copy)
        self.statusBar().showMessage(f"Duplicated: {note.title}")

    def rename_current_note(self) -> None:
        note = self.current_note
        if note is None:
            return
        title = ask_title(self, caption="Rename Note", label="Enter new title:", text=note.title)
        if title is None:
            return
        try:
            self.store.rename(note, title)
        except NoteError as e:
            QMessageBox.warning(self, "Rename Note", str(e))
            return
        self.title_label.setText(note.title)
        self.date_label.setText(f"Modified: {note.formatted_date()}")
        self._refresh_current_item()
        self.statusBar().showMessage(f"Renamed to: {note.title}")

    def _delete_from_list(self) -> None:
        if self.listw.hasFocus():
            self.delete_current_note()

    def delete_current_note(self) -> None:
        note = self.current_note
        if note is None:
            return
        if not confirm_delete(self, note.title):
            return
        self.store.delete(note)
        self._clear_editor()
        self.refresh_list()
        self.statusBar().showMessage(f"Deleted: {note.title}")

    def export_all(self) -> None:
        if self.store.count() == 0:
            QMessageBox.information(self, "Export", "No notes to export.")
            return
        path, _ = QFileDialog.getSaveFileName(self, "Export Notes", DEFAULT_EXPORT_NAME)
        if not path:
            return
        try:
            count = export_notes(self.store, path)
        except NothingToExportError:
            QMessageBox.information(self, "Export", "No notes to export.")
            return
        except NoteError as e:
            QMessageBox.critical(self, "Export Error", f"Error exporting notes: {e}")
            return
        self.statusBar().showMessage(f"Exported {count} notes to {Path(path).name}")
