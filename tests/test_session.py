import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest
from PySide6.QtTest import QTest

from noted.session import EditSession


@pytest.fixture
def session(qapp):
    s = EditSession(autosave_ms=400, status_ms=200)
    yield s
    s.shutdown()


def _record(signal):
    events = []
    signal.connect(lambda *args: events.append(args))
    return events


def test_starts_unbound(session):
    assert not session.is_bound
    assert session.note is None
    assert session.text == ""


def test_select_loads_buffer_and_counts(session, store):
    note = store.create("A", "one two  three")
    counts = _record(session.counts_changed)
    session.select(note)

    assert session.is_bound
    assert session.note is note
    assert session.text == "one two  three"
    assert (session.word_count, session.char_count) == (3, 14)
    assert counts == [(3, 14)]
    assert not session.autosave_pending


def test_edit_writes_note_and_recounts(session, store):
    note = store.create("A", "")
    session.select(note)
    session.edit_content("  hello world  ")

    assert note.content == "  hello world  "
    assert session.word_count == 2
    assert session.char_count == 15
    assert session.autosave_pending


def test_edit_whitespace_only_counts_zero_words(session, store):
    session.select(store.create("A"))
    session.edit_content(" \n\t")
    assert session.word_count == 0
    assert session.char_count == 3


def test_edit_modified_is_monotonic(session, store):
    note = store.create("A")
    session.select(note)
    stamps = []
    for i in range(5):
        session.edit_content(f"text {i}")
        stamps.append(note.modified)
        assert note.modified >= note.created
    assert stamps == sorted(stamps)


def test_edit_when_unbound_is_ignored(session):
    counts = _record(session.counts_changed)
    session.edit_content("ignored")
    assert session.text == ""
    assert counts == []
    assert not session.autosave_pending


def test_debounce_fires_once_after_quiet_period(session, store):
    note = store.create("A")
    session.select(note)
    saved = _record(session.saved)

    session.edit_content("a")
    QTest.qWait(100)
    session.edit_content("ab")
    QTest.qWait(100)
    session.edit_content("abc")

    QTest.qWait(250)
    assert saved == []
    assert session.autosave_pending

    QTest.qWait(300)
    assert saved == [(note.note_id,)]
    assert not session.autosave_pending

    QTest.qWait(500)
    assert len(saved) == 1


def test_status_shows_saved_then_ready(session, store):
    session.select(store.create("A"))
    statuses = _record(session.status_changed)

    session.edit_content("x")
    QTest.qWait(500)
    assert statuses == [("Auto-saved",)]

    QTest.qWait(300)
    assert statuses == [("Auto-saved",), ("Ready",)]


def test_unbind_cancels_pending_save(session, store):
    session.select(store.create("A"))
    saved = _record(session.saved)
    counts = _record(session.counts_changed)

    session.edit_content("x")
    session.unbind()

    assert not session.is_bound
    assert session.text == ""
    assert counts[-1] == (0, 0)
    QTest.qWait(550)
    assert saved == []


def test_switching_notes_cancels_pending_save(session, store):
    a = store.create("A")
    b = store.create("B", "bee")
    session.select(a)
    saved = _record(session.saved)

    session.edit_content("typed into a")
    session.select(b)

    assert session.text == "bee"
    assert a.content == "typed into a"
    QTest.qWait(550)
    assert saved == []


def test_enter_continues_list_and_updates_note(session, store):
    note = store.create("Todo", "3. review doc")
    session.select(note)

    edit = session.handle_enter(len(note.content))

    assert edit.text == "3. review doc\n4. "
    assert note.content == edit.text
    assert session.text == edit.text
    assert session.autosave_pending


def test_enter_on_plain_line_is_not_intercepted(session, store):
    note = store.create("Plain", "hello")
    session.select(note)
    assert session.handle_enter(5) is None
    assert note.content == "hello"
    assert not session.autosave_pending


def test_tab_and_shift_tab(session, store):
    note = store.create("T", "x")
    session.select(note)

    edit = session.handle_tab(0)
    assert edit.text == "    x"
    assert note.content == "    x"

    edit = session.handle_tab(5, reverse=True)
    assert edit.text == "x"
    assert note.content == "x"


def test_shift_tab_noop_leaves_note_untouched(session, store):
    note = store.create("T", "  x")
    session.select(note)
    modified = note.modified

    edit = session.handle_tab(3, reverse=True)

    assert edit.text == "  x"
    assert note.modified == modified
    assert not session.autosave_pending


def test_key_handlers_ignored_when_unbound(session):
    assert session.handle_enter(0) is None
    assert session.handle_tab(0) is None
    assert session.handle_tab(0, reverse=True) is None
