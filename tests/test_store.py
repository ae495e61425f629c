import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from noted.core.store import NoteStore
from noted.errors import NotFoundError, ValidationError


def test_create_appends_and_trims(store):
    a = store.create("  First  ", "hello")
    b = store.create("Second")

    assert a.title == "First"
    assert b.content == ""
    assert list(store) == [a, b]
    assert store.count() == 2
    assert a.created == a.modified


@pytest.mark.parametrize("title", ["", "   ", "\t\n", None])
def test_create_rejects_empty_title(store, title):
    with pytest.raises(ValidationError):
        store.create(title, "x")
    assert store.count() == 0


def test_duplicate_copies_title_and_content(store):
    a = store.create("Plan", "1. one")
    copy = store.duplicate(a)

    assert copy.title == "Plan (Copy)"
    assert copy.content == "1. one"
    assert copy.note_id != a.note_id
    assert list(store) == [a, copy]


def test_duplicate_of_missing_note_raises(store):
    a = store.create("Gone")
    store.delete(a)
    with pytest.raises(NotFoundError):
        store.duplicate(a)


def test_rename_updates_title_and_modified(store):
    a = store.create("Old")
    before = a.modified
    store.rename(a, "  New  ")

    assert a.title == "New"
    assert a.modified >= before
    assert a.modified >= a.created


@pytest.mark.parametrize("title", ["", "   "])
def test_rename_rejects_empty_title_and_keeps_state(store, title):
    a = store.create("Keep")
    modified = a.modified
    with pytest.raises(ValidationError):
        store.rename(a, title)
    assert a.title == "Keep"
    assert a.modified == modified


def test_rename_missing_note_raises(store):
    other = NoteStore().create("Elsewhere")
    with pytest.raises(NotFoundError):
        store.rename(other, "x")


def test_delete_is_idempotent(store):
    a = store.create("A")
    b = store.create("B")
    store.delete(a)
    store.delete(a)

    assert list(store) == [b]
    assert a not in store
    assert store.count() == 1


def test_get_by_id(store):
    a = store.create("A")
    assert store.get(a.note_id) is a
    store.delete(a)
    with pytest.raises(NotFoundError):
        store.get(a.note_id)


def test_identities_stay_unique_across_mutations(store):
    a = store.create("A")
    b = store.duplicate(a)
    c = store.duplicate(b)
    store.rename(c, "A")
    store.delete(b)
    d = store.duplicate(a)

    ids = [n.note_id for n in store]
    assert len(ids) == len(set(ids))
    assert store.count() == len(ids) == 3
    assert [n.title for n in store] == ["A", "A", "A (Copy)"]
    assert list(store)[-1] is d


def test_duplicate_titles_allowed(store):
    store.create("Same")
    store.create("Same")
    assert store.count() == 2


def test_search_empty_query_returns_all_in_order(store):
    notes = [store.create(t) for t in ("c", "a", "b")]
    assert list(store.search("")) == notes
    assert list(store.search("   ")) == notes


def test_search_title_or_content_case_insensitive(store):
    a = store.create("Groceries", "milk, eggs")
    b = store.create("Work", "Buy MILK for office")
    store.create("Ideas", "nothing here")

    assert list(store.search("MiLk")) == [a, b]
    assert list(store.search("  groc ")) == [a]
    assert list(store.search("zzz")) == []


def test_search_does_not_mutate_and_rescans(store):
    a = store.create("alpha")
    first = list(store.search("a"))
    b = store.create("beta")
    second = list(store.search("a"))

    assert first == [a]
    assert second == [a, b]
    assert store.count() == 2


def test_search_is_lazy_view(store):
    store.create("x")
    result = store.search("x")
    assert not isinstance(result, list)
    assert len(list(result)) == 1
