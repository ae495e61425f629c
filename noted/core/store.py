from __future__ import annotations

from typing import Iterator

from noted.core.models import Note
from noted.errors import NotFoundError, ValidationError
from noted.logging_setup import log
from noted.settings import COPY_SUFFIX


def _clean_title(title: str | None) -> str:
    title = (title or "").strip()
    if not title:
        raise ValidationError("Title must not be empty")
    return title


class NoteStore:
    """
    Ordered in-memory collection of notes.

    Insertion order is display order. Notes are identified by `note_id`;
    two notes may share a title.
    """

    def __init__(self) -> None:
        self._notes: list[Note] = []
        self._by_id: dict[str, Note] = {}

    def __len__(self) -> int:
        return len(self._notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(list(self._notes))

    def __contains__(self, note: object) -> bool:
        return isinstance(note, Note) and self._by_id.get(note.note_id) is note

    def count(self) -> int:
        return len(self._notes)

    def get(self, note_id: str) -> Note:
        try:
            return self._by_id[note_id]
        except KeyError:
            raise NotFoundError(f"No note with id {note_id}") from None

    def index_of(self, note: Note) -> int:
        self._require(note)
        return self._notes.index(note)

    def _require(self, note: Note) -> None:
        if note not in self:
            raise NotFoundError(f"Note is not in the store: {getattr(note, 'title', note)!r}")

    def _append(self, note: Note) -> Note:
        self._notes.append(note)
        self._by_id[note.note_id] = note
        return note

    def create(self, title: str, initial_content: str = "") -> Note:
        note = self._append(Note(title=_clean_title(title), content=initial_content or ""))
        log.info("Note created: id=%s title=%s", note.note_id, note.title)
        return note

    def duplicate(self, note: Note) -> Note:
        self._require(note)
        copy = self._append(Note(title=note.title + COPY_SUFFIX, content=note.content))
        log.info("Note duplicated: src=%s new=%s", note.note_id, copy.note_id)
        return copy

    def rename(self, note: Note, new_title: str) -> None:
        title = _clean_title(new_title)
        self._require(note)
        old = note.title
        note.title = title
        note.touch()
        log.info("Note renamed: id=%s %r -> %r", note.note_id, old, title)

    def delete(self, note: Note) -> None:
        if note not in self:
            log.debug("Delete ignored, note not in store: %r", getattr(note, "title", note))
            return
        self._notes.remove(note)
        del self._by_id[note.note_id]
        log.info("Note deleted: id=%s title=%s", note.note_id, note.title)

    def clear(self) -> None:
        self._notes.clear()
        self._by_id.clear()

    def search(self, query: str | None) -> Iterator[Note]:
        """
        Case-insensitive substring match on title or content.
        An empty query yields every note in store order.
        """
        q = (query or "").strip().casefold()
        snapshot = list(self._notes)
        if not q:
            return iter(snapshot)
        return (n for n in snapshot if q in n.title.casefold() or q in n.content.casefold())
