from __future__ import annotations

from pathlib import Path
from typing import Iterable

from noted.core.models import Note
from noted.errors import ExportError, NothingToExportError
from noted.infrastructure.filesystem import atomic_write_text
from noted.logging_setup import log
from noted.settings import EXPORT_SEPARATOR


def format_note_record(note: Note) -> str:
    # "Created:" carries the modified timestamp; existing exports read that way
    return (
        f"{EXPORT_SEPARATOR}\n"
        f"Title: {note.title}\n"
        f"Created: {note.formatted_date()}\n"
        f"{EXPORT_SEPARATOR}\n"
        f"{note.content}\n"
    )


def format_export(notes: Iterable[Note]) -> str:
    return "".join(format_note_record(n) for n in notes)


def export_notes(notes: Iterable[Note], path: Path | str) -> int:
    """
    Write every note, in order, to `path` as UTF-8 text.

    Returns the number of notes written. Raises NothingToExportError for an
    empty collection (no file is created) and ExportError if the file cannot
    be written.
    """
    notes = list(notes)
    if not notes:
        raise NothingToExportError("No notes to export.")

    path = Path(path)
    try:
        atomic_write_text(path, format_export(notes))
    except OSError as e:
        log.exception("Export failed: %s", path)
        raise ExportError(path, e) from e

    log.info("Exported notes: count=%d path=%s", len(notes), path)
    return len(notes)
