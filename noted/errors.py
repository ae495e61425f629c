from __future__ import annotations

from pathlib import Path


class NoteError(Exception):
    """Base class for errors raised by the notes core."""


class ValidationError(NoteError, ValueError):
    """Rejected input, e.g. a title that is empty after trimming."""


class NotFoundError(NoteError, LookupError):
    """A note reference that is not (or no longer) in the store."""


class NothingToExportError(NoteError):
    """Export was requested for an empty store."""


class ExportError(NoteError, OSError):
    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Could not write {path}: {cause.strerror or cause}")
        self.path = Path(path)
        self.cause = cause
