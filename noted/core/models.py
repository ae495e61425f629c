from __future__ import annotations

import uuid
from dataclasses import InitVar, dataclass, field
from datetime import datetime


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(eq=False)
class Note:
    """
    A titled text note. Identity is `note_id`, never the title:
    titles are mutable and may repeat.
    """
    title: str
    content: str = ""
    created: datetime = field(default_factory=datetime.now)
    modified_at: InitVar[datetime | None] = None
    note_id: str = field(default_factory=_new_id)
    modified: datetime = field(init=False)

    def __post_init__(self, modified_at: datetime | None) -> None:
        if modified_at is None or modified_at < self.created:
            modified_at = self.created
        self.modified = modified_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Note):
            return NotImplemented
        return self.note_id == other.note_id

    def __hash__(self) -> int:
        return hash(self.note_id)

    def touch(self) -> None:
        # modified never goes backwards, even if the wall clock does
        now = datetime.now()
        if now > self.modified:
            self.modified = now

    def formatted_date(self) -> str:
        """`modified` as e.g. "March 15, 2024 at 2:30 PM"."""
        return format_timestamp(self.modified)


# English names regardless of process locale (Qt sets LC_ALL at startup)
MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def format_timestamp(ts: datetime) -> str:
    hour = ts.hour % 12 or 12
    meridiem = "AM" if ts.hour < 12 else "PM"
    return f"{MONTHS[ts.month - 1]} {ts.day}, {ts.year} at {hour}:{ts.minute:02d} {meridiem}"
