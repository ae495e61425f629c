from .models import Note, format_timestamp
from .store import NoteStore
from .autoformat import FormatEdit, line_bounds, on_enter, on_tab
from .text_stats import word_count, char_count, format_counts

__all__ = ["Note",
           "format_timestamp",
           "NoteStore",
           "FormatEdit",
           "line_bounds",
           "on_enter",
           "on_tab",
           "word_count",
           "char_count",
           "format_counts"
           ]
