from __future__ import annotations

import re
from dataclasses import dataclass

from noted.settings import BULLET_MARKERS, INDENT

NUMBERED_RE = re.compile(r"([0-9]+)\..*", re.DOTALL)

# line trim: ASCII control chars and space only; NBSP and other Unicode
# spaces count as content
LINE_TRIM = "".join(chr(c) for c in range(0x21))


@dataclass(frozen=True)
class FormatEdit:
    """Result of an intercepted key: the full new text and where the caret goes."""
    text: str
    caret: int


def line_bounds(text: str, caret: int) -> tuple[int, int] | None:
    """
    (start, end) of the line holding the caret, end excluding the newline.
    None when the caret is outside the text.
    """
    if caret < 0 or caret > len(text):
        return None
    start = text.rfind("\n", 0, caret) + 1
    end = text.find("\n", caret)
    if end == -1:
        end = len(text)
    return start, end


def _insert(text: str, caret: int, s: str) -> FormatEdit:
    return FormatEdit(text[:caret] + s + text[caret:], caret + len(s))


def on_enter(text: str, caret: int) -> FormatEdit | None:
    """
    Continue a bullet or numbered list on Enter.

    Returns None when Enter should insert a plain newline.
    """
    bounds = line_bounds(text, caret)
    if bounds is None:
        if not text or caret <= 0:
            return None
        caret = min(caret, len(text))
        before = text[max(0, caret - 2):caret]
        if "•" in before or "-" in before:
            return _insert(text, caret, "\n• ")
        return None

    start, end = bounds
    line = text[start:end].strip(LINE_TRIM)
    if not line:
        return None

    if line.startswith(BULLET_MARKERS):
        return _insert(text, caret, f"\n{line[0]} ")

    m = NUMBERED_RE.fullmatch(line)
    if m:
        return _insert(text, caret, f"\n{int(m.group(1)) + 1}. ")
    return None


def on_tab(text: str, caret: int, reverse: bool = False) -> FormatEdit:
    """
    Tab indents at the caret; reverse (Shift+Tab) outdents the current line
    by one indent if it starts with a full one. Always intercepted.
    """
    caret = max(0, min(caret, len(text)))
    if not reverse:
        return _insert(text, caret, INDENT)

    start, _ = line_bounds(text, caret)
    if not text.startswith(INDENT, start):
        return FormatEdit(text, caret)
    new_caret = max(start, caret - len(INDENT))
    return FormatEdit(text[:start] + text[start + len(INDENT):], new_caret)
