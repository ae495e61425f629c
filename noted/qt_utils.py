from __future__ import annotations

from contextlib import contextmanager


@contextmanager
def blocked_signals(obj):
    """
    Temporarily silence Qt signals of `obj`, restoring them afterwards.
    Used when the UI writes text the session already knows about.
    """
    if obj is None:
        yield
        return
    previous = obj.blockSignals(True)
    try:
        yield
    finally:
        obj.blockSignals(previous)
