from __future__ import annotations

import os
import uuid
from contextlib import suppress
from pathlib import Path


def atomic_write_text(path: Path, text: str, *, encoding: str = "utf-8") -> None:
    """
    Write `text` to `path` so readers see either the old file or the
    complete new one:
    - write to a temp file in the same directory
    - fsync
    - replace()

    The parent directory must already exist. On failure the temp file is
    removed and the original OSError propagates.
    """
    path = Path(path)
    tmp_path = path.parent / f".{path.name}.tmp-{uuid.uuid4().hex}"

    try:
        with open(tmp_path, "w", encoding=encoding, newline="") as f:
            f.write(text)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    finally:
        with suppress(OSError):
            if tmp_path.exists():
                tmp_path.unlink()
