from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from noted import __version__
from noted.logging_setup import install_global_exception_hooks, log, SESSION_ID
from noted.settings import APP_NAME
from noted.ui.main_window import NotesWindow


def main(argv: list[str] | None = None) -> int:
    install_global_exception_hooks()
    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationName(APP_NAME)
    app.setApplicationDisplayName("Noted")
    app.setApplicationVersion(__version__)

    win = NotesWindow()
    win.resize(1200, 800)
    win.setMinimumSize(900, 600)
    win.show()
    log.info("Application started: version=%s sid=%s notes=%d", __version__, SESSION_ID, win.store.count())
    code = app.exec()
    log.info("Application exited: code=%s", code)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
