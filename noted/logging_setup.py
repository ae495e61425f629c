from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path

from noted.settings import APP_NAME, LOG_BACKUPS, LOG_FORMAT, LOG_MAX_BYTES, LOG_PATH

SESSION_ID = uuid.uuid4().hex[:8]


class EnsureSessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


class SessionAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        extra = kwargs.setdefault("extra", {})
        extra.setdefault("session", SESSION_ID)
        return msg, kwargs


def _file_handler(log_path: Path) -> logging.Handler | None:
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            log_path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
    except OSError:
        # no writable home: notes are in-memory anyway, console is enough
        return None


def setup_logging(name: str = APP_NAME, log_path: Path | None = LOG_PATH) -> logging.Logger:
    """
    DEBUG to a rotating file, INFO to stdout, every record tagged with the
    session id. Calling it again for the same logger is a no-op.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if logger.handlers:
        return logger

    fmt = logging.Formatter(LOG_FORMAT)
    session_filter = EnsureSessionFilter()

    handlers: list[tuple[logging.Handler, int]] = [
        (logging.StreamHandler(sys.stdout or sys.stderr), logging.INFO),
    ]
    fh = _file_handler(log_path) if log_path is not None else None
    if fh is not None:
        handlers.insert(0, (fh, logging.DEBUG))

    for handler, level in handlers:
        handler.setLevel(level)
        handler.setFormatter(fmt)
        handler.addFilter(session_filter)
        logger.addHandler(handler)

    logger.info("Logging initialized. log_file=%s", log_path if fh is not None else None)
    return logger


log = SessionAdapter(setup_logging(), {})


def install_global_exception_hooks() -> None:
    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook

    try:
        from PySide6.QtCore import QtMsgType, qInstallMessageHandler

        levels = {
            QtMsgType.QtDebugMsg: logging.DEBUG,
            QtMsgType.QtInfoMsg: logging.INFO,
            QtMsgType.QtWarningMsg: logging.WARNING,
            QtMsgType.QtCriticalMsg: logging.ERROR,
            QtMsgType.QtFatalMsg: logging.CRITICAL,
        }

        def _qt_message_handler(mode, context, message):
            file = getattr(context, "file", None)
            line = getattr(context, "line", None)
            func = getattr(context, "function", None)
            where = f"{file}:{line} {func}" if file or line or func else "unknown"
            log.log(levels.get(mode, logging.WARNING), "Qt: %s | where=%s", message, where)

        qInstallMessageHandler(_qt_message_handler)
        log.info("Qt message handler installed")
    except Exception:
        log.exception("Failed to install Qt message handler")
