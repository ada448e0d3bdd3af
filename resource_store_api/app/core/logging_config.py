"""
Root logger setup.

``setup_logging`` is called by ``create_app`` before the store and
routers are built.  Records go to stderr and, when ``LOG_FILE`` is set,
to that file as well, all as ``time [LEVEL] logger: message``.
Uvicorn's own loggers are left alone; they print through their own
handlers when the app runs under ``run.py``.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach handlers to the root logger once.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names mean ``INFO``.
    logfile : Optional[str]
        Extra destination for log records, resolved against the
        working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        # Tests and repeated create_app() calls must not stack handlers.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
