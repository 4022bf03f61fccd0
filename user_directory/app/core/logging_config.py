"""
Logging setup.

Everything logs through the standard ``logging`` module with a logger
per module (``logging.getLogger(__name__)``).  ``setup_logging`` is
called once by ``create_app`` and attaches the handlers to the root
logger, so records from the application and from uvicorn share one
format and one destination.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _with_format(handler: logging.Handler) -> logging.Handler:
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach a console handler, and a file handler if ``logfile`` is set.

    Does nothing when the root logger already has handlers, which
    happens under pytest or when ``create_app`` runs more than once.
    Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(_with_format(logging.StreamHandler()))

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        root.addHandler(_with_format(logging.FileHandler(log_path, encoding="utf-8")))
