"""
Logging configuration for the Newsroom API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called.  Requests are
logged by the middleware in ``main.py``, so uvicorn's own access log is
turned down to warnings to avoid every request appearing twice.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file that receives the same records as the console.
    """
    root = logging.getLogger()
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    if root.handlers:
        # Already configured, e.g. by pytest or a second create_app call.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
