"""
Logging setup - console and optional file handlers on the root logger.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

_HANDLER_PREFIX = "todo_tasks."
_CONSOLE_HANDLER = _HANDLER_PREFIX + "console"
_FILE_HANDLER = _HANDLER_PREFIX + "file"

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _AccessNoiseFilter(logging.Filter):
    """Keep uvicorn per-request access lines out unless something went wrong."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "uvicorn.access":
            return record.levelno >= logging.WARNING
        return True


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configure the root logger with:
    - Console handler: stderr, filtered
    - File handler: everything at `level`, only when `log_file` is given

    Safe to call more than once: only handlers installed here are replaced,
    anything else on the root logger (pytest capture, uvicorn) is left alone.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        if h.get_name() and h.get_name().startswith(_HANDLER_PREFIX):
            root.removeHandler(h)
            h.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler(sys.stderr)
    ch.set_name(_CONSOLE_HANDLER)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_AccessNoiseFilter())
    root.addHandler(ch)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.set_name(_FILE_HANDLER)
        fh.setLevel(level)
        fh.setFormatter(fmt)
        root.addHandler(fh)
