"""Logging setup shared by the decision service and the headless CLI.

Everything goes to stderr: ``decide`` writes its actions to stdout, and the
service's uvicorn loggers are routed through the same handler so request
lines and policy lines share one format.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)-7s %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

# uvicorn installs its own handlers unless told otherwise
_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", access_log: bool = False) -> None:
    """Install one stderr handler on the root logger.

    Per-tick policy decisions log at DEBUG, so INFO keeps a busy match quiet.
    uvicorn's access log (one line per ``/action`` call) is muted unless
    *access_log* is set.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _UVICORN_LOGGERS:
        uv = logging.getLogger(name)
        uv.handlers.clear()
        uv.propagate = True
    logging.getLogger("uvicorn.access").setLevel(logging.INFO if access_log else logging.WARNING)
