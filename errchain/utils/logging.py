from __future__ import annotations
"""Rich-backed logger for the errchain command line.

The core modules never log; only the CLI asks for a logger here.
"""
from logging import Logger, getLogger, INFO, DEBUG, WARNING, ERROR

from rich.logging import RichHandler

__all__ = ["get", "log"]

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

log: Logger = getLogger("errchain")


def _ensure_handler(lg: Logger) -> None:
    if not any(isinstance(h, RichHandler) for h in lg.handlers):
        lg.addHandler(RichHandler(rich_tracebacks=True, markup=True, show_path=False))
        lg.propagate = False


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the errchain logger set to *level* (str)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    _ensure_handler(log)
    log.setLevel(lvl)
    return log
