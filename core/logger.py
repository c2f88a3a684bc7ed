"""Logging setup shared by the launcher entry points.

Everything goes to stderr; the launcher never writes log files. The default
level is WARNING so that a successful launch adds nothing to the child's
output.
"""
import logging
import sys

from .config import config

DEFAULT_FORMAT = "%(levelname)s: %(message)s"

_handler: logging.Handler | None = None


def _resolve_level(level) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).upper())
    if isinstance(resolved, int):
        return resolved
    return logging.WARNING


def setup_logging(level=None, fmt: str = DEFAULT_FORMAT) -> None:
    """Attach a single stderr handler to the root logger.

    Calling it again replaces the handler, binding it to the current
    sys.stderr; the previously bound stream is left untouched.
    """
    global _handler

    if level is None:
        level = config.get("logging.level", "WARNING")

    root = logging.getLogger()
    if _handler is not None:
        root.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(_handler)
    root.setLevel(_resolve_level(level))
