"""Logging setup shared by CLI commands."""

from __future__ import annotations

import json
import logging
import sys

from snakebrain.cli.options import LogFormat

_HANDLER_MARK = "_snakebrain_handler"
_READABLE_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"

# uvicorn loggers and the level they are held at when quieted.
_UVICORN_LEVELS = {"uvicorn.access": logging.WARNING, "uvicorn.error": logging.INFO}


class _JSONLogFormatter(logging.Formatter):
    """One JSON object per line, for log collectors."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry, separators=(",", ":"), ensure_ascii=True)


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == LogFormat.JSON:
        return _JSONLogFormatter(datefmt="%Y-%m-%dT%H:%M:%S")
    return logging.Formatter(fmt=_READABLE_FORMAT, datefmt="%H:%M:%S")


def _configure_logging(
    level: str = "INFO",
    log_format: str = LogFormat.READABLE.value,
    quiet_uvicorn: bool = True,
) -> None:
    """Install the snakebrain stderr handler on the root logger.

    Safe to call more than once: a handler installed by an earlier call is
    replaced, handlers added by anyone else are left alone.
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        if getattr(existing, _HANDLER_MARK, False):
            root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    setattr(handler, _HANDLER_MARK, True)
    handler.setFormatter(_build_formatter(log_format))
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    if quiet_uvicorn:
        for name, uvicorn_level in _UVICORN_LEVELS.items():
            logging.getLogger(name).setLevel(uvicorn_level)
