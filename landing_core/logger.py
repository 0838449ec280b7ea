"""
JSON logging for the landing page API.

Every record is written as one JSON line with `timestamp`, `level`, `name`
and `message`, plus `exception` when a traceback is attached and `context`
for the keyword arguments passed to the helpers below. `LOG_LEVEL` sets the
level; `DEBUG=true` forces DEBUG.
"""

import json
import logging
import os
from typing import Any, Callable, Dict, Optional

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
if os.environ.get("DEBUG", "false").lower() == "true":
    LOG_LEVEL = "DEBUG"

# Attributes every LogRecord carries; anything else came in through `extra`
_RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Formats log records as single-line JSON documents."""

    def format(self, record: logging.LogRecord) -> str:
        log_record: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)

        log_record.update(
            (key, value) for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS
        )
        return json.dumps(log_record, default=str)


def get_logger(name: str) -> logging.Logger:
    """
    Return the named logger with a JSON stream handler attached once.

    Args:
        name: The name of the logger, typically __name__.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
    return logger


logger = get_logger("landing_api")


def _log(level: int, msg: str, exc_info: bool = False, **context: Any) -> None:
    extra = {"context": context} if context else {}
    logger.log(level, msg, extra=extra, exc_info=exc_info)


def _at(level: int) -> Callable[..., None]:
    def log(msg: str, **context: Any) -> None:
        _log(level, msg, **context)
    return log


info = _at(logging.INFO)
warning = _at(logging.WARNING)
error = _at(logging.ERROR)


def exception(msg: str, exc: Optional[BaseException] = None, **context: Any) -> None:
    """
    Log an error with the exception's type, message and traceback.

    Call from inside the ``except`` block handling `exc`.
    """
    if exc is not None:
        context["exception_type"] = type(exc).__name__
        context["exception_message"] = str(exc)
    _log(logging.ERROR, msg, exc_info=exc is not None, **context)
