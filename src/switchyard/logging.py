"""Logging setup for switchyard.

Uses stdlib ``logging`` throughout. Structured payloads ride along in
``extra={"payload": {...}}``; request-scoped variables set with
``switchyard.context.set_log_variable`` are copied onto every record by
``LogVariablesFilter``.

Nothing here may raise into the dispatcher: the filter never rejects or
fails a record, and stdlib handlers report their own errors through
``Handler.handleError``.
"""

import json
import logging
from typing import Any

from switchyard.config import DispatcherConfig
from switchyard.context import log_variables

ROOT_LOGGER = "switchyard"

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s %(payload)s %(variables)s"


class LogVariablesFilter(logging.Filter):
    """Attach the current log variables and a default payload to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.variables = dict(log_variables())
        if not hasattr(record, "payload"):
            record.payload = {}
        return True


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
            "payload": getattr(record, "payload", {}),
            "variables": getattr(record, "variables", {}),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


def get_logger(name: str) -> logging.Logger:
    """Return the named logger with ``LogVariablesFilter`` attached once."""
    logger = logging.getLogger(name)
    if not any(isinstance(f, LogVariablesFilter) for f in logger.filters):
        logger.addFilter(LogVariablesFilter())
    return logger


def configure_logging(config: DispatcherConfig | None = None) -> logging.Logger:
    """Install a stream handler on the ``switchyard`` logger.

    Replaces a handler installed by an earlier call, so calling this
    twice doesn't duplicate output.
    """
    config = config or DispatcherConfig()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(config.log_level.upper())

    for existing in [h for h in logger.handlers if getattr(h, "_switchyard", False)]:
        logger.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._switchyard = True  # type: ignore[attr-defined]
    handler.addFilter(LogVariablesFilter())
    if config.log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    logger.addHandler(handler)
    return logger
