"""Structured JSON logging for the ``boomerang`` logger namespace."""

from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime, timezone
import json
import logging
from typing import IO, Any


ROOT_LOGGER = "boomerang"

# Attributes every LogRecord carries; anything else came in through ``extra``.
_STANDARD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


def _extra_fields(record: logging.LogRecord) -> Iterator[tuple[str, Any]]:
    for key, value in vars(record).items():
        if key in _STANDARD_ATTRS or key.startswith("_"):
            continue
        yield key, value


class JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = dict(_extra_fields(record))
        payload.update(
            ts=datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            level=record.levelname,
            logger=record.name,
            message=record.getMessage(),
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, sort_keys=True, default=str)


def json_handlers(logger: logging.Logger) -> list[logging.Handler]:
    """Return the handlers on ``logger`` that emit Boomerang JSON lines."""

    return [h for h in logger.handlers if isinstance(h.formatter, JsonFormatter)]


def configure_logging(level: str = "INFO", stream: IO[str] | None = None) -> logging.Logger:
    """Install the JSON handler on the root Boomerang logger once.

    Handlers attached by other tools (test runners, frameworks) are left alone
    and do not count as configuration.
    """

    logger = logging.getLogger(ROOT_LOGGER)
    if json_handlers(logger):
        return logger

    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger


def set_level(level: str) -> None:
    configure_logging().setLevel(level.upper())


def get_logger(name: str = ROOT_LOGGER) -> logging.Logger:
    """Return a logger under the configured Boomerang namespace."""

    configure_logging()
    return logging.getLogger(name)


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    level: int = logging.INFO,
    **fields: Any,
) -> None:
    """Log ``event`` with ``fields`` attached as structured attributes."""

    logger.log(level, event, extra={"event": event, **fields})
