"""Structured logging that writes one JSON object per line."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Mapping, MutableMapping
from uuid import uuid4

__all__ = [
    "LOGGER_NAME",
    "JsonLogFormatter",
    "configure_json_logger",
    "flush_handlers",
    "log_event",
]

LOGGER_NAME = "tempconv"


def _jsonable(value: Any) -> Any:
    # Temperatures and units render through their display form.
    as_dict = getattr(value, "as_dict", None)
    if callable(as_dict):
        return as_dict()
    symbol = getattr(value, "symbol", None)
    if isinstance(symbol, str):
        return symbol
    return str(value)


class JsonLogFormatter(logging.Formatter):
    """Format log records as single-line JSON payloads."""

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        payload: MutableMapping[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc)
            .isoformat(timespec="milliseconds")
            .replace("+00:00", "Z"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": message,
        }

        trace_id = getattr(record, "trace_id", None)
        if trace_id:
            payload["trace_id"] = trace_id

        payload["event"] = getattr(record, "event", None) or message

        extra_fields = getattr(record, "extra_fields", None)
        if isinstance(extra_fields, Mapping):
            payload.update(extra_fields)

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=_jsonable)


def configure_json_logger(log_path: Path | None, level: int = logging.INFO) -> logging.Logger:
    """Configure the ``tempconv`` logger with a JSONL file handler.

    Without ``log_path`` a :class:`logging.NullHandler` is installed so library
    and CLI events are silently discarded.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_path is not None:
        log_path = Path(log_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(JsonLogFormatter())
    else:
        handler = logging.NullHandler()

    handler.setLevel(level)
    logger.addHandler(handler)
    return logger


def flush_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


def log_event(
    logger: logging.Logger,
    event: str,
    *,
    trace_id: str | None = None,
    level: int = logging.INFO,
    **fields: Any,
) -> str:
    """Emit ``event`` on ``logger`` and return its trace id.

    A fresh trace id is minted when none is given, so the first event of a
    request starts the correlation chain the following ones reuse.
    """

    trace_id = trace_id or uuid4().hex
    logger.log(level, event, extra={"trace_id": trace_id, "event": event, "extra_fields": fields})
    return trace_id
