from __future__ import annotations

import json
import logging
from datetime import datetime
from datetime import timezone
from typing import Any

from banditlog.context import get_run_id


def _record_context(record: logging.LogRecord) -> dict[str, Any]:
    # attached with extra={"context": {...}}
    return getattr(record, "context", None) or {}


class JSONFormatter(logging.Formatter):
    """one json object per line."""

    def __init__(self, service: str):
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname,
            "service": self._service,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if run_id := get_run_id():
            log_data["run_id"] = run_id
        if context := _record_context(record):
            log_data["context"] = context
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """human readable lines for terminals, context appended as key=value."""

    def __init__(self, service: str):
        super().__init__()
        self._service = service

    def format(self, record: logging.LogRecord) -> str:
        run_id = get_run_id()
        line = "{time} [{level:<8}] [{service}]{run} {name} - {message}".format(
            time=self.formatTime(record, "%Y-%m-%d %H:%M:%S"),
            level=record.levelname,
            service=self._service,
            run=f" [{run_id[:8]}]" if run_id else "",
            name=record.name,
            message=record.getMessage(),
        )
        context = _record_context(record)
        if context:
            line += " " + " ".join(f"{k}={v}" for k, v in context.items())
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line
