from __future__ import annotations

import logging
import os
import sys
from typing import IO, Literal

from banditlog.formatters import JSONFormatter
from banditlog.formatters import TextFormatter

LogFormat = Literal["json", "text"]

# chatty at INFO, and the drivers log what matters themselves
_QUIET_LIBRARIES = ("sqlalchemy.engine", "redis")

_configured_services: set[str] = set()


def _resolve_level(service: str, level: str | None) -> int:
    name = level or os.environ.get(f"{service.upper()}_LOG_LEVEL") or os.environ.get("LOG_LEVEL", "INFO")
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(
    service: str,
    level: str | None = None,
    log_format: LogFormat | None = None,
    stream: IO[str] | None = None,
) -> None:
    """install a single stderr handler on the root logger.

    the level comes from the argument, then ``{SERVICE}_LOG_LEVEL``, then
    ``LOG_LEVEL``, then INFO. ``LOG_FORMAT=json`` switches to one json
    object per line. repeated calls for the same service are ignored.
    """
    if service in _configured_services:
        return

    log_level = _resolve_level(service, level)
    fmt = log_format or ("json" if os.environ.get("LOG_FORMAT", "").lower() == "json" else "text")
    formatter = JSONFormatter(service) if fmt == "json" else TextFormatter(service)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    for name in _QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured_services.add(service)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
