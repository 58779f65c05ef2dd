from banditlog.config import configure_logging
from banditlog.config import get_logger
from banditlog.context import run_context
from banditlog.context import get_run_id

__all__ = [
    "configure_logging",
    "get_logger",
    "run_context",
    "get_run_id",
]
