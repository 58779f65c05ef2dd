from __future__ import annotations

import uuid
from contextvars import ContextVar
from contextlib import contextmanager
from typing import Generator

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)


def get_run_id() -> str | None:
    return _run_id.get()


@contextmanager
def run_context(run_id: str | None = None) -> Generator[str, None, None]:
    """tag every log line of one training run or one selection.

    a fresh hex id is used when run_id is not given. the outer id is
    restored on exit.
    """
    token = _run_id.set(run_id or uuid.uuid4().hex)
    try:
        yield _run_id.get()
    finally:
        _run_id.reset(token)
