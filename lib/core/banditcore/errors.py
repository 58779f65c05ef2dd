from __future__ import annotations

from typing import Any


class BanditError(Exception):
    """
    base exception for all bandit errors.

    subclasses define a default detail message; instances can override it
    and attach a context dict for diagnostics.
    """

    detail: str = "bandit error"

    def __init__(self, detail: str | None = None, context: dict[str, Any] | None = None):
        self.detail = detail or self.__class__.detail
        self.context = context or {}
        super().__init__(self.detail)


# precondition violations

class EmptyCatalogError(BanditError):
    detail = "arm catalog is empty"


class UnseenContextError(BanditError):
    detail = "context has no reward slots"


class UnknownArmError(BanditError):
    detail = "arm is not part of the catalog"
