from abc import ABC, abstractmethod

from .state import PolicyState


class BaseStateBackend(ABC):

    @abstractmethod
    def load(self) -> PolicyState | None:
        pass
    @abstractmethod
    def save(self, state: PolicyState) -> None:
        pass

    def close(self) -> None:
        """release connections. backends without any keep the no-op."""


class InMemoryStateBackend(BaseStateBackend):

    def __init__(self):
        self.state: PolicyState | None = None

    def load(self) -> PolicyState | None:
        return self.state

    def save(self, state: PolicyState) -> None:
        self.state = state
