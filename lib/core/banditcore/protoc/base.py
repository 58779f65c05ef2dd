from abc import ABC, abstractmethod

from banditcore.param.state import PolicyState


class BaseProtocol(ABC):
    """
    Base class for the decision rules that drive an agent.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @classmethod
    @abstractmethod
    def select(cls, *args, **kwargs) -> int:
        pass

    @classmethod
    @abstractmethod
    def train(cls, *args, **kwargs) -> PolicyState:
        pass

    @classmethod
    def init_params(cls, arms: list[str]) -> PolicyState:
        return PolicyState(arms=list(arms))
