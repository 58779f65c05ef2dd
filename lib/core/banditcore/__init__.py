from banditcore.agent import Agent
from banditcore.context import Context
from banditcore.param.state import PolicyState
from banditcore.pool import Arm, Pool
from banditcore.protoc import EpsilonGreedyProtocol

__all__ = [
    "Agent",
    "Arm",
    "Context",
    "EpsilonGreedyProtocol",
    "PolicyState",
    "Pool",
]
