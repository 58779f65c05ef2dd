from banditcore.protoc.base import BaseProtocol
from banditcore.protoc.eps import EpsilonGreedyProtocol

__all__ = [
    "BaseProtocol",
    "EpsilonGreedyProtocol",
]
