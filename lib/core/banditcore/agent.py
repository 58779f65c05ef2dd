from dataclasses import dataclass, field
from typing import Union, List
import random
import uuid

from banditcore import callback
from banditcore.context import Context
from banditcore.param.state import PolicyState
from banditcore.pool import Arm, Pool
from banditcore.protoc.base import BaseProtocol
from banditcore.protoc.eps import EpsilonGreedyProtocol


@dataclass
class Agent:

    pool: Pool = field(metadata={'description': 'ordered arm catalog.'})
    state: PolicyState = field(metadata={'description': 'learned per-context rewards and counts.'})
    eps: float = field(default=0.1, metadata={'description': 'exploration rate in [0, 1].'})
    protocol: type[BaseProtocol] = field(default=EpsilonGreedyProtocol)
    rng: random.Random = field(default_factory=random.Random, repr=False)
    id: str = field(default_factory=lambda: str(uuid.uuid4().hex), metadata={'description': 'unique agent id.'})
    callbacks: List[callback.BaseCallback] = field(default_factory=list)

    def __post_init__(self):
        if not 0.0 <= self.eps <= 1.0:
            raise ValueError(f"eps must be within [0, 1], got {self.eps}")
        if self.pool.item_ids != self.state.arms:
            raise ValueError("pool order does not match the policy state arms")

    def add_callback(self, clb: callback.BaseCallback):
        if not isinstance(clb, callback.BaseCallback):
            raise TypeError("Callback must be an instance of BaseCallback")  # noqa
        self.callbacks.append(clb)

    @callback.register()
    def select(self, context: Context) -> Arm:
        choice = self.protocol.select(self.state, context, self.eps, self.rng)
        return self.pool[choice]

    @callback.register()
    def train(self, context: Context, arm: Arm, reward: Union[int, float]) -> PolicyState:
        return self.protocol.train(
            ps=self.state,
            context=context,
            choice=self.pool.index_of(arm),
            reward=reward
        )
