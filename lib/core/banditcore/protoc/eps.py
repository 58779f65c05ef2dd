from typing import ClassVar, Union
import random

import numpy as np

from banditcore.context import Context
from banditcore.errors import EmptyCatalogError, UnknownArmError, UnseenContextError
from banditcore.param.state import PolicyState
from banditcore.protoc.base import BaseProtocol


class EpsilonGreedyProtocol(BaseProtocol):

    name: ClassVar[str] = "EpsilonGreedyProtocol"

    @staticmethod
    def select(
            ps: PolicyState,
            context: Context,
            eps: float,
            rng: random.Random,
    ) -> int:
        """
        Pick an arm index for context.

        Explores uniformly with probability eps, and always when context has
        no reward data. Otherwise exploits the arm with the greatest running
        average; ties go to the lowest index.
        """
        if ps.num_arms == 0:
            raise EmptyCatalogError(context={"context": context.to_dict()})

        rewards = ps.rewards.get(context)
        if rng.random() < eps or rewards is None or len(rewards) == 0:
            return rng.randrange(ps.num_arms)
        return int(np.argmax(rewards))

    @classmethod
    def train(
            cls,
            ps: PolicyState,
            context: Context,
            choice: int,
            reward: Union[int, float, np.float64]
    ) -> PolicyState:
        if not ps.has_context(context):
            raise UnseenContextError(context={"context": context.to_dict()})
        if not 0 <= choice < ps.num_arms:
            raise UnknownArmError(context={"choice": choice, "num_arms": ps.num_arms})

        counts = ps.counts[context]
        rewards = ps.rewards[context]

        counts[choice] += 1
        n = int(counts[choice])
        rewards[choice] = (rewards[choice] * (n - 1) + reward) / n

        return ps
