from dataclasses import dataclass, field

import numpy as np

from banditcore.context import Context


@dataclass
class PolicyState:
    """Learned per-context model.

    For every context seen during training, ``rewards[ctx]`` holds the running
    average reward and ``counts[ctx]`` the pull count of each arm. Both are
    indexed positionally by ``arms``, so the arm order must never change once
    a context has slots.
    """

    arms: list[str] = field(default_factory=list)
    rewards: dict[Context, np.ndarray] = field(default_factory=dict)
    counts: dict[Context, np.ndarray] = field(default_factory=dict)

    @property
    def num_arms(self) -> int:
        return len(self.arms)

    @property
    def contexts(self) -> list[Context]:
        return list(self.rewards.keys())

    def has_context(self, context: Context) -> bool:
        return context in self.rewards

    def init_context(self, context: Context) -> bool:
        """allocate zeroed slots for context. existing slots are kept."""
        if context in self.rewards:
            return False
        self.rewards[context] = np.zeros(self.num_arms, dtype=np.float64)
        self.counts[context] = np.zeros(self.num_arms, dtype=np.int64)
        return True
