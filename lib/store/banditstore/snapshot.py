from pydantic import BaseModel, model_validator

from banditcore.context import Context
from banditcore.param.state import PolicyState
from banditcore.param.var import CountVector, RewardVector


class ContextRecord(BaseModel):
    user_id: str
    time_of_day: str = ""
    weekday: str = ""
    device: str = ""
    rewards: RewardVector
    counts: CountVector

    @model_validator(mode="after")
    def check_vectors(self):
        if len(self.rewards) != len(self.counts):
            raise ValueError("rewards and counts differ in length")
        if (self.counts < 0).any():
            raise ValueError("counts must be non-negative")
        return self

    def to_context(self) -> Context:
        return Context(
            user_id=self.user_id,
            time_of_day=self.time_of_day,
            weekday=self.weekday,
            device=self.device,
        )


class PolicySnapshot(BaseModel):
    """serialized form of a PolicyState. only arm item ids are kept."""

    arms: list[str]
    contexts: list[ContextRecord] = []

    @model_validator(mode="after")
    def check_alignment(self):
        for record in self.contexts:
            if len(record.rewards) != len(self.arms):
                raise ValueError(
                    f"context {record.to_context()} has {len(record.rewards)} slots "
                    f"for {len(self.arms)} arms"
                )
        return self

    @classmethod
    def from_state(cls, state: PolicyState) -> "PolicySnapshot":
        return cls(
            arms=list(state.arms),
            contexts=[
                ContextRecord(
                    **context.to_dict(),
                    rewards=state.rewards[context],
                    counts=state.counts[context],
                )
                for context in state.contexts
            ],
        )

    def to_state(self) -> PolicyState:
        state = PolicyState(arms=list(self.arms))
        for record in self.contexts:
            context = record.to_context()
            state.rewards[context] = record.rewards.copy()
            state.counts[context] = record.counts.copy()
        return state
