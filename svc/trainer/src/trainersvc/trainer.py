import random
from dataclasses import dataclass, field
from typing import Iterable

from banditcore.agent import Agent
from banditcore.callback import BaseCallback
from banditcore.context import Context
from banditcore.param.state import PolicyState
from banditcore.pool import Pool
from banditcore.protoc.eps import EpsilonGreedyProtocol
from banditlog import get_logger
from banditstore.warehouse import InteractionRecord

from trainersvc.bucketing import bucket_timestamp
from trainersvc.config import TrainerSettings

logger = get_logger(__name__)


@dataclass
class TrainingSet:
    contexts: list[Context] = field(default_factory=list)
    pool: Pool = field(default_factory=lambda: Pool(name="catalog"))
    rows: int = 0


def build_training_set(
    records: Iterable[InteractionRecord],
    click_reward: float = 1.0,
    no_click_penalty: float = 0.1,
) -> TrainingSet:
    """turn interaction rows into distinct contexts and a first-sight arm catalog.

    each arm accumulates click_reward per click and loses no_click_penalty per
    impression without one, separately for every context.
    """
    ts = TrainingSet()
    seen: dict[Context, None] = {}
    for record in records:
        time_of_day, weekday = bucket_timestamp(record.impression_time)
        context = Context(
            user_id=record.user_id,
            time_of_day=time_of_day,
            weekday=weekday,
            device=record.device,
        )
        seen.setdefault(context, None)

        arm = ts.pool.get_or_add(record.item_id)
        arm.accumulate(context, click_reward if record.was_clicked else -no_click_penalty)
        ts.rows += 1

    ts.contexts = list(seen)
    return ts


class TrialCounter(BaseCallback):
    """tallies simulated trials and the synthetic reward they collected."""

    scope = "trainer"

    def __init__(self):
        self.trials = 0
        self.reward = 0.0

    def on_train_end(self, agent, context, arm, reward, **kwargs):
        self.trials += 1
        self.reward += reward


class PolicyTrainer:
    def __init__(self, settings: TrainerSettings, rng: random.Random | None = None):
        self._settings = settings
        self._rng = rng or random.Random(settings.seed)

    def train(self, records: Iterable[InteractionRecord]) -> PolicyState:
        ts = build_training_set(
            records,
            click_reward=self._settings.click_reward,
            no_click_penalty=self._settings.no_click_penalty,
        )
        logger.info("there are %d arms to choose from", len(ts.pool))
        logger.info("training %d contexts from %d rows", len(ts.contexts), ts.rows)

        state = EpsilonGreedyProtocol.init_params(ts.pool.item_ids)
        agent = Agent(
            pool=ts.pool,
            state=state,
            eps=self._settings.eps,
            protocol=EpsilonGreedyProtocol,
            rng=self._rng,
        )
        counter = TrialCounter()
        agent.add_callback(counter)

        for context in ts.contexts:
            state.init_context(context)
            for _ in range(self._settings.trials_per_context):
                arm = agent.select(context)
                agent.train(context, arm, arm.pull(context))

        logger.info(
            "ran %d trials, mean synthetic reward %.4f",
            counter.trials,
            counter.reward / counter.trials if counter.trials else 0.0,
        )
        # the synthetic rewards live on ts.pool and go out of scope here
        return state
