import random

from banditcore.agent import Agent
from banditcore.context import Context
from banditcore.param.backend import BaseStateBackend
from banditcore.pool import Pool
from banditcore.protoc.eps import EpsilonGreedyProtocol
from banditlog import get_logger, run_context
from banditstore.errors import StateNotFoundError

from selectorsvc.config import SelectorSettings

logger = get_logger(__name__)


class SelectionService:
    """serves recommendations from a trained policy. never writes state."""

    def __init__(
        self,
        settings: SelectorSettings,
        backend: BaseStateBackend,
        rng: random.Random | None = None,
    ):
        self._settings = settings
        self._backend = backend
        self._rng = rng or random.Random(settings.seed)
        self._agent: Agent | None = None

    @property
    def agent(self) -> Agent:
        if self._agent is None:
            raise RuntimeError("SelectionService not loaded. Call load() first.")
        return self._agent

    def load(self) -> None:
        logger.info("loading model")
        state = self._backend.load()
        if state is None:
            raise StateNotFoundError()

        self._agent = Agent(
            pool=Pool.from_item_ids(state.arms),
            state=state,
            eps=self._settings.eps,
            protocol=EpsilonGreedyProtocol,
            rng=self._rng,
        )
        logger.info("loaded %d arms across %d contexts", state.num_arms, len(state.contexts))

    def select(self, context: Context) -> str:
        with run_context():
            if not self.agent.state.has_context(context):
                logger.debug("unseen context %s, exploring", context)
            arm = self.agent.select(context)
            logger.info("recommend item: %s", arm.item_id)
            return arm.item_id
