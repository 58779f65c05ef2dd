from banditcore.param.backend import BaseStateBackend
from banditcore.param.state import PolicyState
from banditlog import get_logger, run_context
from banditstore.warehouse import BaseRecordSource

from trainersvc.config import TrainerSettings
from trainersvc.trainer import PolicyTrainer

logger = get_logger(__name__)


class TrainerService:
    """fetch records, train a policy and persist it, once."""

    def __init__(
        self,
        settings: TrainerSettings,
        source: BaseRecordSource,
        backend: BaseStateBackend,
    ):
        self._settings = settings
        self._source = source
        self._backend = backend
        self._trainer = PolicyTrainer(settings)

    def run(self) -> PolicyState:
        with run_context() as run_id:
            logger.info("starting training run %s", run_id)
            records = self._source.fetch()
            state = self._trainer.train(records)

            logger.info(
                "saving model with %d contexts via %s",
                len(state.contexts),
                type(self._backend).__name__,
            )
            self._backend.save(state)
            logger.info("training run complete")
            return state
