import click

from banditcore.errors import BanditError
from banditlog import configure_logging
from banditlog import get_logger
from banditstore import build_state_backend
from banditstore.config import StateSettings, WarehouseSettings
from banditstore.warehouse import WarehouseRecordSource

from trainersvc.config import TrainerSettings
from trainersvc.service import TrainerService

logger = get_logger(__name__)


@click.command()
@click.option("--state-path", default=None, help="where to write the policy state (file backend)")
@click.option("--table", default=None, help="warehouse table holding interactions")
@click.option("--trials", default=None, type=int, help="simulated trials per context")
@click.option("--seed", default=None, type=int, help="seed for reproducible training")
def run(state_path: str | None, table: str | None, trials: int | None, seed: int | None) -> None:
    """train the recommendation policy from historical clicks."""
    configure_logging("trainer")

    overrides = {"trials_per_context": trials, "seed": seed}
    settings = TrainerSettings(**{k: v for k, v in overrides.items() if v is not None})
    state_settings = StateSettings(**({"path": state_path} if state_path else {}))
    warehouse_settings = WarehouseSettings(**({"table": table} if table else {}))

    source = WarehouseRecordSource(warehouse_settings)
    backend = build_state_backend(state_settings)
    try:
        TrainerService(settings, source, backend).run()
    except BanditError as e:
        logger.error("training failed: %s", e.detail, extra={"context": e.context})
        raise click.ClickException(e.detail) from e
    finally:
        source.close()
        backend.close()


if __name__ == "__main__":
    run()
