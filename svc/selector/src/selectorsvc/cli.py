import click

from banditcore.context import Context
from banditcore.errors import BanditError
from banditlog import configure_logging
from banditlog import get_logger
from banditstore import build_state_backend
from banditstore.config import StateSettings

from selectorsvc.config import SelectorSettings
from selectorsvc.selector import SelectionService

logger = get_logger(__name__)


@click.command()
@click.option("--user", "user_id", default="", help="user id")
@click.option("--time", "time_of_day", default="", help="time of day [morning|afternoon|evening|night]")
@click.option("--weekday", default="", help="weekday, e.g. monday")
@click.option("--device", default="", help="device")
@click.option("--state-path", default=None, help="policy state to read (file backend)")
@click.option("--seed", default=None, type=int, help="seed for reproducible exploration")
def run(
    user_id: str,
    time_of_day: str,
    weekday: str,
    device: str,
    state_path: str | None,
    seed: int | None,
) -> None:
    """recommend one item for the given context."""
    configure_logging("selector")

    settings = SelectorSettings(**({"seed": seed} if seed is not None else {}))
    state_settings = StateSettings(**({"path": state_path} if state_path else {}))

    backend = build_state_backend(state_settings)
    service = SelectionService(settings, backend)
    context = Context(
        user_id=user_id,
        time_of_day=time_of_day,
        weekday=weekday,
        device=device,
    )
    try:
        service.load()
        item_id = service.select(context)
    except BanditError as e:
        logger.error("selection failed: %s", e.detail, extra={"context": e.context})
        raise click.ClickException(e.detail) from e
    finally:
        backend.close()

    click.echo(item_id)


if __name__ == "__main__":
    run()
