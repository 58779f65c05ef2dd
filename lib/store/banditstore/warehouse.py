from abc import ABC, abstractmethod
from datetime import datetime

from pydantic import BaseModel, ValidationError
from sqlalchemy import Select, column, create_engine, select, table
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from banditlog import get_logger

from banditstore.config import WarehouseSettings
from banditstore.errors import DataSourceError

logger = get_logger(__name__)

INTERACTION_COLUMNS = ("user_id", "item_id", "impression_time", "was_clicked", "device")


class InteractionRecord(BaseModel):
    """one labeled impression."""

    user_id: str
    item_id: str
    impression_time: datetime | None = None
    was_clicked: bool = False
    device: str = ""


class BaseRecordSource(ABC):

    @abstractmethod
    def fetch(self) -> list[InteractionRecord]:
        pass


class WarehouseRecordSource(BaseRecordSource):
    """reads every interaction row from a sql table in one query."""

    def __init__(self, settings: WarehouseSettings | None = None, engine: Engine | None = None):
        if settings is None:
            settings = WarehouseSettings()
        self._settings = settings
        self._engine = engine

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = create_engine(self._settings.dsn, pool_pre_ping=True)
        return self._engine

    @property
    def query(self) -> Select:
        # identifiers are quoted by the dialect, never spliced into sql text
        source = table(self._settings.table, schema=self._settings.table_schema)
        return select(*map(column, INTERACTION_COLUMNS)).select_from(source)

    def fetch(self) -> list[InteractionRecord]:
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(self.query).mappings().all()
        except SQLAlchemyError as e:
            raise DataSourceError(f"failed to read {self._settings.table}: {e}") from e

        records = []
        for position, row in enumerate(rows):
            try:
                records.append(InteractionRecord.model_validate(dict(row)))
            except ValidationError as e:
                raise DataSourceError(
                    f"invalid interaction row {position}: {e}",
                    context={"row": position},
                ) from e

        logger.info("fetched %d rows of training data", len(records))
        return records

    def close(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
