from banditcore.param.backend import BaseStateBackend

from banditstore.config import RedisSettings, StateSettings, WarehouseSettings
from banditstore.errors import DataSourceError, PersistenceError, StateNotFoundError
from banditstore.file import FileStateBackend
from banditstore.redis.client import RedisStateBackend
from banditstore.snapshot import PolicySnapshot
from banditstore.warehouse import BaseRecordSource, InteractionRecord, WarehouseRecordSource


def build_state_backend(settings: StateSettings | None = None) -> BaseStateBackend:
    if settings is None:
        settings = StateSettings()
    if settings.backend == "redis":
        return RedisStateBackend(key=settings.redis_key, settings=settings.redis)
    return FileStateBackend(settings.path)


__all__ = [
    # Persistence
    "build_state_backend",
    "FileStateBackend",
    "RedisStateBackend",
    "PolicySnapshot",
    # Training records
    "BaseRecordSource",
    "InteractionRecord",
    "WarehouseRecordSource",
    # Errors
    "DataSourceError",
    "PersistenceError",
    "StateNotFoundError",
    # Config
    "RedisSettings",
    "StateSettings",
    "WarehouseSettings",
]
