from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RedisSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="REDIS_")

    host: str = "localhost"
    port: int = 6379
    password: str | None = None
    db: int = 0

    @property
    def url(self) -> str:
        auth = f":{self.password}@" if self.password else ""
        return f"redis://{auth}{self.host}:{self.port}/{self.db}"


class StateSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="STATE_")

    backend: Literal["file", "redis"] = "file"
    path: str = "strategy.json"
    redis_key: str = "bandit:policy:default"
    redis: RedisSettings = Field(default_factory=RedisSettings)


class WarehouseSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WAREHOUSE_")

    driver: str = "postgresql+psycopg"
    host: str = "localhost"
    port: int = 5432
    user: str = "bandit"
    password: str = "bandit"
    database: str = "bandit"
    table: str = "interactions"
    table_schema: str | None = None

    # full sqlalchemy url, takes precedence over the fields above
    url: str | None = None

    @property
    def dsn(self) -> str:
        if self.url:
            return self.url
        return f"{self.driver}://{self.user}:{self.password}@{self.host}:{self.port}/{self.database}"
