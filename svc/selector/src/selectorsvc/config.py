from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SelectorSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="SELECTOR_")

    eps: float = Field(0.1, ge=0.0, le=1.0)
    seed: int | None = None
