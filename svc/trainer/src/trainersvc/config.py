from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TrainerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="TRAINER_")

    eps: float = Field(0.1, ge=0.0, le=1.0)
    trials_per_context: int = Field(10_000, ge=0)

    click_reward: float = 1.0
    no_click_penalty: float = 0.1

    seed: int | None = None
