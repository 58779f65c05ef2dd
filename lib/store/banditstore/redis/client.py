import redis
from pydantic import ValidationError

from banditcore.param.backend import BaseStateBackend
from banditcore.param.state import PolicyState

from banditstore.config import RedisSettings
from banditstore.errors import PersistenceError
from banditstore.snapshot import PolicySnapshot


class RedisStateBackend(BaseStateBackend):
    """policy state as a single json value under one redis key."""

    def __init__(
        self,
        key: str,
        settings: RedisSettings | None = None,
        client: redis.Redis | None = None,
    ):
        if settings is None:
            settings = RedisSettings()
        self._settings = settings
        self._key = key
        self._client = client

    @property
    def key(self) -> str:
        return self._key

    @property
    def client(self) -> redis.Redis:
        if self._client is None:
            self._client = redis.Redis.from_url(self._settings.url)
        return self._client

    def load(self) -> PolicyState | None:
        try:
            data = self.client.get(self._key)
        except redis.RedisError as e:
            raise PersistenceError(f"cannot read redis key {self._key}: {e}") from e
        if data is None:
            return None
        try:
            return PolicySnapshot.model_validate_json(data).to_state()
        except ValidationError as e:
            raise PersistenceError(f"corrupt policy state under {self._key}: {e}") from e

    def save(self, state: PolicyState) -> None:
        payload = PolicySnapshot.from_state(state).model_dump_json()
        try:
            self.client.set(self._key, payload)
        except redis.RedisError as e:
            raise PersistenceError(f"cannot write redis key {self._key}: {e}") from e

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
