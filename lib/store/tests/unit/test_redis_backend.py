import pytest
import redis

from banditstore.config import RedisSettings
from banditstore.errors import PersistenceError
from banditstore.redis.client import RedisStateBackend
from banditstore.snapshot import PolicySnapshot


class TestRedisStateBackend:

    def test_load_missing_key_returns_none(self, mock_redis):
        backend = RedisStateBackend(key="bandit:policy:test", client=mock_redis)

        assert backend.load() is None
        mock_redis.get.assert_called_once_with("bandit:policy:test")

    def test_save_writes_snapshot_json(self, mock_redis, trained_state):
        backend = RedisStateBackend(key="bandit:policy:test", client=mock_redis)

        backend.save(trained_state)

        key, payload = mock_redis.set.call_args[0]
        assert key == "bandit:policy:test"
        assert PolicySnapshot.model_validate_json(payload).arms == trained_state.arms

    def test_load_returns_saved_state(self, mock_redis, trained_state):
        backend = RedisStateBackend(key="k", client=mock_redis)
        backend.save(trained_state)
        mock_redis.get.return_value = mock_redis.set.call_args[0][1].encode()

        restored = backend.load()

        assert restored.arms == trained_state.arms
        assert restored.contexts == trained_state.contexts

    def test_connection_error_on_load_raises_persistence_error(self, mock_redis):
        mock_redis.get.side_effect = redis.ConnectionError("refused")
        backend = RedisStateBackend(key="k", client=mock_redis)

        with pytest.raises(PersistenceError):
            backend.load()

    def test_connection_error_on_save_raises_persistence_error(self, mock_redis, trained_state):
        mock_redis.set.side_effect = redis.ConnectionError("refused")
        backend = RedisStateBackend(key="k", client=mock_redis)

        with pytest.raises(PersistenceError):
            backend.save(trained_state)

    def test_corrupt_value_raises_persistence_error(self, mock_redis):
        mock_redis.get.return_value = b"garbage"
        backend = RedisStateBackend(key="k", client=mock_redis)

        with pytest.raises(PersistenceError):
            backend.load()

    def test_close_releases_client(self, mock_redis):
        backend = RedisStateBackend(key="k", client=mock_redis)

        backend.close()

        mock_redis.close.assert_called_once()


class TestRedisSettings:

    def test_url_without_password(self):
        assert RedisSettings(host="cache", port=6380, db=2).url == "redis://cache:6380/2"

    def test_url_with_password(self):
        assert RedisSettings(password="secret").url == "redis://:secret@localhost:6379/0"
