from unittest.mock import Mock

import numpy as np
import pytest
import redis

from banditcore.context import Context
from banditcore.param.state import PolicyState


@pytest.fixture
def trained_state():
    """policy state with a few contexts, including an untouched one"""
    state = PolicyState(arms=["item-b", "item-a", "item-c"])
    morning = Context("u-1", "morning", "monday", "mobile")
    unknown = Context("u-2", "", "", "desktop")
    untouched = Context("u-3", "night", "sunday", "tv")

    state.rewards[morning] = np.array([0.1, 0.91666666666666663, -0.1])
    state.counts[morning] = np.array([12, 9988, 1])
    state.rewards[unknown] = np.array([1 / 3, 0.0, 2.0000000000000004])
    state.counts[unknown] = np.array([3, 0, 7])
    state.init_context(untouched)
    return state


@pytest.fixture
def mock_redis():
    """mocked sync redis client"""
    client = Mock(spec=redis.Redis)
    client.get.return_value = None
    return client
