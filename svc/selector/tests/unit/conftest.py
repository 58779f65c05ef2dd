import random

import numpy as np
import pytest

from banditcore.context import Context
from banditcore.param.backend import InMemoryStateBackend
from banditcore.param.state import PolicyState

from selectorsvc.config import SelectorSettings


@pytest.fixture
def known_context():
    return Context(user_id="u-1", time_of_day="evening", weekday="friday", device="mobile")


@pytest.fixture
def policy_state(known_context):
    """ItemB leads for the known context"""
    state = PolicyState(arms=["ItemA", "ItemB"])
    state.rewards[known_context] = np.array([0.2, 0.9])
    state.counts[known_context] = np.array([3, 5])
    return state


@pytest.fixture
def loaded_backend(policy_state):
    backend = InMemoryStateBackend()
    backend.save(policy_state)
    return backend


@pytest.fixture
def greedy_settings():
    return SelectorSettings(eps=0.0, seed=5)


@pytest.fixture
def rng():
    return random.Random(5)
