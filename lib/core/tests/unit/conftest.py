import random

import numpy as np
import pytest

from banditcore.context import Context
from banditcore.param.state import PolicyState
from banditcore.pool import Pool


@pytest.fixture
def rng():
    """seeded random source"""
    return random.Random(1234)


@pytest.fixture
def context():
    return Context(user_id="u-1", time_of_day="morning", weekday="monday", device="mobile")


@pytest.fixture
def unseen_context():
    return Context(user_id="u-404", time_of_day="night", weekday="sunday", device="tv")


@pytest.fixture
def two_item_pool():
    """catalog with ItemA and ItemB"""
    return Pool.from_item_ids(["ItemA", "ItemB"])


@pytest.fixture
def two_item_state(context):
    """ItemB leads for context: rewards [0.2, 0.9], counts [3, 5]"""
    state = PolicyState(arms=["ItemA", "ItemB"])
    state.rewards[context] = np.array([0.2, 0.9])
    state.counts[context] = np.array([3, 5])
    return state


@pytest.fixture
def three_arm_state(context):
    state = PolicyState(arms=["arm-0", "arm-1", "arm-2"])
    state.init_context(context)
    return state
