import random
from datetime import datetime

import pytest

from banditcore.param.backend import InMemoryStateBackend
from banditstore.warehouse import BaseRecordSource, InteractionRecord

from trainersvc.config import TrainerSettings


class ListRecordSource(BaseRecordSource):
    def __init__(self, records):
        self.records = records
        self.calls = 0

    def fetch(self):
        self.calls += 1
        return list(self.records)


@pytest.fixture
def trainer_settings():
    """small, seeded trainer settings"""
    return TrainerSettings(eps=0.1, trials_per_context=500, seed=42)


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def monday_morning():
    return datetime(2024, 3, 4, 9, 30)


@pytest.fixture
def click_records(monday_morning):
    """u-1 on mobile ignores item-a and clicks item-b; u-2 has no timestamp"""
    return [
        InteractionRecord(user_id="u-1", item_id="item-a", impression_time=monday_morning,
                          was_clicked=False, device="mobile"),
        InteractionRecord(user_id="u-1", item_id="item-b", impression_time=monday_morning,
                          was_clicked=True, device="mobile"),
        InteractionRecord(user_id="u-1", item_id="item-a", impression_time=monday_morning,
                          was_clicked=False, device="mobile"),
        InteractionRecord(user_id="u-2", item_id="item-c", impression_time=None,
                          was_clicked=True, device="desktop"),
        InteractionRecord(user_id="u-2", item_id="item-a", impression_time=None,
                          was_clicked=False, device="desktop"),
    ]


@pytest.fixture
def list_source(click_records):
    return ListRecordSource(click_records)


@pytest.fixture
def memory_backend():
    return InMemoryStateBackend()
