from dataclasses import dataclass, field
from uuid import uuid4

from banditcore.context import Context
from banditcore.errors import UnknownArmError


@dataclass
class Arm:
    item_id: str
    id: str = field(default_factory=lambda: str(uuid4()))
    # synthetic training signal, never persisted
    rewards: dict[Context, float] = field(default_factory=dict, repr=False, compare=False)

    def pull(self, context: Context) -> float:
        return self.rewards.get(context, 0.0)

    def accumulate(self, context: Context, delta: float) -> None:
        self.rewards[context] = self.rewards.get(context, 0.0) + delta


@dataclass
class Pool:
    name: str
    id: str = field(default_factory=lambda: str(uuid4()))
    arms: list[Arm] = field(default_factory=list)
    _index: dict[str, int] = field(default_factory=dict, init=False, repr=False, compare=False)
    _by_item: dict[str, Arm] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self):
        arms, self.arms = self.arms, []
        for arm in arms:
            self.add_arm(arm)

    @classmethod
    def from_item_ids(cls, item_ids: list[str], name: str = "catalog") -> "Pool":
        return cls(name=name, arms=[Arm(item_id=item_id) for item_id in item_ids])

    @property
    def is_empty(self) -> bool:
        return len(self.arms) == 0

    @property
    def item_ids(self) -> list[str]:
        return [arm.item_id for arm in self.arms]

    def add_arm(self, arm: Arm) -> None:
        if arm.id in self._index:
            raise ValueError(f"arm {arm.id} already in pool {self.name}")
        self._index[arm.id] = len(self.arms)
        self._by_item.setdefault(arm.item_id, arm)
        self.arms.append(arm)

    def get_or_add(self, item_id: str) -> Arm:
        """return the arm for item_id, creating it on first sight."""
        arm = self._by_item.get(item_id)
        if arm is None:
            arm = Arm(item_id=item_id)
            self.add_arm(arm)
        return arm

    def index_of(self, arm: Arm) -> int:
        try:
            return self._index[arm.id]
        except KeyError:
            raise UnknownArmError(context={"arm_id": arm.id, "item_id": arm.item_id}) from None

    def __getitem__(self, index: int) -> Arm:
        return self.arms[index]

    def __iter__(self):
        return iter(self.arms)

    def __len__(self) -> int:
        return len(self.arms)
