from dataclasses import dataclass, asdict


@dataclass(frozen=True, order=True)
class Context:
    """Discrete situation a recommendation is made under.

    Contexts are compared and hashed on all four fields, so two interactions
    with identical fields share one bucket of the policy state. An empty
    time_of_day or weekday is the "unknown" bucket.
    """
    user_id: str
    time_of_day: str = ""
    weekday: str = ""
    device: str = ""

    def to_dict(self) -> dict[str, str]:
        return asdict(self)
