"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self

EVENT_NAME_MAX_LENGTH = 20
EVENT_DESCRIPTION_MAX_LENGTH = 150
EVENT_TYPE_NAME_MAX_LENGTH = 15
USER_ID_MAX_LENGTH = 450

# Upper bound of a BigAutoField primary key.
MAX_EVENT_ID = 2**63 - 1


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("EventId must be an integer")
        if self.value < 1:
            raise ValueError("EventId must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value.strip()))

    def __str__(self) -> str:
        return str(self.value)
