"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class HotelId:
    """Unique identifier for a Hotel."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("HotelId must be a positive integer")

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not value.isdigit():
            raise ValueError(f"Invalid hotel id: {value!r}")
        return cls(value=int(value))


@dataclass(frozen=True)
class RoomId:
    """Unique identifier for a Room."""

    value: int


@dataclass(frozen=True)
class Capacity:
    """Non-negative integer representing how many guests a room holds."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError("Capacity cannot be negative")
