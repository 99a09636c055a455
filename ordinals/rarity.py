"""Rarity levels of satoshis, derived from their degree notation."""

from __future__ import annotations

import enum
from functools import total_ordering
from typing import Protocol


class _DegreeLike(Protocol):
    hour: int
    minute: int
    second: int
    third: int


@total_ordering
class Rarity(enum.Enum):
    """How rare a satoshi is, ordered from least to most rare."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"
    MYTHIC = "mythic"

    def __str__(self) -> str:
        return self.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rarity):
            return NotImplemented
        members = list(Rarity)
        return members.index(self) < members.index(other)

    def __hash__(self) -> int:
        return hash(self.value)

    @classmethod
    def parse(cls, s: str) -> "Rarity":
        """Parse a rarity from its lower-case name."""
        try:
            return cls(s)
        except ValueError:
            raise ValueError(f"invalid rarity: {s}") from None

    @classmethod
    def from_degree(cls, degree: _DegreeLike) -> "Rarity":
        """Classify a satoshi by the components of its degree."""
        hour, minute, second, third = (
            degree.hour,
            degree.minute,
            degree.second,
            degree.third,
        )
        if hour == 0 and minute == 0 and second == 0 and third == 0:
            return cls.MYTHIC
        if minute == 0 and second == 0 and third == 0:
            return cls.LEGENDARY
        if minute == 0 and third == 0:
            return cls.EPIC
        if second == 0 and third == 0:
            return cls.RARE
        if third == 0:
            return cls.UNCOMMON
        return cls.COMMON