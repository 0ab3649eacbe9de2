from __future__ import annotations
from enum import Enum
from typing import NamedTuple, Tuple

__all__ = [
    "Coordinate",
    "Direction",
]


class Coordinate(NamedTuple):
    """Integer grid cell. x grows to the right, y grows upward."""

    x: int
    y: int

    def step(self, direction: "Direction") -> "Coordinate":
        dx, dy = direction.delta
        return Coordinate(self.x + dx, self.y + dy)


class Direction(Enum):
    NORTH = (0, 1)
    SOUTH = (0, -1)
    EAST = (1, 0)
    WEST = (-1, 0)
    NONE = (0, 0)

    @property
    def delta(self) -> Tuple[int, int]:
        return self.value

    @property
    def is_none(self) -> bool:
        return self is Direction.NONE

    @classmethod
    def from_lurd(cls, ch: str) -> "Direction":
        """Maps a LURD solution letter (either case) to a direction."""
        try:
            return _LURD[ch.lower()]
        except KeyError:
            raise ValueError(f"Not a LURD move: {ch!r}") from None


_LURD = {
    "l": Direction.WEST,
    "u": Direction.NORTH,
    "r": Direction.EAST,
    "d": Direction.SOUTH,
}
