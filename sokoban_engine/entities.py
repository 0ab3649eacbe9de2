from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from .geometry import Coordinate, Direction

__all__ = [
    "Kind",
    "Entity",
    "Movable",
    "Player",
    "Box",
    "Goal",
    "Wall",
]


class Kind(str, Enum):
    PLAYER = "player"
    BOX = "box"
    GOAL = "goal"
    WALL = "wall"


@dataclass(eq=False, slots=True)
class Entity:
    """A live board occupant. Identity, not value, distinguishes entities."""

    coord: Coordinate

    @property
    def kind(self) -> Kind:
        raise NotImplementedError


@dataclass(eq=False, slots=True)
class Movable(Entity):
    # pending intent, only non-NONE inside a resolution step
    direction: Direction = Direction.NONE

    def commit(self) -> bool:
        """Applies the pending direction. Returns True if the entity moved."""
        if self.direction.is_none:
            return False
        self.coord = self.coord.step(self.direction)
        self.direction = Direction.NONE
        return True


@dataclass(eq=False, slots=True)
class Player(Movable):
    @property
    def kind(self) -> Kind:
        return Kind.PLAYER


@dataclass(eq=False, slots=True)
class Box(Movable):
    @property
    def kind(self) -> Kind:
        return Kind.BOX


@dataclass(eq=False, slots=True)
class Goal(Entity):
    @property
    def kind(self) -> Kind:
        return Kind.GOAL


@dataclass(eq=False, slots=True)
class Wall(Entity):
    @property
    def kind(self) -> Kind:
        return Kind.WALL
