from __future__ import annotations
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List, Optional, Set, Tuple

from .entities import Box, Entity, Goal, Kind, Movable, Player, Wall
from .errors import MalformedLevelError
from .geometry import Coordinate
from .level import (
    LevelDescriptor,
    TOK_WALL,
    PLAYER_TOKENS,
    BOX_TOKENS,
    GOAL_TOKENS,
)

__all__ = [
    "Board",
    "BoardSnapshot",
    "cell_coordinate",
]


def cell_coordinate(row: int, col: int, height: int) -> Coordinate:
    """Text cell (row from top, column) -> grid coordinate with y pointing up."""
    return Coordinate(col, height - 1 - row)


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Read-only view of a board: (kind, coordinate) for every live entity."""

    width: int
    height: int
    entities: Tuple[Tuple[Kind, Coordinate], ...]

    def cells(self, kind: Kind) -> FrozenSet[Coordinate]:
        return frozenset(c for k, c in self.entities if k is kind)

    @property
    def player(self) -> Coordinate:
        return next(c for k, c in self.entities if k is Kind.PLAYER)


class Board:
    """
    Live, mutable set of entities instantiated from one LevelDescriptor.

    Entities are kept in a plain list; the movement resolver works on them
    directly. width/height are the dimensions of the source descriptor.
    """

    def __init__(self, entities: Iterable[Entity], width: int, height: int) -> None:
        self.entities: List[Entity] = list(entities)
        self.width = width
        self.height = height
        players = [e for e in self.entities if isinstance(e, Player)]
        if len(players) != 1:
            raise MalformedLevelError(
                f"Board must hold exactly one player, found {len(players)}")
        self._player = players[0]

    @classmethod
    def from_level(cls, level: LevelDescriptor) -> "Board":
        """Spawns entities for every marker of the descriptor.

        '*' spawns a Box and a Goal, '+' spawns a Player and a Goal.
        Goals come first so that markers sit under the occupants.
        """
        entities: List[Entity] = []
        for r, line in enumerate(level.lines):
            for c, ch in enumerate(line):
                pos = cell_coordinate(r, c, level.height)
                if ch in GOAL_TOKENS:
                    entities.append(Goal(pos))
                if ch in BOX_TOKENS:
                    entities.append(Box(pos))
                elif ch in PLAYER_TOKENS:
                    entities.append(Player(pos))
                elif ch == TOK_WALL:
                    entities.append(Wall(pos))
        return cls(entities, level.width, level.height)

    # ---- typed views
    @property
    def player(self) -> Player:
        return self._player

    @property
    def boxes(self) -> List[Box]:
        return [e for e in self.entities if isinstance(e, Box)]

    @property
    def goals(self) -> List[Goal]:
        return [e for e in self.entities if isinstance(e, Goal)]

    @property
    def walls(self) -> List[Wall]:
        return [e for e in self.entities if isinstance(e, Wall)]

    def movables(self) -> Iterator[Movable]:
        return (e for e in self.entities if isinstance(e, Movable))

    # ---- cell queries
    def wall_cells(self) -> Set[Coordinate]:
        return {w.coord for w in self.walls}

    def box_cells(self) -> Set[Coordinate]:
        return {b.coord for b in self.boxes}

    def goal_cells(self) -> Set[Coordinate]:
        return {g.coord for g in self.goals}

    def box_at(self, coord: Coordinate) -> Optional[Box]:
        for b in self.boxes:
            if b.coord == coord:
                return b
        return None

    def is_wall(self, coord: Coordinate) -> bool:
        return any(w.coord == coord for w in self.walls)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            width=self.width,
            height=self.height,
            entities=tuple((e.kind, e.coord) for e in self.entities),
        )

    def __repr__(self) -> str:
        return (f"Board({self.width}x{self.height}, player={tuple(self.player.coord)}, "
                f"boxes={len(self.boxes)}, goals={len(self.goals)})")
