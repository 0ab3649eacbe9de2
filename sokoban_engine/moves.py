from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Tuple

from .board import Board
from .entities import Kind, Movable
from .errors import IllegalCommandError
from .geometry import Coordinate, Direction

__all__ = [
    "EntityMove",
    "MoveOutcome",
    "resolve",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EntityMove:
    kind: Kind
    source: Coordinate
    target: Coordinate


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    """What one resolution step committed. Empty moves == rejected step."""

    direction: Direction
    moves: Tuple[EntityMove, ...] = ()

    @property
    def player_moved(self) -> bool:
        return any(m.kind is Kind.PLAYER for m in self.moves)

    @property
    def pushed(self) -> bool:
        return any(m.kind is Kind.BOX for m in self.moves)

    @property
    def rejected(self) -> bool:
        return not self.moves


def _cancel(*entities: Movable) -> None:
    for e in entities:
        e.direction = Direction.NONE


def resolve(board: Board, direction: Direction) -> MoveOutcome:
    """Resolves one directional command on the board, in place.

    Algorithm:
      1) the player takes the direction as pending intent,
      2) a box on the cell in front of the player takes the same direction
         (one box only, the one directly in front),
      3) a wall in front of the player cancels everything; a pushed box
         whose target is a wall or any box (positions before the step)
         cancels both the box and the player,
      4) every entity with a pending direction moves one cell, then all
         directions are reset.
    """
    if not isinstance(direction, Direction) or direction.is_none:
        raise IllegalCommandError(f"Not a move direction: {direction!r}")

    player = board.player
    player.direction = direction

    pushed = board.box_at(player.coord.step(direction))
    if pushed is not None:
        pushed.direction = direction

    walls = board.wall_cells()
    boxes = board.box_cells()
    player_target = player.coord.step(player.direction)

    if player_target in walls:
        if pushed is not None:
            _cancel(pushed)
        _cancel(player)
    elif pushed is not None:
        box_target = pushed.coord.step(pushed.direction)
        if box_target in walls or box_target in boxes:
            _cancel(player, pushed)

    moves = []
    for e in board.movables():
        source = e.coord
        if e.commit():
            moves.append(EntityMove(e.kind, source, e.coord))

    outcome = MoveOutcome(direction=direction, moves=tuple(moves))
    if outcome.rejected:
        logger.debug("Move %s rejected at %s", direction.name, tuple(player.coord))
    else:
        logger.debug("Move %s committed: %s", direction.name,
                     ", ".join(f"{m.kind.value} {tuple(m.source)}->{tuple(m.target)}"
                               for m in outcome.moves))
    return outcome
