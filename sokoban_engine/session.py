from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Sequence, Set, Tuple

from .board import Board, BoardSnapshot
from .errors import IllegalCommandError, LevelPackError
from .geometry import Direction
from .goal_check import is_solved
from .level import LevelDescriptor
from .moves import MoveOutcome, resolve

__all__ = [
    "Command",
    "Session",
    "SessionSnapshot",
    "StepResult",
]

logger = logging.getLogger(__name__)


class Command(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    RESTART = "restart"
    NEXT_LEVEL = "next_level"
    PREVIOUS_LEVEL = "previous_level"

    @classmethod
    def parse(cls, name: str) -> "Command":
        """'up', 'UP', 'next_level', ... -> Command."""
        if isinstance(name, str):
            try:
                return cls(name.strip().lower())
            except ValueError:
                pass
        raise IllegalCommandError(f"Unknown command: {name!r}")

    @property
    def direction(self) -> Direction:
        return _DIRECTIONS.get(self, Direction.NONE)

    @property
    def is_move(self) -> bool:
        return self in _DIRECTIONS


_DIRECTIONS = {
    Command.UP: Direction.NORTH,
    Command.DOWN: Direction.SOUTH,
    Command.RIGHT: Direction.EAST,
    Command.LEFT: Direction.WEST,
}


@dataclass(frozen=True, slots=True)
class StepResult:
    command: Command
    outcome: Optional[MoveOutcome]
    solved: bool
    level_changed: bool
    current: int
    move_count: int


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    current: int
    level_count: int
    move_count: int
    level_name: str
    board: BoardSnapshot


class Session:
    """
    Level list, current index and move counter, plus the live Board.

    Every command is processed to completion before returning. Level changes
    (win, restart, next, previous) rebuild the board from the descriptor and
    reset the move counter; the index is clamped to the pack, never wrapped.
    """

    def __init__(self, levels: Sequence[LevelDescriptor], current: int = 0,
                 solved: Iterable[int] = ()) -> None:
        self.levels: Tuple[LevelDescriptor, ...] = tuple(levels)
        if not self.levels:
            raise LevelPackError("A session needs at least one level")
        self.solved: Set[int] = {i for i, lvl in enumerate(self.levels) if lvl.solved}
        self.solved.update(solved)
        self.current = self._clamp(current)
        self.move_count = 0
        self.board = Board.from_level(self.levels[self.current])
        logger.info("Session started with %d levels at level %d",
                    len(self.levels), self.current + 1)

    @classmethod
    def from_pack(cls, pack) -> "Session":
        return cls(pack.levels, current=pack.current)

    @property
    def level(self) -> LevelDescriptor:
        return self.levels[self.current]

    def _clamp(self, index: int) -> int:
        return max(0, min(index, len(self.levels) - 1))

    def _activate(self, index: int) -> bool:
        """Rebuilds the board for levels[index]. Returns True if the index changed."""
        index = self._clamp(index)
        board = Board.from_level(self.levels[index])
        changed = index != self.current
        self.current = index
        self.board = board
        self.move_count = 0
        logger.info("Level %d/%d active", index + 1, len(self.levels))
        return changed

    def _result(self, command: Command, outcome: Optional[MoveOutcome] = None,
                solved: bool = False, level_changed: bool = False) -> StepResult:
        return StepResult(command=command, outcome=outcome, solved=solved,
                          level_changed=level_changed, current=self.current,
                          move_count=self.move_count)

    # ---- commands
    def move(self, direction: Direction) -> StepResult:
        outcome = resolve(self.board, direction)
        if outcome.player_moved:
            self.move_count += 1
        command = _COMMANDS[direction]
        if outcome.rejected or not is_solved(self.board):
            return self._result(command, outcome)

        logger.info("Level %d solved in %d moves", self.current + 1, self.move_count)
        self.solved.add(self.current)
        changed = self._activate(self.current + 1)
        return self._result(command, outcome, solved=True, level_changed=changed)

    def restart(self) -> StepResult:
        self._activate(self.current)
        return self._result(Command.RESTART)

    def next_level(self) -> StepResult:
        changed = self._activate(self.current + 1)
        return self._result(Command.NEXT_LEVEL, level_changed=changed)

    def previous_level(self) -> StepResult:
        changed = self._activate(self.current - 1)
        return self._result(Command.PREVIOUS_LEVEL, level_changed=changed)

    def handle(self, command: Command) -> StepResult:
        """Single entry point for decoded input events."""
        if not isinstance(command, Command):
            raise IllegalCommandError(f"Unknown command: {command!r}")
        if command.is_move:
            return self.move(command.direction)
        if command is Command.RESTART:
            return self.restart()
        if command is Command.NEXT_LEVEL:
            return self.next_level()
        return self.previous_level()

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            current=self.current,
            level_count=len(self.levels),
            move_count=self.move_count,
            level_name=self.level.name,
            board=self.board.snapshot(),
        )


_COMMANDS = {d: c for c, d in _DIRECTIONS.items()}
