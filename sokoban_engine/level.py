from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple

from .errors import MalformedLevelError

__all__ = [
    "LevelDescriptor",
    "TOK_WALL",
    "TOK_GOAL",
    "TOK_BOX",
    "TOK_BOX_ON_GOAL",
    "TOK_PLAYER",
    "TOK_PLAYER_ON_GOAL",
    "TOK_FLOOR",
]

TOK_WALL = "#"
TOK_GOAL = "."
TOK_BOX = "$"
TOK_BOX_ON_GOAL = "*"
TOK_PLAYER = "@"
TOK_PLAYER_ON_GOAL = "+"
TOK_FLOOR = " "

PLAYER_TOKENS = (TOK_PLAYER, TOK_PLAYER_ON_GOAL)
BOX_TOKENS = (TOK_BOX, TOK_BOX_ON_GOAL)
GOAL_TOKENS = (TOK_GOAL, TOK_BOX_ON_GOAL, TOK_PLAYER_ON_GOAL)


@dataclass(frozen=True, slots=True)
class LevelDescriptor:
    """
    Immutable initial layout of one puzzle.

    lines[0] is the top row of the level. Every row has the same length and
    exactly one player marker ('@' or '+') appears in the grid; anything else
    raises MalformedLevelError.
    """

    lines: Tuple[str, ...]
    name: str = ""
    solved: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        # accept any sequence of rows, store a tuple
        object.__setattr__(self, "lines", tuple(self.lines))
        label = f" {self.name!r}" if self.name else ""
        if not self.lines:
            raise MalformedLevelError(f"Level{label} has no rows")
        widths = {len(line) for line in self.lines}
        if len(widths) != 1:
            raise MalformedLevelError(
                f"Level{label} is not rectangular (row widths {sorted(widths)})")
        players = self.player_count
        if players != 1:
            raise MalformedLevelError(
                f"Level{label} must contain exactly one player, found {players}")

    @property
    def width(self) -> int:
        return len(self.lines[0])

    @property
    def height(self) -> int:
        return len(self.lines)

    def _count(self, tokens: Tuple[str, ...]) -> int:
        return sum(1 for line in self.lines for ch in line if ch in tokens)

    @property
    def player_count(self) -> int:
        return self._count(PLAYER_TOKENS)

    @property
    def box_count(self) -> int:
        return self._count(BOX_TOKENS)

    @property
    def goal_count(self) -> int:
        return self._count(GOAL_TOKENS)

    def __str__(self) -> str:
        return "\n".join(self.lines)
