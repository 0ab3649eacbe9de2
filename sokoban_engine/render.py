from __future__ import annotations
from typing import Dict, Union

import numpy as np

from .board import Board, BoardSnapshot
from .entities import Kind
from .geometry import Coordinate

# numeric cell codes for to_grid()
EMPTY = 0
WALL = 1
BOX = 2
GOAL = 3
PLAYER = 4
BOX_ON_GOAL = 5
PLAYER_ON_GOAL = 6

_CHARS = {
    EMPTY: " ",
    WALL: "#",
    BOX: "$",
    GOAL: ".",
    PLAYER: "@",
    BOX_ON_GOAL: "*",
    PLAYER_ON_GOAL: "+",
}


def _as_snapshot(board: Union[Board, BoardSnapshot]) -> BoardSnapshot:
    return board.snapshot() if isinstance(board, Board) else board


def _cell_codes(snap: BoardSnapshot) -> Dict[Coordinate, int]:
    codes: Dict[Coordinate, int] = {}
    goals = snap.cells(Kind.GOAL)
    for kind, pos in snap.entities:
        if kind is Kind.WALL:
            codes[pos] = WALL
        elif kind is Kind.BOX:
            codes[pos] = BOX_ON_GOAL if pos in goals else BOX
        elif kind is Kind.PLAYER:
            codes[pos] = PLAYER_ON_GOAL if pos in goals else PLAYER
        elif pos not in codes:
            codes[pos] = GOAL
    return codes


def to_grid(board: Union[Board, BoardSnapshot]) -> np.ndarray:
    """(height, width) int8 array of cell codes, top row first.

    Entities that left the described rectangle are not drawn.
    """
    snap = _as_snapshot(board)
    grid = np.zeros((snap.height, snap.width), dtype=np.int8)
    for pos, code in _cell_codes(snap).items():
        row = snap.height - 1 - pos.y
        if 0 <= row < snap.height and 0 <= pos.x < snap.width:
            grid[row, pos.x] = code
    return grid


def render_ascii(board: Union[Board, BoardSnapshot]) -> str:
    """ASCII visualization of the board in standard notation."""
    grid = to_grid(board)
    return "\n".join("".join(_CHARS[int(code)] for code in row) for row in grid)


def status_line(snapshot) -> str:
    """HUD text for a SessionSnapshot."""
    return f"Moves: {snapshot.move_count} Levels: {snapshot.current + 1}"
