from .board import Board, BoardSnapshot
from .entities import Kind


def is_solved(board: Board) -> bool:
    """Solved iff the box cells are exactly the goal cells."""
    return board.box_cells() == board.goal_cells()


def snapshot_is_solved(snapshot: BoardSnapshot) -> bool:
    return snapshot.cells(Kind.BOX) == snapshot.cells(Kind.GOAL)
