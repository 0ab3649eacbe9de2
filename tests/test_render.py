"""Tests for the render module."""

import numpy as np

from sokoban_engine.board import Board
from sokoban_engine.geometry import Direction
from sokoban_engine.moves import resolve
from sokoban_engine.parser import parse_level_str
from sokoban_engine.render import BOX_ON_GOAL, PLAYER, WALL, render_ascii, status_line, to_grid
from sokoban_engine.session import Session

LVL = """
#####
#.@ #
# $ #
# . #
#####
"""


def test_render_round_trips_level():
    lvl = parse_level_str(LVL)
    assert render_ascii(Board.from_level(lvl)).splitlines() == list(lvl.lines)


def test_render_after_push():
    b = Board.from_level(parse_level_str("#####\n#@$.#\n#####"))
    resolve(b, Direction.EAST)
    assert render_ascii(b) == "#####\n# @*#\n#####"


def test_player_on_goal_rendered():
    b = Board.from_level(parse_level_str("#####\n#@.$#\n#####"))
    resolve(b, Direction.EAST)
    assert render_ascii(b.snapshot()).splitlines()[1] == "# +$#"


def test_to_grid_codes():
    b = Board.from_level(parse_level_str("####\n#@*#\n####"))
    grid = to_grid(b)
    assert grid.shape == (3, 4)
    assert grid.dtype == np.int8
    assert grid[1, 1] == PLAYER
    assert grid[1, 2] == BOX_ON_GOAL
    assert (grid[0] == WALL).all()


def test_status_line():
    s = Session([parse_level_str("#####\n#@  #\n#####")])
    s.move(Direction.EAST)
    assert status_line(s.snapshot()) == "Moves: 1 Levels: 1"
