import pytest

from sokoban_engine.board import Board
from sokoban_engine.entities import Kind
from sokoban_engine.errors import IllegalCommandError
from sokoban_engine.geometry import Coordinate, Direction
from sokoban_engine.level import LevelDescriptor
from sokoban_engine.moves import resolve

OPEN = LevelDescriptor([
    "#####",
    "#   #",
    "# @ #",
    "#   #",
    "#####",
])


def board(rows):
    return Board.from_level(LevelDescriptor(rows))


def coords(b):
    return [(e.kind, e.coord) for e in b.entities]


@pytest.mark.parametrize("d, expected", [
    (Direction.NORTH, Coordinate(2, 3)),
    (Direction.SOUTH, Coordinate(2, 1)),
    (Direction.EAST, Coordinate(3, 2)),
    (Direction.WEST, Coordinate(1, 2)),
])
def test_free_move(d, expected):
    b = Board.from_level(OPEN)
    out = resolve(b, d)
    assert b.player.coord == expected
    assert out.player_moved and not out.pushed
    assert out.moves[0].source == Coordinate(2, 2)


def test_north_moves_up_a_text_row():
    b = board(["# #", "#@#", "###"])
    resolve(b, Direction.NORTH)
    assert b.player.coord == Coordinate(1, 2)


def test_push_box_onto_goal():
    b = board(["#####", "#@$.#", "#####"])
    out = resolve(b, Direction.EAST)
    assert b.player.coord == Coordinate(2, 1)
    assert b.box_cells() == {Coordinate(3, 1)}
    assert out.pushed and out.player_moved
    assert {m.kind for m in out.moves} == {Kind.PLAYER, Kind.BOX}


@pytest.mark.parametrize("d", list(Direction)[:4])
def test_walls_block_every_direction(d):
    b = board(["###", "#@#", "###"])
    before = coords(b)
    out = resolve(b, d)
    assert out.rejected
    assert coords(b) == before


def test_push_into_wall_rejected():
    b = board(["####", "#@$#", "####"])
    before = coords(b)
    out = resolve(b, Direction.EAST)
    assert out.rejected and not out.player_moved
    assert coords(b) == before


def test_double_box_push_rejected():
    b = board(["####", "#@$$", "####"])
    before = coords(b)
    out = resolve(b, Direction.EAST)
    assert out.rejected
    assert coords(b) == before


def test_double_box_push_rejected_even_with_space_behind():
    b = board(["#######", "#@$$  #", "#######"])
    before = coords(b)
    assert resolve(b, Direction.EAST).rejected
    assert coords(b) == before


def test_box_with_gap_behind_is_pushed():
    b = board(["#####", "#@$ #", "##  #", "#####"])
    out = resolve(b, Direction.EAST)
    assert out.pushed
    assert b.box_cells() == {Coordinate(3, 2)}


def test_boxes_do_not_move_on_their_own():
    b = board(["#####", "#@ $#", "#####"])
    resolve(b, Direction.EAST)
    assert b.box_cells() == {Coordinate(3, 1)}
    assert b.player.coord == Coordinate(2, 1)


def test_directions_reset_after_step():
    b = board(["####", "#@$$", "####"])
    resolve(b, Direction.EAST)
    assert all(m.direction is Direction.NONE for m in b.movables())
    b = board(["#####", "#@$ #", "#####"])
    resolve(b, Direction.EAST)
    assert all(m.direction is Direction.NONE for m in b.movables())


def test_goal_does_not_block():
    b = board(["####", "#@.#", "####"])
    assert resolve(b, Direction.EAST).player_moved
    assert b.player.coord == Coordinate(2, 1)


def test_player_may_leave_unwalled_grid():
    b = board(["@"])
    resolve(b, Direction.WEST)
    assert b.player.coord == Coordinate(-1, 0)


@pytest.mark.parametrize("bad", [Direction.NONE, "east", None, (1, 0)])
def test_illegal_direction(bad):
    b = Board.from_level(OPEN)
    before = coords(b)
    with pytest.raises(IllegalCommandError):
        resolve(b, bad)
    assert coords(b) == before
