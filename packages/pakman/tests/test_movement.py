"""Tests for neighbor lookups and player move resolution."""

import logging

import pytest
from pakman.feedback import Cue, Feedback
from pakman.level import build_board
from pakman.movement import enterable, look, move_player
from pakman.occupants import Adversary, Empty, PowerItem, SmallItem, Wall
from pakman.types import Direction

# five dots, one under the (1,1) spawn; power at (2,2)
LAYOUT = """\
+++++
+...+
+.o.+
+++++
"""


@pytest.fixture
def board():
    return build_board(LAYOUT, adversary_spawns=())


@pytest.fixture
def feedback():
    return Feedback()


class TestLook:
    def test_returns_neighbor(self, board):
        assert look(board.grid, (1, 1), Direction.RIGHT) == SmallItem((2, 1))
        assert isinstance(look(board.grid, (1, 1), Direction.UP), Wall)

    def test_off_grid_is_none(self, caplog):
        board = build_board("..\n..", player_spawn=(0, 0), adversary_spawns=())
        with caplog.at_level(logging.WARNING, logger="pakman.movement"):
            assert look(board.grid, (1, 1), Direction.RIGHT) is None
        assert "out of bounds" in caplog.text


@pytest.mark.parametrize(
    "occupant, expected",
    [
        (None, False),
        (Empty((0, 0)), True),
        (SmallItem((0, 0)), True),
        (PowerItem((0, 0)), True),
        (Wall((0, 0)), False),
        (Adversary((0, 0)), False),
    ],
)
def test_enterable(occupant, expected):
    assert enterable(occupant) is expected


class TestMovePlayer:
    def test_move_onto_dot(self, board, feedback):
        assert move_player(board, Direction.RIGHT, feedback)
        assert board.player.coord == (2, 1)
        assert board.grid.at((2, 1)) == Empty((2, 1))
        assert board.grid.at((1, 1)) == Empty((1, 1))
        assert board.dots_remaining == 3

    def test_eat_cue_precedes_move_cue(self, board, feedback):
        move_player(board, Direction.RIGHT, feedback)
        coords, cues = feedback.pending()
        assert cues == [Cue.EAT, Cue.MOVE]
        assert set(coords) == {(1, 1), (2, 1)}

    def test_move_onto_empty(self, board, feedback):
        move_player(board, Direction.RIGHT, feedback)
        feedback.clear()
        assert move_player(board, Direction.LEFT, feedback)
        assert board.player.coord == (1, 1)
        assert board.dots_remaining == 3
        assert feedback.pending()[1] == [Cue.MOVE]

    def test_wall_blocks(self, board, feedback):
        assert not move_player(board, Direction.UP, feedback)
        assert board.player.coord == (1, 1)
        assert feedback.pending()[1] == [Cue.HIT_WALL]

    def test_facing_changes_even_when_blocked(self, board, feedback):
        move_player(board, Direction.UP, feedback)
        assert board.player.facing is Direction.UP

    def test_adversary_blocks_player(self, feedback):
        board = build_board(LAYOUT, adversary_spawns=((2, 1),))
        assert not move_player(board, Direction.RIGHT, feedback)
        assert board.player.coord == (1, 1)
        assert board.player.alive
        assert board.adversaries

    def test_off_grid_is_blocked(self, feedback):
        board = build_board("..\n..", adversary_spawns=())
        assert not move_player(board, Direction.RIGHT, feedback)
        assert board.player.coord == (1, 1)
        assert feedback.pending()[1] == [Cue.HIT_WALL]

    def test_power_item_grants_bonus_minus_this_tick(self, board, feedback):
        move_player(board, Direction.DOWN, feedback)
        assert board.player.coord == (1, 2)
        move_player(board, Direction.RIGHT, feedback)
        assert board.player.coord == (2, 2)
        assert board.player.power == 13
        assert board.dots_remaining == 3

    def test_custom_power_bonus(self, board, feedback):
        move_player(board, Direction.DOWN, feedback)
        move_player(board, Direction.RIGHT, feedback, power_bonus=5)
        assert board.player.power == 4

    def test_power_counts_down_when_blocked(self, board, feedback):
        board.player.power = 5
        move_player(board, Direction.UP, feedback)
        assert board.player.power == 4

    def test_power_never_negative(self, board, feedback):
        move_player(board, Direction.UP, feedback)
        assert board.player.power == 0

    def test_player_cell_stays_empty(self, board, feedback):
        for direction in (Direction.RIGHT, Direction.RIGHT, Direction.DOWN, Direction.LEFT):
            move_player(board, direction, feedback)
            assert board.grid.at(board.player.coord) == Empty(board.player.coord)
