"""Tests for level parsing, board construction and the bundled levels."""

import pytest
from pakman.level import (
    LEVELS,
    LevelDef,
    build_board,
    get_level,
    load_level,
    parse_level,
    read_level_file,
)
from pakman.occupants import Adversary, Empty, PowerItem, SmallItem, Wall
from pakman.types import LevelLoadError

SPACED = """\
+ + + + +
+ . . o +
+ . + . +
+ + + + +
"""


class TestParseLevel:
    def test_dimensions_ignore_spaces(self):
        grid, _ = parse_level(SPACED)
        assert grid.dimensions() == (5, 4)

    def test_tokens(self):
        grid, _ = parse_level(SPACED)
        assert isinstance(grid.at((0, 0)), Wall)
        assert isinstance(grid.at((2, 1)), SmallItem)
        assert isinstance(grid.at((3, 1)), PowerItem)
        assert isinstance(grid.at((2, 2)), Wall)

    def test_every_occupant_knows_its_cell(self):
        grid, _ = parse_level(SPACED)
        for coord, occupant in grid.cells():
            assert occupant.coord == coord

    def test_spawn_forced_empty(self):
        grid, _ = parse_level(SPACED)
        assert grid.at((1, 1)) == Empty((1, 1))

    def test_count_is_dots_minus_one(self):
        # dots at (1,1), (2,1), (1,2), (3,2)
        _, dots = parse_level(SPACED)
        assert dots == 3

    def test_count_decremented_even_without_dot_on_spawn(self):
        _, dots = parse_level("+++++\n+-..+\n+++++")
        assert dots == 1

    def test_unknown_characters_are_empty(self):
        grid, _ = parse_level("++++\n+-x+\n++++")
        assert grid.at((2, 1)) == Empty((2, 1))

    def test_trailing_blank_lines_ignored(self):
        grid, _ = parse_level("+++\n+.+\n+++\n\n\n")
        assert grid.dimensions() == (3, 3)

    def test_crlf_line_endings(self):
        grid, _ = parse_level("+++\r\n+.+\r\n+++\r\n")
        assert grid.dimensions() == (3, 3)

    def test_custom_spawn(self):
        grid, dots = parse_level("+++++\n+...+\n+++++", player_spawn=(3, 1))
        assert grid.at((3, 1)) == Empty((3, 1))
        assert grid.at((1, 1)) == SmallItem((1, 1))
        assert dots == 2

    def test_non_rectangular_raises(self):
        with pytest.raises(LevelLoadError, match="rectangular"):
            parse_level("+++\n+.\n+++")

    def test_empty_text_raises(self):
        with pytest.raises(LevelLoadError):
            parse_level("")

    def test_blank_text_raises(self):
        with pytest.raises(LevelLoadError):
            parse_level("   \n  \n")

    def test_spawn_outside_raises(self):
        with pytest.raises(LevelLoadError, match="Player spawn"):
            parse_level("+++\n+.+\n+++", player_spawn=(5, 5))


class TestBuildBoard:
    def test_player_placed_at_spawn(self):
        board = build_board(SPACED, adversary_spawns=())
        assert board.player.coord == (1, 1)
        assert board.player.alive
        assert board.player.power == 0

    def test_player_is_not_stored_in_grid(self):
        board = build_board(SPACED, adversary_spawns=())
        assert board.grid.at((1, 1)) == Empty((1, 1))
        assert board.occupant_at((1, 1)) is board.player

    def test_adversary_covers_cell(self):
        board = build_board(SPACED, adversary_spawns=((1, 2),))
        adversary = board.adversaries[0]
        assert board.grid.at((1, 2)) is adversary
        assert adversary.understudy == SmallItem((1, 2))
        assert adversary.ident == 1

    def test_adversary_count_includes_covered_dot(self):
        board = build_board(SPACED, adversary_spawns=((1, 2),))
        assert board.dots_remaining == 3

    def test_adversaries_numbered_in_order(self):
        board = build_board(SPACED, adversary_spawns=((1, 2), (3, 2)))
        assert [a.ident for a in board.adversaries] == [1, 2]

    def test_adversary_in_wall_raises(self):
        with pytest.raises(LevelLoadError, match="wall"):
            build_board(SPACED, adversary_spawns=((0, 0),))

    def test_adversary_outside_raises(self):
        with pytest.raises(LevelLoadError, match="outside"):
            build_board(SPACED, adversary_spawns=((9, 9),))

    def test_three_by_three_starts_with_zero_count(self):
        board = build_board("+++\n+.+\n+++", adversary_spawns=())
        assert board.dots_remaining == 0


class TestLevelRegistry:
    def test_get_level(self):
        assert get_level(1) is LEVELS[1]

    @pytest.mark.parametrize("number", [0, 4, -1])
    def test_unknown_level_raises(self, number):
        with pytest.raises(LevelLoadError):
            get_level(number)

    def test_missing_resource_raises(self):
        with pytest.raises(LevelLoadError, match="not found"):
            LevelDef(9, "Missing", "no-such-level.txt").read()

    @pytest.mark.parametrize("number", sorted(LEVELS))
    def test_bundled_level_loads(self, number):
        level = LEVELS[number]
        board = load_level(level)
        grid = board.grid

        assert board.player.coord == level.player_spawn
        assert grid.at(level.player_spawn) == Empty(level.player_spawn)
        assert board.dots_remaining > 0
        assert len(board.adversaries) == len(level.adversary_spawns)
        for adversary in board.adversaries:
            assert grid.at(adversary.coord) is adversary
            assert not isinstance(adversary.understudy, (Wall, Adversary))

    @pytest.mark.parametrize("number", sorted(LEVELS))
    def test_bundled_level_is_enclosed(self, number):
        grid = load_level(LEVELS[number]).grid
        for x in range(grid.width):
            assert isinstance(grid.at((x, 0)), Wall)
            assert isinstance(grid.at((x, grid.height - 1)), Wall)
        for y in range(grid.height):
            assert isinstance(grid.at((0, y)), Wall)
            assert isinstance(grid.at((grid.width - 1, y)), Wall)

    def test_load_level_returns_fresh_boards(self):
        first = load_level(LEVELS[1])
        second = load_level(LEVELS[1])
        assert first is not second
        assert first.grid is not second.grid


class TestReadLevelFile:
    def test_reads_text(self, tmp_path):
        path = tmp_path / "tiny.txt"
        path.write_text("+++\n+.+\n+++\n")
        board = build_board(read_level_file(path), adversary_spawns=())
        assert board.grid.dimensions() == (3, 3)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(LevelLoadError, match="Cannot read"):
            read_level_file(tmp_path / "nope.txt")
