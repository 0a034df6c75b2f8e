"""Level loading - text layouts to Boards, plus the bundled level registry.

Layout format: one row per line, one character per column. Spaces are
stripped before parsing, so characters may be written space-separated.

    +   wall
    .   small item
    o   power item
    any other character is empty space
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from pakman.board import Board
from pakman.grid import Grid
from pakman.occupants import Player, SmallItem, Wall, from_token
from pakman.types import Coord, LevelLoadError

logger = logging.getLogger(__name__)

PLAYER_SPAWN: Coord = (1, 1)
DEFAULT_ADVERSARY_SPAWNS: tuple[Coord, ...] = ((1, 5),)


@dataclass(frozen=True)
class LevelDef:
    """A bundled level.

    Attributes:
        number: Menu number used by the level prompt.
        name: Display name.
        resource: File name inside the bundled ``levels`` directory.
        player_spawn: Player start cell; forced to empty on load.
        adversary_spawns: Adversary start cells.
    """

    number: int
    name: str
    resource: str
    player_spawn: Coord = PLAYER_SPAWN
    adversary_spawns: tuple[Coord, ...] = DEFAULT_ADVERSARY_SPAWNS

    def read(self) -> str:
        try:
            return (resources.files("pakman") / "levels" / self.resource).read_text()
        except FileNotFoundError as exc:
            raise LevelLoadError(f"Level resource '{self.resource}' not found") from exc


LEVELS: dict[int, LevelDef] = {
    1: LevelDef(1, "Corridors", "level1.txt"),
    2: LevelDef(2, "Crossroads", "level2.txt", adversary_spawns=((1, 5), (19, 5))),
    3: LevelDef(
        3, "Ghost House", "level3.txt",
        adversary_spawns=((1, 5), (12, 10), (14, 10)),
    ),
}


def get_level(number: int) -> LevelDef:
    """Look up a bundled level by menu number."""
    try:
        return LEVELS[number]
    except KeyError:
        raise LevelLoadError(
            f"No level {number}; choose one of {sorted(LEVELS)}"
        ) from None


def read_level_file(path: str | Path) -> str:
    """Read a layout from disk, wrapping I/O failures in LevelLoadError."""
    try:
        return Path(path).read_text()
    except OSError as exc:
        raise LevelLoadError(f"Cannot read level file '{path}': {exc}") from exc


def _rows(text: str) -> list[str]:
    rows = [line.replace(" ", "") for line in text.splitlines()]
    while rows and not rows[-1]:
        rows.pop()
    if not rows:
        raise LevelLoadError("Level is empty")
    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise LevelLoadError(
                f"Level is not rectangular: row {y} has {len(row)} columns, "
                f"expected {width}"
            )
    if width == 0:
        raise LevelLoadError("Level has no columns")
    return rows


def parse_level(text: str, player_spawn: Coord = PLAYER_SPAWN) -> tuple[Grid, int]:
    """Build a Grid from layout text.

    Returns the grid and the starting small-item count. The player spawn
    cell is forced to empty and the count is reduced by one regardless of
    what the layout put there.
    """
    rows = _rows(text)
    grid = Grid(len(rows[0]), len(rows))
    if not grid.contains(player_spawn):
        raise LevelLoadError(
            f"Player spawn {player_spawn} is outside the "
            f"{grid.width}x{grid.height} level"
        )

    dots = 0
    for y, row in enumerate(rows):
        for x, token in enumerate(row):
            occupant = from_token(token, (x, y))
            if isinstance(occupant, SmallItem):
                dots += 1
            grid.set((x, y), occupant)

    grid.clear(player_spawn)
    return grid, dots - 1


def build_board(
    text: str,
    player_spawn: Coord = PLAYER_SPAWN,
    adversary_spawns: tuple[Coord, ...] = DEFAULT_ADVERSARY_SPAWNS,
) -> Board:
    """Parse *text* and place the player and adversaries on it."""
    grid, dots = parse_level(text, player_spawn)
    for coord in adversary_spawns:
        if not grid.contains(coord):
            raise LevelLoadError(
                f"Adversary spawn {coord} is outside the "
                f"{grid.width}x{grid.height} level"
            )
        if isinstance(grid.at(coord), Wall):
            raise LevelLoadError(f"Adversary spawn {coord} is inside a wall")

    board = Board(grid=grid, player=Player(coord=player_spawn), dots_remaining=dots)
    for coord in adversary_spawns:
        board.spawn_adversary(coord)
    return board


def load_level(level: LevelDef) -> Board:
    """Build a fresh Board for a bundled level."""
    board = build_board(level.read(), level.player_spawn, level.adversary_spawns)
    logger.info(
        "Loaded level %d (%s): %dx%d, %d small items, %d adversaries",
        level.number, level.name, board.grid.width, board.grid.height,
        board.dots_remaining, len(board.adversaries),
    )
    return board
