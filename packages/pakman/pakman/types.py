"""Shared type aliases, directions, and errors for the maze simulation."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

Coord = tuple[int, int]


class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def step(self, coord: Coord) -> Coord:
        """Return the coordinate one cell away in this direction."""
        dx, dy = self.value
        return (coord[0] + dx, coord[1] + dy)


DIRECTIONS: tuple[Direction, ...] = tuple(Direction)


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    request_stop: Callable[[], None]
    random: _random.Random


class LevelLoadError(Exception):
    """Raised when a level resource is missing or malformed."""


class OutOfBoundsMove(IndexError):
    """Raised when a grid lookup falls outside the grid."""

    def __init__(self, coord: Coord, width: int, height: int) -> None:
        self.coord = coord
        super().__init__(f"{coord} out of bounds for {width}x{height} grid")


if TYPE_CHECKING:
    from pakman.board import Board

System = Callable[["Board", TickContext], None]
