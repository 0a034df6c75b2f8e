"""Grid - the authoritative map layer, one occupant per cell."""
from __future__ import annotations

from typing import Iterator

from pakman.occupants import Empty, Occupant, glyph
from pakman.types import Coord, Direction, OutOfBoundsMove


class Grid:
    """Rectangular field of occupants.

    Every in-bounds coordinate holds exactly one occupant. A new grid is
    filled with :class:`Empty`. ``set`` overwrites unconditionally, so
    callers moving something out of a cell must put an Empty back.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells: dict[Coord, Occupant] = {
            (x, y): Empty((x, y)) for y in range(height) for x in range(width)
        }

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def dimensions(self) -> tuple[int, int]:
        return (self._width, self._height)

    def contains(self, coord: Coord) -> bool:
        x, y = coord
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_bounds(self, coord: Coord) -> None:
        if not self.contains(coord):
            raise OutOfBoundsMove(coord, self._width, self._height)

    def at(self, coord: Coord) -> Occupant:
        self._check_bounds(coord)
        return self._cells[coord]

    def set(self, coord: Coord, occupant: Occupant) -> None:
        self._check_bounds(coord)
        self._cells[coord] = occupant

    def clear(self, coord: Coord) -> None:
        """Put an Empty at *coord*."""
        self.set(coord, Empty(coord))

    def neighbor(self, coord: Coord, direction: Direction) -> Coord:
        """Return the adjacent coordinate; no wrap-around.

        Raises OutOfBoundsMove when the step would leave the grid.
        """
        target = direction.step(coord)
        self._check_bounds(target)
        return target

    def coords(self) -> Iterator[Coord]:
        """Yield every coordinate in row-major order."""
        for y in range(self._height):
            for x in range(self._width):
                yield (x, y)

    def cells(self) -> Iterator[tuple[Coord, Occupant]]:
        for coord in self.coords():
            yield coord, self._cells[coord]

    def count(self, occupant_type: type) -> int:
        """Number of cells holding an occupant of *occupant_type*."""
        return sum(1 for occ in self._cells.values() if isinstance(occ, occupant_type))

    def rows(self) -> list[str]:
        """Render the grid as level text, one string per row."""
        return [
            "".join(glyph(self._cells[(x, y)]) for x in range(self._width))
            for y in range(self._height)
        ]
