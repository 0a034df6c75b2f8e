"""Occupant kinds - the closed set of things that can sit in a grid cell.

Every kind declares its behaviour through class-level fields rather than
overridden methods:

* ``kind``   -- the :class:`Kind` tag used for dispatch.
* ``solid``  -- blocks entry through normal movement.
* ``edible`` -- may be consumed by :func:`pakman.eating.eat`.

``Empty``, ``Wall``, ``SmallItem`` and ``PowerItem`` are immutable values;
relocating one produces a new value (see :func:`relocated`). ``Adversary``
and ``Player`` are mutable actors that update their own ``coord``.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from pakman.types import Coord, Direction

RGB = tuple[int, int, int]


class Kind(Enum):
    EMPTY = "empty"
    WALL = "wall"
    SMALL_ITEM = "small_item"
    POWER_ITEM = "power_item"
    ADVERSARY = "adversary"
    PLAYER = "player"


@dataclass(frozen=True)
class Empty:
    coord: Coord
    kind: ClassVar[Kind] = Kind.EMPTY
    solid: ClassVar[bool] = False
    edible: ClassVar[bool] = False


@dataclass(frozen=True)
class Wall:
    coord: Coord
    kind: ClassVar[Kind] = Kind.WALL
    solid: ClassVar[bool] = True
    edible: ClassVar[bool] = False


@dataclass(frozen=True)
class SmallItem:
    coord: Coord
    kind: ClassVar[Kind] = Kind.SMALL_ITEM
    solid: ClassVar[bool] = False
    edible: ClassVar[bool] = True


@dataclass(frozen=True)
class PowerItem:
    coord: Coord
    kind: ClassVar[Kind] = Kind.POWER_ITEM
    solid: ClassVar[bool] = False
    edible: ClassVar[bool] = True


@dataclass(eq=False)
class Adversary:
    """A roaming adversary.

    ``understudy`` is the occupant that was in the adversary's cell right
    before it arrived. It is never another Adversary.
    """

    coord: Coord
    ident: int = 0
    understudy: Occupant | None = None
    kind: ClassVar[Kind] = Kind.ADVERSARY
    solid: ClassVar[bool] = True
    edible: ClassVar[bool] = True


@dataclass(eq=False)
class Player:
    coord: Coord
    facing: Direction = Direction.RIGHT
    power: int = 0
    alive: bool = True
    kind: ClassVar[Kind] = Kind.PLAYER
    solid: ClassVar[bool] = False
    edible: ClassVar[bool] = False

    @property
    def empowered(self) -> bool:
        return self.power > 0


Occupant = Union[Empty, Wall, SmallItem, PowerItem, Adversary, Player]
Item = Union[Empty, Wall, SmallItem, PowerItem]

_ITEM_TYPES = (Empty, Wall, SmallItem, PowerItem)

# Presentation tables, keyed by kind.
_GLYPHS: dict[Kind, str] = {
    Kind.EMPTY: " ",
    Kind.WALL: "+",
    Kind.SMALL_ITEM: ".",
    Kind.POWER_ITEM: "o",
    Kind.ADVERSARY: "~",
}

# The mouth opens away from the direction of travel.
_PLAYER_GLYPHS: dict[Direction, str] = {
    Direction.UP: "v",
    Direction.DOWN: "^",
    Direction.LEFT: ">",
    Direction.RIGHT: "<",
}

_COLORS: dict[Kind, RGB] = {
    Kind.EMPTY: (255, 255, 255),
    Kind.WALL: (0, 0, 139),
    Kind.SMALL_ITEM: (0, 200, 0),
    Kind.POWER_ITEM: (255, 0, 255),
    Kind.ADVERSARY: (255, 255, 255),
    Kind.PLAYER: (255, 255, 0),
}

_TOKENS: dict[str, type[Item]] = {
    "+": Wall,
    ".": SmallItem,
    "o": PowerItem,
}


def glyph(occupant: Occupant) -> str:
    """Return the character used to draw *occupant*."""
    if isinstance(occupant, Player):
        return _PLAYER_GLYPHS[occupant.facing]
    return _GLYPHS[occupant.kind]


def color(occupant: Occupant) -> RGB:
    """Return the RGB color used to draw *occupant*."""
    return _COLORS[occupant.kind]


def from_token(token: str, coord: Coord) -> Item:
    """Build the map occupant for one level character.

    Unknown characters map to Empty.
    """
    return _TOKENS.get(token, Empty)(coord)


def relocated(occupant: Occupant, coord: Coord) -> Occupant:
    """Return *occupant* positioned at *coord*.

    Immutable kinds are copied; actors are updated in place.
    """
    if occupant.coord == coord:
        return occupant
    if isinstance(occupant, _ITEM_TYPES):
        return dataclasses.replace(occupant, coord=coord)
    occupant.coord = coord
    return occupant
