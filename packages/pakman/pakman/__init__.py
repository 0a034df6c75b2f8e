"""pakman - A turn-based maze chase simulation."""

from pakman.board import Board
from pakman.engine import Engine
from pakman.feedback import Cue, Feedback, Redraw
from pakman.grid import Grid
from pakman.level import LEVELS, LevelDef, build_board, get_level, load_level
from pakman.occupants import Adversary, Empty, Player, PowerItem, SmallItem, Wall
from pakman.round import Outcome, Phase, Round, Session
from pakman.types import Coord, Direction, LevelLoadError, OutOfBoundsMove, TickContext

__all__ = [
    "Board",
    "Engine",
    "Grid",
    "Feedback",
    "Cue",
    "Redraw",
    "LEVELS",
    "LevelDef",
    "build_board",
    "get_level",
    "load_level",
    "Empty",
    "Wall",
    "SmallItem",
    "PowerItem",
    "Adversary",
    "Player",
    "Round",
    "Session",
    "Outcome",
    "Phase",
    "Coord",
    "Direction",
    "TickContext",
    "LevelLoadError",
    "OutOfBoundsMove",
]
