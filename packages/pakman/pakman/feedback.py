"""Feedback channel - redraw requests and audio cues with per-tick flush.

Systems mark cells dirty and queue cues while they mutate the board.
Nothing reaches subscribers until :meth:`Feedback.flush`, which resolves
each dirty cell against the final board state, so a cell touched several
times in one tick is redrawn once, with what actually ended up there.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from pakman.occupants import RGB, color, glyph
from pakman.types import Coord

if TYPE_CHECKING:
    from pakman.board import Board
    from pakman.types import TickContext


class Cue(Enum):
    MOVE = "move"
    EAT = "eat"
    HIT_WALL = "hit-wall"
    INTRO = "intro"


@dataclass(frozen=True)
class Redraw:
    coord: Coord
    glyph: str
    color: RGB


_RedrawHandler = Callable[[Redraw], None]
_CueHandler = Callable[[Cue], None]


class Feedback:

    def __init__(self) -> None:
        self._redraw_handlers: list[_RedrawHandler] = []
        self._cue_handlers: list[_CueHandler] = []
        self._dirty: dict[Coord, None] = {}
        self._cues: list[Cue] = []

    def on_redraw(self, handler: _RedrawHandler) -> None:
        self._redraw_handlers.append(handler)

    def on_cue(self, handler: _CueHandler) -> None:
        self._cue_handlers.append(handler)

    def cue(self, cue: Cue) -> None:
        self._cues.append(cue)

    def redraw(self, *coords: Coord) -> None:
        for coord in coords:
            self._dirty[coord] = None

    def redraw_all(self, board: Board) -> None:
        self.redraw(*board.grid.coords())

    def pending(self) -> tuple[list[Coord], list[Cue]]:
        """Dirty cells and queued cues, in the order they were raised."""
        return list(self._dirty), list(self._cues)

    def flush(self, board: Board) -> list[Redraw]:
        """Dispatch queued cues, then one redraw per dirty cell.

        Returns the redraws that were dispatched.
        """
        cues = self._cues
        dirty = self._dirty
        self._cues = []
        self._dirty = {}

        for cue in cues:
            for handler in self._cue_handlers:
                handler(cue)

        redraws: list[Redraw] = []
        for coord in dirty:
            occupant = board.occupant_at(coord)
            redraws.append(Redraw(coord, glyph(occupant), color(occupant)))
        for event in redraws:
            for handler in self._redraw_handlers:
                handler(event)
        return redraws

    def clear(self) -> None:
        self._cues.clear()
        self._dirty.clear()


def make_feedback_system(feedback: Feedback) -> Callable[[Board, TickContext], None]:
    def feedback_system(board: Board, ctx: TickContext) -> None:
        feedback.flush(board)

    return feedback_system
