"""Neighbor and solidity rules, and player move resolution."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pakman.eating import POWER_BONUS, eat
from pakman.feedback import Cue
from pakman.types import Coord, Direction, OutOfBoundsMove

if TYPE_CHECKING:
    from pakman.board import Board
    from pakman.feedback import Feedback
    from pakman.grid import Grid
    from pakman.occupants import Occupant

logger = logging.getLogger(__name__)


def look(grid: Grid, coord: Coord, direction: Direction) -> Occupant | None:
    """Return the occupant one step from *coord*, or None off the grid.

    Levels are expected to be enclosed by walls, so falling off the grid
    is logged and reported as None; callers treat it as solid.
    """
    try:
        return grid.at(grid.neighbor(coord, direction))
    except OutOfBoundsMove as exc:
        logger.warning("Neighbor lookup %s from %s: %s", direction.name, coord, exc)
        return None


def enterable(occupant: Occupant | None) -> bool:
    return occupant is not None and not occupant.solid


def move_player(
    board: Board,
    direction: Direction,
    feedback: Feedback,
    power_bonus: int = POWER_BONUS,
) -> bool:
    """Resolve one player move attempt. Returns True if the player moved.

    Facing always changes. A blocked move leaves the player in place. An
    accepted move eats the target first, then empties the origin, then
    relocates the player. The power countdown drops by one either way.
    """
    player = board.player
    player.facing = direction
    origin = player.coord

    target = look(board.grid, origin, direction)
    moved = enterable(target)
    if moved:
        if target.edible:
            eat(board, target, feedback, power_bonus)
        feedback.cue(Cue.MOVE)
        board.grid.clear(origin)
        player.coord = direction.step(origin)
    else:
        feedback.cue(Cue.HIT_WALL)

    if player.power > 0:
        player.power -= 1

    feedback.redraw(origin, player.coord)
    return moved
