"""Eat protocol - what happens when the player meets something edible."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pakman.feedback import Cue
from pakman.occupants import Adversary, Empty, Occupant, PowerItem, SmallItem, relocated

if TYPE_CHECKING:
    from pakman.board import Board
    from pakman.feedback import Feedback

logger = logging.getLogger(__name__)

POWER_BONUS = 14


def eat(
    board: Board,
    target: Occupant,
    feedback: Feedback,
    power_bonus: int = POWER_BONUS,
) -> bool:
    """Let the player consume *target*.

    Items are always eaten. An adversary is eaten only while the player is
    empowered; otherwise the player dies and the board is left untouched.
    Returns True if *target* was consumed.

    Raises TypeError for occupants that are not edible.
    """
    if isinstance(target, (SmallItem, PowerItem)):
        board.grid.clear(target.coord)
        if isinstance(target, SmallItem):
            board.dots_remaining -= 1
        else:
            board.player.power += power_bonus
        feedback.cue(Cue.EAT)
        feedback.redraw(target.coord)
        return True

    if isinstance(target, Adversary):
        player = board.player
        if not player.empowered:
            player.alive = False
            logger.info("Player caught by adversary %d at %s", target.ident, target.coord)
            return False

        coord = target.coord
        under = target.understudy
        restored = Empty(coord) if under is None else relocated(under, coord)
        board.grid.set(coord, restored)
        board.remove_adversary(target)
        feedback.cue(Cue.EAT)
        feedback.redraw(coord)
        logger.debug("Adversary %d eaten at %s", target.ident, coord)
        if restored.edible:
            eat(board, restored, feedback, power_bonus)
        return True

    raise TypeError(f"{type(target).__name__} is not edible")
