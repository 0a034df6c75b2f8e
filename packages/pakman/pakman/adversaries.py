"""Adversary controller - random walk, understudy bookkeeping, collisions."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from pakman.eating import POWER_BONUS, eat
from pakman.movement import look
from pakman.occupants import Adversary, Empty, Wall, relocated
from pakman.types import DIRECTIONS, Direction

if TYPE_CHECKING:
    import random

    from pakman.board import Board
    from pakman.feedback import Feedback
    from pakman.types import TickContext


def step_adversary(
    board: Board,
    adversary: Adversary,
    direction: Direction,
    feedback: Feedback,
) -> bool:
    """Move *adversary* one cell in *direction* unless a wall is there.

    The understudy goes back into the cell being left. The destination's
    occupant becomes the new understudy, except when it is another
    adversary: then the old understudy is kept. Returns True if it moved.
    """
    grid = board.grid
    target = look(grid, adversary.coord, direction)
    if target is None or isinstance(target, Wall):
        return False

    origin = adversary.coord
    dest = direction.step(origin)
    under = adversary.understudy
    if under is not None and not isinstance(under, Adversary):
        grid.set(origin, relocated(under, origin))
    else:
        grid.set(origin, Empty(origin))
    feedback.redraw(origin)

    if not isinstance(target, Adversary):
        adversary.understudy = target

    adversary.coord = dest
    grid.set(dest, adversary)
    feedback.redraw(dest)
    return True


def move_adversaries(
    board: Board,
    rng: random.Random,
    feedback: Feedback,
    power_bonus: int = POWER_BONUS,
) -> None:
    """Run one adversary sweep, then resolve collisions with the player."""
    for adversary in list(board.adversaries):
        step_adversary(board, adversary, rng.choice(DIRECTIONS), feedback)

    for adversary in list(board.adversaries):
        if adversary.coord == board.player.coord:
            eat(board, adversary, feedback, power_bonus)


def make_adversary_system(
    feedback: Feedback,
    power_bonus: int = POWER_BONUS,
) -> Callable[[Board, TickContext], None]:
    def adversary_system(board: Board, ctx: TickContext) -> None:
        if not board.player.alive:
            return
        move_adversaries(board, ctx.random, feedback, power_bonus)

    return adversary_system
