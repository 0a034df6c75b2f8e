"""Player input - the direction waiting for the next tick."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from pakman.eating import POWER_BONUS
from pakman.movement import move_player

if TYPE_CHECKING:
    from pakman.board import Board
    from pakman.feedback import Feedback
    from pakman.types import Direction, TickContext


class PendingMove:
    """One slot for the player's next direction.

    A tick is played per key press, so a later ``submit`` before the
    tick simply replaces the earlier one.
    """

    def __init__(self) -> None:
        self._direction: Direction | None = None

    def submit(self, direction: Direction) -> None:
        self._direction = direction

    def take(self) -> Direction | None:
        direction, self._direction = self._direction, None
        return direction


def make_command_system(
    pending: PendingMove,
    feedback: Feedback,
    power_bonus: int = POWER_BONUS,
    on_blocked: Callable[[Direction], None] | None = None,
) -> Callable[[Board, TickContext], None]:
    """Return a system that plays the pending move, if any.

    ``on_blocked(direction)`` fires when the player bumps into something
    solid or the edge of the grid.
    """

    def command_system(board: Board, ctx: TickContext) -> None:
        direction = pending.take()
        if direction is None or not board.player.alive:
            return
        moved = move_player(board, direction, feedback, power_bonus)
        if not moved and on_blocked is not None:
            on_blocked(direction)

    return command_system
