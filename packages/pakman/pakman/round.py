"""Round controller and the session phase machine around it."""
from __future__ import annotations

import logging
import random
from enum import Enum
from typing import TYPE_CHECKING, Callable

from pakman.adversaries import make_adversary_system
from pakman.commands import PendingMove, make_command_system
from pakman.eating import POWER_BONUS
from pakman.engine import Engine
from pakman.feedback import Cue, Feedback, make_feedback_system
from pakman.level import LevelDef, get_level, load_level

if TYPE_CHECKING:
    from pakman.board import Board
    from pakman.types import Direction, TickContext

logger = logging.getLogger(__name__)


class Outcome(Enum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"


def judge(board: Board) -> Outcome:
    """Terminal check; a caught player loses even on the last item."""
    if not board.player.alive:
        return Outcome.LOST
    if board.dots_remaining <= 0:
        return Outcome.WON
    return Outcome.PLAYING


def make_outcome_system(
    on_end: Callable[[Outcome], None],
) -> Callable[[Board, TickContext], None]:
    def outcome_system(board: Board, ctx: TickContext) -> None:
        outcome = judge(board)
        if outcome is not Outcome.PLAYING:
            on_end(outcome)
            ctx.request_stop()

    return outcome_system


class Round:
    """One playthrough of one board.

    Systems run in this order each tick: player command, adversary sweep,
    feedback flush, outcome check.
    """

    def __init__(
        self,
        board: Board,
        seed: int | None = None,
        feedback: Feedback | None = None,
        power_bonus: int = POWER_BONUS,
    ) -> None:
        self.board = board
        self.feedback = feedback if feedback is not None else Feedback()
        self.pending = PendingMove()
        self.engine = Engine(board, seed=seed)
        self._outcome = Outcome.PLAYING

        self.engine.add_system(make_command_system(
            self.pending, self.feedback, power_bonus, on_blocked=self._on_blocked,
        ))
        self.engine.add_system(make_adversary_system(self.feedback, power_bonus))
        self.engine.add_system(make_feedback_system(self.feedback))
        self.engine.add_system(make_outcome_system(self._finish))

    @classmethod
    def from_level(
        cls,
        level: LevelDef | int,
        seed: int | None = None,
        feedback: Feedback | None = None,
        power_bonus: int = POWER_BONUS,
    ) -> Round:
        if isinstance(level, int):
            level = get_level(level)
        return cls(load_level(level), seed=seed, feedback=feedback, power_bonus=power_bonus)

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @property
    def ticks(self) -> int:
        return self.engine.tick_number

    def _on_blocked(self, direction: Direction) -> None:
        logger.debug("Move %s blocked at %s", direction.name, self.board.player.coord)

    def _finish(self, outcome: Outcome) -> None:
        self._outcome = outcome
        logger.info(
            "Round %s after %d ticks (%d small items left)",
            outcome.value, self.ticks, self.board.dots_remaining,
        )

    def begin(self) -> None:
        """Paint the whole board and play the intro cue."""
        self.feedback.clear()
        self.feedback.redraw_all(self.board)
        self.feedback.cue(Cue.INTRO)
        self.engine.start()
        self.feedback.flush(self.board)

    def submit(self, direction: Direction | None) -> Outcome:
        """Play one tick in *direction*.

        ``None`` (unrecognised input) is ignored without consuming a tick, as
        is anything submitted after the round has ended.
        """
        if direction is None or self._outcome is not Outcome.PLAYING:
            return self._outcome
        self.pending.submit(direction)
        self.engine.step()
        return self._outcome


class Phase(Enum):
    CHOOSING_LEVEL = "choosing_level"
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


TRANSITIONS: dict[Phase, frozenset[Phase]] = {
    Phase.CHOOSING_LEVEL: frozenset({Phase.PLAYING, Phase.QUIT}),
    Phase.PLAYING: frozenset({Phase.WON, Phase.LOST}),
    Phase.WON: frozenset({Phase.CHOOSING_LEVEL, Phase.QUIT}),
    Phase.LOST: frozenset({Phase.CHOOSING_LEVEL, Phase.QUIT}),
    Phase.QUIT: frozenset(),
}

_OUTCOME_PHASES = {Outcome.WON: Phase.WON, Outcome.LOST: Phase.LOST}


class Session:
    """Level choice, play, replay.

    One Feedback channel outlives the rounds so front-end subscriptions
    survive a replay; everything else is rebuilt per round.
    """

    def __init__(
        self,
        seed: int | None = None,
        feedback: Feedback | None = None,
        power_bonus: int = POWER_BONUS,
    ) -> None:
        self.feedback = feedback if feedback is not None else Feedback()
        self.round: Round | None = None
        self._phase = Phase.CHOOSING_LEVEL
        self._rng = random.Random(seed)
        self._power_bonus = power_bonus
        self._start_hooks: list[Callable[[Board, TickContext], None]] = []

    @property
    def phase(self) -> Phase:
        return self._phase

    def on_start(self, hook: Callable[[Board, TickContext], None]) -> None:
        """Run *hook* at the start of every round, before the first paint."""
        self._start_hooks.append(hook)

    def _transition(self, target: Phase) -> None:
        if target not in TRANSITIONS[self._phase]:
            raise ValueError(
                f"Cannot go from {self._phase.value} to {target.value}"
            )
        logger.debug("Session %s -> %s", self._phase.value, target.value)
        self._phase = target

    def choose_level(self, level: LevelDef | int) -> Round:
        """Start a round. LevelLoadError leaves the session choosing."""
        if Phase.PLAYING not in TRANSITIONS[self._phase]:
            raise ValueError(f"Cannot choose a level while {self._phase.value}")
        self.round = Round.from_level(
            level,
            seed=self._rng.getrandbits(64),
            feedback=self.feedback,
            power_bonus=self._power_bonus,
        )
        for hook in self._start_hooks:
            self.round.engine.on_start(hook)
        self._transition(Phase.PLAYING)
        self.round.begin()
        return self.round

    def submit(self, direction: Direction | None) -> Phase:
        if self._phase is not Phase.PLAYING or self.round is None:
            raise ValueError(f"No round in progress ({self._phase.value})")
        outcome = self.round.submit(direction)
        if outcome is not Outcome.PLAYING:
            self._transition(_OUTCOME_PHASES[outcome])
        return self._phase

    def play_again(self, again: bool) -> Phase:
        self._transition(Phase.CHOOSING_LEVEL if again else Phase.QUIT)
        self.round = None
        return self._phase

    def quit(self) -> Phase:
        self._transition(Phase.QUIT)
        self.round = None
        return self._phase
