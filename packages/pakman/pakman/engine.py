"""Engine - ordered system runner with start hooks and a seeded RNG."""

from __future__ import annotations

import os
import random
from typing import TYPE_CHECKING, Callable

from pakman.types import System, TickContext

if TYPE_CHECKING:
    from pakman.board import Board


class Engine:
    """Runs registered systems against one Board, one tick per ``step``.

    There is no pacing: the caller decides when the next tick happens
    (normally once per player input). Once a system requests a stop the
    round is over and ``step`` does nothing.
    """

    def __init__(self, board: Board, seed: int | None = None) -> None:
        self._board = board
        self._tick_number = 0
        self._systems: list[System] = []
        self._start_hooks: list[Callable[[Board, TickContext], None]] = []
        self._stop_requested: bool = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def board(self) -> Board:
        return self._board

    @property
    def tick_number(self) -> int:
        """Ticks played so far; 0 until the first ``step``."""
        return self._tick_number

    @property
    def seed(self) -> int:
        return self._seed

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Callable[[Board, TickContext], None]) -> None:
        self._start_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _context(self) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            request_stop=self._request_stop,
            random=self._rng,
        )

    def start(self) -> None:
        """Run the start hooks once, at tick 0."""
        ctx = self._context()
        for hook in self._start_hooks:
            hook(self._board, ctx)

    def step(self) -> None:
        """Play one tick, skipping the systems after a stop request."""
        if self._stop_requested:
            return
        self._tick_number += 1
        ctx = self._context()
        for system in self._systems:
            system(self._board, ctx)
            if self._stop_requested:
                break
