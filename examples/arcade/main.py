"""Pakman arcade - play the maze chase in a pygame window.

Controls:
  1-3         Choose a level
  Arrows/WASD Move (one tick per key press)
  F           Play again after a round
  Q / Escape  Quit
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import pygame

from pakman import LEVELS, Board, LevelLoadError, Phase, Session, TickContext
from pakman.logging_config import configure_logging
from ui.audio import Audio
from ui.board_view import BoardView
from ui.constants import (
    COLOR_BG, COLOR_ERROR, COLOR_LOSE, COLOR_TEXT, COLOR_WIN,
    DEFAULT_TILE_SIZE, FPS, PROMPT_H, PROMPT_W, STATUS_H,
)
from ui.keys import LEVEL_KEYS, PLAY_AGAIN_KEY, QUIT_KEY, direction_for
from ui.status import StatusBar

logger = logging.getLogger("pakman.arcade")

REPLAY_HINT = "Press 'F' to play again or 'Q' to quit"


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Pakman - turn-based maze chase")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--level", type=int, default=None, choices=sorted(LEVELS),
                   help="Start this level directly instead of prompting")
    p.add_argument("--tile-size", type=int, default=DEFAULT_TILE_SIZE,
                   help=f"Cell size in pixels (12-48, default: {DEFAULT_TILE_SIZE})")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    p.add_argument("--log-dir", type=Path, default=Path("logs"),
                   help="Directory for log files (default: ./logs)")
    args = p.parse_args()
    args.tile_size = max(12, min(48, args.tile_size))
    return args


def _prompt_level(status: StatusBar) -> None:
    status.set("Choose a level (1-3)", COLOR_TEXT,
               hint="   ".join(f"{n}: {lvl.name}" for n, lvl in sorted(LEVELS.items())))


def _start_level(session: Session, number: int, status: StatusBar) -> None:
    try:
        session.choose_level(number)
    except LevelLoadError as exc:
        logger.error("%s", exc)
        status.set(str(exc), COLOR_ERROR)
        return
    status.set(f"Level {number}: {LEVELS[number].name}", COLOR_TEXT, hint="Arrows/WASD to move")


def _update_hud(session: Session, status: StatusBar) -> None:
    if session.round is None:
        return
    board = session.round.board
    power = f"   POWER {board.player.power}" if board.player.empowered else ""
    status.set(
        f"Items left: {max(board.dots_remaining, 0)}   Tick {session.round.ticks}{power}",
        COLOR_TEXT,
        hint="Arrows/WASD to move",
    )


def main() -> None:
    args = parse_args()
    configure_logging(args.log_level, args.log_dir)

    pygame.init()
    pygame.display.set_caption("Pakman")
    pygame.display.set_mode((PROMPT_W, PROMPT_H))
    clock = pygame.time.Clock()

    session = Session(seed=args.seed)
    view = BoardView(args.tile_size)
    audio = Audio()
    status = StatusBar()
    session.feedback.on_redraw(view.on_redraw)
    session.feedback.on_cue(audio.on_cue)

    def fit_window(board: Board, ctx: TickContext) -> None:
        width, height = board.grid.dimensions()
        view.reset(width, height)
        grid_w, grid_h = view.pixel_size(width, height)
        pygame.display.set_mode((max(grid_w, PROMPT_W), grid_h + STATUS_H))

    session.on_start(fit_window)

    _prompt_level(status)
    if args.level is not None:
        _start_level(session, args.level, status)

    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
                continue
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                running = False
                continue

            phase = session.phase
            if phase is Phase.CHOOSING_LEVEL:
                if event.key == QUIT_KEY:
                    session.quit()
                    running = False
                elif event.key in LEVEL_KEYS:
                    _start_level(session, LEVEL_KEYS[event.key], status)

            elif phase is Phase.PLAYING:
                phase = session.submit(direction_for(event.key))
                if phase is Phase.WON:
                    status.set("You Win.", COLOR_WIN, hint=REPLAY_HINT)
                elif phase is Phase.LOST:
                    status.set("You Lose.", COLOR_LOSE, hint=REPLAY_HINT)
                else:
                    _update_hud(session, status)

            elif phase in (Phase.WON, Phase.LOST):
                if event.key == PLAY_AGAIN_KEY:
                    session.play_again(True)
                    view.clear()
                    pygame.display.set_mode((PROMPT_W, PROMPT_H))
                    _prompt_level(status)
                elif event.key == QUIT_KEY:
                    session.play_again(False)
                    running = False

        screen = pygame.display.get_surface()
        screen.fill(COLOR_BG)
        view.draw(screen)
        status.draw(screen, screen.get_height() - STATUS_H)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
