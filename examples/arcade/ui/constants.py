"""Layout, color, and audio constants."""
from __future__ import annotations

DEFAULT_TILE_SIZE = 24
STATUS_H = 48
FPS = 30

# Window used while no board is loaded (level prompt)
PROMPT_W = 480
PROMPT_H = 240

COLOR_BG = (0, 0, 0)
COLOR_STATUS_BG = (20, 20, 30)
COLOR_TEXT = (255, 255, 255)
COLOR_TEXT_DIM = (150, 150, 160)
COLOR_WIN = (100, 255, 100)
COLOR_LOSE = (255, 80, 80)
COLOR_ERROR = (255, 180, 80)

FONT_NAME = "monospace"

# Audio: (frequency Hz, duration ms) per cue
SAMPLE_RATE = 22050
CUE_TONES: dict[str, list[tuple[int, int]]] = {
    "move": [(1250, 10)],
    "eat": [(8000, 10)],
    "hit-wall": [(37, 10)],
    "intro": [(494, 120), (988, 120), (740, 120), (622, 120), (988, 60), (740, 180)],
}
VOLUME = 0.3
