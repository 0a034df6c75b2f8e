"""Synthesized beeps for feedback cues."""
from __future__ import annotations

import logging
import math
from array import array

import pygame

from pakman import Cue
from ui.constants import CUE_TONES, SAMPLE_RATE, VOLUME

logger = logging.getLogger(__name__)


def _tone(frequency: int, duration_ms: int) -> array:
    count = max(1, SAMPLE_RATE * duration_ms // 1000)
    amplitude = int(32767 * VOLUME)
    period = SAMPLE_RATE / frequency
    # Square wave
    return array("h", (
        amplitude if math.fmod(i, period) < period / 2 else -amplitude
        for i in range(count)
    ))


class Audio:
    """Plays one short sound per cue. Silent if the mixer is unavailable."""

    def __init__(self) -> None:
        self._sounds: dict[Cue, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
        except pygame.error as exc:
            logger.warning("Audio disabled: %s", exc)
            return
        for cue in Cue:
            samples = array("h")
            for frequency, duration in CUE_TONES[cue.value]:
                samples.extend(_tone(frequency, duration))
            self._sounds[cue] = pygame.mixer.Sound(buffer=samples.tobytes())

    @property
    def enabled(self) -> bool:
        return bool(self._sounds)

    def on_cue(self, cue: Cue) -> None:
        sound = self._sounds.get(cue)
        if sound is not None:
            sound.play()
