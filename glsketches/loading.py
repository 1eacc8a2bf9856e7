"""A "Now Loading" indicator: cycling dots and a growing and shrinking arc."""

from __future__ import annotations

import math

WINDOW_SCALE = 50
WINDOW_WIDTH = 16 * WINDOW_SCALE
WINDOW_HEIGHT = 9 * WINDOW_SCALE
PHASE_STEP = 0.1
RATE_PHASE_STEP = 0.01
_DOTS = {0: ".", 1: "..", 2: "..."}


class LoadingIndicator:
    """State of the loading screen, advanced one tick at a time."""

    def __init__(self) -> None:
        self.phase = 0.0
        self.rate_phase = 0.0
        self.playing = True
        self.running = True
        self._text = ""

    def step(self) -> None:
        """Advance one tick while playing."""
        if not self.playing:
            return
        self.phase += PHASE_STEP
        self.rate_phase += RATE_PHASE_STEP
        dots = _DOTS.get(int(math.fmod(self.phase, 3)))
        if dots is not None:
            self._text = "Now Loading " + dots

    def text(self) -> str:
        """Return the loading message; empty before the first tick."""
        return self._text

    def arc_rate(self) -> float:
        """Return the fraction of the spinner circle drawn, between 0 and 1."""
        return math.sin(self.rate_phase) ** 2

    def handle_key(self, key: str) -> None:
        """Apply one key press: space pauses, ``q`` quits."""
        if key == "q":
            self.running = False
        elif key == " ":
            self.playing = not self.playing