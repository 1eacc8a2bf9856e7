"""An orbiting camera and the arrow sketch that uses it."""

from __future__ import annotations

import math
from typing import List

from .coords import Vec3, cart2pol, pol2cart
from .shapes import Mode, Primitive, arrow, axis

CAMERA_HOME: Vec3 = (150.0, math.pi / 4, math.pi / 4)
DEFAULT_STEP = math.pi * 5 / 180


class OrbitCamera:
    """A camera looking at the origin, moved over a sphere with the keyboard.

    ``i``/``k`` raise and lower it, ``j``/``l`` turn it around the y axis,
    ``u``/``o`` move it closer and further, and ``r`` puts it back home.
    """

    def __init__(self, step: float = DEFAULT_STEP) -> None:
        self.step = step
        self._position: Vec3 = pol2cart(*CAMERA_HOME)

    def handle_key(self, key: str) -> bool:
        """Apply one key press; return whether the key moved the camera."""
        norm, around, elevation = cart2pol(*self._position)
        handled = True
        if key == "r":
            norm, around, elevation = CAMERA_HOME
        elif key == "i":
            elevation += self.step
        elif key == "k":
            elevation -= self.step
        elif key == "j":
            around += self.step
        elif key == "l":
            around -= self.step
        elif key == "u":
            norm -= 2
        elif key == "o":
            norm += 2
        else:
            handled = False
        self._position = pol2cart(norm, around, elevation)
        return handled

    def reset(self) -> None:
        """Move the camera back to its home position."""
        self._position = pol2cart(*CAMERA_HOME)

    def position(self) -> Vec3:
        """Return the camera's Cartesian position."""
        return self._position


class ArrowScene:
    """An arrow from the origin that is turned, lengthened and shortened with the keyboard."""

    guide_radius = 50.0

    def __init__(self) -> None:
        self.step = math.pi * (10.0 / 360.0)
        self.horizontal = 0.0
        self.vertical = 0.0
        self.arrow_length = 50.0
        self.running = True
        self.camera = OrbitCamera(self.step)

    def handle_key(self, key: str) -> None:
        """Apply one key press.

        ``a``/``d`` and ``w``/``s`` turn the arrow, ``t``/``g`` change its
        length, ``r`` resets, ``q`` quits; camera keys go to the camera.
        """
        if key == "a":
            self.horizontal += self.step
        elif key == "d":
            self.horizontal -= self.step
        elif key == "w":
            self.vertical += self.step
        elif key == "s":
            self.vertical -= self.step
        elif key == "t":
            self.arrow_length += 1
        elif key == "g":
            self.arrow_length -= 1
        elif key == "r":
            self.horizontal = 0.0
            self.vertical = 0.0
        elif key == "q":
            self.running = False
        self.camera.handle_key(key)

    def primitives(self) -> List[Primitive]:
        """Return what one frame draws: axes, angle guides and the arrow."""
        r = self.guide_radius
        h = self.horizontal
        start: Vec3 = (r, 0.0, 0.0)
        swept: Vec3 = (r * math.cos(h), 0.0, r * math.sin(h))
        raised = pol2cart(r, h, self.vertical)
        guides = [
            Primitive(Mode.LINE_STRIP, (start, swept), (0.3, 0.3, 0.3)),
            Primitive(Mode.LINE_STRIP, (swept, raised), (0.7, 0.7, 0.7)),
        ]
        return (
            axis()
            + guides
            + arrow(0, 0, 0, self.arrow_length, self.horizontal, self.vertical)
        )