"""Tilted circles and spirals, and the sketch that shows them together."""

from __future__ import annotations

import math
from typing import Iterator, List, Tuple

from .camera import OrbitCamera
from .coords import Vec3, cart2pol, pol2cart
from .shapes import Mode, Primitive, arrow, axis, circle3d, spiral3d, vortex3d

DEFAULT_TURNS = 10.0
SCENE_VERTEXES = 500
PHASE_STEP = 0.1
RATE_STEP = 0.1


def ellipse(radius: float, theta: float, a: float, b: float) -> Tuple[float, float]:
    """Return the point at angle ``theta`` on an ellipse with axes ``radius*a`` and ``radius*b``."""
    return (radius * a * math.cos(theta), radius * b * math.sin(theta))


def _sweep(vertexes: int, rate: float) -> Iterator[int]:
    """Yield vertex indices until the swept fraction reaches ``rate``."""
    if vertexes <= 0:
        raise ValueError(f"vertexes must be positive, got {vertexes}")
    rate = min(rate, 1.0)
    for i in range(vertexes + 1):
        yield i
        if i >= rate * vertexes:
            break


def _start(fill: bool, center: Vec3) -> Tuple[Mode, List[Vec3]]:
    if fill:
        return Mode.TRIANGLE_FAN, [center]
    return Mode.LINE_STRIP, []


def _turn(cx: float, cz: float, horizontal: float) -> Tuple[float, float]:
    """Rotate ``(cx, cz)`` in the x-z plane by ``horizontal``."""
    norm, angle, elevation = cart2pol(cx, 0, cz)
    x, _, z = pol2cart(norm, angle + horizontal, elevation)
    return x, z


def tilted_circle(
    x0: float,
    y0: float,
    z0: float,
    radius: float,
    horizontal: float,
    vertical: float,
    phase: float,
    vertexes: int,
    rate: float,
    fill: bool,
) -> Primitive:
    """Return a circle tilted by ``vertical`` and turned by ``horizontal``, built from ellipses."""
    mode, vertices = _start(fill, (x0, y0, z0))
    frequency = math.pi * 2 / vertexes if vertexes > 0 else 0.0
    tilt_x = math.cos(vertical + math.pi / 2)
    tilt_y = math.sin(vertical + math.pi / 2)
    for i in _sweep(vertexes, rate):
        theta = i * frequency + phase
        cx, cz = ellipse(radius, theta, tilt_x, 1)
        cy, _ = ellipse(radius, theta, tilt_y, 1)
        x, z = _turn(cx, cz, horizontal)
        vertices.append((x0 + x, y0 + cy, z0 + z))
    return Primitive(mode, tuple(vertices))


def flat_spiral(
    x0: float,
    y0: float,
    z0: float,
    radius: float,
    horizontal: float,
    vertical: float,
    phase: float,
    vertexes: int,
    rate: float,
    fill: bool,
    turns: float,
) -> Primitive:
    """Return a plane spiral widening from the centre to ``radius`` over ``turns`` turns.

    The first vertex sits at zero distance from the centre, where the
    direction is undefined, so its x and z are NaN.
    """
    mode, vertices = _start(fill, (x0, y0, z0))
    frequency = math.pi * 2 * turns / vertexes if vertexes > 0 else 0.0
    tilt_x = math.cos(vertical + math.pi / 2)
    tilt_y = math.sin(vertical + math.pi / 2)
    for i in _sweep(vertexes, rate):
        theta = i * frequency + phase
        length = i * radius / vertexes
        cx = length * tilt_x * math.cos(theta)
        cy = length * tilt_y * math.cos(theta)
        cz = length * math.sin(theta)
        x, z = _turn(cx, cz, horizontal)
        vertices.append((x0 + x, y0 + cy, z0 + z))
    return Primitive(mode, tuple(vertices))


class SpiralScene:
    """Circle, spirals and a vortex that turn with the keyboard and spin over time."""

    def __init__(self) -> None:
        self.increase_rate = math.pi * 5 / 180
        self.horizontal = 0.0
        self.vertical = 0.0
        self.phase = 0.0
        self.rate = 1.0
        self.turns = DEFAULT_TURNS
        self.fill = False
        self.playing = True
        self.running = True
        self.camera = OrbitCamera(self.increase_rate)

    def step(self) -> None:
        """Advance one tick: the shapes spin while playing."""
        if self.playing:
            self.phase += PHASE_STEP

    def handle_key(self, key: str) -> None:
        """Apply one key press.

        ``a``/``d`` and ``w``/``s`` turn the shapes, ``t``/``y`` grow and
        shrink the drawn fraction, ``v``/``c`` add and remove turns, ``f``
        toggles filling, ``r`` resets, space pauses and ``q`` quits; camera
        keys go to the camera.
        """
        step = self.increase_rate
        if key == "a":
            self.horizontal += step
        elif key == "d":
            self.horizontal -= step
        elif key == "w":
            self.vertical += step
        elif key == "s":
            self.vertical -= step
        elif key == "t":
            self.rate = min(self.rate + RATE_STEP, 1.0)
        elif key == "y":
            self.rate = max(self.rate - RATE_STEP, 0.0)
        elif key == "r":
            self.horizontal = 0.0
            self.vertical = 0.0
            self.phase = 0.0
            self.turns = DEFAULT_TURNS
        elif key == "f":
            self.fill = not self.fill
        elif key == "v":
            self.turns += 0.1
        elif key == "c":
            self.turns -= 0.1
        elif key == "q":
            self.running = False
        elif key == " ":
            self.playing = not self.playing
        self.camera.handle_key(key)

    def primitives(self) -> List[Primitive]:
        """Return what one frame draws."""
        h, v, p = self.horizontal, self.vertical, self.phase
        n, rate, fill, turns = SCENE_VERTEXES, self.rate, self.fill, self.turns
        return (
            arrow(0, 0, 0, 100, h, v)
            + axis()
            + [
                circle3d(0, 0, 0, 50, h, v, p, n, rate, fill),
                flat_spiral(0, 0, 0, 50, h, v, p, n, rate, fill, turns),
                spiral3d(150, 0, 0, 50, 50, h, v, p, n, rate, fill, turns),
                vortex3d(0, 0, 150, 50, 50, h, v, p, n, rate, fill, turns),
            ]
        )