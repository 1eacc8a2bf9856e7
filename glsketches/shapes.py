"""Geometry for the drawing primitives used by the sketches.

Each function works out the vertices that would be sent to the renderer
and returns them as :class:`Primitive` values, so they can be drawn by any
backend or inspected directly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Tuple

from .coords import Vec3, cart2pol, pol2cart

WHITE: Vec3 = (1.0, 1.0, 1.0)
DEFAULT_AXIS_LENGTH = 1000.0


class Mode(Enum):
    """How a primitive's vertices are joined."""

    LINES = "lines"
    LINE_STRIP = "line_strip"
    LINE_LOOP = "line_loop"
    TRIANGLE_FAN = "triangle_fan"
    QUADS = "quads"
    QUAD_STRIP = "quad_strip"


@dataclass(frozen=True)
class Primitive:
    """A run of vertices drawn in one mode and colour."""

    mode: Mode
    vertices: Tuple[Vec3, ...]
    color: Vec3 = field(default=WHITE)


def _add(*vectors: Vec3) -> Vec3:
    return tuple(sum(parts) for parts in zip(*vectors))  # type: ignore[return-value]


def _scale(factor: float, vector: Vec3) -> Vec3:
    return tuple(factor * part for part in vector)  # type: ignore[return-value]


def _sweep(vertexes: int, rate: float) -> Iterator[int]:
    """Yield vertex indices until the swept fraction reaches ``rate``."""
    if vertexes <= 0:
        raise ValueError(f"vertexes must be positive, got {vertexes}")
    rate = min(rate, 1.0)
    for i in range(vertexes + 1):
        yield i
        if i >= rate * vertexes:
            break


def _fan_or_strip(fill: bool, center: Vec3) -> Tuple[Mode, List[Vec3]]:
    if fill:
        return Mode.TRIANGLE_FAN, [center]
    return Mode.LINE_STRIP, []


def _tilted_ring(radius: float, horizontal: float, vertical: float, theta: float) -> Vec3:
    """Point on a circle tilted by ``vertical`` and turned by ``horizontal``."""
    cx = radius * math.cos(vertical + math.pi / 2) * math.cos(theta)
    cy = radius * math.sin(vertical + math.pi / 2) * math.cos(theta)
    cz = radius * math.sin(theta)
    norm, angle, elevation = cart2pol(cx, 0, cz)
    x, _, z = pol2cart(norm, angle + horizontal, elevation)
    return (x, cy, z)


def cube(
    x0: float, y0: float, z0: float, length: float, horizontal: float, vertical: float
) -> List[Primitive]:
    """Return the faces of a cube centred on ``(x0, y0, z0)``, rotated by the two angles."""
    half = length / 2
    dx = pol2cart(half, horizontal, vertical)
    dz = pol2cart(half, horizontal + math.pi / 2, 0)
    dy = pol2cart(half, horizontal, vertical + math.pi / 2)
    origin = (x0, y0, z0)

    def corner(sx: int, sz: int, sy: int) -> Vec3:
        return _add(origin, _scale(sx, dx), _scale(sz, dz), _scale(sy, dy))

    ring = [(1, 1), (-1, 1), (-1, -1), (1, -1)]
    caps = [corner(sx, sz, sy) for sy in (1, -1) for sx, sz in ring]
    sides = [corner(sx, sz, sy) for sx, sz in ring + ring[:1] for sy in (1, -1)]
    return [Primitive(Mode.QUADS, tuple(caps)), Primitive(Mode.QUAD_STRIP, tuple(sides))]


def arrow(
    x0: float, y0: float, z0: float, length: float, horizontal: float, vertical: float
) -> List[Primitive]:
    """Return the shaft and head of an arrow starting at ``(x0, y0, z0)``."""
    origin = (x0, y0, z0)
    tip = _add(pol2cart(length, horizontal, vertical), origin)
    shaft = Primitive(Mode.LINES, (origin, tip))

    theta = math.pi / 6
    up = pol2cart(-length * 0.25, horizontal, vertical + theta)
    down = pol2cart(-length * 0.25, horizontal, vertical - theta)
    right = pol2cart(length / 25, horizontal + math.pi / 2, 0)
    left = pol2cart(length / 25, horizontal - math.pi / 2, 0)
    head = Primitive(
        Mode.TRIANGLE_FAN,
        (
            tip,
            _add(tip, up, right),
            _add(tip, down, right),
            _add(tip, down, left),
            _add(tip, up, left),
            _add(tip, up, right),
        ),
    )
    return [shaft, head]


def curve(x0: float, y0: float, slope: float, range_x: float, ex_range: float) -> Primitive:
    """Return line segments of the parabola ``y = y0 + slope * dx**2`` on both sides of ``x0``.

    Segments run in unit steps from ``ex_range`` out to ``range_x``.
    """
    start = int(ex_range)
    stop = math.floor(range_x)
    vertices: List[Vec3] = []
    for sign in (-1, 1):
        for i in range(start, stop + 1):
            j = i + 1 if i + 1 <= range_x else int(range_x)
            vertices.append((x0 + sign * i, y0 + slope * i**2, 0.0))
            vertices.append((x0 + sign * j, y0 + slope * j**2, 0.0))
    return Primitive(Mode.LINES, tuple(vertices))


def circle(
    center_x: float,
    center_y: float,
    center_z: float,
    radius: float,
    phase: float,
    vertexes: int,
    rate: float,
    fill: bool,
) -> Primitive:
    """Return a circle, or the fraction ``rate`` of it, in the plane z = ``center_z``."""
    center = (center_x, center_y, center_z)
    mode, vertices = _fan_or_strip(fill, center)
    rotation = math.pi * 2 / vertexes if vertexes > 0 else 0.0
    for i in _sweep(vertexes, rate):
        angle = i * rotation + phase
        vertices.append(
            (center_x + radius * math.cos(angle), center_y + radius * math.sin(angle), center_z)
        )
    return Primitive(mode, tuple(vertices))


def circle3d(
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
    """Return a circle tilted by ``vertical`` and turned by ``horizontal``."""
    mode, vertices = _fan_or_strip(fill, (x0, y0, z0))
    frequency = math.pi * 2 / vertexes if vertexes > 0 else 0.0
    for i in _sweep(vertexes, rate):
        offset = _tilted_ring(radius, horizontal, vertical, i * frequency + phase)
        vertices.append(_add((x0, y0, z0), offset))
    return Primitive(mode, tuple(vertices))


def _helix(
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
    widening: bool,
) -> Primitive:
    mode, vertices = _fan_or_strip(fill, (x0, y0, z0))
    frequency = math.pi * 2 * turns / vertexes if vertexes > 0 else 0.0
    for i in _sweep(vertexes, rate):
        theta = i * frequency + phase
        length = i * radius / vertexes
        ring = _tilted_ring(length if widening else radius, horizontal, vertical, theta)
        along = pol2cart(i * length / vertexes, horizontal, vertical)
        vertices.append(_add((x0, y0, z0), along, ring))
    return Primitive(mode, tuple(vertices))


def spiral3d(
    x0: float,
    y0: float,
    z0: float,
    radius: float,
    height: float,
    horizontal: float,
    vertical: float,
    phase: float,
    vertexes: int,
    rate: float,
    fill: bool,
    turns: float,
) -> Primitive:
    """Return a helix of constant radius wound ``turns`` times along its axis.

    ``height`` is accepted but does not affect the shape.
    """
    return _helix(
        x0, y0, z0, radius, horizontal, vertical, phase, vertexes, rate, fill, turns, False
    )


def vortex3d(
    x0: float,
    y0: float,
    z0: float,
    radius: float,
    height: float,
    horizontal: float,
    vertical: float,
    phase: float,
    vertexes: int,
    rate: float,
    fill: bool,
    turns: float,
) -> Primitive:
    """Return a helix whose radius widens from zero to ``radius``.

    ``height`` is accepted but does not affect the shape.
    """
    return _helix(
        x0, y0, z0, radius, horizontal, vertical, phase, vertexes, rate, fill, turns, True
    )


def axis(length: float = DEFAULT_AXIS_LENGTH) -> List[Primitive]:
    """Return the x (blue), y (red) and z (green) axes from the origin."""
    origin = (0.0, 0.0, 0.0)
    return [
        Primitive(Mode.LINES, (origin, (length, 0.0, 0.0)), (0.0, 0.0, 1.0)),
        Primitive(Mode.LINES, (origin, (0.0, length, 0.0)), (1.0, 0.0, 0.0)),
        Primitive(Mode.LINES, (origin, (0.0, 0.0, length)), (0.0, 1.0, 0.0)),
    ]


_CAMERA_HOME: Vec3 = (150.0, math.pi / 4, math.pi / 4)


class CubeScene:
    """A cube that can be turned with the keyboard, seen by an orbiting camera."""

    cube_length = 50.0

    def __init__(self) -> None:
        self.increase_rate = math.pi * 5 / 180
        self.horizontal = 0.0
        self.vertical = 0.0
        self.playing = True
        self.running = True
        self.camera_pos: Vec3 = pol2cart(*_CAMERA_HOME)

    def handle_key(self, key: str) -> None:
        """Apply one key press: a/d/w/s turn the cube, i/k/j/l/u/o move the camera."""
        norm, around, elevation = cart2pol(*self.camera_pos)
        step = self.increase_rate
        if key == "a":
            self.horizontal += step
        elif key == "d":
            self.horizontal -= step
        elif key == "w":
            self.vertical += step
        elif key == "s":
            self.vertical -= step
        elif key == "r":
            self.horizontal = 0.0
            self.vertical = 0.0
            norm, around, elevation = _CAMERA_HOME
        elif key == "i":
            elevation += step
        elif key == "k":
            elevation -= step
        elif key == "j":
            around += step
        elif key == "l":
            around -= step
        elif key == "u":
            norm -= 2
        elif key == "o":
            norm += 2
        elif key == "q":
            self.running = False
        elif key == " ":
            self.playing = not self.playing
        self.camera_pos = pol2cart(norm, around, elevation)

    def primitives(self) -> List[Primitive]:
        """Return what one frame draws: the axes and the cube."""
        return axis() + cube(0, 0, 0, self.cube_length, self.horizontal, self.vertical)