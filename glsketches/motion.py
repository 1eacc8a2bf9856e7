"""Moving bodies: a cube rolling over its edges, and point bodies in
circular, projectile and spring motion."""

from __future__ import annotations

import math
from typing import Tuple

from .camera import OrbitCamera
from .coords import Vec3
from .physics import Body

_POSITION = 0
_VELOCITY = 1
_ACCELERATION = 2


class RollingCube:
    """A cube that rolls along the x axis, tipping over one edge at a time.

    ``w``/``s`` speed it up forwards and backwards, ``e`` stops it, ``r``
    puts it back at the origin, space pauses and ``q`` quits; camera keys
    go to the camera.
    """

    def __init__(self, size: float = 50.0, move_rate: float = 100.0) -> None:
        if move_rate == 0:
            raise ValueError("move_rate must not be zero")
        self.size = float(size)
        self.move_rate = float(move_rate)
        self.position: Tuple[float, float] = (0.0, 0.0)
        self.vertical = 0.0
        self.direction = 0
        self.playing = True
        self.running = True
        self.camera = OrbitCamera(math.pi * 5 / 180)

    def step(self) -> Tuple[float, float]:
        """Advance one tick while playing and return the cube centre ``(x, y)``."""
        if not self.playing:
            return self.position
        x = self.position[0] + self.direction * (self.size / self.move_rate)
        self.vertical -= self.direction * (math.pi / (2 * self.move_rate))
        tip = math.fmod(math.fabs(self.vertical), math.pi / 2)
        y = self.size * math.sqrt(2) * math.sin(tip + math.pi / 4) / 2
        self.position = (x, y)
        return self.position

    def handle_key(self, key: str) -> None:
        """Apply one key press."""
        if key == "w":
            self.direction += 1
        elif key == "s":
            self.direction -= 1
        elif key == "e":
            self.direction = 0
        elif key == "r":
            self.direction = 0
            self.vertical = 0.0
            self.position = (0.0, 0.0)
        elif key == "q":
            self.running = False
        elif key == " ":
            self.playing = not self.playing
        self.camera.handle_key(key)


def _center_angle(x: float, z: float) -> float:
    """Return the horizontal angle pointing from ``(x, z)`` back towards the y axis."""
    if x == 0:
        if z == 0 or math.isnan(z):
            ratio = math.nan
        else:
            ratio = math.copysign(math.inf, z) * math.copysign(1.0, x)
    else:
        ratio = z / x
    theta = math.atan(ratio)
    if x > 0:
        theta += math.pi
    return theta


class CircularMotion:
    """A body kept on a circle by an acceleration always aimed at the y axis."""

    mass = 2.0
    cube_size = 5.0
    start: Vec3 = (100.0, 0.0, 0.0)
    speed = 15.0
    speed_horizontal = math.pi / 2
    speed_vertical = 0.0

    def __init__(self) -> None:
        self.accel_norm = self.speed**2 / abs(self.start[0])
        self.body = Body(self.mass, self.cube_size)
        self.reset()

    def reset(self) -> None:
        """Put the body back at its start with its initial velocity."""
        self.body.set_cart(_POSITION, *self.start)
        self.body.set_pol(_VELOCITY, self.speed, self.speed_horizontal, self.speed_vertical)
        self.body.set_pol(_ACCELERATION, self.accel_norm, 0, 0)

    def step(self) -> Vec3:
        """Advance one tick, then aim the acceleration at the centre; return the position."""
        position = self.body.step()
        x, _, z = position
        self.body.set_pol(_ACCELERATION, self.accel_norm, _center_angle(x, z), 0)
        return position


class ProjectileMotion:
    """A body thrown up and sideways, falling under constant gravity."""

    mass = 2.0
    cube_size = 5.0
    start: Vec3 = (-50.0, 0.0, 50.0)
    speed = 15.0
    speed_horizontal = -math.pi / 6
    speed_vertical = math.pi / 3
    gravity = 0.98

    def __init__(self) -> None:
        self.body = Body(self.mass, self.cube_size)
        self.reset()

    def reset(self) -> None:
        """Put the body back at its start with its initial velocity."""
        self.body.set_cart(_POSITION, *self.start)
        self.body.set_pol(_VELOCITY, self.speed, self.speed_horizontal, self.speed_vertical)
        self.body.set_cart(_ACCELERATION, 0, -self.gravity, 0)

    def step(self) -> Vec3:
        """Advance one tick and return the position."""
        return self.body.step()


class SpringMotion:
    """A body on the x axis pulled back to the origin by a force of ``-x``."""

    mass = 10.0
    cube_size = 20.0
    start_speed = 50.0

    def __init__(self) -> None:
        self.body = Body(self.mass, self.cube_size)
        self.body.set_cart(_POSITION, 0, 0, 0)
        self.body.set_cart(_VELOCITY, self.start_speed, 0, 0)

    def step(self) -> Vec3:
        """Advance one tick, keep the body on the x axis and update the spring force."""
        self.body.step()
        x = self.body.cart(_POSITION)[0]
        position = self.body.set_cart(_POSITION, x, 0, 0)
        self.body.set_force_cart(-x, 0, 0)
        return position