"""Two sliding blocks and a wall whose collision count spells out digits of pi."""

from __future__ import annotations

import math
import re
import sys
from dataclasses import dataclass
from typing import List, Optional, Sequence

WINDOW_WIDTH = 700
WINDOW_HEIGHT = 350
MAX_STEPS = 200_000
HELP = "f: following\n(a, d): model_origin\n(z, c): fps\nx: fps = 1\nr: reset\nq: quit"

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _sqrt(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


@dataclass
class Block:
    """A block on the floor: mass, left edge position, speed, energy term and side length."""

    mass: float
    position: float
    speed: float
    energy: float
    length: float


class CollisionSim:
    """A light block between a wall and a heavy block of mass ``100 ** digits``."""

    def __init__(self, digits: int = 1, v0: float = -1.0, cube_size: float = 10.0) -> None:
        self.digits = digits
        self.v0 = float(v0)
        self.cube_size = float(cube_size)
        self.blocks: List[Block] = [
            Block(1.0, cube_size * 2, 0.0, 0.0, cube_size * 5),
            Block(100.0**digits, cube_size * 10, self.v0, 0.0, cube_size * 10),
        ]
        self.collisions = 0
        self.steps = 0
        self.is_collision = False
        self.playing = True
        self.running = True
        self.following = 0
        self.per_ct = 1
        self.model_origin = [50.0, 50.0]

    def collide(self) -> None:
        """Exchange momentum between the blocks, keeping momentum and energy."""
        light, heavy = self.blocks
        momentum = sum(b.mass * b.speed for b in self.blocks)
        a = sum(b.mass for b in self.blocks)
        b = math.sqrt(heavy.mass) * momentum
        c = momentum**2 - light.mass * heavy.mass * self.v0**2
        heavy.energy = (b + _sqrt(b**2 - a * c)) / a
        light.energy = (-math.sqrt(heavy.mass) * heavy.energy + momentum) / math.sqrt(light.mass)
        for block in self.blocks:
            block.speed = block.energy / math.sqrt(block.mass)
        if self.is_collision:
            self.collisions += 1
            self.is_collision = False

    def step(self) -> int:
        """Move both blocks one tick, bouncing off the wall and each other; return the tick count."""
        for index, block in enumerate(self.blocks):
            block.position += block.speed
            if block.position < 0:
                self.collisions += 1
                self.is_collision = True
                if index == 0:
                    block.position = 0.0
                    block.speed *= -1
        light, heavy = self.blocks
        if heavy.position - light.position < light.length:
            self.collide()
        if heavy.position - light.position > light.length:
            self.is_collision = True
        if heavy.position < light.length:
            heavy.position = light.length
        self.steps += 1
        return self.steps

    def _advance(self) -> None:
        if self.playing:
            for _ in range(self.per_ct):
                self.step()

    def _settled(self) -> bool:
        light, heavy = self.blocks
        return 0 <= light.speed <= heavy.speed

    def handle_key(self, key: str) -> None:
        """Apply one key press.

        Space pauses, ``f`` cycles the block followed, ``a``/``d`` move the
        view, ``z``/``c`` change steps per frame, ``x`` resets them, ``r``
        resets the view and ``q`` quits.
        """
        if key == " ":
            self.playing = not self.playing
        elif key == "f":
            self.following = (self.following + 1) % (len(self.blocks) + 1)
        elif key == "a":
            self.model_origin[0] -= 10
        elif key == "d":
            self.model_origin[0] += 10
        elif key == "z":
            self.per_ct = max(self.per_ct - 1, 1)
        elif key == "x":
            self.per_ct = 1
        elif key == "c":
            self.per_ct += 1
        elif key == "r":
            self.playing = True
            self.following = 0
            self.per_ct = 1
            self.model_origin[0] = 50.0
        elif key == "q":
            self.running = False

    def status(self) -> str:
        """Return the status lines shown on screen."""
        lines = [
            f"collision: {self.collisions}, {self.per_ct}/ct, "
            f"following: {self.following}, is_playing: {int(self.playing)}"
        ]
        lines.extend(
            f"cube{index}(pos, speed): ({block.position:.6f}, {block.speed:.6f})"
            for index, block in enumerate(self.blocks)
        )
        return "\n".join(lines)


def _leading_int(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _leading_float(text: str) -> float:
    match = _FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation until no more collisions can happen and print the count."""
    args = sys.argv[1:] if argv is None else list(argv)
    print(f"Window Size: ({WINDOW_WIDTH}, {WINDOW_HEIGHT})")
    print(HELP)
    digits, v0, cube_size = 1, -1.0, 10.0
    if 1 <= len(args) <= 3:
        if len(args) >= 3:
            cube_size = _leading_float(args[2])
        if len(args) >= 2:
            v0 = -float(abs(_leading_int(args[1])))
        digits = _leading_int(args[0])
    else:
        print("collision 100^d v_0 cube_size")
    sim = CollisionSim(digits, v0, cube_size)
    for _ in range(MAX_STEPS):
        if sim._settled():
            break
        sim._advance()
    print(sim.status())
    return 0