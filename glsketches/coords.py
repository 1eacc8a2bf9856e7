"""Cartesian and polar coordinates in three dimensions.

Polar coordinates are ``(norm, horizontal, vertical)``: the horizontal angle
is measured in the x-z plane from the x axis towards z, and the vertical
angle is the elevation towards y.
"""

from __future__ import annotations

import math
from typing import List, Tuple

Vec3 = Tuple[float, float, float]

DIMENSION = 3


def _ieee_div(num: float, den: float) -> float:
    """Divide the way IEEE floats do, giving inf or nan instead of raising."""
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def deg2rad(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180


def rad2deg(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180 / math.pi


def cart2pol(x: float, y: float, z: float) -> Vec3:
    """Return ``(norm, horizontal, vertical)`` for the point ``(x, y, z)``."""
    horizontal_sq = x**2 + z**2
    norm = math.sqrt(horizontal_sq + y**2)
    horizontal = math.atan(_ieee_div(z, x))
    vertical = math.atan(_ieee_div(y, math.sqrt(horizontal_sq)))
    if x < 0:
        horizontal += math.pi
    return (norm, horizontal, vertical)


def pol2cart(norm: float, horizontal: float, vertical: float) -> Vec3:
    """Return ``(x, y, z)`` for the polar coordinates given."""
    horizontal_norm = norm * math.cos(vertical)
    return (
        horizontal_norm * math.cos(horizontal),
        norm * math.sin(vertical),
        horizontal_norm * math.sin(horizontal),
    )


class CoordSystem:
    """A vector and its derivatives, kept in both Cartesian and polar form.

    Index 0 is the position, 1 the velocity, 2 the acceleration and so on,
    up to ``diffs``.
    """

    def __init__(self, diffs: int) -> None:
        if diffs < 0:
            raise ValueError(f"diffs must not be negative, got {diffs}")
        self._diffs = diffs
        self._carts: List[Vec3] = [(0.0, 0.0, 0.0)] * (diffs + 1)
        self._polars: List[Vec3] = [(0.0, 0.0, 0.0)] * (diffs + 1)

    @property
    def diffs(self) -> int:
        """The highest derivative held."""
        return self._diffs

    def _check(self, n: int) -> None:
        if not 0 <= n <= self._diffs:
            raise IndexError(f"derivative {n} is outside 0..{self._diffs}")

    def set_cart(self, n: int, x: float, y: float, z: float) -> Vec3:
        """Set derivative ``n`` from Cartesian values and return them."""
        self._check(n)
        self._carts[n] = (float(x), float(y), float(z))
        self._polars[n] = cart2pol(x, y, z)
        return self._carts[n]

    def cart(self, n: int) -> Vec3:
        """Return derivative ``n`` in Cartesian form."""
        self._check(n)
        return self._carts[n]

    def set_pol(self, n: int, norm: float, horizontal: float, vertical: float) -> Vec3:
        """Set derivative ``n`` from polar values and return them."""
        self._check(n)
        self._polars[n] = (float(norm), float(horizontal), float(vertical))
        self._carts[n] = pol2cart(norm, horizontal, vertical)
        return self._polars[n]

    def pol(self, n: int) -> Vec3:
        """Return derivative ``n`` in polar form."""
        self._check(n)
        return self._polars[n]

    def cart2pol(self, n: int) -> Vec3:
        """Convert the stored Cartesian derivative ``n`` to polar form."""
        self._check(n)
        return cart2pol(*self._carts[n])

    def pol2cart(self, n: int) -> Vec3:
        """Convert the stored polar derivative ``n`` to Cartesian form."""
        self._check(n)
        return pol2cart(*self._polars[n])

    def dimension(self) -> int:
        """Return the number of spatial dimensions."""
        return DIMENSION

    def carts(self) -> List[Vec3]:
        """Return a copy of all derivatives in Cartesian form."""
        return list(self._carts)

    def polars(self) -> List[Vec3]:
        """Return a copy of all derivatives in polar form."""
        return list(self._polars)