"""A point body moved step by step by its velocity and acceleration."""

from __future__ import annotations

from typing import Iterable

from .coords import CoordSystem, Vec3

_POSITION = 0
_ACCELERATION = 2


class Body:
    """A body with mass and size whose acceleration and force stay in step (F = m a)."""

    def __init__(self, mass: float, size: float) -> None:
        self.mass = mass
        self.size = size
        self.time = 0
        self._coord = CoordSystem(_ACCELERATION)
        self._force = CoordSystem(0)

    def accel_to_force_cart(self, accel: Iterable[float]) -> Vec3:
        """Return the Cartesian force for a Cartesian acceleration."""
        x, y, z = accel
        return (x * self.mass, y * self.mass, z * self.mass)

    def accel_to_force_pol(self, accel: Iterable[float]) -> Vec3:
        """Return the polar force for a polar acceleration."""
        norm, horizontal, vertical = accel
        return (norm * self.mass, horizontal, vertical)

    def force_to_accel_cart(self, force: Iterable[float]) -> Vec3:
        """Return the Cartesian acceleration for a Cartesian force."""
        x, y, z = force
        mass = float(self.mass)
        return (x / mass, y / mass, z / mass)

    def force_to_accel_pol(self, force: Iterable[float]) -> Vec3:
        """Return the polar acceleration for a polar force."""
        norm, horizontal, vertical = force
        return (norm / float(self.mass), horizontal, vertical)

    def set_cart(self, n: int, x: float, y: float, z: float) -> Vec3:
        """Set derivative ``n`` in Cartesian form; setting the acceleration sets the force."""
        if n == _ACCELERATION:
            self._force.set_cart(0, *self.accel_to_force_cart((x, y, z)))
        return self._coord.set_cart(n, x, y, z)

    def cart(self, n: int) -> Vec3:
        """Return derivative ``n`` in Cartesian form."""
        return self._coord.cart(n)

    def set_pol(self, n: int, norm: float, horizontal: float, vertical: float) -> Vec3:
        """Set derivative ``n`` in polar form; setting the acceleration sets the force."""
        if n == _ACCELERATION:
            self._force.set_pol(0, *self.accel_to_force_pol((norm, horizontal, vertical)))
        return self._coord.set_pol(n, norm, horizontal, vertical)

    def pol(self, n: int) -> Vec3:
        """Return derivative ``n`` in polar form."""
        return self._coord.pol(n)

    def set_force_cart(self, x: float, y: float, z: float) -> Vec3:
        """Set the force in Cartesian form, updating the acceleration."""
        self._coord.set_cart(_ACCELERATION, *self.force_to_accel_cart((x, y, z)))
        return self._force.set_cart(0, x, y, z)

    def force_cart(self) -> Vec3:
        """Return the force in Cartesian form."""
        return self._force.cart(0)

    def set_force_pol(self, norm: float, horizontal: float, vertical: float) -> Vec3:
        """Set the force in polar form, updating the acceleration."""
        self._coord.set_pol(_ACCELERATION, *self.force_to_accel_pol((norm, horizontal, vertical)))
        return self._force.set_pol(0, norm, horizontal, vertical)

    def force_pol(self) -> Vec3:
        """Return the force in polar form."""
        return self._force.pol(0)

    def step(self) -> Vec3:
        """Advance one tick: velocity gains acceleration, then position gains velocity.

        Returns the new position.
        """
        self.time += 1
        carts = self._coord.carts()
        for n in reversed(range(len(carts) - 1)):
            carts[n] = tuple(a + b for a, b in zip(carts[n], carts[n + 1]))
            self._coord.set_cart(n, *carts[n])
        return self._coord.cart(_POSITION)