"""Geometry, physics and toy-game sketches that describe drawing as renderer-independent primitives."""

__version__ = "0.1.0"