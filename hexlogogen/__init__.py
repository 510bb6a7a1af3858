"""Geometric logo layouts: coloured shapes on a hexagon cut into triangles."""

__version__ = "0.1.0"