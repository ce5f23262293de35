"""Axial hexagonal coordinates, edge and vertex directions, and coordinate conversions."""

__version__ = "0.1.0"
__all__ = ["conversions", "edge_direction", "hex", "vertex_direction", "way"]