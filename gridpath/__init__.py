"""Tile maps, a trail-walking iterator, depth-first and A* path search, and a terminal view."""

__version__ = "0.1.0"
__all__ = ["__version__"]