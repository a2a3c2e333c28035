"""Deterministic team battle simulation on a hexagonal grid, with step playback."""

__version__ = "0.1.0"
__all__ = ["__version__"]