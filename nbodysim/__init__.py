"""Gravitational N-body simulation with an interactive pygame viewer and FPS benchmark."""

__version__ = "0.0.1"
__all__ = ["__version__"]