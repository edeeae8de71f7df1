"""Wireframe height-map viewer with XPM reading and X11 colour names."""

__version__ = "0.1.0"

__all__ = ["__version__"]