"""Small 2D plotting library for line, dot and quiver plots rendered to images."""

__version__ = "0.1.0"