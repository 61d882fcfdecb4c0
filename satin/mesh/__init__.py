"""Mesh subpackage initialization file for importing the grid."""

from .grid import Grid

__all__ = ["Grid"]
