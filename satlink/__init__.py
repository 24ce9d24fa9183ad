"""Satellite link trees: build, print, encode, decode and find common parents."""

__version__ = "0.1.0"
__all__ = ["heap", "satellite", "bst", "tree", "cli"]