"""Pixel Golf: a small 2D mini-golf game."""

__version__ = "0.1.0"
