"""Charting primitives: drawing helpers, computed series, grid lines, color maps and file utilities."""

__version__ = "0.1.0"