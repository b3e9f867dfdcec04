# -*- coding: utf-8 -*-
"""
This module provides utilities for converting and displaying boards.

It includes functions for unpacking a board into a 4x4 grid of tile values, packing a grid back into a board, and
rendering a board as framed text for the console.
"""

from .render import from_grid, render, to_grid

__all__ = ["to_grid", "from_grid", "render"]
