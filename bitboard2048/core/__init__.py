# -*- coding: utf-8 -*-
"""
This module provides the bitboard engine of the 2048 game.

It includes the packed board primitives, the precomputed move table, the move directions, and the pure functions
that apply moves, score boards and spawn new tiles.
"""

from .bitboard import column_from, count_empty, highest_tile, reverse_row, transpose
from .gameboard import execute, is_done, legal_directions, score, spawn_tile
from .gamemove import Direction
from .movetable import MoveTable, default_table

__all__ = [
    "Direction",
    "MoveTable",
    "default_table",
    "transpose",
    "column_from",
    "reverse_row",
    "count_empty",
    "highest_tile",
    "execute",
    "score",
    "spawn_tile",
    "legal_directions",
    "is_done",
]
