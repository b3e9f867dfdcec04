# -*- coding: utf-8 -*-
"""
Bitboard engine for the 2048 game.

Boards are packed into 64-bit integers and every move is applied with four lookups in a precomputed table. Games are
driven by an injected policy, so the engine can play very large numbers of automated games.
"""

from .core import (
    Direction,
    MoveTable,
    column_from,
    count_empty,
    default_table,
    execute,
    reverse_row,
    score,
    spawn_tile,
    transpose,
)
from .envs import Game
from .policies import FunctionPolicy, Policy, RandomPolicy
from .utils import render

__all__ = [
    "Direction",
    "MoveTable",
    "default_table",
    "Game",
    "execute",
    "transpose",
    "score",
    "count_empty",
    "spawn_tile",
    "column_from",
    "reverse_row",
    "Policy",
    "FunctionPolicy",
    "RandomPolicy",
    "render",
]
