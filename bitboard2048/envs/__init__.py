# -*- coding: utf-8 -*-
"""
Bitboard implementation of the 2048 game.

This module provides the `Game` class, which holds a board and plays it to completion under a policy.
"""

from .game import Game

__all__ = ["Game"]
