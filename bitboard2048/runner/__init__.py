# -*- coding: utf-8 -*-
"""
Batch runner playing many games in parallel threads and aggregating their scores.
"""

from .batch import TILE_VALUES, BatchSummary, play_games, summarize
from .config import BatchConfig

__all__ = ["BatchConfig", "BatchSummary", "TILE_VALUES", "play_games", "summarize"]
