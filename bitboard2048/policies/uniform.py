"""
Random-play policy.
"""

from collections.abc import Sequence

from numpy.random import Generator, default_rng

from bitboard2048.core.gamemove import Direction

from .base import Policy


class RandomPolicy(Policy):
    """
    Plays a uniformly random direction among those not yet tried at the current position.

    Returns ``Direction.NONE`` once every direction has failed.
    """

    def __init__(self, seed: int | Generator | None = None):
        """
        Initialize the policy.

        Parameters
        ----------
        seed : int | Generator, optional
            Seed or generator for reproducible play.
        """
        self._rng = seed if isinstance(seed, Generator) else default_rng(seed)

    def choose(self, board: int, failed: Sequence[Direction]) -> Direction:
        return Direction.sample_without(failed, rng=self._rng)
