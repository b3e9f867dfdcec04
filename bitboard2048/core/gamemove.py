"""
Move directions of the 2048 game and the helpers random-play policies rely on.
"""

from collections.abc import Iterable
from enum import Enum

from numpy.random import PCG64DXSM, Generator, default_rng

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())


class Direction(Enum):
    """
    Direction of a move.

    ``NONE`` is the sentinel a policy returns when it has no move left to offer.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3
    NONE = -1

    @classmethod
    def moves(cls) -> tuple['Direction', ...]:
        """Return the four real directions, in a fixed order."""
        return _MOVES

    @classmethod
    def without(cls, directions: Iterable['Direction']) -> list['Direction']:
        """
        List the real directions not contained in ``directions``.

        Parameters
        ----------
        directions : Iterable[Direction]
            Directions to exclude, usually those that already failed.

        Returns
        -------
        list[Direction]
            Remaining directions, in the order of ``Direction.moves()``.

        Example
        -------
        >>> Direction.without([Direction.LEFT, Direction.RIGHT])
        [<Direction.UP: 1>, <Direction.DOWN: 3>]
        """
        excluded = set(directions)
        return [direction for direction in _MOVES if direction not in excluded]

    @classmethod
    def sample(cls, rng: Generator | None = None) -> 'Direction':
        """Pick one of the four real directions uniformly at random."""
        rng = rng if rng is not None else _GENERATOR
        return _MOVES[rng.integers(len(_MOVES))]

    @classmethod
    def sample_without(cls, directions: Iterable['Direction'], rng: Generator | None = None) -> 'Direction':
        """
        Pick uniformly among the directions not contained in ``directions``.

        Parameters
        ----------
        directions : Iterable[Direction]
            Directions to exclude.
        rng : Generator, optional
            Random generator; the module generator is used when omitted.

        Returns
        -------
        Direction
            A remaining direction, or ``Direction.NONE`` when all four are excluded.

        Notes
        -----
        The module generator is not meant to be shared between threads; concurrent callers should pass their own.
        """
        remaining = cls.without(directions)
        if not remaining:
            return cls.NONE

        rng = rng if rng is not None else _GENERATOR
        return remaining[rng.integers(len(remaining))]


_MOVES = (Direction.LEFT, Direction.UP, Direction.RIGHT, Direction.DOWN)
