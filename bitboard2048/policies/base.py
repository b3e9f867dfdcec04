"""
Interface of the move-selection policies driving a game.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence

from bitboard2048.core.gamemove import Direction

# ##>: Plain callable accepted wherever a policy is expected.
PolicyFunction = Callable[[int, Sequence[Direction]], Direction]


class Policy(ABC):
    """
    Chooses the next move of a game.

    Implementations keep their own state (random generator, evaluation tables, ...) and are called once per decision.
    """

    @abstractmethod
    def choose(self, board: int, failed: Sequence[Direction]) -> Direction:
        """
        Choose the next move.

        Parameters
        ----------
        board : int
            The current packed board.
        failed : Sequence[Direction]
            Directions already tried at this position that did not change the board.

        Returns
        -------
        Direction
            The move to play, or ``Direction.NONE`` to end the game.
        """


class FunctionPolicy(Policy):
    """Policy backed by a plain function ``(board, failed) -> Direction``."""

    def __init__(self, function: PolicyFunction):
        self._function = function

    def choose(self, board: int, failed: Sequence[Direction]) -> Direction:
        return self._function(board, failed)


def as_policy(policy: Policy | PolicyFunction) -> Policy:
    """
    Wrap a callable into a ``Policy`` unless it already is one.

    Raises
    ------
    TypeError
        If ``policy`` is neither a ``Policy`` nor callable.
    """
    if isinstance(policy, Policy):
        return policy
    if callable(policy):
        return FunctionPolicy(policy)
    raise TypeError(f'Expected a Policy or a callable, got {type(policy).__name__}.')
