"""Single game of 2048 played on a packed 64-bit board."""

import logging

from numpy.random import Generator, default_rng

from bitboard2048.core.bitboard import count_empty, highest_tile
from bitboard2048.core.gameboard import execute, is_done, score, spawn_tile
from bitboard2048.core.gamemove import Direction
from bitboard2048.core.movetable import MoveTable, default_table
from bitboard2048.policies.base import Policy, PolicyFunction, as_policy

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class Game:
    """
    2048 game.

    This class owns one board value and drives it with table lookups. The move table is shared, read-only, between
    every game using it; the board and the random generator belong to this game only.

    Attributes
    ----------
    table : MoveTable
        The move table used to apply moves.
    board : int
        The current packed board.
    moves : int
        Number of moves that changed the board.
    terminated : bool
        Whether ``run`` reached a terminal state.
    """

    def __init__(self, table: MoveTable | None = None, seed: int | Generator | None = None):
        """
        Initialize an empty game.

        Parameters
        ----------
        table : MoveTable, optional
            Move table to use; the process-wide table is used when omitted.
        seed : int | Generator, optional
            Seed or generator for tile spawning.
        """
        self.table = table if table is not None else default_table()
        self._rng = seed if isinstance(seed, Generator) else default_rng(seed)

        self.board = 0
        self.moves = 0
        self.terminated = False

    @classmethod
    def new(cls, table: MoveTable | None = None, seed: int | Generator | None = None) -> 'Game':
        """
        Create a game seeded with two random tiles.

        Parameters
        ----------
        table : MoveTable, optional
            Move table to use.
        seed : int | Generator, optional
            Seed or generator for tile spawning.

        Returns
        -------
        Game
            A game with exactly 14 empty cells.
        """
        game = cls(table=table, seed=seed)
        game.board |= spawn_tile(game.board, game._rng)
        game.board |= spawn_tile(game.board, game._rng)
        return game

    @classmethod
    def play(
        cls,
        policy: Policy | PolicyFunction,
        table: MoveTable | None = None,
        seed: int | Generator | None = None,
    ) -> 'Game':
        """
        Play a new game to completion.

        Parameters
        ----------
        policy : Policy | PolicyFunction
            Chooses every move; see ``Game.run``.
        table : MoveTable, optional
            Move table to use.
        seed : int | Generator, optional
            Seed or generator for tile spawning.

        Returns
        -------
        Game
            The finished game; its ``board`` is the final board.
        """
        return cls.new(table=table, seed=seed).run(policy)

    @property
    def score(self) -> int:
        """Score of the current board."""
        return score(self.board, self.table)

    @property
    def count_empty(self) -> int:
        """Number of empty cells on the current board."""
        return count_empty(self.board)

    @property
    def highest_tile(self) -> int:
        """Displayed value of the largest tile on the current board."""
        return highest_tile(self.board)

    @property
    def is_finished(self) -> bool:
        """
        Check if the game is finished.

        Returns
        -------
        bool
            True if the game was terminated or no move changes the board, False otherwise.
        """
        return self.terminated or is_done(self.board, self.table)

    def execute(self, direction: Direction) -> int:
        """Return the current board moved in ``direction``, leaving the game untouched."""
        return execute(self.board, direction, self.table)

    def step(self, direction: Direction) -> bool:
        """
        Apply a move and spawn a tile if it changed the board.

        Parameters
        ----------
        direction : Direction
            The move to apply.

        Returns
        -------
        bool
            True if the board changed, False if the move had no effect.

        Raises
        ------
        RuntimeError
            If the game is already terminated.
        """
        if self.terminated:
            raise RuntimeError('Cannot move in a terminated game.')

        result = execute(self.board, direction, self.table)
        if result == self.board:
            return False

        # ##: A move that changed the board always leaves at least one empty cell.
        self.board = result | spawn_tile(result, self._rng)
        self.moves += 1
        return True

    def run(self, policy: Policy | PolicyFunction) -> 'Game':
        """
        Play from the current board until a terminal state.

        Parameters
        ----------
        policy : Policy | PolicyFunction
            Called with ``(board, failed)`` before every decision, ``failed`` being the directions already tried
            without effect at the current position.

        Returns
        -------
        Game
            This game, terminated.

        Notes
        -----
        - The game ends when the policy returns ``Direction.NONE`` or once all four directions failed.
        - A direction already in ``failed`` is ignored and the policy is asked again, unless no move changes the
          board: the remaining directions then count as failed and the game ends.
        - A successful move clears ``failed``.

        Raises
        ------
        ValueError
            If the policy returns something other than a ``Direction``.
        """
        if self.terminated:
            return self

        policy = as_policy(policy)
        failed: list[Direction] = []

        while True:
            direction = policy.choose(self.board, tuple(failed))

            if direction is Direction.NONE or len(failed) == 4:
                break
            if direction in failed:
                # ##: A blocked board fails every remaining direction, whatever the policy insists on.
                if is_done(self.board, self.table):
                    failed.extend(Direction.without(failed))
                    break
                continue

            if self.step(direction):
                failed.clear()
            else:
                failed.append(direction)

        self.terminated = True
        _logger.debug('Game over after %d moves: board=%#018x, score=%d', self.moves, self.board, self.score)
        return self
