"""
Play many independent games in parallel and aggregate their results.

The move table is built before any worker starts, then shared read-only. Every game owns its board, its policy and
its random generator, so no state is shared between workers.
"""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass

from numpy import array, int64
from numpy.random import Generator, SeedSequence, default_rng
from tqdm import tqdm

from bitboard2048.core.bitboard import highest_tile
from bitboard2048.core.gameboard import score
from bitboard2048.core.movetable import MoveTable, default_table
from bitboard2048.envs.game import Game
from bitboard2048.policies import Policy, PolicyFunction, RandomPolicy

from .config import BatchConfig

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##>: Tile values reported in a summary, from "2" to "32768".
TILE_VALUES: tuple[int, ...] = tuple(1 << exponent for exponent in range(1, 16))

PolicyFactory = Callable[[Generator], Policy | PolicyFunction]


@dataclass(frozen=True)
class BatchSummary:
    """
    Aggregated results of a batch of games.

    Attributes
    ----------
    played : int
        Number of games played.
    average_score : float
        Mean final score.
    best_score : int
        Highest final score.
    best_board : int
        Final board of the first game reaching ``best_score``.
    tile_counts : dict[int, int]
        For every tile value, the number of games whose highest tile reached at least that value.
    """

    played: int
    average_score: float
    best_score: int
    best_board: int
    tile_counts: dict[int, int]

    def tile_rate(self, tile: int) -> float:
        """Percentage of games whose highest tile reached at least ``tile``."""
        return 100.0 * self.tile_counts.get(tile, 0) / self.played


def _play_one(policy_factory: PolicyFactory, table: MoveTable, seed: SeedSequence) -> int:
    rng = default_rng(seed)
    return Game.play(policy_factory(rng), table=table, seed=rng).board


def play_games(
    config: BatchConfig,
    policy_factory: PolicyFactory = RandomPolicy,
    table: MoveTable | None = None,
) -> list[int]:
    """
    Play a batch of games to completion.

    Parameters
    ----------
    config : BatchConfig
        Number of games, threads, seed and progress display.
    policy_factory : PolicyFactory, optional
        Builds one policy per game from that game's random generator (default is ``RandomPolicy``).
    table : MoveTable, optional
        Move table shared by all games; the process-wide table is used when omitted.

    Returns
    -------
    list[int]
        Final boards, in submission order.

    Notes
    -----
    - With a fixed ``config.seed`` the results do not depend on the number of threads.
    - A failing game is logged and its exception re-raised once the pool shuts down.
    """
    # ##: Build the table before any worker touches it.
    table = table if table is not None else default_table()
    seeds = SeedSequence(config.seed).spawn(config.count)

    _logger.info('Playing %d games on %d threads', config.count, config.threads)
    boards = [0] * config.count

    with ThreadPoolExecutor(max_workers=config.threads) as executor:
        futures = {executor.submit(_play_one, policy_factory, table, seed): index for index, seed in enumerate(seeds)}

        with tqdm(total=config.count, desc='Games', disable=not config.show_progress) as progress:
            for future in as_completed(futures):
                index = futures[future]
                try:
                    boards[index] = future.result()
                except Exception:
                    _logger.exception('Game %d failed', index)
                    raise
                progress.update(1)

    _logger.info('Finished %d games', config.count)
    return boards


def summarize(boards: list[int], table: MoveTable | None = None) -> BatchSummary:
    """
    Aggregate the final boards of a batch.

    Parameters
    ----------
    boards : list[int]
        Final boards, at least one.
    table : MoveTable, optional
        Move table used to score the boards.

    Returns
    -------
    BatchSummary
        Scores and tile statistics of the batch.

    Raises
    ------
    ValueError
        If ``boards`` is empty.
    """
    if not boards:
        raise ValueError('Cannot summarize an empty batch.')

    table = table if table is not None else default_table()
    scores = array([score(board, table) for board in boards], dtype=int64)
    highest = array([highest_tile(board) for board in boards], dtype=int64)
    best = int(scores.argmax())

    return BatchSummary(
        played=len(boards),
        average_score=float(scores.mean()),
        best_score=int(scores[best]),
        best_board=boards[best],
        tile_counts={tile: int((highest >= tile).sum()) for tile in TILE_VALUES},
    )
