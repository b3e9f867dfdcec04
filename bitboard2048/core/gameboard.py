"""
Core functionality of the bitboard engine: applying moves, scoring boards and spawning tiles.

All functions are pure: they take a board value and the move table, and return a new value.
"""

from collections.abc import Sequence

from numpy.random import PCG64DXSM, Generator, default_rng

from bitboard2048.core.bitboard import count_empty, transpose
from bitboard2048.core.gamemove import Direction
from bitboard2048.core.masks import ROW_MASK, TILE_MASK, TILE_SPAWN_PROBS
from bitboard2048.core.movetable import MoveTable

# ##>: Module-level generator for performance (avoids repeated initialization).
_GENERATOR = default_rng(PCG64DXSM())

# ##>: Probability that a spawned tile is a "2" (nybble 1) rather than a "4" (nybble 2).
_TWO_PROB = TILE_SPAWN_PROBS[1]


def move_left(board: int, table: MoveTable) -> int:
    """Return ``board`` moved toward the high nybble of each row."""
    deltas = table.left
    return (
        board
        ^ deltas[board & ROW_MASK]
        ^ (deltas[(board >> 16) & ROW_MASK] << 16)
        ^ (deltas[(board >> 32) & ROW_MASK] << 32)
        ^ (deltas[(board >> 48) & ROW_MASK] << 48)
    )


def move_right(board: int, table: MoveTable) -> int:
    """Return ``board`` moved toward the low nybble of each row."""
    deltas = table.right
    return (
        board
        ^ deltas[board & ROW_MASK]
        ^ (deltas[(board >> 16) & ROW_MASK] << 16)
        ^ (deltas[(board >> 32) & ROW_MASK] << 32)
        ^ (deltas[(board >> 48) & ROW_MASK] << 48)
    )


def move_up(board: int, table: MoveTable) -> int:
    """Return ``board`` moved toward the high row of each column."""
    deltas = table.up
    transposed = transpose(board)
    return (
        board
        ^ deltas[transposed & ROW_MASK]
        ^ (deltas[(transposed >> 16) & ROW_MASK] << 4)
        ^ (deltas[(transposed >> 32) & ROW_MASK] << 8)
        ^ (deltas[(transposed >> 48) & ROW_MASK] << 12)
    )


def move_down(board: int, table: MoveTable) -> int:
    """Return ``board`` moved toward the low row of each column."""
    deltas = table.down
    transposed = transpose(board)
    return (
        board
        ^ deltas[transposed & ROW_MASK]
        ^ (deltas[(transposed >> 16) & ROW_MASK] << 4)
        ^ (deltas[(transposed >> 32) & ROW_MASK] << 8)
        ^ (deltas[(transposed >> 48) & ROW_MASK] << 12)
    )


def execute(board: int, direction: Direction, table: MoveTable) -> int:
    """
    Apply a move to a board.

    Parameters
    ----------
    board : int
        The packed board.
    direction : Direction
        The move to apply.
    table : MoveTable
        The precomputed move table.

    Returns
    -------
    int
        The board after sliding and merging, without any new tile.

    Raises
    ------
    ValueError
        If ``direction`` is not a ``Direction``.

    Notes
    -----
    - ``Direction.NONE`` returns the board unchanged.
    - Any other value, such as a bare action number, is rejected.
    - If the move has no effect, the same board value is returned.

    Example
    -------
    >>> from bitboard2048.core.movetable import default_table
    >>> hex(execute(0x2211, Direction.LEFT, default_table()))
    '0x3200'
    """
    if direction is Direction.LEFT:
        return move_left(board, table)
    if direction is Direction.RIGHT:
        return move_right(board, table)
    if direction is Direction.UP:
        return move_up(board, table)
    if direction is Direction.DOWN:
        return move_down(board, table)
    if direction is Direction.NONE:
        return board
    raise ValueError(f'Unknown direction: {direction!r}')


def table_sum(board: int, values: Sequence[int]) -> int:
    """Sum the entries of a per-row table for the four rows of ``board``."""
    return (
        values[board & ROW_MASK]
        + values[(board >> 16) & ROW_MASK]
        + values[(board >> 32) & ROW_MASK]
        + values[(board >> 48) & ROW_MASK]
    )


def score(board: int, table: MoveTable) -> int:
    """
    Compute the score of a board.

    Parameters
    ----------
    board : int
        The packed board.
    table : MoveTable
        The precomputed move table.

    Returns
    -------
    int
        Sum of the row scores of the four rows.
    """
    return table_sum(board, table.scores)


def spawn_tile(board: int, rng: Generator | None = None) -> int:
    """
    Draw a new tile for a random empty cell.

    Parameters
    ----------
    board : int
        The packed board. Must contain at least one empty cell.
    rng : Generator, optional
        Random generator; the module generator is used when omitted.

    Returns
    -------
    int
        The tile shifted into its cell, to be OR-ed into ``board``.

    Raises
    ------
    ValueError
        If the board has no empty cell.

    Notes
    -----
    - The tile is a "2" (nybble 1) with probability 0.9 and a "4" (nybble 2) otherwise.
    - The cell is chosen uniformly among the empty ones.
    """
    empty = count_empty(board)
    if empty == 0:
        raise ValueError(f'Cannot spawn a tile on a full board: {board:#018x}')

    rng = rng if rng is not None else _GENERATOR
    tile = 1 if rng.random() < _TWO_PROB else 2
    nth = int(rng.integers(empty))

    # ##: Walk the cells until the nth empty one.
    shift = 0
    while True:
        if ((board >> shift) & TILE_MASK) == 0:
            if nth == 0:
                return tile << shift
            nth -= 1
        shift += 4


def legal_directions(board: int, table: MoveTable) -> list[Direction]:
    """
    Determine which moves change the board.

    Parameters
    ----------
    board : int
        The packed board.
    table : MoveTable
        The precomputed move table.

    Returns
    -------
    list[Direction]
        Directions whose move yields a different board.
    """
    return [direction for direction in Direction.moves() if execute(board, direction, table) != board]


def is_done(board: int, table: MoveTable) -> bool:
    """Check whether no move changes the board."""
    return not legal_directions(board, table)

