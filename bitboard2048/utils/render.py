"""
Conversion between packed boards and 4x4 grids, and console rendering of a board.
"""

from numpy import asarray, int64, ndarray, where

from bitboard2048.core.bitboard import get_tile
from bitboard2048.core.masks import MAX_EXPONENT

# ##>: Cell index of each grid position, top-left first.
_DISPLAY_ORDER = tuple(range(15, -1, -1))

_FRAME_TOP = (
    '*-------------------------------------------*',
    '|   _____________________________________   |',
    '|   |        |        |        |        |   |',
)
_FRAME_SEPARATOR = '|   |--------|--------|--------|--------|   |'
_FRAME_BOTTOM = (
    '|   |________|________|________|________|   |',
    '|                                           |',
    '*-------------------------------------------*',
)


def to_grid(board: int) -> ndarray:
    """
    Unpack a board into a 4x4 grid of tile values.

    Parameters
    ----------
    board : int
        The packed board.

    Returns
    -------
    ndarray
        A (4, 4) int64 array; ``grid[0, 0]`` is the top-left cell, empty cells are 0.

    Example
    -------
    >>> to_grid(0x0000_0000_0000_2211)[3].tolist()
    [4, 4, 2, 2]
    """
    exponents = asarray([get_tile(board, index) for index in _DISPLAY_ORDER], dtype=int64).reshape(4, 4)
    return where(exponents > 0, 1 << exponents, 0)


def from_grid(grid) -> int:
    """
    Pack a 4x4 grid of tile values into a board.

    Parameters
    ----------
    grid : array_like
        A (4, 4) grid of tile values, 0 for empty cells, top-left first.

    Returns
    -------
    int
        The packed board.

    Raises
    ------
    ValueError
        If the grid is not 4x4 or holds a value that is not a tile between 2 and 32768.
    """
    cells = asarray(grid)
    if cells.shape != (4, 4):
        raise ValueError(f'Expected a (4, 4) grid, got shape {cells.shape}.')

    board = 0
    for index, value in zip(_DISPLAY_ORDER, cells.ravel().tolist()):
        if value == 0:
            continue

        exponent = int(value).bit_length() - 1
        if value != 1 << exponent or not 1 <= exponent <= MAX_EXPONENT:
            raise ValueError(f'Invalid tile value {value}: expected 0 or a power of two between 2 and 32768.')
        board |= exponent << (index << 2)
    return board


def render(board: int) -> str:
    """
    Render a board as a framed text grid.

    Parameters
    ----------
    board : int
        The packed board.

    Returns
    -------
    str
        Multi-line text, one framed row of cells per board row, empty cells shown as 0.
    """
    rows = [
        '|   |' + '|'.join(f'{value:^8}' for value in row) + '|   |'
        for row in to_grid(board).tolist()
    ]
    return '\n'.join([*_FRAME_TOP, f'\n{_FRAME_SEPARATOR}\n'.join(rows), *_FRAME_BOTTOM])
