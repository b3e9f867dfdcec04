"""
Bit-arithmetic primitives for the packed 64-bit 2048 board.

A board is a plain integer holding sixteen 4-bit cells ("nybbles"). Cell ``n`` occupies bits ``4n`` to ``4n + 3``
and row ``r`` occupies bits ``16r`` to ``16r + 15``. A cell value of ``0`` is empty, a value ``k > 0`` is a tile
worth ``2 ** k``.
"""

from bitboard2048.core.masks import COL_MASK, TILE_MASK

# ##>: One bit per nybble, at the nybble's lowest position.
_NYBBLE_LOW_BITS = 0x1111_1111_1111_1111


def transpose(board: int) -> int:
    """
    Exchange rows and columns of a board.

    Parameters
    ----------
    board : int
        The packed board.

    Returns
    -------
    int
        The transposed board.

    Notes
    -----
    - Runs as two rounds of masked shifts, no loop over cells.
    - ``transpose(transpose(board)) == board`` for every 64-bit value.

    Example
    -------
    >>> hex(transpose(0xFEDC_BA98_7654_3210))
    '0xfb73ea62d951c840'
    """
    a1 = board & 0xF0F0_0F0F_F0F0_0F0F
    a2 = board & 0x0000_F0F0_0000_F0F0
    a3 = board & 0x0F0F_0000_0F0F_0000
    a = a1 | (a2 << 12) | (a3 >> 12)

    b1 = a & 0xFF00_FF00_00FF_00FF
    b2 = a & 0x00FF_00FF_0000_0000
    b3 = a & 0x0000_0000_FF00_FF00
    return b1 | (b2 >> 24) | (b3 << 24)


def column_from(row: int) -> int:
    """
    Spread the four cells of a 16-bit row over the first cell slot of each board row.

    Parameters
    ----------
    row : int
        A 16-bit row pattern.

    Returns
    -------
    int
        A board whose lowest nybble of row ``r`` holds cell ``r`` of ``row``.
    """
    return (row | (row << 12) | (row << 24) | (row << 36)) & COL_MASK


def reverse_row(row: int) -> int:
    """Reverse the order of the four nybbles of a 16-bit row."""
    return ((row >> 12) & 0x000F) | ((row >> 4) & 0x00F0) | ((row << 4) & 0x0F00) | ((row << 12) & 0xF000)


def row_cells(row: int) -> list[int]:
    """Split a 16-bit row into its four cells, lowest nybble first."""
    return [(row >> shift) & TILE_MASK for shift in (0, 4, 8, 12)]


def pack_row(cells: list[int]) -> int:
    """Pack four cells, lowest nybble first, into a 16-bit row."""
    return cells[0] | (cells[1] << 4) | (cells[2] << 8) | (cells[3] << 12)


def get_tile(board: int, index: int) -> int:
    """Return the nybble stored at cell ``index`` (0 to 15)."""
    return (board >> (index << 2)) & TILE_MASK


def set_tile(board: int, index: int, value: int) -> int:
    """Return ``board`` with cell ``index`` replaced by ``value``."""
    shift = index << 2
    return (board & ~(TILE_MASK << shift)) | ((value & TILE_MASK) << shift)


def count_empty(board: int) -> int:
    """
    Count the empty cells of a board.

    Parameters
    ----------
    board : int
        The packed board.

    Returns
    -------
    int
        Number of nybbles equal to zero, between 0 and 16.
    """
    # ##: Fold every nybble onto its lowest bit, then count the occupied ones.
    occupied = (board | (board >> 1) | (board >> 2) | (board >> 3)) & _NYBBLE_LOW_BITS
    return 16 - occupied.bit_count()


def highest_tile(board: int) -> int:
    """
    Get the displayed value of the largest tile.

    Parameters
    ----------
    board : int
        The packed board.

    Returns
    -------
    int
        ``2 ** k`` for the largest nybble ``k``, or 0 for an empty board.
    """
    highest = max(get_tile(board, index) for index in range(16))
    return 1 << highest if highest else 0
