"""
Precomputed move and score tables for the bitboard engine.

Every 16-bit row pattern is collapsed once. The effect of each move is stored as an XOR delta, so applying a move to
a full board costs four lookups and four XORs.
"""

import logging
import threading
from dataclasses import dataclass, field
from time import perf_counter

from bitboard2048.core.bitboard import column_from, pack_row, reverse_row, row_cells
from bitboard2048.core.masks import MAX_EXPONENT, ROW_PATTERNS

# ##>: Module logger.
_logger = logging.getLogger(__name__)

# ##>: Process-wide table, built on first use.
_DEFAULT_TABLE = None
_DEFAULT_LOCK = threading.Lock()


def collapse_row(cells: list[int]) -> list[int]:
    """
    Slide and merge four cells toward index 0.

    Parameters
    ----------
    cells : list[int]
        Four nybble values, index 0 being the cell the tiles move toward.

    Returns
    -------
    list[int]
        The collapsed cells.

    Notes
    -----
    - Each tile merges at most once: ``[1, 1, 1, 1]`` gives ``[2, 2, 0, 0]``.
    - A merge of two ``15`` cells stays ``15`` instead of overflowing the nybble.
    """
    line = list(cells)

    i = 0
    while i < 3:
        # ##: Find the next non-empty cell after i.
        j = i + 1
        while j < 4 and line[j] == 0:
            j += 1
        if j == 4:
            break

        # ##: Pull it into an empty slot, then look at the same slot again.
        if line[i] == 0:
            line[i], line[j] = line[j], 0
            continue

        if line[i] == line[j]:
            if line[i] != MAX_EXPONENT:
                line[i] += 1
            line[j] = 0
        i += 1

    return line


def row_score(cells: list[int]) -> int:
    """
    Compute the score carried by the tiles of a row.

    Parameters
    ----------
    cells : list[int]
        Four nybble values.

    Returns
    -------
    int
        Sum of ``(v - 1) * 2 ** v`` over cells with ``v >= 2``.

    Notes
    -----
    A tile ``2 ** v`` built from spawned "2" tiles took ``v - 1`` rounds of merges, each worth ``2 ** v`` in total.
    A nybble of 1 is a spawned "2" and is worth nothing.
    """
    return sum((value - 1) * (1 << value) for value in cells if value >= 2)


@dataclass(frozen=True)
class MoveTable:
    """
    XOR deltas and scores for every row pattern.

    Attributes
    ----------
    left : tuple[int, ...]
        Row delta for a move toward the high nybble of a row.
    right : tuple[int, ...]
        Row delta for a move toward the low nybble of a row.
    up : tuple[int, ...]
        Column delta, keyed by a transposed row, for a move toward the high row.
    down : tuple[int, ...]
        Column delta, keyed by a transposed row, for a move toward the low row.
    scores : tuple[int, ...]
        Score carried by the tiles of each row.
    """

    left: tuple[int, ...] = field(repr=False)
    right: tuple[int, ...] = field(repr=False)
    up: tuple[int, ...] = field(repr=False)
    down: tuple[int, ...] = field(repr=False)
    scores: tuple[int, ...] = field(repr=False)

    @classmethod
    def generate(cls) -> 'MoveTable':
        """
        Build the tables for all 65536 row patterns.

        Returns
        -------
        MoveTable
            A fully built, immutable table.

        Notes
        -----
        Only the collapse toward the low nybble is simulated. The right and down deltas are keyed by the row itself,
        the left and up deltas by the reversed row, since a move one way on a row is the move the other way on the
        row read backwards.
        """
        start = perf_counter()

        left = [0] * ROW_PATTERNS
        right = [0] * ROW_PATTERNS
        up = [0] * ROW_PATTERNS
        down = [0] * ROW_PATTERNS
        scores = [0] * ROW_PATTERNS

        for row in range(ROW_PATTERNS):
            cells = row_cells(row)
            result = pack_row(collapse_row(cells))
            scores[row] = row_score(cells)

            rev_row = reverse_row(row)
            rev_result = reverse_row(result)

            right[row] = row ^ result
            left[rev_row] = rev_row ^ rev_result
            down[row] = column_from(row) ^ column_from(result)
            up[rev_row] = column_from(rev_row) ^ column_from(rev_result)

        _logger.debug('Move table built in %.3f s', perf_counter() - start)
        return cls(left=tuple(left), right=tuple(right), up=tuple(up), down=tuple(down), scores=tuple(scores))


def default_table() -> MoveTable:
    """
    Get the process-wide move table, building it on first use.

    Returns
    -------
    MoveTable
        The shared table.

    Notes
    -----
    Concurrent first calls build the table once; later calls return it without locking.
    """
    global _DEFAULT_TABLE

    if _DEFAULT_TABLE is None:
        with _DEFAULT_LOCK:
            if _DEFAULT_TABLE is None:
                _DEFAULT_TABLE = MoveTable.generate()
    return _DEFAULT_TABLE
