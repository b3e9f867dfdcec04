"""
Tests for the move table: row collapse, scores and the XOR deltas of every row pattern.
"""

from unittest import TestCase, main

from bitboard2048.core.bitboard import column_from, pack_row, reverse_row, row_cells
from bitboard2048.core.gameboard import execute
from bitboard2048.core.gamemove import Direction
from bitboard2048.core.masks import ROW_PATTERNS
from bitboard2048.core.movetable import MoveTable, collapse_row, default_table, row_score


def reference_slide(cells: list[int]) -> list[int]:
    """Compact, merge equal neighbours once, compact again; tiles move toward index 0."""
    tiles = [cell for cell in cells if cell != 0]
    result = []
    i = 0
    while i < len(tiles):
        if i + 1 < len(tiles) and tiles[i] == tiles[i + 1]:
            result.append(min(tiles[i] + 1, 15))
            i += 2
        else:
            result.append(tiles[i])
            i += 1
    return result + [0] * (4 - len(result))


class TestCollapseRow(TestCase):
    """Canonical collapse of four cells."""

    def test_slides_into_empty_cells(self):
        self.assertEqual(collapse_row([0, 0, 0, 3]), [3, 0, 0, 0])
        self.assertEqual(collapse_row([0, 2, 0, 5]), [2, 5, 0, 0])

    def test_merges_pairs(self):
        self.assertEqual(collapse_row([1, 1, 2, 2]), [2, 3, 0, 0])
        self.assertEqual(collapse_row([0, 1, 1, 0]), [2, 0, 0, 0])

    def test_merges_each_tile_once(self):
        self.assertEqual(collapse_row([1, 1, 1, 1]), [2, 2, 0, 0])
        self.assertEqual(collapse_row([2, 1, 1, 0]), [2, 2, 0, 0])
        self.assertEqual(collapse_row([3, 3, 3, 0]), [4, 3, 0, 0])

    def test_no_change(self):
        self.assertEqual(collapse_row([1, 2, 3, 4]), [1, 2, 3, 4])
        self.assertEqual(collapse_row([0, 0, 0, 0]), [0, 0, 0, 0])

    def test_saturates_at_fifteen(self):
        self.assertEqual(collapse_row([15, 15, 0, 0]), [15, 0, 0, 0])
        self.assertEqual(collapse_row([14, 14, 15, 15]), [15, 15, 0, 0])

    def test_input_not_modified(self):
        cells = [1, 1, 0, 0]
        collapse_row(cells)
        self.assertEqual(cells, [1, 1, 0, 0])

    def test_agrees_with_reference_on_every_row(self):
        for row in range(ROW_PATTERNS):
            cells = row_cells(row)
            self.assertEqual(collapse_row(cells), reference_slide(cells), msg=f'row={row:#06x}')


class TestRowScore(TestCase):
    """Score carried by a row."""

    def test_values(self):
        self.assertEqual(row_score([0, 0, 0, 0]), 0)
        self.assertEqual(row_score([1, 1, 0, 0]), 0)
        # ##>: A "4" is one merge of two "2" tiles.
        self.assertEqual(row_score([2, 0, 0, 0]), 4)
        # ##>: An "8" took two "4" merges and one "8" merge.
        self.assertEqual(row_score([3, 0, 0, 0]), 16)
        self.assertEqual(row_score([2, 3, 1, 0]), 20)

    def test_merge_adds_merged_value(self):
        """Merging two tiles adds the value of the created tile."""
        for value in range(1, 14):
            self.assertEqual(row_score([value + 1]) - 2 * row_score([value]), 1 << (value + 1))


class TestMoveTable(TestCase):
    """Deltas of the four directions against a direct simulation."""

    @classmethod
    def setUpClass(cls):
        cls.table = default_table()

    def test_table_sizes(self):
        for values in (self.table.left, self.table.right, self.table.up, self.table.down, self.table.scores):
            self.assertEqual(len(values), ROW_PATTERNS)

    def test_default_table_is_shared(self):
        self.assertIs(default_table(), self.table)

    def test_generate_is_deterministic(self):
        self.assertEqual(MoveTable.generate(), self.table)

    def test_table_is_immutable(self):
        with self.assertRaises(AttributeError):
            self.table.left = ()
        with self.assertRaises(TypeError):
            self.table.left[0] = 1

    def test_right_delta_matches_collapse(self):
        for row in range(ROW_PATTERNS):
            expected = pack_row(collapse_row(row_cells(row)))
            self.assertEqual(self.table.right[row] ^ row, expected)

    def test_left_delta_matches_reversed_slide(self):
        for row in range(ROW_PATTERNS):
            expected = pack_row(reference_slide(row_cells(row)[::-1])[::-1])
            self.assertEqual(self.table.left[row] ^ row, expected)
            self.assertEqual(execute(row, Direction.LEFT, self.table), expected)

    def test_vertical_moves_on_a_single_column(self):
        """A row laid out as the first column of a board slides the same way vertically."""
        for row in range(ROW_PATTERNS):
            cells = row_cells(row)
            board = column_from(row)

            down = column_from(pack_row(reference_slide(cells)))
            up = column_from(pack_row(reference_slide(cells[::-1])[::-1]))

            self.assertEqual(execute(board, Direction.DOWN, self.table), down)
            self.assertEqual(execute(board, Direction.UP, self.table), up)

    def test_left_and_up_keyed_by_reversed_row(self):
        for row in (0x0000, 0x0011, 0x2211, 0x1234, 0xF0F0):
            self.assertEqual(self.table.left[reverse_row(row)], reverse_row(self.table.right[row]))
            self.assertEqual(self.table.up[reverse_row(row)], column_from(reverse_row(self.table.right[row])))


if __name__ == '__main__':
    main()
