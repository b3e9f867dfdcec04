"""
Tests for grid conversion and console rendering.
"""

from unittest import TestCase, main

import numpy as np

from bitboard2048.utils.render import from_grid, render, to_grid


class TestGrid(TestCase):
    """Conversion between packed boards and grids of tile values."""

    def test_to_grid(self):
        grid = to_grid(0x0011_0000_0000_2211)
        expected = np.array([[0, 0, 2, 2], [0, 0, 0, 0], [0, 0, 0, 0], [4, 4, 2, 2]])
        np.testing.assert_array_equal(grid, expected)
        self.assertEqual(grid.shape, (4, 4))

    def test_from_grid(self):
        grid = [[2048, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 32768]]
        self.assertEqual(from_grid(grid), 0xB000_0000_0000_000F)

    def test_inverse(self):
        board = 0xFEDC_BA98_7654_3210
        self.assertEqual(from_grid(to_grid(board)), board)

    def test_invalid_shape(self):
        with self.assertRaises(ValueError):
            from_grid(np.zeros((3, 3), dtype=np.int64))

    def test_invalid_values(self):
        for value in (1, 3, 6, 65536, -2):
            grid = np.zeros((4, 4), dtype=np.int64)
            grid[1, 2] = value
            with self.assertRaises(ValueError, msg=f'value={value}'):
                from_grid(grid)


class TestRender(TestCase):
    """Framed console output."""

    def test_layout(self):
        lines = render(0x0000_0000_0000_2211).splitlines()

        # ##>: Three header lines, four rows with three separators, three footer lines.
        self.assertEqual(len(lines), 13)
        self.assertTrue(all(len(line) == len(lines[0]) for line in lines))
        self.assertEqual(lines[0], '*-------------------------------------------*')
        self.assertEqual(lines[9], '|   |   4    |   4    |   2    |   2    |   |')

    def test_empty_cells(self):
        self.assertIn('|   0    |   0    |   0    |   0    |', render(0))


if __name__ == '__main__':
    main()
