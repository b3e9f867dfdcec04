"""
Bit masks and game-rule constants for the packed 64-bit board.
"""

# ##>: Low 16 bits of a board, i.e. one row of four nybbles.
ROW_MASK: int = 0xFFFF

# ##>: Lowest nybble of each 16-bit row, i.e. one cell per row after a transpose.
COL_MASK: int = 0x000F_000F_000F_000F

# ##>: A single 4-bit cell.
TILE_MASK: int = 0xF

# ##>: Every bit of a board.
BOARD_MASK: int = 0xFFFF_FFFF_FFFF_FFFF

# ##>: Largest exponent a nybble can hold; merges saturate here.
MAX_EXPONENT: int = 15

# ##>: Number of distinct 16-bit row patterns.
ROW_PATTERNS: int = 1 << 16

# ##>: Tile spawn probabilities keyed by nybble value (1 is a "2", 2 is a "4").
TILE_SPAWN_PROBS: dict[int, float] = {1: 0.9, 2: 0.1}
