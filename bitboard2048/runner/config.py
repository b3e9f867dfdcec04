"""
Configuration of batch runs.
"""

from dataclasses import dataclass


@dataclass
class BatchConfig:
    """
    Configuration for playing a batch of games.

    Raises
    ------
    ValueError
        If ``count`` or ``threads`` is lower than 1.
    """

    # ##>: Number of games to play.
    count: int = 1

    # ##>: Number of worker threads; each plays whole games.
    threads: int = 1

    # ##>: Root seed; every game gets its own child seed. None draws fresh entropy.
    seed: int | None = None

    # ##>: Display a tqdm progress bar.
    show_progress: bool = True

    def __post_init__(self):
        if self.count < 1:
            raise ValueError(f'count must be >= 1, got {self.count}')
        if self.threads < 1:
            raise ValueError(f'threads must be >= 1, got {self.threads}')
