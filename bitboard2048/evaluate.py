# -*- coding: utf-8 -*-
"""
Play a batch of random games from the command line and report the scores.
"""
import logging
from argparse import ArgumentParser, ArgumentTypeError

from bitboard2048.core.movetable import default_table
from bitboard2048.runner import TILE_VALUES, BatchConfig, BatchSummary, play_games, summarize
from bitboard2048.utils import render


def positive_int(value: str) -> int:
    """Parse a strictly positive integer argument."""
    try:
        number = int(value)
    except ValueError as error:
        raise ArgumentTypeError(f'value must be a number, got {value!r}') from error
    if number < 1:
        raise ArgumentTypeError(f'value must be >= 1, got {number}')
    return number


def build_parser() -> ArgumentParser:
    """Build the command line parser."""
    parser = ArgumentParser(description='Play 2048 games with random moves on a bitboard engine.')
    parser.add_argument('-c', '--count', type=positive_int, default=1, help='number of games played (default: 1)')
    parser.add_argument('-t', '--threads', type=positive_int, default=1, help='number of worker threads (default: 1)')
    parser.add_argument('-s', '--seed', type=int, default=None, help='root seed for reproducible runs')
    parser.add_argument('-q', '--quiet', action='store_true', help="don't print output")
    parser.add_argument('--log-level', default='WARNING', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser


def format_summary(summary: BatchSummary) -> str:
    """
    Format a batch summary for the console.

    Parameters
    ----------
    summary : BatchSummary
        The batch results.

    Returns
    -------
    str
        Averages, the best board and the share of games reaching each tile.
    """
    lines = [
        f'played: {summary.played}',
        f'average score: {summary.average_score:.2f}',
        f'best score: {summary.best_score}',
        '',
        render(summary.best_board),
        '',
    ]
    for tile in TILE_VALUES:
        count = summary.tile_counts[tile]
        lines.append(f'{tile:5}: ({summary.tile_rate(tile):06.2f}%) {count} of {summary.played}')
    return '\n'.join(lines)


def run(argv: list[str] | None = None) -> BatchSummary:
    """
    Parse the arguments, play the batch and print its report.

    Parameters
    ----------
    argv : list[str], optional
        Arguments without the program name; ``sys.argv`` is used when omitted.

    Returns
    -------
    BatchSummary
        The results of the batch.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    config = BatchConfig(count=args.count, threads=args.threads, seed=args.seed, show_progress=not args.quiet)
    table = default_table()
    summary = summarize(play_games(config, table=table), table)

    if not args.quiet:
        print(format_summary(summary))
    return summary


def main(argv: list[str] | None = None) -> None:
    """Command line entry point."""
    run(argv)


if __name__ == '__main__':
    main()
