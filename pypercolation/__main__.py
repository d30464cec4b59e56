"""Command-line entry point: ``python -m pypercolation N T``."""

import argparse
import logging
import sys
from typing import List, Optional
from pypercolation.PercolationStats import PercolationStats
from pypercolation.exceptions import PercolationError


def main(argv: Optional[List[str]] = None) -> int:
    """Parse ``N`` and ``T``, run the trials and print the summary."""

    parser = argparse.ArgumentParser(
        prog="pypercolation",
        description="Estimate the site percolation threshold of an N-by-N grid.",
    )
    parser.add_argument("n", type=int, help="Grid side length (N > 0)")
    parser.add_argument("trials", type=int, help="Number of trials (T > 0)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every trial"
    )
    args = parser.parse_args(argv)

    if args.n <= 0:
        parser.error(f"N must be a positive integer, got {args.n}")
    if args.trials < 1:
        parser.error(f"T must be a positive integer, got {args.trials}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        stats = PercolationStats(args.n, args.trials, seed=args.seed)
    except PercolationError as exc:
        print(f"pypercolation: error: {exc}", file=sys.stderr)
        return 1

    print(stats.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
