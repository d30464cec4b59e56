"""
Percolation threshold estimation
================================

Monte-Carlo estimate of the site percolation threshold of an ``n``-by-``n``
grid. Each trial opens uniformly random blocked sites of a fresh
:class:`~pypercolation.Percolation` until it percolates and records the
fraction of open sites at that moment. Over ``trials`` independent trials the
sample mean, sample standard deviation and a 95% confidence interval of that
fraction are reported.
"""

import logging
import math
import operator
import numpy as np
from typing import Optional, Sequence, Tuple, Union
from pypercolation.Percolation import Percolation
from pypercolation.exceptions import InvalidSizeError

# z-score of the two-sided 95% normal interval
CONFIDENCE_Z = 1.96

SeedLike = Optional[Union[int, np.random.Generator]]


def sample_mean(samples: Sequence[float]) -> float:
    """Compute the arithmetic mean of a non-empty sample.

    Parameters
    ----------
    samples : Sequence[float]
        The sample values.

    Returns
    -------
    float
        The mean of ``samples``.

    """
    values = np.asarray(samples, dtype=float)
    if values.size == 0:
        raise ValueError("mean of an empty sample is undefined")
    return float(values.mean())


def sample_stddev(samples: Sequence[float]) -> float:
    """Compute the sample standard deviation (``n - 1`` denominator).

    Parameters
    ----------
    samples : Sequence[float]
        The sample values.

    Returns
    -------
    float
        The standard deviation, or NaN when fewer than two values are given.

    """
    values = np.asarray(samples, dtype=float)
    if values.size < 2:
        return math.nan
    return float(values.std(ddof=1))


def run_trial(n: int, rng: np.random.Generator) -> float:
    """Open random sites of a fresh grid until it percolates.

    Parameters
    ----------
    n : int
        Side length of the grid.
    rng : np.random.Generator
        Source of uniformly distributed site coordinates.

    Returns
    -------
    float
        The fraction of open sites at the first opening that made the grid
        percolate.

    """
    percolation = Percolation(n, prevent_backwash=False)
    while not percolation.percolates():
        row = int(rng.integers(n)) + 1
        col = int(rng.integers(n)) + 1
        while percolation.is_open(row, col):
            row = int(rng.integers(n)) + 1
            col = int(rng.integers(n)) + 1
        percolation.open(row, col)
    return percolation.number_of_open_sites() / (n * n)


class PercolationStats:
    """Run independent percolation trials and summarise their thresholds."""

    def __init__(self, n: int, trials: int, seed: SeedLike = None):
        """Perform ``trials`` independent experiments on an ``n``-by-``n`` grid.

        Parameters
        ----------
        n : int
            Side length of every grid. Must be at least 1.
        trials : int
            Number of trials. Must be at least 1.
        seed : int or np.random.Generator, optional
            Seed for ``numpy.random.default_rng`` or a generator to draw from.
            Equal integer seeds reproduce the same thresholds.

        Raises
        ------
        InvalidSizeError
            If ``n`` or ``trials`` is smaller than 1.

        """
        n = operator.index(n)
        trials = operator.index(trials)
        if n < 1:
            raise InvalidSizeError(f"grid size must be > 0, got {n}")
        if trials < 1:
            raise InvalidSizeError(f"number of trials must be > 0, got {trials}")

        self.n = n
        self.trials = trials
        rng = np.random.default_rng(seed)

        self.thresholds = np.empty(trials, dtype=float)
        for i in range(trials):
            self.thresholds[i] = run_trial(n, rng)
            logging.debug(
                "trial %d/%d: threshold %.6f", i + 1, trials, self.thresholds[i]
            )

        if trials < 2:
            logging.warning(
                "Only one trial was run; the standard deviation and confidence "
                "interval are undefined."
            )
        logging.info(
            "Ran %d trials on a %dx%d grid: mean threshold %.6f",
            trials, n, n, self.mean(),
        )

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        return sample_mean(self.thresholds)

    def stddev(self) -> float:
        """Sample standard deviation of the percolation threshold."""
        return sample_stddev(self.thresholds)

    def confidence_lo(self) -> float:
        """Low endpoint of the 95% confidence interval."""
        return self.mean() - CONFIDENCE_Z * self.stddev() / math.sqrt(self.trials)

    def confidence_hi(self) -> float:
        """High endpoint of the 95% confidence interval."""
        return self.mean() + CONFIDENCE_Z * self.stddev() / math.sqrt(self.trials)

    def confidence_interval(self) -> Tuple[float, float]:
        return self.confidence_lo(), self.confidence_hi()

    def summary(self) -> str:
        """Format mean, standard deviation and confidence interval as three lines."""
        lo, hi = self.confidence_interval()
        return (
            f"mean                    = {self.mean()}\n"
            f"stddev                  = {self.stddev()}\n"
            f"95% confidence interval = [{lo}, {hi}]"
        )


def run(n: int, trials: int, seed: SeedLike = None) -> PercolationStats:
    """Estimate the percolation threshold of an ``n``-by-``n`` grid.

    Parameters
    ----------
    n : int
        Side length of the grid.
    trials : int
        Number of independent trials.
    seed : int or np.random.Generator, optional
        Seed or generator for the random site choices.

    Returns
    -------
    PercolationStats
        The completed experiment.

    """
    return PercolationStats(n, trials, seed=seed)
