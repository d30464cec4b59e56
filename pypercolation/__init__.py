from pypercolation.exceptions import (
    PercolationError,
    InvalidSizeError,
    OutOfRangeError
)
from pypercolation.UnionFind import WeightedUnionFind
from pypercolation.Percolation import Percolation
from pypercolation.PercolationStats import (
    PercolationStats,
    run,
    run_trial,
    sample_mean,
    sample_stddev
)

__all__ = [
    "PercolationError",
    "InvalidSizeError",
    "OutOfRangeError",
    "WeightedUnionFind",
    "Percolation",
    "PercolationStats",
    "run",
    "run_trial",
    "sample_mean",
    "sample_stddev",
]
