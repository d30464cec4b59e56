class PercolationError(Exception):
    """Base class for errors raised by pypercolation."""


class InvalidSizeError(PercolationError, ValueError):
    """Raised when a grid, union-find or trial count is not strictly positive."""


class OutOfRangeError(PercolationError, IndexError):
    """Raised when a site coordinate or element index lies outside its range."""
