"""
Percolation module
==================

Site percolation on an ``n``-by-``n`` grid. Every site starts *blocked* and may
be *opened*; an open site is *full* when a chain of open, orthogonally adjacent
sites links it to the top row, and the grid *percolates* when some site of the
bottom row is full.

Connectivity is tracked incrementally by a :class:`WeightedUnionFind` over the
``n * n`` sites plus two virtual nodes, one joined to every open site of the
top row and one joined to every open site of the bottom row. ``percolates``
and ``is_full`` therefore cost a single connectivity query instead of a scan
over a whole row.

Because every open bottom-row site joins the virtual bottom, a percolating
grid also links *every* bottom component to the virtual top ("backwash").
By default a second structure without the virtual bottom is kept so that
``is_full`` stays exact; pass ``prevent_backwash=False`` to save that memory
and answer fullness from the shared structure instead.

Rows and columns are 1-based externally, with ``(1, 1)`` the upper-left site.
"""

import operator
import numpy as np
from typing import Iterable, List, Tuple, Union
from pypercolation.UnionFind import WeightedUnionFind
from pypercolation.exceptions import InvalidSizeError, OutOfRangeError


class Percolation:
    """An ``n``-by-``n`` site percolation grid."""

    def __init__(self, n: int, prevent_backwash: bool = True):
        """Create a fully blocked grid.

        Parameters
        ----------
        n : int
            Side length of the grid. Must be strictly positive.
        prevent_backwash : bool, default True
            If True, fullness is answered by a second union-find holding only
            the virtual top, so bottom-row sites do not become full through
            the virtual bottom once the grid percolates.

        Raises
        ------
        InvalidSizeError
            If ``n`` is not positive.

        """
        n = operator.index(n)
        if n <= 0:
            raise InvalidSizeError(f"grid size must be > 0, got {n}")

        self._n = n
        self._virtual_top = n * n
        self._virtual_bottom = n * n + 1
        self._open = np.zeros(n * n, dtype=bool)
        self._open_count = 0

        self._uf = WeightedUnionFind(n * n + 2)
        # same index space minus the virtual bottom
        self._full_uf = WeightedUnionFind(n * n + 1) if prevent_backwash else None

    @property
    def n(self) -> int:
        """Side length of the grid."""
        return self._n

    @property
    def virtual_top(self) -> int:
        return self._virtual_top

    @property
    def virtual_bottom(self) -> int:
        return self._virtual_bottom

    @property
    def prevent_backwash(self) -> bool:
        return self._full_uf is not None

    def _index(self, row: int, col: int) -> int:
        """Validate 1-based coordinates and map them to a row-major index.

        Parameters
        ----------
        row : int
            Row number in ``[1, n]``.
        col : int
            Column number in ``[1, n]``.

        Returns
        -------
        int
            The element index ``(row - 1) * n + (col - 1)``.

        Raises
        ------
        OutOfRangeError
            If either coordinate lies outside ``[1, n]``.
        TypeError
            If either coordinate is not an integer, or is a bool.

        """
        if isinstance(row, bool) or isinstance(col, bool):
            raise TypeError("site coordinates must be integers, not bool")
        row = operator.index(row)
        col = operator.index(col)
        if row < 1 or row > self._n or col < 1 or col > self._n:
            raise OutOfRangeError(
                f"site ({row}, {col}) is outside the grid, "
                f"row and col must be between 1 and {self._n}"
            )
        return (row - 1) * self._n + (col - 1)

    def neighbours(self, row: int, col: int) -> List[Tuple[int, int]]:
        """Return the orthogonal neighbours of a site that lie inside the grid.

        Neighbours are listed left, right, up, down; edge and corner sites
        have fewer than four. Open state is not consulted.

        Parameters
        ----------
        row : int
            Row number in ``[1, n]``.
        col : int
            Column number in ``[1, n]``.

        Returns
        -------
        List[Tuple[int, int]]
            The 1-based ``(row, col)`` of each neighbour.

        """
        self._index(row, col)
        return self._neighbours(row, col)

    def _neighbours(self, row: int, col: int) -> List[Tuple[int, int]]:
        # coordinates already validated
        n = self._n
        candidates = []
        if col > 1:
            candidates.append((row, col - 1))
        if col < n:
            candidates.append((row, col + 1))
        if row > 1:
            candidates.append((row - 1, col))
        if row < n:
            candidates.append((row + 1, col))
        return candidates

    def open(self, row: int, col: int) -> None:
        """Open a site and connect it to its open neighbours.

        Opening an already open site does nothing. A site of the first row is
        also joined to the virtual top, and a site of the last row to the
        virtual bottom; with ``n == 1`` the single site joins both.

        Parameters
        ----------
        row : int
            Row number in ``[1, n]``.
        col : int
            Column number in ``[1, n]``.

        Raises
        ------
        OutOfRangeError
            If either coordinate lies outside ``[1, n]``. The grid is left
            unchanged.

        """
        index = self._index(row, col)
        if self._open[index]:
            return

        self._open[index] = True
        self._open_count += 1

        for nrow, ncol in self._neighbours(row, col):
            neighbour = (nrow - 1) * self._n + (ncol - 1)
            if self._open[neighbour]:
                self._connect(index, neighbour)

        if row == 1:
            self._connect(index, self._virtual_top)
        if row == self._n:
            self._uf.union(index, self._virtual_bottom)

    def _connect(self, index: int, other: int) -> None:
        self._uf.union(index, other)
        if self._full_uf is not None:
            self._full_uf.union(index, other)

    def open_many(
        self, sites: Union[Iterable[Tuple[int, int]], np.ndarray]
    ) -> None:
        """Open a sequence of sites in order.

        Parameters
        ----------
        sites : Iterable[Tuple[int, int]] or np.ndarray
            ``(row, col)`` pairs, or an integer array of shape ``(k, 2)``.

        """
        for row, col in sites:
            self.open(row, col)

    def is_open(self, row: int, col: int) -> bool:
        """Check whether a site is open.

        Raises
        ------
        OutOfRangeError
            If either coordinate lies outside ``[1, n]``.

        """
        return bool(self._open[self._index(row, col)])

    def is_full(self, row: int, col: int) -> bool:
        """Check whether a site is open and connected to the top row.

        A blocked site is never full.

        Parameters
        ----------
        row : int
            Row number in ``[1, n]``.
        col : int
            Column number in ``[1, n]``.

        Returns
        -------
        bool
            True if the site is full; False otherwise.

        Raises
        ------
        OutOfRangeError
            If either coordinate lies outside ``[1, n]``.

        """
        index = self._index(row, col)
        if not self._open[index]:
            return False
        uf = self._full_uf if self._full_uf is not None else self._uf
        return uf.is_connected(index, self._virtual_top)

    def percolates(self) -> bool:
        """Check whether the virtual top and virtual bottom are connected."""
        return self._uf.is_connected(self._virtual_top, self._virtual_bottom)

    def number_of_open_sites(self) -> int:
        return self._open_count

    @property
    def open_sites(self) -> np.ndarray:
        """Boolean ``(n, n)`` copy of the open state of every site."""
        return self._open.reshape(self._n, self._n).copy()

    @property
    def full_sites(self) -> np.ndarray:
        """Boolean ``(n, n)`` mask of the full sites."""
        n = self._n
        mask = np.zeros((n, n), dtype=bool)
        for index in np.flatnonzero(self._open):
            row, col = divmod(int(index), n)
            mask[row, col] = self.is_full(row + 1, col + 1)
        return mask

    def __str__(self) -> str:
        # '#' blocked, 'o' open, '*' full
        full = self.full_sites
        lines = []
        for row in range(self._n):
            line = ""
            for col in range(self._n):
                if full[row, col]:
                    line += "*"
                elif self._open[row * self._n + col]:
                    line += "o"
                else:
                    line += "#"
            lines.append(line)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Percolation(n={self._n}, open_sites={self._open_count}, "
            f"percolates={self.percolates()})"
        )
