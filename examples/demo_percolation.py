import numpy as np
from pypercolation import Percolation

n = 20
rng = np.random.default_rng(0)
grid = Percolation(n)

while not grid.percolates():
    row, col = rng.integers(n, size=2) + 1
    grid.open(row, col)

print(grid)
print()
print(
    f"percolated after {grid.number_of_open_sites()} of {n * n} sites "
    f"({grid.number_of_open_sites() / (n * n):.3f})"
)
