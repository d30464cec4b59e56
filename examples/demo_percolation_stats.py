import logging
from pypercolation import run

logging.basicConfig(level=logging.INFO)

for n in (10, 25, 50, 100):
    stats = run(n, 100, seed=n)
    lo, hi = stats.confidence_interval()
    print(f"n={n:4d}  mean={stats.mean():.4f}  stddev={stats.stddev():.4f}  "
          f"95% CI=[{lo:.4f}, {hi:.4f}]")
