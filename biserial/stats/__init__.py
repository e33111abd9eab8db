"""
Statistical routines.

1. **Common** (biserial.stats.common):
   Scheme-agnostic descriptive primitives (mean, standard deviation with a
   selectable divisor, square root).

2. **Correlation** (biserial.stats.correlation):
   Correlation coefficients built on the common primitives, currently the
   point-biserial correlation and its significance test.

Example:
--------
>>> from biserial.stats.correlation.point_biserial import point_biserial
>>> round(point_biserial([1, 2, 3], [4, 5, 6], "biased"), 6)
-0.948683
"""
