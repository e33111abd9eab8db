"""
biserial.api - User-Friendly Facade
===================================

Validated entry points organized by what users want to compute. Arguments
are checked against the supported call shapes here so the statistical layer
can assume clean numeric input.

Examples
--------
>>> from biserial.api import point_biserial
>>> round(point_biserial([1, 2, 3], [4, 5, 6]), 4)
-0.8018
"""

from biserial.api.correlation import (
    PointBiserialConfig,
    point_biserial,
    point_biserial_outcome,
    point_biserial_test,
)

__all__ = [
    "PointBiserialConfig",
    "point_biserial",
    "point_biserial_outcome",
    "point_biserial_test",
]
