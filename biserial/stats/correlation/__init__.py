"""
biserial.stats.correlation
==========================

Correlation coefficients between a continuous and a dichotomous variable.
"""

from biserial.stats.correlation.point_biserial import (
    PointBiserialOutcome,
    PointBiserialTest,
    point_biserial,
    point_biserial_outcome,
    point_biserial_test,
)

__all__ = [
    "PointBiserialOutcome",
    "PointBiserialTest",
    "point_biserial",
    "point_biserial_outcome",
    "point_biserial_test",
]
