"""
biserial — point-biserial correlation for two-group samples.

The point-biserial coefficient is the Pearson correlation between a
continuous variable and a dichotomous one. Here the dichotomous variable is
implicit: callers pass the continuous values of each group as two separate
samples, and choose how the pooled standard deviation is normalized.

Malformed input (empty samples, unsupported call shapes) raises. Numerically
degenerate input (for example, no spread in the pooled sample) yields NaN,
and `point_biserial_outcome` reports why.

Example
-------
>>> import biserial
>>> round(biserial.point_biserial([1, 2, 3], [4, 5, 6]), 7)
-0.8017837
>>> assert hasattr(biserial, "stats")
"""

from biserial import api, core, stats
from biserial.__version__ import __version__
from biserial.api import (
    PointBiserialConfig,
    point_biserial,
    point_biserial_outcome,
    point_biserial_test,
)
from biserial.core.errors import (
    BiserialError,
    DegenerateSampleError,
    InvalidArgumentError,
    TypeMismatchError,
)
from biserial.core.names import Normalization
from biserial.stats.correlation import PointBiserialOutcome, PointBiserialTest

__all__ = [
    "__version__",
    "BiserialError",
    "DegenerateSampleError",
    "InvalidArgumentError",
    "Normalization",
    "PointBiserialConfig",
    "PointBiserialOutcome",
    "PointBiserialTest",
    "TypeMismatchError",
    "point_biserial",
    "point_biserial_outcome",
    "point_biserial_test",
]
