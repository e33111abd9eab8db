"""
biserial.api.correlation
========================

Public entry points for point-biserial correlation.

This layer validates call shapes and argument types before delegating to
`biserial.stats.correlation`. Two shapes are accepted:

    point_biserial(sample_a, sample_b)
    point_biserial(sample_a, sample_b, normalization)

Anything else raises `TypeMismatchError`; empty samples and unknown
normalization modes raise `InvalidArgumentError`.

Examples
--------
>>> from biserial.api.correlation import (
...     PointBiserialConfig,
...     point_biserial,
...     point_biserial_test,
... )
>>> round(point_biserial([1, 2, 3], [4, 5, 6]), 7)
-0.8017837
>>> round(point_biserial([1, 2, 3], [4, 5, 6], normalization="uncorrected"), 7)
-0.8783101
>>>
>>> # One-sided test configured up front
>>> config = PointBiserialConfig(alternative="less")
>>> result = point_biserial_test([1, 2, 3, 4], [5, 6, 7, 9], config=config)
"""

from __future__ import annotations
import numbers
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import numpy as np

from biserial.core.errors import InvalidArgumentError, TypeMismatchError
from biserial.core.names import ALTERNATIVES, DEFAULT_NORMALIZATION, Normalization
from biserial.stats.correlation.point_biserial import (
    PointBiserialOutcome,
    PointBiserialTest,
    point_biserial as _point_biserial,
    point_biserial_outcome as _point_biserial_outcome,
    point_biserial_test as _point_biserial_test,
)


@dataclass
class PointBiserialConfig:
    """
    Configuration for point-biserial analyses.

    Parameters
    ----------
    normalization : str, default="unbiased"
        Divisor for the pooled standard deviation:
        - "unbiased": n - 1
        - "uncorrected": n
        - "biased": n + 1
    alternative : str, default="two-sided"
        Alternative hypothesis for `point_biserial_test`:
        "two-sided", "greater" or "less"

    `normalization` sets the divisor of the coefficient reported by
    `point_biserial_test`; the test statistic itself is always Pearson r.

    Examples
    --------
    >>> PointBiserialConfig(normalization="biased").validate()
    """

    normalization: str = DEFAULT_NORMALIZATION.value
    alternative: str = "two-sided"

    def validate(self) -> None:
        """Validate configuration values."""
        Normalization.coerce(self.normalization)
        if self.alternative not in ALTERNATIVES:
            raise InvalidArgumentError(
                f"alternative must be one of {ALTERNATIVES}, got {self.alternative}"
            )


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _check_sample(sample: Any, position: str) -> None:
    """Reject anything that is not a flat sequence of real numbers."""
    if isinstance(sample, np.ndarray):
        if sample.ndim != 1 or sample.dtype.kind not in "iuf":
            raise TypeMismatchError(
                f"{position} sample must be a 1-D numeric array, "
                f"got shape {sample.shape} and dtype {sample.dtype}"
            )
        return
    if not isinstance(sample, (list, tuple)):
        raise TypeMismatchError(
            f"{position} sample must be a list, tuple or numpy array, "
            f"got {type(sample).__name__}"
        )
    for item in sample:
        if not _is_real(item):
            raise TypeMismatchError(
                f"{position} sample must contain only real numbers, "
                f"got {type(item).__name__}"
            )


_MISSING: Any = object()


def _validate(
    sample_a: Any,
    sample_b: Any,
    normalization: Any,
    extra: Sequence[Any],
    function: str,
) -> tuple:
    if sample_a is _MISSING or sample_b is _MISSING:
        raise TypeMismatchError(
            f"Function {function} expects (sample_a, sample_b[, normalization]), "
            "got fewer than two arguments"
        )
    if extra:
        raise TypeMismatchError(
            f"Function {function} expects (sample_a, sample_b[, normalization]), "
            f"got {len(extra)} extra argument(s)"
        )
    _check_sample(sample_a, "First")
    _check_sample(sample_b, "Second")
    if len(sample_a) == 0 or len(sample_b) == 0:
        raise InvalidArgumentError(
            f"Function {function} requires two arrays with one or more items."
        )

    if not isinstance(normalization, str):
        raise TypeMismatchError(
            f"normalization must be a string, got {type(normalization).__name__}"
        )
    return sample_a, sample_b, Normalization.coerce(normalization)


def point_biserial(
    sample_a: Any = _MISSING,
    sample_b: Any = _MISSING,
    normalization: Any = DEFAULT_NORMALIZATION,
    *extra: Any,
) -> float:
    """
    Point-biserial correlation coefficient.

    Parameters
    ----------
    sample_a : list, tuple or 1-D array of reals
        Continuous values where the binary variable is 1
    sample_b : list, tuple or 1-D array of reals
        Continuous values where the binary variable is 0
    normalization : {"unbiased", "uncorrected", "biased"}, optional
        Divisor for the pooled standard deviation, default "unbiased"

    Returns
    -------
    float
        The coefficient, or NaN when it is numerically undefined
    """
    return _point_biserial(
        *_validate(sample_a, sample_b, normalization, extra, "point_biserial")
    )


def point_biserial_outcome(
    sample_a: Any = _MISSING,
    sample_b: Any = _MISSING,
    normalization: Any = DEFAULT_NORMALIZATION,
    *extra: Any,
) -> PointBiserialOutcome:
    """Same call shapes as `point_biserial`, returning the explicit outcome."""
    return _point_biserial_outcome(
        *_validate(sample_a, sample_b, normalization, extra, "point_biserial_outcome")
    )


def point_biserial_test(
    sample_a: Any,
    sample_b: Any,
    config: Optional[PointBiserialConfig] = None,
) -> PointBiserialTest:
    """
    Test whether the point-biserial correlation differs from zero.

    The t statistic and p-value always use the Pearson-equivalent coefficient
    ("uncorrected" divisor) and `config.alternative`. `config.normalization`
    selects the divisor of the reported `coefficient`.
    """
    config = config or PointBiserialConfig()
    config.validate()
    sample_a, sample_b, normalization = _validate(
        sample_a, sample_b, config.normalization, (), "point_biserial_test"
    )
    return _point_biserial_test(
        sample_a, sample_b, config.alternative, normalization
    )
