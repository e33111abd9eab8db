"""
biserial.stats.common.descriptive
=================================

Descriptive statistics primitives.

Provides the numeric building blocks consumed by the correlation routines:
arithmetic mean, standard deviation with a selectable divisor, and a real
square root. These functions are scheme-agnostic and raise rather than
return sentinels, leaving the fail-soft policy to their callers.

Examples
--------
>>> from biserial.stats.common.descriptive import mean, std
>>> mean([1, 2, 3, 4])
2.5
>>> round(std([1, 2, 3, 4, 5, 6], "uncorrected") ** 2, 6)
2.916667
"""

from __future__ import annotations
import math
from typing import Sequence, Union

import numpy as np

from biserial.core.errors import DegenerateSampleError, InvalidArgumentError
from biserial.core.names import DEFAULT_NORMALIZATION, Normalization, NormalizationLike

ArrayLike = Union[Sequence[float], np.ndarray]


def _as_float_array(values: ArrayLike, what: str) -> np.ndarray:
    arr = np.asarray(values, dtype=float)
    if arr.ndim != 1:
        raise InvalidArgumentError(f"{what} requires a one-dimensional sequence")
    if arr.size == 0:
        raise InvalidArgumentError(f"{what} requires one or more items")
    return arr


def mean(values: ArrayLike) -> float:
    """Arithmetic mean of a non-empty sequence."""
    arr = _as_float_array(values, "mean")
    with np.errstate(all="ignore"):
        return float(np.mean(arr))


def normalization_divisor(n: int, normalization: NormalizationLike) -> int:
    """Divisor for the sum of squared deviations of `n` values.

    Returns n - 1, n or n + 1 for the unbiased, uncorrected and biased
    modes respectively.
    """
    return n + Normalization.coerce(normalization).divisor_offset


def std(
    values: ArrayLike, normalization: NormalizationLike = DEFAULT_NORMALIZATION
) -> float:
    """Standard deviation with the divisor selected by `normalization`.

    Args:
        values: Non-empty one-dimensional sequence of reals
        normalization: "unbiased" (n - 1, default), "uncorrected" (n)
            or "biased" (n + 1)

    Returns:
        sqrt(sum((x - mean)^2) / divisor)

    Raises:
        InvalidArgumentError: if `values` is empty or the mode is unknown
        DegenerateSampleError: if the divisor is not positive
            (a single value under "unbiased")
    """
    arr = _as_float_array(values, "std")
    divisor = normalization_divisor(arr.size, normalization)
    if divisor <= 0:
        raise DegenerateSampleError(
            f"Standard deviation undefined for {arr.size} value(s) "
            f"with normalization {Normalization.coerce(normalization).value!r}"
        )
    with np.errstate(all="ignore"):
        deviations = arr - arr.mean()
        return float(np.sqrt(np.dot(deviations, deviations) / divisor))


def sqrt(x: float) -> float:
    """Real square root; negative input is undefined."""
    if x < 0:
        raise DegenerateSampleError(f"Square root of negative value {x}")
    return math.sqrt(x)
