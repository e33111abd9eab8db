"""
biserial.stats.correlation.point_biserial
=========================================

Point-biserial correlation between a continuous and a dichotomous variable.

The dichotomous variable is given implicitly: `sample_a` holds the continuous
values where the indicator is 1, `sample_b` those where it is 0.

Mathematical Background
-----------------------
    r_pb = (M_A - M_B) / s * sqrt(n_A / n * n_B / n)

where M_A, M_B are the group means, n = n_A + n_B, and s is the standard
deviation of the pooled sample with divisor n - 1, n or n + 1. With the
"uncorrected" divisor r_pb equals the Pearson correlation between the pooled
values and the 0/1 indicator.

Empty samples are a hard error. Numerically degenerate samples (zero pooled
spread, non-finite values) are not: they produce an outcome whose value is
NaN and whose `reason` names the condition.

Examples
--------
>>> from biserial.stats.correlation.point_biserial import point_biserial
>>> round(point_biserial([1, 2, 3], [4, 5, 6]), 7)
-0.8017837
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional

import numpy as np
from scipy.stats import t as student_t

from biserial.core.errors import InvalidArgumentError
from biserial.core.logging import get_logger
from biserial.core.names import (
    ALTERNATIVES,
    DEFAULT_NORMALIZATION,
    Alternative,
    Normalization,
    NormalizationLike,
)
from biserial.stats.common.descriptive import (
    ArrayLike,
    mean,
    sqrt,
    std,
)

logger = get_logger(__name__)

NAN = float("nan")


@dataclass(frozen=True)
class PointBiserialOutcome:
    """
    Explicit result of a point-biserial computation.

    Attributes:
        value: Coefficient, or NaN when undefined
        reason: None when defined; otherwise "non_finite" or "zero_std"
        n_a, n_b: Group sizes
        mean_a, mean_b: Group means
        std: Pooled standard deviation (NaN if it could not be formed)
        normalization: Divisor mode used for `std`
    """

    value: float
    reason: Optional[str]
    n_a: int
    n_b: int
    mean_a: float
    mean_b: float
    std: float
    normalization: Normalization

    @property
    def is_defined(self) -> bool:
        return self.reason is None


@dataclass(frozen=True)
class PointBiserialTest:
    """Significance test of the point-biserial coefficient against zero.

    `statistic`, `t` and `pvalue` use the Pearson-equivalent coefficient;
    `coefficient` is the value under the requested `normalization`.
    """

    statistic: float
    t: float
    df: int
    pvalue: float
    alternative: str
    coefficient: float
    normalization: Normalization


def _check_samples(sample_a: ArrayLike, sample_b: ArrayLike) -> None:
    if np.size(sample_a) == 0 or np.size(sample_b) == 0:
        raise InvalidArgumentError(
            "Function point_biserial requires two arrays with one or more items."
        )


def point_biserial_outcome(
    sample_a: ArrayLike,
    sample_b: ArrayLike,
    normalization: NormalizationLike = DEFAULT_NORMALIZATION,
) -> PointBiserialOutcome:
    """Compute the point-biserial correlation as an explicit outcome.

    Args:
        sample_a: Continuous values where the binary variable is 1
        sample_b: Continuous values where the binary variable is 0
        normalization: Divisor for the pooled standard deviation

    Returns:
        PointBiserialOutcome; never raises for numerically degenerate input

    Raises:
        InvalidArgumentError: if either sample is empty or the
            normalization is unknown
    """
    _check_samples(sample_a, sample_b)
    mode = Normalization.coerce(normalization)
    n_a, n_b = int(np.size(sample_a)), int(np.size(sample_b))
    n_total = n_a + n_b
    mean_a = mean_b = NAN

    def undefined(reason: str, sd: float = NAN) -> PointBiserialOutcome:
        logger.debug(
            "point_biserial_undefined",
            reason=reason,
            n_a=n_a,
            n_b=n_b,
            normalization=mode.value,
        )
        return PointBiserialOutcome(NAN, reason, n_a, n_b, mean_a, mean_b, sd, mode)

    try:
        a = np.asarray(sample_a, dtype=float).ravel()
        b = np.asarray(sample_b, dtype=float).ravel()
    except OverflowError:
        # integers beyond the float range
        return undefined("non_finite")

    mean_a, mean_b = mean(a), mean(b)
    if not (math.isfinite(mean_a) and math.isfinite(mean_b)):
        return undefined("non_finite")

    diff = mean_a - mean_b
    sd = std(np.concatenate((a, b)), mode)
    if not math.isfinite(sd):
        return undefined("non_finite", sd)
    if sd == 0.0:
        return undefined("zero_std", sd)

    proportion = (n_a / n_total) * (n_b / n_total)
    value = (diff / sd) * sqrt(proportion)
    if not math.isfinite(value):
        return undefined("non_finite", sd)

    return PointBiserialOutcome(value, None, n_a, n_b, mean_a, mean_b, sd, mode)


def point_biserial(
    sample_a: ArrayLike,
    sample_b: ArrayLike,
    normalization: NormalizationLike = DEFAULT_NORMALIZATION,
) -> float:
    """Point-biserial correlation coefficient, or NaN when undefined."""
    return point_biserial_outcome(sample_a, sample_b, normalization).value


def point_biserial_test(
    sample_a: ArrayLike,
    sample_b: ArrayLike,
    alternative: Alternative = "two-sided",
    normalization: NormalizationLike = DEFAULT_NORMALIZATION,
) -> PointBiserialTest:
    """Test H0: r_pb = 0 with Student's t on n - 2 degrees of freedom.

    Uses the Pearson-equivalent coefficient ("uncorrected" divisor), so the
    p-value agrees with `scipy.stats.pointbiserialr` for "two-sided". The
    coefficient under `normalization` is reported alongside as `coefficient`.

    Args:
        sample_a: Continuous values where the binary variable is 1
        sample_b: Continuous values where the binary variable is 0
        alternative: "two-sided", "greater" (r > 0) or "less" (r < 0)
        normalization: Divisor mode for the reported `coefficient`

    Returns:
        PointBiserialTest; t and pvalue are NaN when r is undefined or n < 3
    """
    if alternative not in ALTERNATIVES:
        raise InvalidArgumentError(
            f"alternative must be one of {ALTERNATIVES}, got {alternative}"
        )

    mode = Normalization.coerce(normalization)
    coefficient = point_biserial_outcome(sample_a, sample_b, mode).value
    outcome = point_biserial_outcome(sample_a, sample_b, Normalization.UNCORRECTED)
    r = outcome.value
    df = outcome.n_a + outcome.n_b - 2
    if not outcome.is_defined or df < 1:
        return PointBiserialTest(r, NAN, df, NAN, alternative, coefficient, mode)

    one_minus_r2 = 1.0 - r * r
    if one_minus_r2 <= 0.0:
        t_stat = math.copysign(math.inf, r)
    else:
        t_stat = r * math.sqrt(df / one_minus_r2)

    if alternative == "two-sided":
        pvalue = 2.0 * float(student_t.sf(abs(t_stat), df))
    elif alternative == "greater":
        pvalue = float(student_t.sf(t_stat, df))
    else:
        pvalue = float(student_t.cdf(t_stat, df))

    return PointBiserialTest(
        r, t_stat, df, min(pvalue, 1.0), alternative, coefficient, mode
    )
