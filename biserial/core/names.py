"""
biserial.core.names
===================

Typed names shared across the package.

- `Normalization`: an Enum for the standard-deviation divisor modes.
- `Alternative`: Literal tags for the alternative hypothesis of the test.
- `NormalizationLike`: accepted spelling of a normalization argument.

Examples
--------
>>> from biserial.core.names import Normalization
>>> Normalization.UNBIASED.value
'unbiased'
>>> Normalization.coerce("biased") is Normalization.BIASED
True
"""

from __future__ import annotations
from enum import Enum
from typing import Literal, Union

from biserial.core.errors import InvalidArgumentError


class Normalization(str, Enum):
    """Divisor used for the sum of squared deviations.

    - UNBIASED: divide by (n - 1)
    - UNCORRECTED: divide by n
    - BIASED: divide by (n + 1)
    """

    UNBIASED = "unbiased"
    UNCORRECTED = "uncorrected"
    BIASED = "biased"

    @property
    def divisor_offset(self) -> int:
        """Offset added to n to obtain the divisor."""
        return _DIVISOR_OFFSETS[self]

    @classmethod
    def coerce(cls, value: "NormalizationLike") -> "Normalization":
        """Return the enum member for `value`, accepting members or their strings."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(repr(m.value) for m in cls)
            raise InvalidArgumentError(
                f"Unknown normalization {value!r}; choose one of {choices}"
            ) from None


_DIVISOR_OFFSETS = {
    Normalization.UNBIASED: -1,
    Normalization.UNCORRECTED: 0,
    Normalization.BIASED: 1,
}

DEFAULT_NORMALIZATION = Normalization.UNBIASED

NormalizationLike = Union[Normalization, str]

Alternative = Literal["two-sided", "greater", "less"]
ALTERNATIVES = ("two-sided", "greater", "less")
