"""
biserial.core.errors
====================

Exception taxonomy.

Malformed input is a hard error and propagates to the caller:
`InvalidArgumentError` for bad values, `TypeMismatchError` for bad call
shapes. `DegenerateSampleError` is raised only by the descriptive primitives
when asked for an undefined quantity; the correlation routine checks for
those conditions first and reports them as a NaN outcome instead.
"""


class BiserialError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(BiserialError, ValueError):
    """An argument has the right type but an unusable value."""


class TypeMismatchError(BiserialError, TypeError):
    """Arguments do not match any supported call shape."""


class DegenerateSampleError(BiserialError, ArithmeticError):
    """A numeric quantity is undefined for the given sample."""
