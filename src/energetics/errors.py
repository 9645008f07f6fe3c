"""Exceptions raised by energetics.

None of these derive from ``ValueError``: Pydantic wraps ``ValueError``
raised inside validators into a ``ValidationError``, and callers should see
these types directly when constructing models."""

import math


class EnergeticsError(Exception):
    """Base class for all energetics errors."""


class InvalidMagnitudeError(EnergeticsError):
    """A magnitude, density, quantity, efficiency or scale factor was
    negative (or not a finite number)."""


class UndefinedMixError(EnergeticsError):
    """Two fuels with zero combined quantity cannot be mixed."""


class UnknownUnitKindError(EnergeticsError):
    """An energy unit name did not match any known unit kind."""


class InvalidFractionError(EnergeticsError):
    """A blend fraction was outside the closed interval [0, 1]."""


class IncompatibleFuelError(EnergeticsError):
    """A provider was given a fuel that it cannot consume."""


def check_non_negative(value: float, what: str) -> float:
    """Return ``value`` if it is a finite non-negative number, otherwise raise
    :class:`InvalidMagnitudeError`."""
    if not math.isfinite(value) or value < 0:
        raise InvalidMagnitudeError(
            f'{what} must be a finite non-negative number, got {value}'
        )
    return value


class EnergyOverflowError(EnergeticsError):
    """The result of an operation on finite values is too large to represent
    as a floating-point number."""


def check_finite_result(value: float, what: str) -> float:
    """Return ``value`` if it is finite, otherwise raise
    :class:`EnergyOverflowError`."""
    if math.isinf(value):
        raise EnergyOverflowError(f'{what} overflows a floating-point number')
    return value
