# TODO: Remove this when we migrate to Python 3.14.
from __future__ import annotations

import math

from pydantic import ConfigDict, field_validator

from energetics.constants import (
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_RELATIVE_TOLERANCE,
)
from energetics.errors import (
    UnknownUnitKindError,
    check_finite_result,
    check_non_negative,
)
from energetics.units import JOULES_PER_BTU, JOULES_PER_CALORIE, JOULES_PER_JOULE
from energetics.utils.models import CIBaseModel, CIStrEnum


class EnergyKind(CIStrEnum):
    """Supported energy units."""

    JOULE = 'joule'
    CALORIE = 'calorie'
    BTU = 'btu'

    @property
    def joules_per_unit(self) -> float:
        """Number of joules in one unit of this kind."""
        match self:
            case EnergyKind.JOULE:
                return JOULES_PER_JOULE
            case EnergyKind.CALORIE:
                return JOULES_PER_CALORIE
            case EnergyKind.BTU:
                return JOULES_PER_BTU

    @property
    def symbol(self) -> str:
        match self:
            case EnergyKind.JOULE:
                return 'J'
            case EnergyKind.CALORIE:
                return 'cal'
            case EnergyKind.BTU:
                return 'BTU'

    @classmethod
    def parse(cls, value: EnergyKind | str) -> EnergyKind:
        """Convert a unit name or symbol (case-insensitive) to a unit kind.

        Raises:
            UnknownUnitKindError: If the value does not name a known unit.
        """
        if isinstance(value, EnergyKind):
            return value
        if isinstance(value, str):
            for kind in cls:
                if value.strip().lower() in (kind.value, kind.symbol.lower()):
                    return kind
        raise UnknownUnitKindError(f'Unknown energy unit kind: {value!r}')


class Energy(CIBaseModel):
    """An amount of energy tagged with its unit.

    Values are immutable: conversion and arithmetic always produce new
    values. Equality is tolerant: two values are equal if their magnitudes
    agree within a small relative tolerance once expressed in joules. Since
    tolerant equality is not transitive, energy values are not hashable.

    Energy values are created by keyword
    (``Energy(kind='calorie', magnitude=1.0)``) or with the per-unit
    constructors :meth:`joules`, :meth:`calories` and :meth:`btus`. Operations
    whose result is too large to represent raise
    :class:`~energetics.errors.EnergyOverflowError`."""

    model_config = ConfigDict(frozen=True)
    """Values are frozen after creation."""

    kind: EnergyKind
    """Unit in which the magnitude is expressed."""

    magnitude: float
    """Amount of energy, in units of ``kind``. Never negative."""

    __hash__ = None  # type: ignore[assignment]

    @field_validator('kind', mode='before')
    @classmethod
    def parse_kind(cls, value):
        return EnergyKind.parse(value)

    @field_validator('magnitude')
    @classmethod
    def check_magnitude(cls, value: float) -> float:
        return check_non_negative(value, 'Energy magnitude')

    @classmethod
    def joules(cls, magnitude: float) -> Energy:
        return cls(kind=EnergyKind.JOULE, magnitude=magnitude)

    @classmethod
    def calories(cls, magnitude: float) -> Energy:
        return cls(kind=EnergyKind.CALORIE, magnitude=magnitude)

    @classmethod
    def btus(cls, magnitude: float) -> Energy:
        return cls(kind=EnergyKind.BTU, magnitude=magnitude)

    def to_joules(self) -> float:
        """Magnitude of this value expressed in joules."""
        return self.magnitude * self.kind.joules_per_unit

    def convert_to(self, target: EnergyKind | str) -> Energy:
        """Express this value in another unit.

        Conversion multiplies by the source unit's joule factor and divides by
        the target's. Converting to the value's own unit returns the value
        unchanged, with no arithmetic."""
        target = EnergyKind.parse(target)
        if target is self.kind:
            return self
        magnitude = self.magnitude * self.kind.joules_per_unit / target.joules_per_unit
        return Energy(
            kind=target, magnitude=check_finite_result(magnitude, 'Converted energy')
        )

    def scale(self, factor: float) -> Energy:
        """Multiply by a non-negative factor, keeping the unit."""
        check_non_negative(factor, 'Scale factor')
        magnitude = check_finite_result(self.magnitude * factor, 'Scaled energy')
        return Energy(kind=self.kind, magnitude=magnitude)

    def isclose(
        self,
        other: Energy,
        rel_tol: float = DEFAULT_RELATIVE_TOLERANCE,
        abs_tol: float = DEFAULT_ABSOLUTE_TOLERANCE,
    ) -> bool:
        """Compare with another value, in any unit, within a tolerance."""
        return math.isclose(
            self.to_joules(), other.to_joules(), rel_tol=rel_tol, abs_tol=abs_tol
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Energy):
            return NotImplemented
        return self.isclose(other)

    def __lt__(self, other: Energy) -> bool:
        if not isinstance(other, Energy):
            return NotImplemented
        return not self.isclose(other) and self.to_joules() < other.to_joules()

    def __le__(self, other: Energy) -> bool:
        if not isinstance(other, Energy):
            return NotImplemented
        return self.isclose(other) or self.to_joules() < other.to_joules()

    def __gt__(self, other: Energy) -> bool:
        if not isinstance(other, Energy):
            return NotImplemented
        return not self.isclose(other) and self.to_joules() > other.to_joules()

    def __ge__(self, other: Energy) -> bool:
        if not isinstance(other, Energy):
            return NotImplemented
        return self.isclose(other) or self.to_joules() > other.to_joules()

    def __add__(self, other: Energy) -> Energy:
        """Sum of two values, in the unit of the left-hand operand."""
        if not isinstance(other, Energy):
            return NotImplemented
        magnitude = self.magnitude + other.convert_to(self.kind).magnitude
        return Energy(
            kind=self.kind, magnitude=check_finite_result(magnitude, 'Energy sum')
        )

    def __str__(self) -> str:
        return f'{self.magnitude:g} {self.kind.symbol}'
