# TODO: Remove this when we migrate to Python 3.14.
from __future__ import annotations

import logging

from pydantic import ConfigDict, field_validator

from energetics.constants import MIX_NAME_SEPARATOR
from energetics.errors import (
    InvalidFractionError,
    UndefinedMixError,
    check_finite_result,
    check_non_negative,
)
from energetics.utils.models import CIBaseModel

from .energy import Energy, EnergyKind

logger = logging.getLogger(__name__)


class Fuel(CIBaseModel):
    """A named substance storing energy for later consumption.

    The energy density is stored canonically in joules per unit of reference
    quantity (mass or volume: the reference unit is up to the caller, but it
    must be the same for density and quantity). Fuels are immutable; mixing
    and blending produce new fuels and leave their inputs untouched."""

    model_config = ConfigDict(frozen=True)
    """Fuels are frozen after creation."""

    name: str
    """Fuel name."""

    energy_density: float
    """Energy content in J per unit of reference quantity."""

    quantity: float
    """Amount of fuel present, in units of reference quantity."""

    renewable: bool = False
    """Whether the fuel comes from a renewable source. Some providers only
    accept renewable fuels."""

    @field_validator('energy_density')
    @classmethod
    def check_density(cls, value: float) -> float:
        return check_non_negative(value, 'Fuel energy density')

    @field_validator('quantity')
    @classmethod
    def check_quantity(cls, value: float) -> float:
        return check_non_negative(value, 'Fuel quantity')

    @classmethod
    def from_density(
        cls, name: str, density: Energy, quantity: float, renewable: bool = False
    ) -> Fuel:
        """Create a fuel from an energy density expressed in any unit."""
        return cls(
            name=name,
            energy_density=density.to_joules(),
            quantity=quantity,
            renewable=renewable,
        )

    def total_energy(self) -> Energy:
        """Total energy stored in the fuel, in joules.

        Raises:
            EnergyOverflowError: If density times quantity is too large to
                represent as a floating-point number.
        """
        total = check_finite_result(
            self.energy_density * self.quantity, f'Total energy of "{self.name}"'
        )
        return Energy.joules(total)

    def density_in(self, kind: EnergyKind | str) -> Energy:
        """Energy density per unit of reference quantity in the given unit."""
        return Energy.joules(self.energy_density).convert_to(kind)

    def with_quantity(self, quantity: float) -> Fuel:
        """The same fuel, in a different quantity."""
        return Fuel(
            name=self.name,
            energy_density=self.energy_density,
            quantity=quantity,
            renewable=self.renewable,
        )

    def mix(self, other: Fuel) -> Fuel:
        """Mix with another fuel.

        The result holds the combined quantity of both fuels, and its energy
        density is the average of the two densities weighted by quantity, so
        that the total energy of the mix is the sum of the total energies of
        the inputs. The mix is renewable only if both inputs are.

        Raises:
            UndefinedMixError: If both fuels have zero quantity, in which case
                the weighted average is undefined.
            EnergyOverflowError: If the combined quantity is too large to
                represent.
        """
        total_quantity = self._combined_quantity(other)
        if total_quantity == 0:
            raise UndefinedMixError(
                f'Cannot mix "{self.name}" and "{other.name}": '
                'combined quantity is zero.'
            )

        # Weights are normalized first so that large densities times large
        # quantities cannot overflow.
        density = (self.quantity / total_quantity) * self.energy_density + (
            other.quantity / total_quantity
        ) * other.energy_density

        # Rounding can push the average fractionally outside the input range.
        lo, hi = sorted((self.energy_density, other.energy_density))
        density = min(max(density, lo), hi)

        logger.debug(
            'Mixed %s (%g) and %s (%g): density %g J',
            self.name,
            self.quantity,
            other.name,
            other.quantity,
            density,
        )
        return Fuel(
            name=self._mixed_name(other),
            energy_density=density,
            quantity=total_quantity,
            renewable=self.renewable and other.renewable,
        )

    def blend(self, other: Fuel, fraction: float) -> Fuel:
        """Blend with another fuel in fixed proportions.

        Unlike :meth:`mix`, the density of the result does not depend on the
        quantities of the inputs: it is ``fraction`` times this fuel's density
        plus ``1 - fraction`` times the other's. A fraction of 0.5 gives the
        plain average of the two densities.

        Raises:
            InvalidFractionError: If ``fraction`` is not in [0, 1].
            EnergyOverflowError: If the combined quantity is too large to
                represent.
        """
        if not 0.0 <= fraction <= 1.0:
            raise InvalidFractionError(
                f'Blend fraction must be between 0 and 1, got {fraction}'
            )
        density = fraction * self.energy_density + (1.0 - fraction) * (
            other.energy_density
        )
        return Fuel(
            name=self._mixed_name(other),
            energy_density=density,
            quantity=self._combined_quantity(other),
            renewable=self.renewable and other.renewable,
        )

    def _combined_quantity(self, other: Fuel) -> float:
        return check_finite_result(
            self.quantity + other.quantity, 'Combined fuel quantity'
        )

    def _mixed_name(self, other: Fuel) -> str:
        return f'{self.name}{MIX_NAME_SEPARATOR}{other.name}'
