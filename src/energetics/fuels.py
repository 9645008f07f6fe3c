"""Reference fuels.

Densities are per unit of reference quantity and are illustrative only."""

from energetics.types import Energy, Fuel
from energetics.utils.models import CIStrEnum


class StandardFuel(CIStrEnum):
    DIESEL = 'diesel'
    LITHIUM_BATTERY = 'lithium_battery'
    URANIUM = 'uranium'

    @property
    def density(self) -> Energy:
        """Energy density, in the unit the fuel is usually quoted in."""
        match self:
            case StandardFuel.DIESEL:
                return Energy.joules(100.0)
            case StandardFuel.LITHIUM_BATTERY:
                return Energy.calories(200.0)
            case StandardFuel.URANIUM:
                return Energy.joules(1000.0)

    @property
    def renewable(self) -> bool:
        return self is StandardFuel.LITHIUM_BATTERY


def standard_fuel(name: StandardFuel | str, quantity: float) -> Fuel:
    """Create a given quantity of one of the reference fuels.

    Fuel names are case-insensitive. Raises ``ValueError`` for unknown
    names."""
    kind = StandardFuel(name)
    return Fuel.from_density(str(kind), kind.density, quantity, kind.renewable)
