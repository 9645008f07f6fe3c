from energetics.errors import (
    EnergeticsError,
    EnergyOverflowError,
    IncompatibleFuelError,
    InvalidFractionError,
    InvalidMagnitudeError,
    UndefinedMixError,
    UnknownUnitKindError,
)
from energetics.fuels import StandardFuel, standard_fuel
from energetics.providers import (
    BritishEngine,
    EnergyProvider,
    GreenEngine,
    InternalCombustion,
    OmniGenerator,
    Reactor,
)
from energetics.types import Energy, EnergyKind, Fuel

__all__ = [
    'BritishEngine',
    'EnergeticsError',
    'EnergyOverflowError',
    'Energy',
    'EnergyKind',
    'EnergyProvider',
    'Fuel',
    'GreenEngine',
    'IncompatibleFuelError',
    'InternalCombustion',
    'InvalidFractionError',
    'InvalidMagnitudeError',
    'OmniGenerator',
    'Reactor',
    'StandardFuel',
    'UndefinedMixError',
    'UnknownUnitKindError',
    'standard_fuel',
]
