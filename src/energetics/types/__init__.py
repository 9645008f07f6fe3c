from .energy import Energy, EnergyKind
from .fuel import Fuel

__all__ = [
    'Energy',
    'EnergyKind',
    'Fuel',
]
