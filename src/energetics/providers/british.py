from typing import ClassVar, Literal

from energetics.constants import BRITISH_EFFICIENCY
from energetics.types import Energy, EnergyKind

from .base import BaseProvider


class BritishEngine(BaseProvider):
    """Engine that reports its output in British thermal units."""

    provider_type: Literal['british_engine'] = 'british_engine'

    EFFICIENCY_KEY: ClassVar[str] = 'british'
    DEFAULT_EFFICIENCY: ClassVar[float] = BRITISH_EFFICIENCY

    def output(self) -> Energy:
        return self.delivered_energy().convert_to(EnergyKind.BTU)
