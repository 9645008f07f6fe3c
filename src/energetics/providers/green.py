from typing import ClassVar, Literal

from pydantic import field_validator

from energetics.constants import GREEN_EFFICIENCY
from energetics.errors import IncompatibleFuelError
from energetics.types import Energy, Fuel

from .base import BaseProvider


class GreenEngine(BaseProvider):
    """Clean engine running only on renewable fuel."""

    provider_type: Literal['green_engine'] = 'green_engine'

    EFFICIENCY_KEY: ClassVar[str] = 'green'
    DEFAULT_EFFICIENCY: ClassVar[float] = GREEN_EFFICIENCY

    @field_validator('fuel')
    @classmethod
    def check_renewable(cls, fuel: Fuel) -> Fuel:
        if not fuel.renewable:
            raise IncompatibleFuelError(
                f'Green engine requires a renewable fuel, got "{fuel.name}".'
            )
        return fuel

    def output(self) -> Energy:
        return self.delivered_energy()
