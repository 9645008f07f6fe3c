from typing import ClassVar, Literal

from energetics.constants import OMNI_EFFICIENCY
from energetics.types import Energy

from .base import BaseProvider


class OmniGenerator(BaseProvider):
    """Idealized generator that consumes any fuel.

    By default there is no efficiency loss at all, so the output is exactly
    the total energy of the fuel."""

    provider_type: Literal['omni_generator'] = 'omni_generator'

    EFFICIENCY_KEY: ClassVar[str] = 'omni'
    DEFAULT_EFFICIENCY: ClassVar[float] = OMNI_EFFICIENCY

    def output(self) -> Energy:
        return self.delivered_energy()
