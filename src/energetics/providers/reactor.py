from typing import ClassVar, Literal

from energetics.constants import REACTOR_EFFICIENCY
from energetics.types import Energy

from .base import BaseProvider


class Reactor(BaseProvider):
    """Nuclear reactor.

    Output is the fuel energy reduced by the thermal-to-usable conversion
    loss of the reactor."""

    provider_type: Literal['reactor'] = 'reactor'

    EFFICIENCY_KEY: ClassVar[str] = 'reactor'
    DEFAULT_EFFICIENCY: ClassVar[float] = REACTOR_EFFICIENCY

    def output(self) -> Energy:
        return self.delivered_energy()
