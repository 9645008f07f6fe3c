# TODO: Remove this when we migrate to Python 3.14+.
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Self

from pydantic import ConfigDict, field_validator, model_validator

from energetics.config import Config
from energetics.errors import check_non_negative
from energetics.types import Energy, Fuel
from energetics.utils.models import CIBaseModel

logger = logging.getLogger(__name__)


class BaseProvider(CIBaseModel, ABC):
    """Base class for energy providers.

    A provider holds a fuel and reports the usable energy it can deliver from
    that fuel. Reporting output only reads the provider's own fields, so
    calling :meth:`output` repeatedly gives the same result.

    Each provider has an efficiency: the fraction of the fuel's stored energy
    that ends up as output. If no ``efficiency`` is given, it is fixed when the
    provider is created: from the ``[efficiency]`` section of the global
    configuration (key ``EFFICIENCY_KEY``) if a configuration is loaded, and
    from ``DEFAULT_EFFICIENCY`` otherwise. Later configuration changes do not
    affect existing providers. Efficiencies above 1 are treated as 1."""

    model_config = ConfigDict(frozen=True)
    """Providers are frozen after creation."""

    fuel: Fuel
    """Fuel consumed by the provider."""

    efficiency: float | None = None
    """Efficiency of the provider. Filled in from configuration or defaults
    at creation if not given, so never ``None`` on a constructed provider."""

    EFFICIENCY_KEY: ClassVar[str]
    """Name of the configuration entry holding this provider's default
    efficiency."""

    DEFAULT_EFFICIENCY: ClassVar[float]
    """Efficiency used when none is given and no configuration is loaded."""

    @field_validator('efficiency')
    @classmethod
    def check_efficiency(cls, value: float | None) -> float | None:
        if value is not None:
            check_non_negative(value, 'Provider efficiency')
        return value

    # Providers are frozen, so the resolved efficiency has to be set with
    # `object.__setattr__`, as in the configuration class.

    @model_validator(mode='after')
    def resolve_efficiency(self) -> Self:
        """Fix the efficiency from configuration or defaults if not given."""
        if self.efficiency is None:
            try:
                value = getattr(Config.get().efficiency, self.EFFICIENCY_KEY)
            except ValueError:
                value = self.DEFAULT_EFFICIENCY
            object.__setattr__(self, 'efficiency', value)
        return self

    @property
    def effective_efficiency(self) -> float:
        """Efficiency actually applied to the fuel energy, in [0, 1]."""
        assert self.efficiency is not None
        if self.efficiency > 1.0:
            logger.debug(
                '%s efficiency %g saturated to 1', type(self).__name__, self.efficiency
            )
            return 1.0
        return self.efficiency

    def delivered_energy(self) -> Energy:
        """Fuel energy scaled by the provider's efficiency, in joules."""
        return self.fuel.total_energy().scale(self.effective_efficiency)

    @abstractmethod
    def output(self) -> Energy:
        """Usable energy output, to be implemented by subclasses."""
        ...
