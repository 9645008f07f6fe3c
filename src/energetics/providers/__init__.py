import logging
import tomllib
from pathlib import Path
from typing import Annotated, Any

from pydantic import Field, RootModel, model_validator

from .base import BaseProvider as BaseProvider
from .british import BritishEngine
from .combustion import InternalCombustion
from .green import GreenEngine
from .omni import OmniGenerator
from .reactor import Reactor

logger = logging.getLogger(__name__)

ProviderUnion = Annotated[
    (Reactor | InternalCombustion | OmniGenerator | GreenEngine | BritishEngine),
    Field(discriminator='provider_type'),
]
"""Union type representing all supported energy providers. This is a Pydantic
discriminated union, using the ``provider_type`` field to select the actual
provider class when building providers from dictionary or TOML data."""


class EnergyProvider(RootModel[ProviderUnion]):
    """Energy provider loader.

    This is a wrapper class to build providers from plain data, and
    additionally to make the ``provider_type`` field used for discriminating
    provider types case-insensitive (dashes and spaces are also accepted in
    place of underscores)."""

    @model_validator(mode='before')
    @classmethod
    def normalize_provider_type(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = {k.lower() if isinstance(k, str) else k: v for k, v in data.items()}
            kind = data.get('provider_type')
            if isinstance(kind, str):
                kind = kind.strip().lower().replace('-', '_').replace(' ', '_')
                data['provider_type'] = kind
        return data

    @classmethod
    def load(cls, path: str | Path) -> ProviderUnion:
        """Load an energy provider from a TOML file.

        The exact provider type is determined by the ``provider_type`` field
        in the TOML data."""
        with open(path, 'rb') as f:
            data = tomllib.load(f)
        logger.debug('Loading energy provider from %s', path)
        return cls.model_validate(data).root

    @classmethod
    def from_data(cls, data: dict) -> ProviderUnion:
        """Initialize an energy provider from a dictionary."""
        return cls.model_validate(data).root


__all__ = [
    'BaseProvider',
    'BritishEngine',
    'EnergyProvider',
    'GreenEngine',
    'InternalCombustion',
    'OmniGenerator',
    'ProviderUnion',
    'Reactor',
]
