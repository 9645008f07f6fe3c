# TODO: Remove this when we migrate to Python 3.14.
from __future__ import annotations

import tomllib
from pathlib import Path

from pydantic import ConfigDict, Field, field_validator, model_validator

from energetics.constants import (
    BRITISH_EFFICIENCY,
    GREEN_EFFICIENCY,
    INTERNAL_COMBUSTION_EFFICIENCY,
    OMNI_EFFICIENCY,
    REACTOR_EFFICIENCY,
)
from energetics.errors import check_non_negative
from energetics.utils.helpers import deep_update
from energetics.utils.models import CIBaseModel, CIStrEnum


class LogLevel(CIStrEnum):
    """Logging levels accepted in configuration files."""

    DEBUG = 'debug'
    INFO = 'info'
    WARNING = 'warning'
    ERROR = 'error'

    @property
    def name_for_logging(self) -> str:
        return self.value.upper()


class EfficiencyConfig(CIBaseModel):
    """Default efficiencies for energy providers that do not set their own."""

    model_config = ConfigDict(frozen=True)
    """Configuration is frozen after creation."""

    reactor: float = REACTOR_EFFICIENCY
    """Nuclear reactor efficiency."""

    internal_combustion: float = INTERNAL_COMBUSTION_EFFICIENCY
    """Internal combustion engine efficiency."""

    omni: float = OMNI_EFFICIENCY
    """Omni generator efficiency."""

    green: float = GREEN_EFFICIENCY
    """Green engine efficiency."""

    british: float = BRITISH_EFFICIENCY
    """British engine efficiency."""

    @field_validator('*')
    @classmethod
    def check_efficiency(cls, value: float, info) -> float:
        return check_non_negative(value, f'{info.field_name} efficiency')


class Config(CIBaseModel):
    """Global energetics configuration settings.

    This is a singleton class; only one instance can be created. This instance
    can then be accessed as `energetics.config.config` via the module-level
    proxy. To use this, create an instance of `Config` at the start of your
    program (probably using the `load` method), then anywhere else in the
    codebase you can access the configuration simply by doing `from
    energetics.config import config`."""

    model_config = ConfigDict(frozen=True)
    """Configuration is frozen after creation."""

    efficiency: EfficiencyConfig = Field(default_factory=EfficiencyConfig)
    """Default provider efficiencies."""

    log_level: LogLevel = LogLevel.WARNING
    """Logging level used by the command line tools."""

    @model_validator(mode='after')
    def register_singleton(self):
        """Initialize the global configuration singleton."""

        global _config
        if _config is not None:
            raise RuntimeError('Config has already been initialized.')
        _config = self
        return self

    @classmethod
    def get(cls) -> Config:
        """Get the global configuration singleton.

        Raises an error if the configuration has not yet been initialized."""
        if _config is None:
            raise ValueError('energetics configuration is not set')
        return _config

    @classmethod
    def load(cls, config_file: str | Path | None = None, **kwargs) -> Config:
        """Load configuration from a TOML file.

        Every setting has a built-in default, so the TOML file (if any) only
        needs to contain the options that differ from the defaults. Additional
        keyword arguments are applied on top of the file data."""

        data = {}
        if config_file is not None:
            with open(config_file, 'rb') as fp:
                data = tomllib.load(fp)

        return cls.model_validate(deep_update(data, kwargs))

    @staticmethod
    def reset():
        """Reset the global configuration singleton.

        This is mostly intended for testing purposes, where it can be useful to
        modify the configuration between or within tests."""
        global _config
        _config = None


# Module property-like access to configuration via a proxy to allow late
# initialization.

_config: Config | None = None


class ConfigProxy:
    def __getattr__(self, name):
        if _config is None:
            raise ValueError('energetics configuration is not set')
        return getattr(_config, name)

    def __setattr__(self, name, value):
        if _config is None:
            raise ValueError('energetics configuration is not set')
        return setattr(_config, name, value)


config = ConfigProxy()
