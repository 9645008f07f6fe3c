import logging
from pathlib import Path

import click

from energetics.config import Config

config_option = click.option(
    '-c',
    '--config',
    'config_file',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help='TOML configuration file (default: built-in settings).',
)


def setup(config_file: Path | None) -> Config:
    """Load configuration and set up logging for a command."""
    # Commands own the process-wide configuration.
    Config.reset()
    cfg = Config.load(config_file)
    logging.basicConfig(level=cfg.log_level.name_for_logging)
    return cfg
