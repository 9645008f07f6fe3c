import logging

import click

from energetics.errors import EnergeticsError
from energetics.types import Energy

from .common import config_option, setup

logger = logging.getLogger(__name__)


@click.command()
@click.argument('magnitude', type=float)
@click.argument('from_kind')
@click.argument('to_kind')
@config_option
def run(magnitude, from_kind, to_kind, config_file):
    """Convert MAGNITUDE of energy from FROM_KIND to TO_KIND.

    Unit kinds are joule, calorie or btu (or the symbols J, cal, BTU)."""
    setup(config_file)
    try:
        energy = Energy(kind=from_kind, magnitude=magnitude)
        result = energy.convert_to(to_kind)
    except EnergeticsError as e:
        raise click.ClickException(str(e)) from e
    logger.info('Converted %s to %s', energy, result.kind)
    click.echo(str(result))


if __name__ == '__main__':
    run()
