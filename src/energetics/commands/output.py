import logging

import click
from pydantic import ValidationError

from energetics.errors import EnergeticsError
from energetics.fuels import StandardFuel, standard_fuel
from energetics.providers import EnergyProvider
from energetics.types import Fuel

from .common import config_option, setup

logger = logging.getLogger(__name__)

PROVIDER_TYPES = [
    'reactor',
    'internal_combustion',
    'omni_generator',
    'green_engine',
    'british_engine',
]


@click.command()
@click.argument('provider', type=click.Choice(PROVIDER_TYPES, case_sensitive=False))
@click.option(
    '--fuel',
    'fuel_name',
    type=click.Choice([str(f) for f in StandardFuel], case_sensitive=False),
    default=None,
    help='Use a reference fuel instead of giving a density.',
)
@click.option('-d', '--density', type=float, default=None, help='Density [J].')
@click.option('-q', '--quantity', type=float, required=True, help='Fuel quantity.')
@click.option('--renewable', is_flag=True, help='Mark the fuel as renewable.')
@click.option(
    '-e',
    '--efficiency',
    type=float,
    default=None,
    help='Efficiency override (default: from configuration).',
)
@config_option
def run(provider, fuel_name, density, quantity, renewable, efficiency, config_file):
    """Print the energy output of PROVIDER running on a fuel."""
    setup(config_file)
    if (fuel_name is None) == (density is None):
        raise click.UsageError('Exactly one of --fuel and --density is required.')

    try:
        if fuel_name is not None:
            fuel = standard_fuel(fuel_name, quantity)
        else:
            fuel = Fuel(
                name='fuel',
                energy_density=density,
                quantity=quantity,
                renewable=renewable,
            )
        data = {'provider_type': provider, 'fuel': fuel}
        if efficiency is not None:
            data['efficiency'] = efficiency
        p = EnergyProvider.from_data(data)
    except (EnergeticsError, ValidationError) as e:
        raise click.ClickException(str(e)) from e

    logger.info('Running %s on %s', type(p).__name__, fuel.name)
    click.echo(str(p.output()))


if __name__ == '__main__':
    run()
