import click

from energetics.errors import EnergeticsError
from energetics.types import Fuel

from .common import config_option, setup


def parse_fuel(ctx, param, value: str) -> Fuel:
    """Parse a NAME:DENSITY:QUANTITY fuel description."""
    parts = value.rsplit(':', 2)
    if len(parts) != 3:
        raise click.BadParameter('expected NAME:DENSITY:QUANTITY')
    name, density, quantity = parts
    try:
        return Fuel(name=name, energy_density=float(density), quantity=float(quantity))
    except ValueError as e:
        raise click.BadParameter(f'invalid number in "{value}"') from e
    except EnergeticsError as e:
        raise click.BadParameter(str(e)) from e


@click.command()
@click.argument('first', callback=parse_fuel)
@click.argument('second', callback=parse_fuel)
@click.option(
    '-f',
    '--fraction',
    type=float,
    default=None,
    help='Blend in fixed proportions, with FRACTION of the first fuel, '
    'instead of weighting densities by quantity.',
)
@config_option
def run(first, second, fraction, config_file):
    """Mix two fuels given as NAME:DENSITY:QUANTITY (density in J per unit
    quantity) and print the resulting fuel."""
    setup(config_file)
    try:
        mixed = first.mix(second) if fraction is None else first.blend(second, fraction)
    except EnergeticsError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f'name: {mixed.name}')
    click.echo(f'energy density: {mixed.energy_density:g} J')
    click.echo(f'quantity: {mixed.quantity:g}')
    click.echo(f'total energy: {mixed.total_energy()}')


if __name__ == '__main__':
    run()
