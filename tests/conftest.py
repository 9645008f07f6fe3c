import pytest

from energetics.config import Config
from energetics.types import Fuel


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        'markers',
        'config_updates(**kwargs): '
        'Mark test to update default config with given key-value pairs.',
    )


@pytest.fixture
def fuel_1000j():
    """Fuel holding 1000 J in total."""
    return Fuel(name='test', energy_density=100.0, quantity=10.0)


# Set up and tear down global configuration around each test.
@pytest.fixture(autouse=True)
def default_config(request):
    # Updates to the default configuration are pulled from the config_updates
    # marker. Keys of the form "section__param" update a single parameter in a
    # configuration section.
    data_marker = request.node.get_closest_marker('config_updates')

    config_data = {}
    if data_marker is not None:
        for key, value in data_marker.kwargs.items():
            if '__' not in key:
                config_data[key] = value
            else:
                section, param = key.split('__', 1)
                config_data.setdefault(section, {})[param] = value

    Config.load(**config_data)

    # Test goes here...
    yield

    # Clear the configuration after the test.
    Config.reset()
