import logging

import pytest
from pydantic import ValidationError

from energetics.errors import (
    EnergyOverflowError,
    InvalidFractionError,
    InvalidMagnitudeError,
    UndefinedMixError,
)
from energetics.types import Energy, EnergyKind, Fuel


class TestConstruction:
    def test_keyword_construction(self):
        f = Fuel(name='diesel', energy_density=100.0, quantity=10.0)
        assert f.name == 'diesel'
        assert f.energy_density == 100.0
        assert f.quantity == 10.0
        assert f.renewable is False
        g = Fuel(name='battery', energy_density=5, quantity=2, renewable=True)
        assert g.renewable is True

    def test_case_insensitive_keys(self):
        f = Fuel.model_validate({'Name': 'x', 'ENERGY_DENSITY': 1.5, 'Quantity': 2})
        assert f.energy_density == 1.5
        assert f.quantity == 2.0

    @pytest.mark.parametrize(
        'density,quantity', [(-1.0, 5.0), (5.0, -1.0), (float('nan'), 1.0)]
    )
    def test_invalid_magnitude(self, density, quantity):
        with pytest.raises(InvalidMagnitudeError):
            Fuel(name='x', energy_density=density, quantity=quantity)

    def test_immutable(self):
        f = Fuel(name='x', energy_density=1.0, quantity=1.0)
        with pytest.raises(ValidationError):
            f.quantity = 2.0  # type: ignore[misc]

    def test_from_density(self):
        f = Fuel.from_density('battery', Energy.calories(200.0), 10.0, renewable=True)
        assert f.energy_density == pytest.approx(836.8)
        assert f.renewable is True

    def test_with_quantity(self):
        f = Fuel(name='x', energy_density=3.0, quantity=1.0, renewable=True)
        g = f.with_quantity(4.0)
        assert g.quantity == 4.0
        assert g.energy_density == 3.0
        assert g.renewable is True
        assert f.quantity == 1.0


class TestEnergy:
    def test_total_energy(self, fuel_1000j):
        total = fuel_1000j.total_energy()
        assert total.kind is EnergyKind.JOULE
        assert total.magnitude == 1000.0

    def test_zero_quantity(self):
        f = Fuel(name='x', energy_density=10.0, quantity=0.0)
        assert f.total_energy().magnitude == 0.0

    def test_total_energy_overflow(self):
        f = Fuel(name='big', energy_density=1e200, quantity=1e200)
        with pytest.raises(EnergyOverflowError, match='big'):
            f.total_energy()

    def test_density_in(self):
        f = Fuel(name='x', energy_density=1055.06, quantity=1.0)
        assert f.density_in('btu').kind is EnergyKind.BTU
        assert f.density_in(EnergyKind.BTU).magnitude == pytest.approx(1.0)
        assert f.density_in('joule').magnitude == 1055.06


class TestMix:
    def test_weighted_average(self):
        a = Fuel(name='a', energy_density=100.0, quantity=1.0)
        b = Fuel(name='b', energy_density=200.0, quantity=3.0)
        m = a.mix(b)
        assert m.quantity == 4.0
        assert m.energy_density == pytest.approx(175.0)
        assert m.name == 'a+b'

    def test_total_energy_conserved(self):
        a = Fuel(name='a', energy_density=12.5, quantity=2.0)
        b = Fuel(name='b', energy_density=80.0, quantity=0.75)
        m = a.mix(b)
        assert m.total_energy() == a.total_energy() + b.total_energy()

    @pytest.mark.parametrize(
        'da,qa,db,qb',
        [
            (100.0, 1.0, 200.0, 3.0),
            (0.1, 0.3, 0.7, 0.2),
            (1e6, 1e-6, 3.0, 42.0),
            (5.0, 0.0, 10.0, 2.0),
        ],
    )
    def test_commutative(self, da, qa, db, qb):
        a = Fuel(name='a', energy_density=da, quantity=qa)
        b = Fuel(name='b', energy_density=db, quantity=qb)
        ab = a.mix(b)
        ba = b.mix(a)
        assert ab.energy_density == ba.energy_density
        assert ab.quantity == ba.quantity
        assert ba.name == 'b+a'

    @pytest.mark.parametrize(
        'da,qa,db,qb',
        [
            (100.0, 1.0, 200.0, 3.0),
            (0.1, 0.1, 0.1, 0.2),
            (7.0, 1e-9, 3.0, 1e9),
            (0.0, 5.0, 13.0, 0.5),
        ],
    )
    def test_density_within_bounds(self, da, qa, db, qb):
        a = Fuel(name='a', energy_density=da, quantity=qa)
        m = a.mix(Fuel(name='b', energy_density=db, quantity=qb))
        assert min(da, db) <= m.energy_density <= max(da, db)

    def test_one_side_empty(self):
        empty = Fuel(name='a', energy_density=5.0, quantity=0.0)
        m = empty.mix(Fuel(name='b', energy_density=10.0, quantity=2.0))
        assert m.energy_density == 10.0
        assert m.quantity == 2.0

    def test_zero_zero(self):
        x = Fuel(name='x', energy_density=5, quantity=0)
        with pytest.raises(UndefinedMixError):
            x.mix(Fuel(name='y', energy_density=10, quantity=0))

    def test_inputs_unchanged(self):
        a = Fuel(name='a', energy_density=100.0, quantity=1.0)
        b = Fuel(name='b', energy_density=200.0, quantity=3.0)
        a.mix(b)
        assert (a.energy_density, a.quantity) == (100.0, 1.0)
        assert (b.energy_density, b.quantity) == (200.0, 3.0)
        # Inputs can be reused.
        assert a.mix(b).mix(a).quantity == 5.0

    def test_renewable(self):
        green = Fuel(name='g', energy_density=1.0, quantity=1.0, renewable=True)
        brown = Fuel(name='b', energy_density=1.0, quantity=1.0)
        assert green.mix(green).renewable is True
        assert green.mix(brown).renewable is False

    def test_logs_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='energetics.types.fuel'):
            a = Fuel(name='a', energy_density=1.0, quantity=1.0)
            a.mix(Fuel(name='b', energy_density=3.0, quantity=1.0))
        assert 'Mixed a' in caplog.text

    def test_large_density_and_quantity(self):
        a = Fuel(name='a', energy_density=1e300, quantity=1e10)
        b = Fuel(name='b', energy_density=1.0, quantity=1e10)
        m = a.mix(b)
        assert m.energy_density == pytest.approx(5e299)
        assert m.quantity == 2e10

    def test_combined_quantity_overflow(self):
        a = Fuel(name='a', energy_density=1.0, quantity=1e308)
        b = Fuel(name='b', energy_density=2.0, quantity=1e308)
        with pytest.raises(EnergyOverflowError):
            a.mix(b)
        with pytest.raises(EnergyOverflowError):
            a.blend(b, 0.5)


class TestBlend:
    def test_half_is_plain_average(self):
        a = Fuel(name='diesel', energy_density=100.0, quantity=1.0)
        b = Fuel(name='battery', energy_density=836.8, quantity=9.0)
        m = a.blend(b, 0.5)
        assert m.energy_density == pytest.approx(468.4)
        assert m.quantity == 10.0
        assert m.name == 'diesel+battery'

    def test_fraction_weights(self):
        a = Fuel(name='a', energy_density=100.0, quantity=1.0)
        b = Fuel(name='b', energy_density=200.0, quantity=1.0)
        assert a.blend(b, 0.25).energy_density == pytest.approx(175.0)
        assert a.blend(b, 1.0).energy_density == 100.0
        assert a.blend(b, 0.0).energy_density == 200.0

    def test_zero_quantities_allowed(self):
        x = Fuel(name='x', energy_density=5.0, quantity=0.0)
        m = x.blend(Fuel(name='y', energy_density=10.0, quantity=0.0), 0.5)
        assert m.energy_density == 7.5
        assert m.quantity == 0.0

    @pytest.mark.parametrize('fraction', [-0.1, 1.5, float('nan')])
    def test_invalid_fraction(self, fraction):
        a = Fuel(name='a', energy_density=1.0, quantity=1.0)
        b = Fuel(name='b', energy_density=1.0, quantity=1.0)
        with pytest.raises(InvalidFractionError):
            a.blend(b, fraction)
