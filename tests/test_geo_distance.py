import math
import random

import pytest

from geodist.core.geo import KILOMETERS, MILES, NAUTICAL_MILES, Location

START = Location.from_pair((38.898556, -77.037852))
END = Location.from_pair((38.897147, -77.043934))

PAIRS = [
    (START, END),
    (Location(51.5007, -0.1246), Location(40.6892, -74.0445)),
    (Location(-33.8568, 151.2153), Location(35.6586, 139.7454)),
    (Location(0.0, 179.5), Location(0.0, -179.5)),
]


def test_distance_in_miles():
    assert START.distance_mi(END) == 0.3412300584989182


def test_distance_in_kilometers():
    assert START.distance_km(END) == 0.549156547264883


def test_distance_in_nautical_miles_uses_derived_constant():
    assert NAUTICAL_MILES == MILES * 1.1508
    assert START.distance_nautical_mi(END) == NAUTICAL_MILES * START.central_angle(END)
    assert START.distance_nautical_mi(END) == pytest.approx(0.3412300584989182 * 1.1508, rel=1e-12)


@pytest.mark.parametrize("a,b", PAIRS)
def test_distance_is_symmetric(a, b):
    assert a.distance_km(b) == b.distance_km(a)
    assert a.distance_mi(b) == b.distance_mi(a)
    assert a.distance_nautical_mi(b) == b.distance_nautical_mi(a)


@pytest.mark.parametrize("a,_", PAIRS)
def test_distance_to_self_is_zero(a, _):
    assert a.distance_km(a) == 0.0
    assert a.distance_mi(a) == 0.0
    assert a.distance_nautical_mi(a) == 0.0


@pytest.mark.parametrize("a,b", PAIRS)
def test_units_are_consistent(a, b):
    assert a.distance_mi(b) / a.distance_km(b) == pytest.approx(MILES / KILOMETERS)


def test_antipodal_points_are_half_a_circumference_apart():
    assert Location(0.0, 0.0).central_angle(Location(0.0, 180.0)) == pytest.approx(math.pi)
    assert Location(0.0, 0.0).distance_km(Location(0.0, 180.0)) == pytest.approx(KILOMETERS * math.pi)


def test_distance_to_dispatches_by_unit_name():
    assert START.distance_to(END, "mi") == START.distance_mi(END)
    assert START.distance_to(END, "nmi") == START.distance_nautical_mi(END)
    assert START.distance_to(END, "km") == START.distance_km(END)
    assert START.distance_to(END) == START.distance_km(END)


def test_distance_to_rejects_unknown_unit():
    with pytest.raises(ValueError, match=r"expected one of: mi, nmi, km"):
        START.distance_to(END, "furlong")


def test_nan_coordinates_propagate():
    assert math.isnan(Location(math.nan, 0.0).distance_km(Location(0.0, 0.0)))
    assert math.isnan(Location(0.0, 0.0).distance_mi(Location(0.0, math.nan)))


def test_infinite_coordinates_produce_nan():
    assert math.isnan(Location(math.inf, 0.0).distance_km(Location(0.0, 0.0)))
    assert math.isnan(Location(0.0, -math.inf).distance_nautical_mi(Location(0.0, 0.0)))


def test_distance_is_bit_symmetric_over_many_points():
    rng = random.Random(20240601)
    for _ in range(5000):
        a = Location(rng.uniform(-90, 90), rng.uniform(-180, 180))
        b = Location(rng.uniform(-90, 90), rng.uniform(-180, 180))
        assert a.central_angle(b) == b.central_angle(a), (a, b)
        assert a.distance_km(b) == b.distance_km(a)
