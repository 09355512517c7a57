import pytest

from timeclock.exceptions import format_radius
from timeclock.geo import Position, distance_m, haversine_m, km_to_m, m_to_km, within_radius

CENTER = Position(0.0, 0.0)


def test_center_is_within():
    assert within_radius(Position(0.0, 0.0), CENTER, 1000)

def test_far_point_is_outside():
    d = distance_m(Position(10.0, 10.0), CENTER)
    assert 1_560_000 < d < 1_580_000
    assert not within_radius(Position(10.0, 10.0), CENTER, 1000)

def test_boundary_is_inclusive():
    d = distance_m(Position(0.005, 0.0), CENTER)
    assert within_radius(Position(0.005, 0.0), CENTER, d)
    assert not within_radius(Position(0.005, 0.0), CENTER, d - 0.01)

def test_haversine_symmetric_and_zero():
    assert haversine_m(51.5, -0.12, 51.5, -0.12) == 0
    assert haversine_m(1, 1, 2, 2) == pytest.approx(haversine_m(2, 2, 1, 1))

def test_km_m_conversion():
    assert km_to_m(1.5) == 1500.0
    assert m_to_km(250) == 0.25
    assert m_to_km(km_to_m(3.2)) == pytest.approx(3.2)

@pytest.mark.parametrize("lat,lng", [(91, 0), (-90.5, 0), (0, 181), (0, -180.01)])
def test_position_rejects_out_of_range(lat, lng):
    with pytest.raises(ValueError):
        Position(lat, lng)

def test_format_radius():
    assert format_radius(250) == "250 m"
    assert format_radius(1500) == "1.5 km"
