import math

import pytest
from pydantic import ValidationError

from geocircles.core.geo import EARTH_RADIUS_MILES, GeoPoint, haversine_miles
from geocircles.domain.models import Coordinate
from geocircles.generator.circle import InvalidAngularStep, InvalidDistance, bearings, generate


def test_default_step_gives_36_points_in_increasing_bearing_order():
    points = generate(Coordinate(latitude=10, longitude=20), 5)
    assert len(points) == 36
    angles = [p.angle for p in points]
    assert angles[0] == 0
    assert angles == sorted(angles)
    assert len(set(angles)) == 36
    assert angles[-1] == 350


@pytest.mark.parametrize("step, expected", [(90, 4), (45, 8), (30, 12), (1, 360), (360, 1)])
def test_cardinality_for_dividing_steps(step, expected):
    assert len(generate((0, 0), 10, step)) == expected


def test_non_dividing_step_stops_below_360():
    angles = [p.angle for p in generate((0, 0), 10, 7)]
    assert len(angles) == math.ceil(360 / 7)
    assert angles[-1] == 357


def test_bearings_are_multiplied_not_accumulated():
    out = bearings(0.25)
    assert len(out) == 1440
    assert out[1234] == 1234 * 0.25


def test_generation_is_deterministic():
    a = generate(Coordinate(latitude=51.5, longitude=-0.12), 12.5, 15)
    b = generate(Coordinate(latitude=51.5, longitude=-0.12), 12.5, 15)
    assert [p.model_dump() for p in a] == [p.model_dump() for p in b]


def test_bearing_zero_from_origin_points_due_north():
    d = 100.0
    north = generate((0, 0), d, 10)[0]
    assert north.angle == 0
    assert north.longitude == pytest.approx(0.0, abs=1e-12)
    assert north.latitude == pytest.approx(math.degrees(d / 3958.8), abs=1e-9)


@pytest.mark.parametrize(
    "center",
    [(0, 0), (40.7128, -74.0060), (-33.8688, 151.2093), (64.1466, -21.9426), (-75.0, 0.0)],
)
@pytest.mark.parametrize("distance", [0.5, 5, 69, 500, 2500])
def test_every_point_is_the_requested_great_circle_distance_away(center, distance):
    origin = GeoPoint(lat=center[0], lon=center[1])
    for p in generate(center, distance, 30):
        got = haversine_miles(origin, GeoPoint(lat=p.latitude, lon=p.longitude))
        assert got == pytest.approx(distance, abs=1e-6)


@pytest.mark.parametrize("center", [(0, 179.9), (0, -179.9), (89.9, 10), (-89.9, -170), (45, 180), (45, -180)])
def test_output_ranges(center):
    for p in generate(center, 300, 5):
        assert -180.0 <= p.longitude < 180.0
        assert -90.0 <= p.latitude <= 90.0
        assert p.distance == 300
        assert 0 <= p.angle < 360


def test_eastward_crossing_of_antimeridian_wraps_to_negative():
    east = generate((0, 179.9), 69, 90)[1]
    assert east.angle == 90
    assert -180.0 <= east.longitude < -179.0


def test_westward_crossing_of_antimeridian_wraps_to_positive():
    west = generate((0, -179.9), 69, 90)[3]
    assert west.angle == 270
    assert 179.0 < west.longitude < 180.0


def test_pole_center_produces_a_ring_at_the_expected_latitude():
    d = 69.0
    expected_lat = 90.0 - math.degrees(d / EARTH_RADIUS_MILES)
    points = generate((90, 0), d, 10)
    assert len(points) == 36
    for p in points:
        assert p.latitude == pytest.approx(expected_lat, abs=1e-9)
        assert -180.0 <= p.longitude < 180.0


def test_new_york_scenario():
    points = generate(Coordinate(latitude=40.7128, longitude=-74.0060), 69.0, 90)
    assert [p.angle for p in points] == [0, 90, 180, 270]
    north = points[0]
    assert north.latitude == pytest.approx(41.7128, abs=0.05)
    assert north.longitude == pytest.approx(-74.0060, abs=1e-9)
    assert points[2].latitude == pytest.approx(39.7128, abs=0.05)


def test_points_are_immutable():
    p = generate((0, 0), 1, 90)[0]
    with pytest.raises(ValidationError):
        p.latitude = 1.0


@pytest.mark.parametrize("distance", [0, -5, float("nan"), float("inf"), float("-inf"), "abc", None])
def test_invalid_distance_is_rejected(distance):
    with pytest.raises(InvalidDistance) as excinfo:
        generate((0, 0), distance, 10)
    assert excinfo.value.distance is distance


def test_invalid_distance_is_a_value_error_with_the_value_in_the_message():
    with pytest.raises(ValueError, match=r"-5"):
        generate((0, 0), -5, 10)


@pytest.mark.parametrize("step", [0, -10, 361, float("nan"), float("inf")])
def test_invalid_step_is_rejected(step):
    with pytest.raises(InvalidAngularStep):
        generate((0, 0), 10, step)


def test_custom_earth_radius():
    north = generate((0, 0), 1.0, 90, earth_radius_miles=1.0)[0]
    assert north.latitude == pytest.approx(math.degrees(1.0))


@pytest.mark.parametrize("n", [39, 78, 156, 175, 350])
def test_step_of_360_over_n_gives_exactly_n_bearings(n):
    out = bearings(360 / n)
    assert len(out) == n
    assert out[-1] < 360 - (360 / n) / 2


def test_step_of_360_over_n_never_repeats_north():
    for n in range(1, 721):
        assert len(bearings(360 / n)) == n


def test_south_pole_center_produces_a_ring_at_the_expected_latitude():
    d = 69.0
    expected_lat = -90.0 + math.degrees(d / EARTH_RADIUS_MILES)
    points = generate((-90, 0), d, 10)
    assert len(points) == 36
    for p in points:
        assert p.latitude == pytest.approx(expected_lat, abs=1e-9)
        assert -180.0 <= p.longitude < 180.0
