import pytest

from builders import make_sample
from utils.distance import haversine_m, segment_distance_m


def test_haversine_identical_points_is_zero():
    assert haversine_m(45.0, 5.0, 45.0, 5.0) == 0.0


def test_haversine_one_degree_of_longitude_on_equator():
    assert haversine_m(0.0, 0.0, 0.0, 1.0) == pytest.approx(111_195, rel=0.01)


def test_haversine_is_symmetric():
    a = (48.8566, 2.3522)
    b = (45.764, 4.8357)
    assert haversine_m(*a, *b) == pytest.approx(haversine_m(*b, *a))


def test_segment_distance_from_coordinates():
    prev = make_sample(0, latitude=0.0, longitude=0.0)
    curr = make_sample(10, latitude=0.0, longitude=1.0)
    assert segment_distance_m(prev, curr, from_coordinates=True) == pytest.approx(
        haversine_m(0.0, 0.0, 0.0, 1.0)
    )


def test_segment_distance_from_cumulative_field_is_not_clamped():
    prev = make_sample(0, cumulative_distance_m=120.0)
    curr = make_sample(10, cumulative_distance_m=100.0)
    assert segment_distance_m(prev, curr, from_coordinates=False) == pytest.approx(-20.0)


def test_segment_distance_missing_field_contributes_nothing():
    prev = make_sample(0, cumulative_distance_m=None)
    curr = make_sample(10, cumulative_distance_m=100.0)
    assert segment_distance_m(prev, curr, from_coordinates=False) == 0.0
    no_coords = make_sample(20)
    assert segment_distance_m(no_coords, curr, from_coordinates=True) == 0.0
