import math

import pytest

from geo import (
    EARTH_RADIUS_M,
    distance,
    midpoint,
    planar_offset_m,
    point_in_circle,
    point_in_polygon,
    segment_intersects_circle,
    segments_intersect,
)

# length of one degree of latitude on the haversine sphere
METERS_PER_DEGREE_LAT = EARTH_RADIUS_M * math.pi / 180

UNIT_SQUARE = [(0, 0), (0, 1), (1, 1), (1, 0)]


@pytest.fixture
def paris():
    return (48.8566, 2.3522)


def test_distance_to_itself_is_zero(paris):
    assert distance(paris, paris) == 0
    assert distance((0, 0), (0, 0)) == 0


def test_distance_is_symmetric_and_non_negative(paris):
    other = (48.8700, 2.3300)

    assert distance(paris, other) == pytest.approx(distance(other, paris))
    assert distance(paris, other) > 0


def test_distance_one_degree_of_latitude():
    assert distance((0, 0), (1, 0)) == pytest.approx(METERS_PER_DEGREE_LAT, rel=1e-9)


def test_distance_antipodal_points_do_not_produce_nan():
    d = distance((0, 0), (0, 180))

    assert not math.isnan(d)
    assert d == pytest.approx(math.pi * EARTH_RADIUS_M)


def test_point_in_circle_center_and_far_point():
    radius_m = 1000

    assert point_in_circle((0, 0), (0, 0), radius_m)
    assert not point_in_circle((1, 1), (0, 0), radius_m)


def test_point_in_circle_just_inside_radius():
    radius_m = 1000
    # 99.9% of the radius, straight north
    just_inside = (0.999 * radius_m / METERS_PER_DEGREE_LAT, 0)

    assert point_in_circle(just_inside, (0, 0), radius_m)


def test_point_in_polygon_unit_square():
    assert point_in_polygon((0.5, 0.5), UNIT_SQUARE)
    assert not point_in_polygon((2, 2), UNIT_SQUARE)


def test_point_in_polygon_ignores_zero_length_edges():
    """
    Duplicated vertices give a zero-length edge; it must never count as a
    crossing nor divide by zero.
    """
    ring = [(0, 0), (0, 0), (0, 1), (1, 1), (1, 1), (1, 0)]

    assert point_in_polygon((0.5, 0.5), ring)
    assert not point_in_polygon((2, 2), ring)


def test_point_in_polygon_self_intersecting_ring_does_not_crash():
    bowtie = [(0, 0), (1, 1), (1, 0), (0, 1)]

    # even-odd: the lower lobe is inside, far away is outside
    assert point_in_polygon((0.1, 0.5), bowtie)
    assert not point_in_polygon((5, 5), bowtie)


def test_segments_intersect_crossing_diagonals():
    assert segments_intersect((0, 0), (1, 1), (0, 1), (1, 0))


def test_segments_intersect_parallel_segments():
    assert not segments_intersect((0, 0), (0, 1), (1, 0), (1, 1))


def test_segments_intersect_collinear_overlap_is_not_reported():
    assert not segments_intersect((0, 0), (0, 2), (0, 1), (0, 3))


def test_segments_intersect_touching_endpoint_counts():
    assert segments_intersect((0, 0), (1, 1), (1, 1), (2, 0))


def test_segments_intersect_lines_cross_outside_segments():
    assert not segments_intersect((0, 0), (1, 0), (0, 1), (1, 2))


def test_segments_intersect_zero_length_segment():
    assert not segments_intersect((0.5, 0.5), (0.5, 0.5), (0, 0), (1, 1))


def test_segment_intersects_circle_passing_through():
    # runs north-south about 111 m east of the center
    assert segment_intersects_circle((-1, 0.001), (1, 0.001), (0, 0), 1000)


def test_segment_intersects_circle_passing_wide():
    # about 11 km east of the center
    assert not segment_intersects_circle((-1, 0.1), (1, 0.1), (0, 0), 1000)


def test_segment_intersects_circle_projection_is_clamped_to_segment():
    # the infinite line goes through the center, the segment stops 1 degree short
    assert not segment_intersects_circle((1, 0), (2, 0), (0, 0), 1000)


def test_segment_intersects_circle_zero_length_segment():
    assert segment_intersects_circle((0, 0), (0, 0), (0, 0), 1000)
    assert not segment_intersects_circle((1, 1), (1, 1), (0, 0), 1000)


def test_midpoint_and_planar_offset():
    assert midpoint((0, 0), (1, 2)) == (0.5, 1.0)
    assert planar_offset_m((0, 0), (0.003, 0.004), 111_000) == pytest.approx(555.0)
