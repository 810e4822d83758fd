import math

import pytest

from contestlib.geometry3d import (
    Point3,
    coplanar,
    collinear,
    cross,
    distance,
    dot,
    in_triangle,
    in_triangle_strict,
    line_angle_cos,
    line_intersection,
    line_line_distance,
    line_plane_angle_sin,
    line_plane_intersection,
    line_plane_parallel,
    line_plane_perpendicular,
    lines_parallel,
    lines_perpendicular,
    norm,
    on_segment,
    on_segment_strict,
    opposite_side_of_line,
    opposite_side_of_plane,
    plane_angle_cos,
    plane_intersection,
    plane_normal,
    planes_parallel,
    planes_perpendicular,
    point_line_distance,
    point_plane_distance,
    same_side_of_line,
    same_side_of_plane,
    segment_triangle_intersect,
    segment_triangle_intersect_strict,
    segments_intersect,
    segments_intersect_strict,
)

O = Point3(0, 0, 0)
X = Point3(1, 0, 0)
Y = Point3(0, 1, 0)
Z = Point3(0, 0, 1)


def close(p, q):
    return distance(p, q) < 1e-7


def test_point_arithmetic_round_trip():
    p, q = Point3(1.5, -2, 3), Point3(4, 5, -6)
    assert (p + q) - q == p
    assert close((p * 4) / 4, p)


def test_cross_of_axes():
    assert cross(X, Y) == Z


def test_cross_is_orthogonal():
    u, v = Point3(1, 2, 3), Point3(-4, 0.5, 2)
    w = cross(u, v)
    assert abs(dot(w, u)) < 1e-9
    assert abs(dot(w, v)) < 1e-9


def test_distance_matches_norm():
    p, q = Point3(1, 2, 3), Point3(4, 6, 3)
    assert distance(p, q) == pytest.approx(norm(p - q))
    assert distance(p, q) == pytest.approx(5.0)


def test_collinear_and_coplanar():
    assert collinear(O, X, X * 3)
    assert not collinear(O, X, Y)
    assert coplanar(O, X, Y, Point3(2, 3, 0))
    assert not coplanar(O, X, Y, Z)


def test_on_segment():
    a, b = Point3(1, 1, 1), Point3(3, 5, 7)
    mid = (a + b) / 2
    assert on_segment(mid, a, b)
    assert on_segment(a, a, b)
    assert not on_segment(b + (b - a), a, b)
    assert on_segment_strict(mid, a, b)
    assert not on_segment_strict(a, a, b)


def test_in_triangle():
    centroid = (O + X + Y) / 3
    assert in_triangle(centroid, O, X, Y)
    assert in_triangle_strict(centroid, O, X, Y)
    edge = (O + X) / 2
    assert in_triangle(edge, O, X, Y)
    assert not in_triangle_strict(edge, O, X, Y)
    assert not in_triangle(Point3(2, 2, 0), O, X, Y)


def test_sides_of_line():
    assert same_side_of_line(Point3(1, 1, 0), Point3(2, 3, 0), O, X)
    assert opposite_side_of_line(Point3(1, 1, 0), Point3(2, -3, 0), O, X)
    assert not same_side_of_line(Point3(1, 0, 0), Point3(2, 3, 0), O, X)


def test_sides_of_plane():
    assert same_side_of_plane(Point3(1, 1, 1), Point3(2, 2, 5), O, X, Y)
    assert opposite_side_of_plane(Point3(1, 1, 1), Point3(2, 2, -5), O, X, Y)
    assert not opposite_side_of_plane(Point3(1, 1, 0), Point3(2, 2, -5), O, X, Y)


def test_parallel_and_perpendicular():
    assert lines_parallel(O, X, Y, Y + X * 2)
    assert not lines_parallel(O, X, O, Y)
    assert planes_parallel(O, X, Y, Z, Z + X, Z + Y)
    assert line_plane_parallel(Z, Z + X, O, X, Y)
    assert lines_perpendicular(O, X, O, Y)
    assert planes_perpendicular(O, X, Y, O, X, Z)
    assert line_plane_perpendicular(O, Z, O, X, Y)
    assert not line_plane_perpendicular(O, X, O, X, Y)


def test_segments_intersect_cases():
    a, b = Point3(0, 0, 1), Point3(2, 2, 1)
    c, d = Point3(0, 2, 1), Point3(2, 0, 1)
    assert segments_intersect(a, b, c, d)
    assert segments_intersect_strict(a, b, c, d)
    # touching at an endpoint
    assert segments_intersect(a, b, b, Point3(3, 0, 1))
    assert not segments_intersect_strict(a, b, b, Point3(3, 0, 1))
    # skew
    assert not segments_intersect(O, X, Point3(0, 1, 1), Point3(0, 2, 1))
    # collinear overlapping and disjoint
    assert segments_intersect(O, X * 2, X, X * 3)
    assert not segments_intersect(O, X, X * 2, X * 3)


def test_segment_triangle():
    inner = Point3(0.2, 0.2, 0)
    assert segment_triangle_intersect(inner - Z, inner + Z, O, X, Y)
    assert segment_triangle_intersect_strict(inner - Z, inner + Z, O, X, Y)
    assert segment_triangle_intersect(inner, inner + Z, O, X, Y)
    assert not segment_triangle_intersect_strict(inner, inner + Z, O, X, Y)
    far = Point3(5, 5, 0)
    assert not segment_triangle_intersect(far - Z, far + Z, O, X, Y)


def test_line_intersection_recovers_point():
    meet = Point3(1, 2, 3)
    d1, d2 = Point3(1, 1, 2), Point3(-2, 1, 0.5)
    got = line_intersection(meet + d1, meet - d1 * 3, meet + d2 * 2, meet - d2)
    assert close(got, meet)


def test_line_intersection_parallel_raises():
    with pytest.raises(ZeroDivisionError):
        line_intersection(O, X, Y, Y + X)


def test_line_plane_intersection_lies_on_both():
    a, b, c = Point3(1, 0, 2), Point3(0, 3, 1), Point3(-1, -1, 4)
    l1, l2 = Point3(5, 5, 5), Point3(-3, 2, -7)
    p = line_plane_intersection(l1, l2, a, b, c)
    assert point_plane_distance(p, a, b, c) < 1e-7
    assert collinear(l1, l2, p)


def test_plane_intersection_points_lie_on_both_planes():
    u = (Point3(1, 0, 2), Point3(0, 3, 1), Point3(-1, -1, 4))
    v = (Point3(2, 2, 2), Point3(0, 1, -1), Point3(3, -2, 0))
    p, q = plane_intersection(*u, *v)
    for point in (p, q):
        assert point_plane_distance(point, *u) < 1e-7
        assert point_plane_distance(point, *v) < 1e-7


def test_plane_intersection_with_edge_parallel():
    p, q = plane_intersection(O, X, Y, O, Z, Z + X)
    for point in (p, q):
        assert point_plane_distance(point, O, X, Y) < 1e-7
        assert point_plane_distance(point, O, Z, Z + X) < 1e-7


def test_distances():
    a, b, c = Point3(1, 0, 2), Point3(0, 3, 1), Point3(-1, -1, 4)
    n = plane_normal(a, b, c)
    p = a + n / norm(n) * 3
    assert point_plane_distance(p, a, b, c) == pytest.approx(3)
    assert point_line_distance(Point3(4, 7, 0), O, Z) == pytest.approx(norm(Point3(4, 7, 0)))
    assert line_line_distance(O, X, Z * 2, Z * 2 + Y) == pytest.approx(2)


def test_angles():
    d = Point3(1, 2, 3)
    assert line_angle_cos(O, d, O, d * 2) == pytest.approx(1)
    assert line_angle_cos(O, X, O, Y) == pytest.approx(0)
    assert plane_angle_cos(O, X, Y, Z, Z + X, Z + Y) == pytest.approx(1)
    s = line_plane_angle_sin(O, Point3(1, 0, 1), O, X, Y)
    assert abs(s) == pytest.approx(math.sin(math.pi / 4))