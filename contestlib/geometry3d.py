"""Vector geometry in three dimensions: points, lines, planes and triangles.

Lines and segments are given by two points, planes and triangles by three.
All comparisons use the tolerance ``EPS``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

EPS = 1e-9


def _zero(value: float) -> bool:
    return abs(value) < EPS


@dataclass(frozen=True)
class Point3:
    """A point or vector in space."""

    x: float
    y: float
    z: float

    def __add__(self, other: Point3) -> Point3:
        return Point3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Point3) -> Point3:
        return Point3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Point3:
        return Point3(self.x * factor, self.y * factor, self.z * factor)

    def __truediv__(self, factor: float) -> Point3:
        return Point3(self.x / factor, self.y / factor, self.z / factor)


def cross(u: Point3, v: Point3) -> Point3:
    """Cross product u x v."""
    return Point3(
        u.y * v.z - v.y * u.z,
        u.z * v.x - u.x * v.z,
        u.x * v.y - u.y * v.x,
    )


def dot(u: Point3, v: Point3) -> float:
    """Dot product u . v."""
    return u.x * v.x + u.y * v.y + u.z * v.z


def plane_normal(a: Point3, b: Point3, c: Point3) -> Point3:
    """Normal vector of the plane through a, b and c (not normalised)."""
    return cross(a - b, b - c)


def distance(p: Point3, q: Point3) -> float:
    """Euclidean distance between two points."""
    return norm(p - q)


def norm(p: Point3) -> float:
    """Length of a vector."""
    return math.sqrt(p.x * p.x + p.y * p.y + p.z * p.z)


def collinear(a: Point3, b: Point3, c: Point3) -> bool:
    """True if the three points lie on one line."""
    return norm(cross(a - b, b - c)) < EPS


def coplanar(a: Point3, b: Point3, c: Point3, d: Point3) -> bool:
    """True if the four points lie in one plane."""
    return _zero(dot(plane_normal(a, b, c), d - a))


def on_segment(p: Point3, a: Point3, b: Point3) -> bool:
    """True if p lies on segment ab, endpoints included."""
    return (
        _zero(norm(cross(p - a, p - b)))
        and (a.x - p.x) * (b.x - p.x) < EPS
        and (a.y - p.y) * (b.y - p.y) < EPS
        and (a.z - p.z) * (b.z - p.z) < EPS
    )


def _differs(p: Point3, q: Point3) -> bool:
    return not _zero(p.x - q.x) or not _zero(p.y - q.y) or not _zero(p.z - q.z)


def on_segment_strict(p: Point3, a: Point3, b: Point3) -> bool:
    """True if p lies on segment ab, endpoints excluded."""
    return on_segment(p, a, b) and _differs(p, a) and _differs(p, b)


def _triangle_parts(p: Point3, a: Point3, b: Point3, c: Point3) -> tuple[float, float, float]:
    return (
        norm(cross(p - a, p - b)),
        norm(cross(p - b, p - c)),
        norm(cross(p - c, p - a)),
    )


def in_triangle(p: Point3, a: Point3, b: Point3, c: Point3) -> bool:
    """True if p lies in triangle abc, border included.

    Meaningless for a degenerate triangle.
    """
    whole = norm(cross(a - b, a - c))
    return _zero(whole - sum(_triangle_parts(p, a, b, c)))


def in_triangle_strict(p: Point3, a: Point3, b: Point3, c: Point3) -> bool:
    """True if p lies strictly inside triangle abc."""
    return in_triangle(p, a, b, c) and all(
        part > EPS for part in _triangle_parts(p, a, b, c)
    )


def _line_side_product(p: Point3, q: Point3, a: Point3, b: Point3) -> float:
    direction = a - b
    return dot(cross(direction, p - b), cross(direction, q - b))


def same_side_of_line(p: Point3, q: Point3, a: Point3, b: Point3) -> bool:
    """True if p and q are strictly on the same side of line ab (coplanar input)."""
    return _line_side_product(p, q, a, b) > EPS


def opposite_side_of_line(p: Point3, q: Point3, a: Point3, b: Point3) -> bool:
    """True if p and q are strictly on opposite sides of line ab (coplanar input)."""
    return _line_side_product(p, q, a, b) < -EPS


def _plane_side_product(p: Point3, q: Point3, a: Point3, b: Point3, c: Point3) -> float:
    n = plane_normal(a, b, c)
    return dot(n, p - a) * dot(n, q - a)


def same_side_of_plane(p: Point3, q: Point3, a: Point3, b: Point3, c: Point3) -> bool:
    """True if p and q are strictly on the same side of plane abc."""
    return _plane_side_product(p, q, a, b, c) > EPS


def opposite_side_of_plane(p: Point3, q: Point3, a: Point3, b: Point3, c: Point3) -> bool:
    """True if p and q are strictly on opposite sides of plane abc."""
    return _plane_side_product(p, q, a, b, c) < -EPS


def lines_parallel(u1: Point3, u2: Point3, v1: Point3, v2: Point3) -> bool:
    """True if line u1u2 is parallel to line v1v2."""
    return norm(cross(u1 - u2, v1 - v2)) < EPS


def planes_parallel(u1, u2, u3, v1, v2, v3) -> bool:
    """True if plane u1u2u3 is parallel to plane v1v2v3."""
    return norm(cross(plane_normal(u1, u2, u3), plane_normal(v1, v2, v3))) < EPS


def line_plane_parallel(l1, l2, s1, s2, s3) -> bool:
    """True if line l1l2 is parallel to plane s1s2s3."""
    return _zero(dot(l1 - l2, plane_normal(s1, s2, s3)))


def lines_perpendicular(u1, u2, v1, v2) -> bool:
    """True if line u1u2 is perpendicular to line v1v2."""
    return _zero(dot(u1 - u2, v1 - v2))


def planes_perpendicular(u1, u2, u3, v1, v2, v3) -> bool:
    """True if plane u1u2u3 is perpendicular to plane v1v2v3."""
    return _zero(dot(plane_normal(u1, u2, u3), plane_normal(v1, v2, v3)))


def line_plane_perpendicular(l1, l2, s1, s2, s3) -> bool:
    """True if line l1l2 is perpendicular to plane s1s2s3."""
    return norm(cross(l1 - l2, plane_normal(s1, s2, s3))) < EPS


def segments_intersect(u1, u2, v1, v2) -> bool:
    """True if segments u1u2 and v1v2 meet, touching and overlap included."""
    if not coplanar(u1, u2, v1, v2):
        return False
    if not collinear(u1, u2, v1) or not collinear(u1, u2, v2):
        return not same_side_of_line(u1, u2, v1, v2) and not same_side_of_line(
            v1, v2, u1, u2
        )
    return (
        on_segment(u1, v1, v2)
        or on_segment(u2, v1, v2)
        or on_segment(v1, u1, u2)
        or on_segment(v2, u1, u2)
    )


def segments_intersect_strict(u1, u2, v1, v2) -> bool:
    """True if segments u1u2 and v1v2 cross properly."""
    return (
        coplanar(u1, u2, v1, v2)
        and opposite_side_of_line(u1, u2, v1, v2)
        and opposite_side_of_line(v1, v2, u1, u2)
    )


def segment_triangle_intersect(l1, l2, s1, s2, s3) -> bool:
    """True if segment l1l2 meets triangle s1s2s3, border and touching included."""
    return (
        not same_side_of_plane(l1, l2, s1, s2, s3)
        and not same_side_of_plane(s1, s2, l1, l2, s3)
        and not same_side_of_plane(s2, s3, l1, l2, s1)
        and not same_side_of_plane(s3, s1, l1, l2, s2)
    )


def segment_triangle_intersect_strict(l1, l2, s1, s2, s3) -> bool:
    """True if segment l1l2 passes properly through the inside of triangle s1s2s3."""
    return (
        opposite_side_of_plane(l1, l2, s1, s2, s3)
        and opposite_side_of_plane(s1, s2, l1, l2, s3)
        and opposite_side_of_plane(s2, s3, l1, l2, s1)
        and opposite_side_of_plane(s3, s1, l1, l2, s2)
    )


def line_intersection(u1: Point3, u2: Point3, v1: Point3, v2: Point3) -> Point3:
    """Meeting point of lines u1u2 and v1v2.

    The lines must be coplanar and not parallel; the parameter is solved in
    the xy projection, so it must not degenerate there.
    """
    t = ((u1.x - v1.x) * (v1.y - v2.y) - (u1.y - v1.y) * (v1.x - v2.x)) / (
        (u1.x - u2.x) * (v1.y - v2.y) - (u1.y - u2.y) * (v1.x - v2.x)
    )
    return u1 + (u2 - u1) * t


def line_plane_intersection(l1, l2, s1, s2, s3) -> Point3:
    """Meeting point of line l1l2 with plane s1s2s3 (must not be parallel)."""
    n = plane_normal(s1, s2, s3)
    t = dot(n, s1 - l1) / dot(n, l2 - l1)
    return l1 + (l2 - l1) * t


def plane_intersection(u1, u2, u3, v1, v2, v3) -> tuple[Point3, Point3]:
    """Two points on the line where planes u1u2u3 and v1v2v3 meet."""
    if line_plane_parallel(v1, v2, u1, u2, u3):
        first = line_plane_intersection(v2, v3, u1, u2, u3)
    else:
        first = line_plane_intersection(v1, v2, u1, u2, u3)
    if line_plane_parallel(v3, v1, u1, u2, u3):
        second = line_plane_intersection(v2, v3, u1, u2, u3)
    else:
        second = line_plane_intersection(v3, v1, u1, u2, u3)
    return first, second


def point_line_distance(p: Point3, a: Point3, b: Point3) -> float:
    """Distance from p to line ab."""
    return norm(cross(p - a, b - a)) / distance(a, b)


def point_plane_distance(p: Point3, a: Point3, b: Point3, c: Point3) -> float:
    """Distance from p to plane abc."""
    n = plane_normal(a, b, c)
    return abs(dot(n, p - a)) / norm(n)


def line_line_distance(u1, u2, v1, v2) -> float:
    """Distance between non-parallel lines u1u2 and v1v2."""
    n = cross(u1 - u2, v1 - v2)
    return abs(dot(u1 - v1, n)) / norm(n)


def line_angle_cos(u1, u2, v1, v2) -> float:
    """Cosine of the angle between the directions of u1u2 and v1v2."""
    du, dv = u1 - u2, v1 - v2
    return dot(du, dv) / norm(du) / norm(dv)


def plane_angle_cos(u1, u2, u3, v1, v2, v3) -> float:
    """Cosine of the angle between the normals of two planes."""
    nu, nv = plane_normal(u1, u2, u3), plane_normal(v1, v2, v3)
    return dot(nu, nv) / norm(nu) / norm(nv)


def line_plane_angle_sin(l1, l2, s1, s2, s3) -> float:
    """Sine of the angle between line l1l2 and plane s1s2s3."""
    d, n = l1 - l2, plane_normal(s1, s2, s3)
    return dot(d, n) / norm(d) / norm(n)