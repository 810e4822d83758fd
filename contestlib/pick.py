"""Integer plane geometry: segments, convex hull, polygon area and Pick's theorem."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import cmp_to_key


@dataclass(frozen=True)
class Point:
    """A lattice point; ordered by y, then x."""

    x: int
    y: int

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __lt__(self, other: Point) -> bool:
        return (self.y, self.x) < (other.y, other.x)


def cross(p: Point, q: Point) -> int:
    """Z component of the cross product p x q."""
    return p.x * q.y - p.y * q.x


def dot(p: Point, q: Point) -> int:
    """Dot product p . q."""
    return p.x * q.x + p.y * q.y


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    p = a - b
    return math.sqrt(p.x * p.x + p.y * p.y)


def lines_same(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if line ab and line cd are the same line."""
    return cross(a - c, c - d) == 0 and cross(b - c, c - d) == 0


def lines_parallel(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if line ab is parallel to line cd."""
    return cross(a - b, c - d) == 0


def line_intersection(a: Point, b: Point, c: Point, d: Point) -> tuple[float, float]:
    """Meeting point of line ab with line cd; raises ValueError if they are parallel."""
    a1, b1, c1 = a.y - b.y, b.x - a.x, cross(a, b)
    a2, b2, c2 = c.y - d.y, d.x - c.x, cross(c, d)
    det = a1 * b2 - a2 * b1
    if det == 0:
        raise ValueError("lines are parallel")
    return (b1 * c2 - b2 * c1) / det, (c1 * a2 - c2 * a1) / det


def on_segment(a: Point, b: Point, c: Point) -> bool:
    """True if c lies in the bounding box of segment ab."""
    return min(a.x, b.x) <= c.x <= max(a.x, b.x) and min(a.y, b.y) <= c.y <= max(a.y, b.y)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def segments_intersect(p1: Point, p2: Point, p3: Point, p4: Point) -> bool:
    """True if segments p1p2 and p3p4 share a point, touching included."""
    d1 = cross(p4 - p3, p1 - p3)
    d2 = cross(p4 - p3, p2 - p3)
    d3 = cross(p2 - p1, p3 - p1)
    d4 = cross(p2 - p1, p4 - p1)
    if _sign(d1) * _sign(d2) < 0 and _sign(d3) * _sign(d4) < 0:
        return True
    return (
        (d1 == 0 and on_segment(p3, p4, p1))
        or (d2 == 0 and on_segment(p3, p4, p2))
        or (d3 == 0 and on_segment(p1, p2, p3))
        or (d4 == 0 and on_segment(p1, p2, p4))
    )


def segment_intersection(a: Point, b: Point, c: Point, d: Point) -> tuple[float, float] | None:
    """Meeting point of segments ab and cd, or None if they do not meet.

    Raises ValueError for overlapping collinear segments, which share no single point.
    """
    if not segments_intersect(a, b, c, d):
        return None
    return line_intersection(a, b, c, d)


def _angle_order(a: Point, b: Point) -> int:
    c = cross(a, b)
    if c != 0:
        return -1 if c > 0 else 1
    d1, d2 = dot(a, a), dot(b, b)
    return -1 if d1 > d2 else (1 if d1 < d2 else 0)


def convex_hull(points: Iterable[Point]) -> list[Point]:
    """Convex hull in counterclockwise order, starting from the lowest point."""
    pts = sorted(set(points), key=lambda p: (p.y, p.x))
    n = len(pts)
    if n == 0:
        return []
    origin = pts[0]
    pts = [p - origin for p in pts]
    if n <= 2:
        return [p + origin for p in pts]
    pts[1:] = sorted(pts[1:], key=cmp_to_key(_angle_order))
    stack = [pts[0], pts[1]]
    for i in range(2, n + 1):
        p3 = pts[i % n]
        keep = i != n
        while True:
            p2, p1 = stack[-1], stack[-2]
            c = cross(p2 - p1, p3 - p1)
            if c < 0:
                if len(stack) > 2:
                    stack.pop()
                    continue
                break
            if c == 0:
                if dot(p3 - p1, p3 - p1) <= dot(p2 - p1, p2 - p1):
                    keep = False
                else:
                    stack.pop()
            break
        if keep:
            stack.append(p3)
    return [p + origin for p in stack]


def signed_area(polygon: Sequence[Point]) -> int:
    """Twice the signed area of a polygon; positive when counterclockwise."""
    n = len(polygon)
    return sum(cross(polygon[i], polygon[(i + 1) % n]) for i in range(n))


def area(polygon: Sequence[Point]) -> int:
    """Twice the area of a polygon."""
    return abs(signed_area(polygon))


def boundary_points(polygon: Sequence[Point]) -> int:
    """Number of lattice points on the boundary of a lattice polygon."""
    n = len(polygon)
    total = 0
    for i in range(n):
        step = polygon[i] - polygon[(i + 1) % n]
        total += math.gcd(abs(step.x), abs(step.y))
    return total


def interior_points(polygon: Sequence[Point]) -> int:
    """Number of lattice points strictly inside a lattice polygon, by Pick's theorem."""
    return (area(polygon) - boundary_points(polygon) + 2) >> 1