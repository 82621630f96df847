"""Free functions over points and matrices.

Order conventions (they are opposite on purpose):
- `transform(p, A, B)` applies A, then B.
- `flatten_transforms([A, B])` returns B.dot(A): folded as curr.dot(prev), so
  the last matrix listed is the outermost one and is applied last.
"""

from __future__ import annotations

import math
from functools import reduce
from typing import Iterable

from rcsgeom.geom import tolerance
from rcsgeom.geom.matrix import Matrix
from rcsgeom.geom.point import Point, PointLike


def transform(point: PointLike, *matrices: Matrix) -> Point:
    """Applies the matrices to the point, left to right."""
    return reduce(lambda p, m: m.map_point(p), matrices, Point(point.x, point.y))


def distance(p1: PointLike, p2: PointLike) -> float:
    # hypot, not sqrt(dx**2 + dy**2): float ** raises OverflowError on huge deltas.
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def are_collinear(*points: PointLike, tol: float | None = None) -> bool:
    """True if every point lies on the line through the first two.

    Fewer than 3 points are trivially collinear. Uses the (doubled) area of
    the triangle first, second, candidate; abs(area) must stay under `tol`.
    """
    if len(points) < 3:
        return True
    eps = tolerance.resolve(tol)
    a, b = points[0].x, points[0].y
    m, n = points[1].x, points[1].y
    return all(
        abs(a * (n - p.y) + m * (p.y - b) + p.x * (b - n)) < eps
        for p in points
    )


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation; t is not clamped."""
    return a + (b - a) * t


def floor_mod(num: float, max_num: float) -> float:
    """Modulus with the sign of max_num: [0, max_num) for positive max_num.

    The second % is not redundant for floats: -1e-20 % 360.0 rounds up to
    360.0, and the outer % folds it back to 0. Zero divisor gives nan.
    """
    if max_num == 0:
        return math.nan
    return ((num % max_num) + max_num) % max_num


def flatten_transforms(matrices: Iterable[Matrix]) -> Matrix:
    return reduce(lambda prev, curr: curr.dot(prev), matrices, Matrix())
