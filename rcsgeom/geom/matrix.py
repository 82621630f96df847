"""Immutable 2x3 affine matrix in SVG notation.

    [a c e]
    [b d f]
    [0 0 1]

x' = a*x + c*y + e
y' = b*x + d*y + f

Every operation returns a new Matrix. Singular matrices (a*d - b*c == 0)
are not guarded: `invert()` yields inf/nan coefficients and callers that
care must check `math.isfinite` themselves.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from rcsgeom.geom import tolerance
from rcsgeom.geom.point import Point, PointLike
from rcsgeom.utils.errors import RcsGeomValidationError

MatrixValues = Tuple[float, float, float, float, float, float]


def _div(num: float, den: float) -> float:
    # IEEE semantics for x/0 (Python raises ZeroDivisionError instead).
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


@dataclass(frozen=True)
class Matrix:
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def from_values(cls, values: Sequence[Any]) -> "Matrix":
        """Build from (a, b, c, d, e, f).

        Raises:
            RcsGeomValidationError: wrong length or non-numeric entry.
        """
        try:
            vals = [float(v) for v in values]
        except (TypeError, ValueError) as e:
            raise RcsGeomValidationError(f"Matrix values inválidos: {values!r}") from e
        if len(vals) != 6:
            raise RcsGeomValidationError(f"Matrix espera 6 valores, recibió {len(vals)}")
        return cls(*vals)

    @property
    def values(self) -> MatrixValues:
        return (self.a, self.b, self.c, self.d, self.e, self.f)

    def dot(self, m: "Matrix") -> "Matrix":
        """Returns self * m; applying the result maps a point through m first."""
        # [a c e]   [a' c' e']
        # [b d f] * [b' d' f']
        # [0 0 1]   [0  0  1 ]
        return Matrix(
            self.a * m.a + self.c * m.b,
            self.b * m.a + self.d * m.b,
            self.a * m.c + self.c * m.d,
            self.b * m.c + self.d * m.d,
            self.a * m.e + self.c * m.f + self.e,
            self.b * m.e + self.d * m.f + self.f,
        )

    def __matmul__(self, m: "Matrix") -> "Matrix":
        if not isinstance(m, Matrix):
            return NotImplemented
        return self.dot(m)

    def determinant(self) -> float:
        return self.a * self.d - self.b * self.c

    def invert(self) -> "Matrix":
        """Closed-form inverse. Never raises; singular input gives inf/nan."""
        m = self
        det = m.a * m.d - m.b * m.c
        neg_det = m.b * m.c - m.a * m.d
        return Matrix(
            _div(m.d, det),
            _div(m.b, neg_det),
            _div(m.c, neg_det),
            _div(m.a, det),
            _div(m.d * m.e - m.c * m.f, neg_det),
            _div(m.b * m.e - m.a * m.f, det),
        )

    def map_point(self, p: PointLike) -> Point:
        # [a c e]   [p.x]
        # [b d f] * [p.y]
        # [0 0 1]   [ 1 ]
        return Point(
            self.a * p.x + self.c * p.y + self.e * 1,
            self.b * p.x + self.d * p.y + self.f * 1,
        )

    def get_scale(self) -> float:
        """Smallest effective uniform scale, robust to skew.

        Map the unit vectors A = (0, 1) and B = (1, 0) through the linear part
        to get A' and B', with theta the angle between them. The scale is
        min(|A'| * sin(theta), |B'| * sin(theta)), i.e.
        |A' x B'| / max(|A'|, |B'|): the smaller height of the parallelogram
        the unit square maps to. Without skew this is min(scale_x, scale_y).

        If max(|A'|, |B'|) == 0 the matrix collapses both axes; returns 0.
        """
        linear = Matrix(self.a, self.b, self.c, self.d, 0, 0)
        vec_a = linear.map_point(Point(0, 1))
        vec_b = linear.map_point(Point(1, 0))
        scale_x = math.hypot(vec_a.x, vec_a.y)
        scale_y = math.hypot(vec_b.x, vec_b.y)
        cross = vec_a.y * vec_b.x - vec_a.x * vec_b.y
        max_scale = max(scale_x, scale_y)
        return abs(cross) / max_scale if max_scale > 0 else 0

    def is_close(self, other: "Matrix", tol: float | None = None) -> bool:
        eps = tolerance.resolve(tol)
        return all(abs(x - y) < eps for x, y in zip(self.values, other.values))

    def is_identity(self, tol: float | None = None) -> bool:
        return self.is_close(IDENTITY, tol)


IDENTITY = Matrix()
