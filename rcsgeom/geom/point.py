"""Immutable 2D point with tolerance-based equality."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

from rcsgeom.geom import tolerance


class PointLike(Protocol):
    """Anything exposing numeric `x`/`y` attributes (Point, namespaces, records)."""

    @property
    def x(self) -> float: ...

    @property
    def y(self) -> float: ...


def _fmt(v: float) -> str:
    # (1, 2) rather than (1.0, 2.0); huge, non-integral and non-finite values
    # as float repr, so 1e21 stays "1e+21".
    if isinstance(v, float) and math.isfinite(v) and v.is_integer() and abs(v) < 1e16:
        return str(int(v))
    return str(v)


@dataclass(frozen=True, eq=False)
class Point:
    x: float = 0.0
    y: float = 0.0

    def equals(self, other: PointLike, tol: float | None = None) -> bool:
        """True iff both |dx| and |dy| are strictly below the tolerance."""
        eps = tolerance.resolve(tol)
        diff_x = abs(self.x - other.x)
        diff_y = abs(self.y - other.y)
        return diff_x < eps and diff_y < eps

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.equals(other)

    # Tolerance equality is not transitive; points can't be dict keys.
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"({_fmt(self.x)}, {_fmt(self.y)})"
