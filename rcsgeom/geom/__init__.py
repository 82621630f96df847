"""Geometry value types and helpers.

This package is intentionally small and dependency-light. The Qt adapter
(`qt_transform`) is not imported here so PySide6 stays optional.
"""

from __future__ import annotations

from rcsgeom.geom.matrix import IDENTITY, Matrix
from rcsgeom.geom.mathutil import (
    are_collinear,
    distance,
    flatten_transforms,
    floor_mod,
    lerp,
    transform,
)
from rcsgeom.geom.point import Point, PointLike
from rcsgeom.geom.rect import Rect

__all__ = [
    "IDENTITY",
    "Matrix",
    "Point",
    "PointLike",
    "Rect",
    "are_collinear",
    "distance",
    "flatten_transforms",
    "floor_mod",
    "lerp",
    "transform",
]
