"""rcs-geom: 2D affine geometry for the RCS vector editor.

Immutable Point/Matrix value types plus pure helpers (transform, distance,
collinearity, lerp, floor modulus, matrix flattening).
"""

from __future__ import annotations

from rcsgeom.core.version import APP_VERSION as __version__
from rcsgeom.utils.log import install_null_handler
from rcsgeom.geom import (
    Matrix,
    Point,
    PointLike,
    Rect,
    are_collinear,
    distance,
    flatten_transforms,
    floor_mod,
    lerp,
    transform,
)

install_null_handler()

__all__ = [
    "__version__",
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
