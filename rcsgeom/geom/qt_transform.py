"""Qt (PySide6) adapter: QTransform / QPointF <-> Matrix / Point.

PySide6 is an optional extra (`rcs-geom[qt]`); it is imported inside the
functions so `rcsgeom.geom` stays importable without it.

QTransform maps x' = m11*x + m21*y + dx, y' = m12*x + m22*y + dy, so
a=m11, b=m12, c=m21, d=m22, e=dx, f=dy. Projective QTransforms are rejected.
"""

from __future__ import annotations

import logging
from typing import Any

from rcsgeom.geom.matrix import Matrix
from rcsgeom.geom.point import Point, PointLike
from rcsgeom.utils.errors import RcsGeomValidationError

log = logging.getLogger(__name__)


def matrix_to_qtransform(m: Matrix) -> Any:
    from PySide6.QtGui import QTransform

    return QTransform(m.a, m.b, m.c, m.d, m.e, m.f)


def matrix_from_qtransform(t: Any) -> Matrix:
    """Raises RcsGeomValidationError for non-affine (perspective) transforms."""
    from PySide6.QtGui import QTransform

    if not isinstance(t, QTransform):
        raise RcsGeomValidationError(f"Se esperaba QTransform, recibió {type(t).__name__}")
    if t.m13() != 0 or t.m23() != 0 or t.m33() != 1:
        log.debug("QTransform proyectivo rechazado: m13=%s m23=%s m33=%s", t.m13(), t.m23(), t.m33())
        raise RcsGeomValidationError("QTransform proyectivo: solo se admiten transformaciones afines")
    return Matrix(t.m11(), t.m12(), t.m21(), t.m22(), t.dx(), t.dy())


def point_to_qpointf(p: PointLike) -> Any:
    from PySide6.QtCore import QPointF

    return QPointF(float(p.x), float(p.y))


def point_from_qpointf(q: Any) -> Point:
    # QPointF exposes x()/y() as methods, not attributes.
    return Point(float(q.x()), float(q.y()))
