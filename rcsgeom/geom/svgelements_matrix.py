"""svgelements adapter for matrices.

The importer/renderer side of the editor parses SVG with `svgelements`;
element transforms arrive as `svgelements.Matrix`. Both use the same SVG
(a, b, c, d, e, f) notation, so the conversion is coefficient-for-coefficient.

svgelements is an optional extra (`rcs-geom[svg]`); it is imported inside
the functions, as the Qt adapter does with PySide6.
"""

from __future__ import annotations

import logging
from typing import Any

from rcsgeom.geom.matrix import Matrix
from rcsgeom.utils.errors import RcsGeomValidationError

log = logging.getLogger(__name__)


def matrix_from_svgelements(m: Any) -> Matrix:
    """Convert an `svgelements.Matrix` (or anything it accepts, e.g. a
    transform attribute string like "translate(10, 5) scale(2)").

    Raises:
        RcsGeomValidationError: if svgelements can't make a matrix of it.
    """
    from svgelements import Matrix as SvgMatrix

    if not isinstance(m, SvgMatrix):
        try:
            m = SvgMatrix(m)
        except Exception as e:
            log.debug("svgelements rechazó %r", m, exc_info=True)
            raise RcsGeomValidationError(f"Transform SVG inválido: {m!r}") from e
    return Matrix.from_values((m.a, m.b, m.c, m.d, m.e, m.f))


def matrix_to_svgelements(m: Matrix) -> Any:
    from svgelements import Matrix as SvgMatrix

    return SvgMatrix(m.a, m.b, m.c, m.d, m.e, m.f)
