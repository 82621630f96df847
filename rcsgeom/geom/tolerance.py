"""Numerical tolerance shared by the geometry helpers.

`EPSILON` is resolved at import from `RCSGEOM_TOLERANCE` (see
`rcsgeom.core.settings`). Callers read it through this module
(`tolerance.EPSILON`) so tests can monkeypatch it in one place, and
`refresh()` re-reads it after `apply_project_settings` has run.
"""

from __future__ import annotations

from rcsgeom.core.settings import geom_tolerance

EPSILON: float = geom_tolerance()


def refresh() -> float:
    global EPSILON
    EPSILON = geom_tolerance()
    return EPSILON


def resolve(tol: float | None) -> float:
    return EPSILON if tol is None else tol
