# File: rcsgeom/core/settings.py
# Project: RusticCreadorSvg Geom (rcs-geom)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Config de la librería: tolerancia numérica vía env var o rcsgeom_settings.json.
# Notes: No depende de Qt. Los consumidores leen env vars (igual que en la app).
from __future__ import annotations

import json
import logging
import math
import os
from pathlib import Path
from typing import Any, Dict

from rcsgeom.core.version import DEFAULT_TOLERANCE, MAX_TOLERANCE
from rcsgeom.utils.errors import RcsGeomValidationError
from rcsgeom.utils.log import get_logger

log = get_logger(__name__)

ENV_TOLERANCE = "RCSGEOM_TOLERANCE"

# ------------------------------
# Project settings (repo-local)
# ------------------------------
# Archivo esperado: rcsgeom_settings.json en la raíz del proyecto (o en un padre del CWD).
PROJECT_SETTINGS_FILENAME = "rcsgeom_settings.json"


def find_project_settings_path(start: Path | None = None) -> Path | None:
    """Busca rcsgeom_settings.json subiendo desde start (o CWD).

    Orden: la tolerancia (`rcsgeom.geom.tolerance.EPSILON`) se fija al importar
    `rcsgeom.geom` (y este módulo ya importa el paquete). Aplicar el archivo después
    no cambia EPSILON: hay que llamar a `rcsgeom.geom.tolerance.refresh()` o pasar `tol=`.
    """
    start = (start or Path.cwd()).resolve()
    for p in (start, *start.parents):
        candidate = p / PROJECT_SETTINGS_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_project_settings(start: Path | None = None, *, logger: logging.Logger | None = None) -> Dict[str, Any]:
    """Carga el JSON de project settings. Devuelve {} si no existe o es inválido.

    Solo lee; no toca env vars (eso es apply_project_settings). Un JSON roto se
    loggea como warning y se ignora: la librería sigue con DEFAULT_TOLERANCE.
    """
    _log = logger or log
    p = find_project_settings_path(start)
    if not p:
        return {}
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (OSError, ValueError) as e:
        _log.warning("No se pudo leer %s: %s", p, e)
        return {}


def _deep_get(d: Dict[str, Any], path: str, default: Any = None) -> Any:
    cur: Any = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


def coerce_tolerance(v: Any) -> float:
    """Valida una tolerancia: float finito en (0, MAX_TOLERANCE].

    Raises:
        RcsGeomValidationError: si el valor no es usable.
    """
    if isinstance(v, bool):
        raise RcsGeomValidationError(f"Tolerancia inválida (bool): {v!r}")
    try:
        tol = float(v)
    except (TypeError, ValueError) as e:
        raise RcsGeomValidationError(f"Tolerancia inválida (float): {v!r}") from e
    if not math.isfinite(tol) or tol <= 0.0 or tol > MAX_TOLERANCE:
        raise RcsGeomValidationError(f"Tolerancia fuera de rango (0, {MAX_TOLERANCE}]: {v!r}")
    return tol


def geom_tolerance(default: float = DEFAULT_TOLERANCE) -> float:
    """Tolerancia efectiva: RCSGEOM_TOLERANCE si es válida, si no `default`."""
    raw = os.environ.get(ENV_TOLERANCE)
    if raw is None or not raw.strip():
        return default
    try:
        return coerce_tolerance(raw.strip())
    except RcsGeomValidationError as e:
        log.warning("%s ignorada: %s", ENV_TOLERANCE, e)
        return default


def apply_project_settings(
    start: Path | None = None,
    *,
    logger: logging.Logger | None = None,
    prefer_env: bool = True,
) -> Dict[str, Any]:
    """Carga rcsgeom_settings.json (si existe) y aplica overrides vía variables de entorno.

    - Si `prefer_env=True`, una env var ya seteada NO se pisa.
    - Si `prefer_env=False`, el JSON pisa la env var.

    Devuelve un dict con los valores *aplicados desde JSON*.

    Nota: `rcsgeom.geom.tolerance.EPSILON` se resuelve al importar; después de
    aplicar, la app llama a `rcsgeom.geom.tolerance.refresh()` en su entry-point.
    """
    _log = logger or log
    data = load_project_settings(start, logger=_log)
    if not data:
        return {}

    applied: Dict[str, Any] = {}

    def _set_env(key: str, value: Any) -> None:
        if prefer_env and os.environ.get(key):
            return
        os.environ[key] = str(value)

    tol = _deep_get(data, "geom.tolerance")
    if tol is not None:
        try:
            tol_f = coerce_tolerance(tol)
        except RcsGeomValidationError as e:
            _log.warning("geom.tolerance ignorada: %s", e)
        else:
            applied["geom.tolerance"] = tol_f
            _set_env(ENV_TOLERANCE, repr(tol_f))

    if applied:
        _log.info("Project settings aplicados: %s", applied)
    return applied
