# File: rcsgeom/utils/errors.py
# Project: RusticCreadorSvg Geom (rcs-geom)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-18
# Purpose: Errores tipados del paquete.
# Notes: La matemática pura (Point/Matrix/mathutil) nunca lanza; solo los adapters,
#        constructores auxiliares y la config.
from __future__ import annotations


class RcsGeomError(Exception):
    """Error base del paquete."""


class RcsGeomValidationError(RcsGeomError):
    """Error de validación (input de adapters/constructores/config)."""
