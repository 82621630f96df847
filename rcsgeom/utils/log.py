# File: rcsgeom/utils/log.py
# Project: RusticCreadorSvg Geom (rcs-geom)
# Version: 0.1.1
# Status: stable
# Date: 2026-10-18
# Purpose: Logger del paquete ("rcsgeom") y salida opcional a consola/archivo.
# Notes: Es una librería: por defecto solo NullHandler (ver rcsgeom/__init__.py).
#        El root logger es de la app que la consume; acá no se toca.
from __future__ import annotations

import logging
import os
from pathlib import Path

PACKAGE_LOGGER = "rcsgeom"
LOG_FILENAME = "rcsgeom.log"

# Handlers instalados por enable_logging (para poder quitarlos).
_HANDLERS: list[logging.Handler] = []


def package_logger() -> logging.Logger:
    return logging.getLogger(PACKAGE_LOGGER)


def install_null_handler() -> None:
    """Evita el "No handlers could be found" / lastResort si la app no configura logging."""
    logger = package_logger()
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())


def enable_logging(
    log_dir: str | os.PathLike | None = None,
    level: int = logging.DEBUG,
) -> logging.Logger:
    """Redirige el logger "rcsgeom" a consola (+ archivo si `log_dir`).

    Útil para diagnosticar tolerancias/adapters sin configurar el root de la app.
    Idempotente: una segunda llamada reemplaza los handlers de la primera.
    Si no puede abrir el archivo, queda solo la consola (warning).
    """
    logger = package_logger()
    disable_logging()
    logger.setLevel(level)

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)
    _HANDLERS.append(ch)

    if log_dir is not None:
        try:
            d = Path(log_dir)
            d.mkdir(parents=True, exist_ok=True)
            fh = logging.FileHandler(d / LOG_FILENAME, encoding="utf-8")
        except OSError as e:
            logger.warning("Log a archivo deshabilitado (%s): %s", log_dir, e)
        else:
            fh.setFormatter(fmt)
            logger.addHandler(fh)
            _HANDLERS.append(fh)

    return logger


def disable_logging() -> None:
    """Quita los handlers de enable_logging y vuelve el nivel a NOTSET."""
    logger = package_logger()
    while _HANDLERS:
        h = _HANDLERS.pop()
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
