"""rcs-geom - version constants.

Keep this module tiny and dependency-free. It is imported by settings and
by the geom package at import time and must not have side effects.
"""

APP_NAME = "RusticCreadorSvg Geom"
APP_SHORT = "rcsgeom"

APP_VERSION = "0.1.0"

# Absolute tolerance for point equality and collinearity tests.
# NOTE: comparisons against it are strict (<), not <=.
DEFAULT_TOLERANCE = 1e-8

# Accepted range for overrides (env / project settings).
MAX_TOLERANCE = 1e-2
