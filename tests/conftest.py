from __future__ import annotations

import pytest

from rcsgeom.core.settings import ENV_TOLERANCE
from rcsgeom.core.version import DEFAULT_TOLERANCE
from rcsgeom.geom import tolerance


@pytest.fixture(autouse=True)
def default_tolerance(monkeypatch: pytest.MonkeyPatch) -> None:
    """Tests assume the shipped tolerance, whatever the shell exports.

    setenv (not delenv) so values written by apply_project_settings are undone.
    """
    monkeypatch.setenv(ENV_TOLERANCE, "")
    monkeypatch.setattr(tolerance, "EPSILON", DEFAULT_TOLERANCE)
