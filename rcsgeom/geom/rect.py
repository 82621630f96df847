"""Plain rectangle container (left, top, right, bottom).

Mutable and unvalidated: l > r or t > b is allowed. None of the
geometry helpers consume it; it only travels with them.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Rect:
    l: float = 0.0
    t: float = 0.0
    r: float = 0.0
    b: float = 0.0

    @property
    def width(self) -> float:
        return self.r - self.l

    @property
    def height(self) -> float:
        return self.b - self.t
