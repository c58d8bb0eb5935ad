from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .geometry import as_points


@dataclass(frozen=True)
class Bounds:
    """
    Axis-aligned bounding box of a point set.
    An empty box has min = +inf and max = -inf on every axis.
    """
    min: Tuple[float, float, float]
    max: Tuple[float, float, float]

    @classmethod
    def empty(cls) -> "Bounds":
        inf = float("inf")
        return cls(min=(inf, inf, inf), max=(-inf, -inf, -inf))

    @classmethod
    def from_points(cls, points) -> "Bounds":
        P = as_points(points)
        if len(P) == 0:
            return cls.empty()
        lo = P.min(axis=0)
        hi = P.max(axis=0)
        return cls(
            min=(float(lo[0]), float(lo[1]), float(lo[2])),
            max=(float(hi[0]), float(hi[1]), float(hi[2])),
        )

    @property
    def is_empty(self) -> bool:
        return any(lo > hi for lo, hi in zip(self.min, self.max))

    @property
    def size(self) -> Tuple[float, float, float]:
        if self.is_empty:
            return (0.0, 0.0, 0.0)
        return tuple(float(hi - lo) for lo, hi in zip(self.min, self.max))
