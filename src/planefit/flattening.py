from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Optional, Tuple

import numpy as np

from .bounds import Bounds
from .geometry import as_points

if TYPE_CHECKING:
    from .plane import Plane


class FlatteningPlane(Enum):
    """
    Axis-aligned plane used to flatten 3D loops to 2D.
    The value names the two axes that are kept, in their original order.
    """
    XY = "xy"
    XZ = "xz"
    YZ = "yz"

    # ---------- selection ----------
    @classmethod
    def from_size(cls, x: float, y: float, z: float) -> "FlatteningPlane":
        """
        Drop the axis with the smallest extent.
        Falls back to XY when Z is not strictly the thinnest candidate.
        """
        if x > y:
            return cls.XZ if z > y else cls.XY
        return cls.YZ if z > x else cls.XY

    @classmethod
    def from_bounds(cls, bounds: Bounds) -> "FlatteningPlane":
        return cls.from_size(*bounds.size)

    @classmethod
    def from_points(cls, points) -> "FlatteningPlane":
        return cls.from_bounds(Bounds.from_points(points))

    @classmethod
    def from_normal(cls, normal) -> "FlatteningPlane":
        """Drop the dominant axis of the normal; ties go to XY."""
        x, y, z = np.abs(np.asarray(normal, dtype=np.float64))
        if x > y and x > z:
            return cls.YZ
        if y > x and y > z:
            return cls.XZ
        return cls.XY

    @classmethod
    def from_plane(cls, plane: "Plane") -> Optional["FlatteningPlane"]:
        for member in cls:
            if member.plane == plane:
                return member
        return None

    # ---------- properties ----------
    @property
    def plane(self) -> "Plane":
        from .plane import Plane

        return {
            FlatteningPlane.XY: Plane.XY,
            FlatteningPlane.XZ: Plane.XZ,
            FlatteningPlane.YZ: Plane.YZ,
        }[self]

    @property
    def dropped_axis(self) -> int:
        return {FlatteningPlane.YZ: 0, FlatteningPlane.XZ: 1, FlatteningPlane.XY: 2}[self]

    @property
    def kept_axes(self) -> Tuple[int, int]:
        return {
            FlatteningPlane.YZ: (1, 2),
            FlatteningPlane.XZ: (0, 2),
            FlatteningPlane.XY: (0, 1),
        }[self]

    # ---------- projection ----------
    def flatten_point(self, point) -> Tuple[float, float]:
        p = np.asarray(point, dtype=np.float64)
        a, b = self.kept_axes
        return float(p[a]), float(p[b])

    def flatten_points(self, points) -> np.ndarray:
        """(N,3) -> (N,2), dropping this plane's normal axis."""
        P = as_points(points)
        return P[:, list(self.kept_axes)]
