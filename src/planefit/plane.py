from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Tuple

import numpy as np

from .flattening import FlatteningPlane
from .geometry import EPS, as_points, face_normal, points_are_clockwise, vector_length

logger = logging.getLogger(__name__)


class PlaneError(ValueError):
    """Raised when no plane can be formed from the given input."""


class DegenerateNormalError(PlaneError):
    """Normal is zero, too short to normalise, or not finite."""


class EmptyPointsError(PlaneError):
    """No points were supplied."""


class NonCoplanarPointsError(PlaneError):
    """At least one point lies off the fitted plane."""


def _unit_normal(normal) -> Tuple[np.ndarray, float]:
    n = np.asarray(normal, dtype=np.float64)
    if n.shape != (3,):
        raise ValueError("normal must be (3,)")
    length = vector_length(n)
    if not np.isfinite(length) or length <= EPS:
        raise DegenerateNormalError(f"normal {tuple(n.tolist())} has degenerate length {length}")
    return n / length, length


@dataclass(frozen=True)
class Plane:
    """
    Oriented plane: all points p with normal·p == w.

    Use the from_* constructors, which validate and normalise their input.
    Calling Plane(normal, w) directly does not normalise: it raises
    ValueError unless normal already has three components and unit length.

    Equality and hashing are exact on (normal, w); compare with a tolerance
    yourself when needed.
    """
    normal: Tuple[float, float, float]
    w: float

    XY: ClassVar["Plane"]
    XZ: ClassVar["Plane"]
    YZ: ClassVar["Plane"]

    def __post_init__(self):
        n = tuple(float(c) for c in self.normal)
        object.__setattr__(self, "normal", n)
        object.__setattr__(self, "w", float(self.w))
        if len(n) != 3:
            raise ValueError("normal must be (3,)")
        length = vector_length(n)
        if not np.isfinite(length) or abs(length - 1.0) >= EPS:
            raise ValueError(f"normal {n} must be unit length, got length {length}")

    # ---------- constructors ----------
    @classmethod
    def from_normal(cls, normal, w: float) -> "Plane":
        """
        Plane from a (not necessarily unit) normal and offset w measured
        against that same normal. w is rescaled along with the normal, so
        (k*n, k*w) gives the same plane as (n, w) for k > 0.

        Raises DegenerateNormalError when the normal is zero, shorter than
        EPS, or not finite.
        """
        n, length = _unit_normal(normal)
        return cls(normal=n, w=float(w) / length)

    @classmethod
    def from_normal_and_point(cls, normal, point) -> "Plane":
        """
        Plane through point with the given (not necessarily unit) normal.
        Raises DegenerateNormalError like from_normal.
        """
        n, _ = _unit_normal(normal)
        return cls._from_unit_normal_and_point(n, point)

    @classmethod
    def from_points(cls, points) -> "Plane":
        """
        Fit a plane to an ordered loop of coplanar points.

        The loop may be convex or concave. The normal faces the side from
        which the loop runs counter-clockwise.

        Raises EmptyPointsError for an empty loop, DegenerateNormalError when
        the loop yields no usable normal (e.g. non-finite coordinates) and
        NonCoplanarPointsError when a point lies EPS or more off the fitted
        plane. All three are PlaneError, itself a ValueError.
        """
        P = as_points(points)
        if len(P) == 0:
            raise EmptyPointsError("cannot fit a plane to an empty point loop")

        normal = face_normal(P)
        if len(P) <= 3:
            return cls.from_normal_and_point(normal, P[0])

        # The corner heuristic in face_normal can pick a reflex corner on
        # concave or thin loops. Re-run it on a flattened copy and compare
        # against the shoelace winding of the same 2D points; both use the
        # same projection, so a mismatch means the 3D sign is wrong too.
        flattening = FlatteningPlane.from_points(P)
        flat = flattening.flatten_points(P)
        flat_normal = face_normal(flat)
        clockwise = points_are_clockwise(flat)
        flipped = bool(flat_normal[2] > 0) == clockwise
        if flipped:
            normal = -normal
        logger.debug(
            "Plane.from_points: n=%d flattening=%s clockwise=%s flipped=%s",
            len(P), flattening.value, clockwise, flipped,
        )

        plane = cls.from_normal_and_point(normal, P[0])

        off = ~plane.contains_points(P)
        if np.any(off):
            i = int(np.argmax(off))
            d = plane.distance_to_point(P[i])
            logger.debug("Plane.from_points: point %d is %.3g off plane %s", i, d, plane)
            raise NonCoplanarPointsError(f"point {i} lies {d:.3g} off the fitted plane")
        return plane

    @classmethod
    def _from_unit_normal_and_point(cls, normal: np.ndarray, point) -> "Plane":
        p = np.asarray(point, dtype=np.float64)
        if p.shape != (3,):
            raise ValueError("point must be (3,)")
        return cls(normal=normal, w=float(np.dot(normal, p)))

    # ---------- queries ----------
    def inverted(self) -> "Plane":
        """Same points, opposite side facing out."""
        x, y, z = self.normal
        return Plane(normal=(-x, -y, -z), w=-self.w)

    def distance_to_point(self, point) -> float:
        """Signed distance, positive on the side the normal points to."""
        return float(np.dot(self.normal, np.asarray(point, dtype=np.float64))) - self.w

    def contains_point(self, point, eps: float = EPS) -> bool:
        return abs(self.distance_to_point(point)) < eps

    def contains_points(self, points, eps: float = EPS) -> np.ndarray:
        """
        points: (N,3) -> mask (N,)
        """
        P = as_points(points)
        n = np.asarray(self.normal, dtype=np.float64)
        return np.abs(P @ n - self.w) < eps


Plane.YZ = Plane(normal=(1.0, 0.0, 0.0), w=0.0)
Plane.XZ = Plane(normal=(0.0, 1.0, 0.0), w=0.0)
Plane.XY = Plane(normal=(0.0, 0.0, 1.0), w=0.0)
