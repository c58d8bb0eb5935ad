from __future__ import annotations

import numpy as np

EPS = 1e-8  # shared tolerance for near-zero lengths and plane containment

_UNIT_X = np.array([1.0, 0.0, 0.0], dtype=np.float64)
_UNIT_Z = np.array([0.0, 0.0, 1.0], dtype=np.float64)


def as_points(points) -> np.ndarray:
    """
    Coerce a point loop to a (N,3) float64 array.
    (N,2) input is embedded in the XY plane (z = 0).
    """
    P = np.asarray(points, dtype=np.float64)
    if P.ndim == 1 and P.size == 0:
        return np.zeros((0, 3), dtype=np.float64)
    if P.ndim != 2 or P.shape[1] not in (2, 3):
        raise ValueError("points must be (N,3)")
    if P.shape[1] == 2:
        P = np.column_stack([P, np.zeros(len(P), dtype=np.float64)])
    return P


def vector_length(v) -> float:
    return float(np.linalg.norm(np.asarray(v, dtype=np.float64)))


def face_normal(points) -> np.ndarray:
    """
    Approximate unit normal of an ordered point loop.

    Takes the cross product of the incoming and outgoing edge at every corner
    and keeps the longest one, so the result follows the right-hand rule for
    convex loops. For concave or very thin loops the winning corner may be a
    reflex one and the sign comes out wrong; callers that care resolve that
    separately.
    """
    P = as_points(points)
    n = len(P)
    if n < 2:
        return _UNIT_Z.copy()
    if n == 2:
        ab = P[1] - P[0]
        normal = np.cross(np.cross(ab, _UNIT_Z), ab)
        length = vector_length(normal)
        if length == 0.0:
            # segment runs along z
            return _UNIT_X.copy()
        return normal / length

    incoming = P - np.roll(P, 1, axis=0)
    outgoing = np.roll(P, -1, axis=0) - P
    corners = np.cross(incoming, outgoing)
    lengths_sq = np.einsum("ij,ij->i", corners, corners)
    best = int(np.argmax(lengths_sq))
    if lengths_sq[best] <= 0.0:
        return _UNIT_Z.copy()
    return corners[best] / np.sqrt(lengths_sq[best])


def points_are_clockwise(points_2d) -> bool:
    """
    Shoelace winding test for a flattened loop, y axis pointing up.
    A repeated closing point is ignored; fewer than 3 points is never clockwise.
    """
    P = np.asarray(points_2d, dtype=np.float64)
    if P.ndim != 2 or P.shape[1] < 2:
        raise ValueError("points_2d must be (N,2)")
    if len(P) > 1 and np.array_equal(P[0], P[-1]):
        P = P[:-1]
    if len(P) < 3:
        return False
    A = np.roll(P, 1, axis=0)
    total = float(np.sum((P[:, 0] - A[:, 0]) * (P[:, 1] + A[:, 1])))
    # abs(total / 2) is the polygon area
    return total > 0.0
