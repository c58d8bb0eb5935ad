from .geometry import EPS, face_normal, points_are_clockwise
from .bounds import Bounds
from .flattening import FlatteningPlane
from .plane import (
    Plane,
    PlaneError,
    DegenerateNormalError,
    EmptyPointsError,
    NonCoplanarPointsError,
)

__all__ = [
    "EPS",
    "face_normal",
    "points_are_clockwise",
    "Bounds",
    "FlatteningPlane",
    "Plane",
    "PlaneError",
    "DegenerateNormalError",
    "EmptyPointsError",
    "NonCoplanarPointsError",
]
