import numpy as np


def square_loop_xyz(size=1.0, z=0.0):
    return np.array([
        [0.0, 0.0, z],
        [size, 0.0, z],
        [size, size, z],
        [0.0, size, z],
    ], dtype=np.float64)


def notched_half_disc_uv(radius=100.0, notch=10.0, n_arc=64):
    """
    Counter-clockwise half disc whose straight edge is pushed in to a deep
    notch. The reflex corner at the notch has the longest corner cross
    product of the whole loop.
    """
    pts = [
        [-radius, 0.0],
        [0.0, notch],
        [radius, 0.0],
    ]
    for k in range(1, n_arc):
        t = np.pi * k / n_arc
        pts.append([radius * np.cos(t), radius * np.sin(t)])
    return np.asarray(pts, dtype=np.float64)


def embed_uv(points_uv, axes, offset=0.0):
    """Place (N,2) coordinates on two of the three axes, the third set to offset."""
    P = np.full((len(points_uv), 3), float(offset), dtype=np.float64)
    P[:, axes[0]] = points_uv[:, 0]
    P[:, axes[1]] = points_uv[:, 1]
    return P


def newell_normal(poly):
    """
    Robust polygon normal for possibly non-triangulated polygon.
    Zero vector for degenerate loops.
    """
    poly = np.asarray(poly, dtype=np.float64)
    if poly.shape[1] == 2:
        poly = np.column_stack([poly, np.zeros(len(poly))])
    n = np.zeros(3, dtype=np.float64)
    for i in range(len(poly)):
        p0 = poly[i]
        p1 = poly[(i + 1) % len(poly)]
        n[0] += (p0[1] - p1[1]) * (p0[2] + p1[2])
        n[1] += (p0[2] - p1[2]) * (p0[0] + p1[0])
        n[2] += (p0[0] - p1[0]) * (p0[1] + p1[1])
    norm = float(np.linalg.norm(n))
    return n if norm < 1e-12 else (n / norm)
