"""Uniform Catmull-Rom spline sampling."""

from __future__ import annotations

import numpy as np


def catmull_rom(
    p0: np.ndarray,
    p1: np.ndarray,
    p2: np.ndarray,
    p3: np.ndarray,
    t: float,
) -> np.ndarray:
    """Point between p1 and p2 at local parameter t (0..1)."""
    t2 = t * t
    t3 = t2 * t
    return 0.5 * (
        (2.0 * p1)
        + (-p0 + p2) * t
        + (2.0 * p0 - 5.0 * p1 + 4.0 * p2 - p3) * t2
        + (-p0 + 3.0 * p1 - 3.0 * p2 + p3) * t3
    )


def catmull_rom_chain(points: np.ndarray, segment: int) -> np.ndarray:
    """
    Sample an open Catmull-Rom chain through all points.

    Each span between consecutive points is evaluated at `segment` evenly
    spaced parameters; the last point is appended, so the result has
    (len(points) - 1) * segment + 1 rows and row k * segment is points[k].
    End spans use the end points themselves as phantom neighbours.
    """
    count = len(points)
    if count < 2:
        return np.array(points, dtype=np.float64, copy=True)

    padded = np.vstack((points[:1], points, points[-1:]))
    params = np.arange(segment, dtype=np.float64) / segment

    samples = np.empty(((count - 1) * segment + 1, points.shape[1]), dtype=np.float64)
    for span in range(count - 1):
        p0, p1, p2, p3 = padded[span:span + 4]
        t = params[:, None]
        samples[span * segment:(span + 1) * segment] = catmull_rom(p0, p1, p2, p3, t)
    samples[-1] = points[-1]
    return samples
