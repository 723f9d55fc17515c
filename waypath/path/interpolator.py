"""
Path interpolation by arc length.

A path is sampled into a polyline (the waypoints themselves for LINE, a
subdivided Catmull-Rom chain for CURVE). The cumulative length of that
polyline is the arc-length table; progress 0..1 maps to a distance along it,
so motion speed does not depend on waypoint spacing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from waypath.errors import InvalidParametersError
from waypath.path.pathway import PathwayType
from waypath.path.spline import catmull_rom_chain


@dataclass(frozen=True)
class PathSample:
    """Resolved point on a path.

    position: interpolated position
    forward: unit direction of travel, None where it is undefined
    index: lower bracketing sample, usable as a cursor for the next lookup
    """

    position: np.ndarray
    forward: np.ndarray | None
    index: int


def as_waypoints(points: Iterable) -> np.ndarray:
    """Copy waypoints into a float64 (N, 3) array, rejecting empty or malformed input."""
    try:
        array = np.array(list(points), dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidParametersError(f"Waypoints are not 3D positions: {e}") from e

    if array.size == 0:
        raise InvalidParametersError("Waypoint sequence is empty")
    if array.ndim != 2 or array.shape[1] != 3:
        raise InvalidParametersError(
            f"Waypoints must have shape (N, 3), got {array.shape}"
        )
    if not np.all(np.isfinite(array)):
        raise InvalidParametersError("Waypoints contain non-finite coordinates")
    return array


def sample_path(points: np.ndarray, pathway_type: PathwayType, segment: int = 1) -> np.ndarray:
    """Polyline the interpolator walks along."""
    if len(points) == 0:
        raise InvalidParametersError("Waypoint sequence is empty")

    if pathway_type == PathwayType.LINE:
        return np.array(points, dtype=np.float64, copy=True)

    if segment < 1:
        raise InvalidParametersError(f"Curve subdivision must be >= 1, got {segment}")
    return catmull_rom_chain(np.asarray(points, dtype=np.float64), int(segment))


def arc_lengths(samples: np.ndarray) -> np.ndarray:
    """Cumulative distances along a polyline, starting at 0."""
    if len(samples) < 2:
        return np.zeros(1, dtype=np.float64)
    seg_lens = np.linalg.norm(samples[1:] - samples[:-1], axis=1)
    return np.concatenate(([0.0], np.cumsum(seg_lens)))


def build_arc_length_table(
    points: np.ndarray,
    pathway_type: PathwayType,
    segment: int = 1,
) -> np.ndarray:
    """Arc-length table of the path.

    Length is len(points) for LINE and (len(points) - 1) * segment + 1 for
    CURVE. Coincident waypoints give an all-zero table.
    """
    return arc_lengths(sample_path(points, pathway_type, segment))


def _locate(table: np.ndarray, target: float, cursor: int | None) -> int:
    """Index i of the last bracket with table[i] <= target, at most len(table) - 2."""
    last = len(table) - 2
    if cursor is not None and 0 <= cursor <= last and table[cursor] <= target:
        i = cursor
        while i < last and table[i + 1] <= target:
            i += 1
        return i

    i = int(np.searchsorted(table, target, side="right")) - 1
    return max(0, min(i, last))


def resolve(
    progress: float,
    table: np.ndarray,
    samples: np.ndarray,
    cursor: int | None = None,
    epsilon: float = 1e-9,
) -> PathSample:
    """
    Resolve normalized progress into a position and direction of travel.

    Args:
        progress: 0..1, clamped.
        table: arc-length table matching samples.
        samples: sampled polyline (see sample_path).
        cursor: bracket index from the previous call; when it is still at or
            before the target, the lookup scans forward from it instead of
            doing a binary search.
        epsilon: brackets shorter than this have no defined forward.

    Returns:
        PathSample. forward is None for single-point or zero-length paths,
        at progress <= 0, and inside zero-length brackets.
    """
    count = len(samples)
    total = float(table[-1])

    if count < 2 or total <= epsilon or progress <= 0.0:
        return PathSample(samples[0].copy(), None, 0)

    if progress >= 1.0:
        i = count - 2
        alpha = 1.0
    else:
        target = progress * total
        i = _locate(table, target, cursor)
        span = float(table[i + 1] - table[i])
        alpha = (target - float(table[i])) / span if span > epsilon else 0.0
        alpha = min(max(alpha, 0.0), 1.0)

    a = samples[i]
    b = samples[i + 1]
    delta = b - a
    position = b.copy() if alpha >= 1.0 else a + delta * alpha

    distance = float(np.linalg.norm(delta))
    forward = delta / distance if distance > epsilon else None
    return PathSample(position, forward, i)


class PathSampler:
    """Samples, arc-length table and lookup cursor of one tween run."""

    __slots__ = ("samples", "table", "cursor", "epsilon")

    def __init__(
        self,
        points: np.ndarray,
        pathway_type: PathwayType,
        segment: int = 1,
        epsilon: float = 1e-9,
    ):
        self.samples = sample_path(points, pathway_type, segment)
        self.table = arc_lengths(self.samples)
        self.cursor = 0
        self.epsilon = epsilon

    @property
    def total_length(self) -> float:
        return float(self.table[-1])

    def sample(self, progress: float) -> PathSample:
        result = resolve(progress, self.table, self.samples, self.cursor, self.epsilon)
        self.cursor = result.index
        return result
