"""Pathway shape and path style tags."""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable


class PathwayType(Enum):
    """
    Interpolation family of a path.

    - LINE: piecewise-linear through the waypoints
    - CURVE: Catmull-Rom spline through the waypoints, subdivided per span
    """

    LINE = auto()
    CURVE = auto()


class PathType(Enum):
    """Path style. Reserved for easing/shape variants of the progress curve."""

    NORMAL = auto()


def _normal(t: float) -> float:
    return t


_PATH_STYLE_FUNCTIONS: dict[PathType, Callable[[float], float]] = {
    PathType.NORMAL: _normal,
}


def path_style_progress(path_type: PathType, t: float) -> float:
    """Shape raw progress t (0..1) according to the path style."""
    return _PATH_STYLE_FUNCTIONS[path_type](t)
