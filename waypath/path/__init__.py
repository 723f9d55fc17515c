"""
Path interpolation: waypoints -> position and direction of travel.

Usage:
    from waypath.path import PathSampler, PathwayType

    sampler = PathSampler(points, PathwayType.CURVE, segment=10)
    sample = sampler.sample(0.5)
    sample.position, sample.forward
"""

from waypath.path.pathway import PathwayType, PathType, path_style_progress
from waypath.path.spline import catmull_rom, catmull_rom_chain
from waypath.path.interpolator import (
    PathSample,
    PathSampler,
    arc_lengths,
    as_waypoints,
    build_arc_length_table,
    resolve,
    sample_path,
)

__all__ = [
    # Tags
    "PathwayType",
    "PathType",
    "path_style_progress",
    # Spline
    "catmull_rom",
    "catmull_rom_chain",
    # Interpolation
    "PathSample",
    "PathSampler",
    "arc_lengths",
    "as_waypoints",
    "build_arc_length_table",
    "resolve",
    "sample_path",
]
