"""
Tween module - moves targets along waypoint paths.

Usage:
    from waypath.tween import PathTweenManager
    from waypath.path import PathwayType

    tweens = PathTweenManager()

    # Straight segments, one shot
    uid = tweens.move_by_points(transform, [(0, 0, 0), (10, 0, 0)], 2.0)

    # Smoothed, looping, facing the direction of travel
    tweens.move_by_points(
        transform, points, 5.0,
        pathway_type=PathwayType.CURVE, is_loop=True, update_forward=True,
    )

    # Chaining
    tweens.move_by_points(
        transform, path1, 1.0,
        on_complete=lambda: tweens.move_by_points(transform, path2, 1.0),
    )

    # In game loop
    tweens.update(dt)
"""

from waypath.tween.tween import PathTween, TweenState
from waypath.tween.pool import TweenPool
from waypath.tween.manager import PathTweenManager

__all__ = [
    # Instances
    "PathTween",
    "TweenState",
    # Storage
    "TweenPool",
    # Manager
    "PathTweenManager",
]
