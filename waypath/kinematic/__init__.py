"""Tween targets."""

from waypath.kinematic.transform import Transform3, TweenTarget

__all__ = ['Transform3', 'TweenTarget']
