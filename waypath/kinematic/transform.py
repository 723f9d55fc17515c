"""Transform3 - minimal tween target holding a local pose."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np

from waypath.geombase import Pose3


@runtime_checkable
class TweenTarget(Protocol):
    """Anything a path tween can drive."""

    def local_pose(self) -> Pose3: ...

    def relocate(self, pose: Pose3) -> None: ...


class Transform3:
    """
    Reference target: a named pose without hierarchy.

    Usage:
        t = Transform3(Pose3(lin=np.array([1.0, 2.0, 3.0])), name="Cube")
        pose = t.local_pose()
        pose.lin = pose.lin + np.array([0.0, 0.0, 1.0])
        t.relocate(pose)
    """

    def __init__(self, pose: Pose3 | None = None, name: str = "") -> None:
        self._pose = pose.copy() if pose is not None else Pose3.identity()
        self.name = name

    def local_pose(self) -> Pose3:
        """Copy of the current pose."""
        return self._pose.copy()

    def relocate(self, pose: Pose3) -> None:
        self._pose = pose.copy()

    @property
    def position(self) -> np.ndarray:
        return self._pose.lin.copy()

    @property
    def rotation(self) -> np.ndarray:
        return self._pose.ang.copy()

    def __repr__(self) -> str:
        return f"Transform3(name={self.name!r}, pose={self._pose!r})"
