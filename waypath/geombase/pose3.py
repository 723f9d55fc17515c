"""Pose3 - position + orientation of a tween target."""

import numpy


class Pose3:
    """A 3D pose represented by rotation quaternion [x, y, z, w] and translation vector."""

    __slots__ = ('ang', 'lin')

    def __init__(
        self,
        ang: numpy.ndarray = None,
        lin: numpy.ndarray = None,
    ):
        if ang is None:
            ang = numpy.array([0.0, 0.0, 0.0, 1.0])
        if lin is None:
            lin = numpy.array([0.0, 0.0, 0.0])
        self.ang = numpy.asarray(ang, dtype=numpy.float64)
        self.lin = numpy.asarray(lin, dtype=numpy.float64)

    def copy(self) -> 'Pose3':
        """Create a copy of the Pose3."""
        return Pose3(ang=self.ang.copy(), lin=self.lin.copy())

    @staticmethod
    def identity() -> 'Pose3':
        return Pose3(
            ang=numpy.array([0.0, 0.0, 0.0, 1.0]),
            lin=numpy.array([0.0, 0.0, 0.0]),
        )

    def __repr__(self) -> str:
        return f"Pose3(lin={self.lin.tolist()}, ang={self.ang.tolist()})"
