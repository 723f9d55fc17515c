"""Quaternion helpers. Quaternions are numpy arrays [x, y, z, w]."""

import numpy
from scipy.spatial.transform import Rotation


def qmul(q1: numpy.ndarray, q2: numpy.ndarray) -> numpy.ndarray:
    """Multiply two quaternions."""
    x1, y1, z1, w1 = q1
    x2, y2, z2, w2 = q2
    return numpy.array([
        w1*x2 + x1*w2 + y1*z2 - z1*y2,
        w1*y2 - x1*z2 + y1*w2 + z1*x2,
        w1*z2 + x1*y2 - y1*x2 + z1*w2,
        w1*w2 - x1*x2 - y1*y2 - z1*z2
    ])


def qinv(q: numpy.ndarray) -> numpy.ndarray:
    """Inverse of a unit quaternion."""
    return numpy.array([-q[0], -q[1], -q[2], q[3]])


def qrot(q: numpy.ndarray, v: numpy.ndarray) -> numpy.ndarray:
    """Rotate vector v by quaternion q."""
    vq = numpy.array([v[0], v[1], v[2], 0.0])
    rotated = qmul(qmul(q, vq), qinv(q))
    return rotated[:3]


def look_rotation(
    forward: numpy.ndarray,
    up: numpy.ndarray = (0.0, 0.0, 1.0),
) -> numpy.ndarray:
    """
    Create a rotation that looks in the given direction.

    Convention: Forward = +Y, Up = +Z.
    Returns identity if direction is zero. If forward is parallel to up,
    the world axis least aligned with forward is used as up instead.
    """
    f = numpy.asarray(forward, dtype=numpy.float64)
    length = numpy.linalg.norm(f)
    if length < 1e-12:
        return numpy.array([0.0, 0.0, 0.0, 1.0])
    f = f / length

    right = numpy.cross(f, numpy.asarray(up, dtype=numpy.float64))
    right_len = numpy.linalg.norm(right)
    if right_len < 1e-9:
        helper = numpy.zeros(3)
        helper[int(numpy.argmin(numpy.abs(f)))] = 1.0
        right = numpy.cross(f, helper)
        right_len = numpy.linalg.norm(right)
    right = right / right_len
    new_up = numpy.cross(right, f)

    # columns are the images of local X, Y, Z
    matrix = numpy.column_stack((right, f, new_up))
    return Rotation.from_matrix(matrix).as_quat()
