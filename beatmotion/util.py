import math
from typing import Sequence

import numpy

EPSILON = 1e-3


def lerp(start: float, end: float, fraction: float) -> float:
    return start + (end - start) * fraction


def inverse_lerp(beginning: float, end: float, value: float) -> float:
    """Position of value between beginning and end, 0 for a zero-length span."""
    length = end - beginning
    if length == 0:
        return 0
    return (value - beginning) / length


def array_lerp(start: Sequence[float], end: Sequence[float], fraction: float) -> list:
    """Per-component linear interpolation. Length follows `start`."""
    return [lerp(start[i], end[i], fraction) for i in range(len(start))]


def positive_mod(a: float, b: float) -> float:
    return (a % b + b) % b


def floor_to(value: float, step: float) -> float:
    """Floor value to a multiple of step."""
    return math.floor(value / step) * step


def ceil_to(value: float, step: float) -> float:
    """Ceil value to a multiple of step."""
    return math.ceil(value / step) * step


def deg2rad(deg):
    return deg / 180.0 * math.pi


def rad2deg(rad):
    return rad * 180.0 / math.pi


# --- Quaternions (x, y, z, w) ---

def qmul(q1: numpy.ndarray, q2: numpy.ndarray) -> numpy.ndarray:
    """Hamilton product q1 * q2."""
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
    """Rotate vector v by unit quaternion q."""
    qv = numpy.array([v[0], v[1], v[2], 0.0])
    return qmul(qmul(q, qv), qinv(q))[:3]


def qslerp(q1: numpy.ndarray, q2: numpy.ndarray, t: float) -> numpy.ndarray:
    """Spherical linear interpolation along the shortest arc.

    t outside [0, 1] extrapolates along the same great circle, which is what
    overshooting easings (back, elastic) rely on.
    """
    dot = float(numpy.dot(q1, q2))
    if dot < 0.0:
        q2 = -q2
        dot = -dot

    DOT_THRESHOLD = 0.9995
    if dot > DOT_THRESHOLD:
        result = q1 + t * (q2 - q1)
        return result / numpy.linalg.norm(result)

    theta_0 = math.acos(dot)
    theta = theta_0 * t
    sin_theta = math.sin(theta)
    sin_theta_0 = math.sin(theta_0)

    s1 = math.cos(theta) - dot * sin_theta / sin_theta_0
    s2 = sin_theta / sin_theta_0

    result = (s1 * q1) + (s2 * q2)
    return result / numpy.linalg.norm(result)


def quat_rotation_matrix(q: numpy.ndarray) -> numpy.ndarray:
    """3x3 rotation matrix of a unit quaternion."""
    x, y, z, w = q
    return numpy.array([
        [1 - 2*(y**2 + z**2), 2*(x*y - z*w), 2*(x*z + y*w)],
        [2*(x*y + z*w), 1 - 2*(x**2 + z**2), 2*(y*z - x*w)],
        [2*(x*z - y*w), 2*(y*z + x*w), 1 - 2*(x**2 + y**2)]
    ])


def quat_from_matrix(rot_mat: numpy.ndarray) -> numpy.ndarray:
    """Unit quaternion of a pure 3x3 rotation matrix."""
    trace = numpy.trace(rot_mat)
    if trace > 0:
        s = 0.5 / math.sqrt(trace + 1.0)
        qw = 0.25 / s
        qx = (rot_mat[2, 1] - rot_mat[1, 2]) * s
        qy = (rot_mat[0, 2] - rot_mat[2, 0]) * s
        qz = (rot_mat[1, 0] - rot_mat[0, 1]) * s
    elif rot_mat[0, 0] > rot_mat[1, 1] and rot_mat[0, 0] > rot_mat[2, 2]:
        s = 2.0 * math.sqrt(1.0 + rot_mat[0, 0] - rot_mat[1, 1] - rot_mat[2, 2])
        qw = (rot_mat[2, 1] - rot_mat[1, 2]) / s
        qx = 0.25 * s
        qy = (rot_mat[0, 1] + rot_mat[1, 0]) / s
        qz = (rot_mat[0, 2] + rot_mat[2, 0]) / s
    elif rot_mat[1, 1] > rot_mat[2, 2]:
        s = 2.0 * math.sqrt(1.0 + rot_mat[1, 1] - rot_mat[0, 0] - rot_mat[2, 2])
        qw = (rot_mat[0, 2] - rot_mat[2, 0]) / s
        qx = (rot_mat[0, 1] + rot_mat[1, 0]) / s
        qy = 0.25 * s
        qz = (rot_mat[1, 2] + rot_mat[2, 1]) / s
    else:
        s = 2.0 * math.sqrt(1.0 + rot_mat[2, 2] - rot_mat[0, 0] - rot_mat[1, 1])
        qw = (rot_mat[1, 0] - rot_mat[0, 1]) / s
        qx = (rot_mat[0, 2] + rot_mat[2, 0]) / s
        qy = (rot_mat[1, 2] + rot_mat[2, 1]) / s
        qz = 0.25 * s
    return numpy.array([qx, qy, qz, qw])


# --- Euler angles ---
#
# Rotations in beatmap data are Euler angles in degrees [x, y, z] applied in
# intrinsic Y-X-Z order (R = Ry * Rx * Rz).

def quat_from_euler(euler: Sequence[float], order: str = 'YXZ') -> numpy.ndarray:
    """Unit quaternion of Euler angles given in degrees."""
    if order != 'YXZ':
        raise NotImplementedError(f"Euler order '{order}' not implemented")

    x, y, z = deg2rad(euler[0]), deg2rad(euler[1]), deg2rad(euler[2])
    c1 = math.cos(x / 2)
    c2 = math.cos(y / 2)
    c3 = math.cos(z / 2)
    s1 = math.sin(x / 2)
    s2 = math.sin(y / 2)
    s3 = math.sin(z / 2)

    return numpy.array([
        s1 * c2 * c3 + c1 * s2 * s3,
        c1 * s2 * c3 - s1 * c2 * s3,
        c1 * c2 * s3 - s1 * s2 * c3,
        c1 * c2 * c3 + s1 * s2 * s3,
    ])


def euler_from_matrix(rot_mat: numpy.ndarray, order: str = 'YXZ') -> list:
    """Euler angles in degrees of a pure 3x3 rotation matrix."""
    if order != 'YXZ':
        raise NotImplementedError(f"Euler order '{order}' not implemented")

    m23 = float(numpy.clip(rot_mat[1, 2], -1.0, 1.0))
    x = math.asin(-m23)
    if abs(m23) < 0.9999999:
        y = math.atan2(rot_mat[0, 2], rot_mat[2, 2])
        z = math.atan2(rot_mat[1, 0], rot_mat[1, 1])
    else:
        # gimbal lock, roll folded into yaw
        y = math.atan2(-rot_mat[2, 0], rot_mat[0, 0])
        z = 0.0

    # -0.0 -> 0.0
    return [rad2deg(a) + 0.0 for a in (x, y, z)]


def euler_from_quat(q: numpy.ndarray, order: str = 'YXZ') -> list:
    """Euler angles in degrees of a unit quaternion."""
    return euler_from_matrix(quat_rotation_matrix(q), order)


def lerp_rotation(start: Sequence[float], end: Sequence[float], fraction: float) -> list:
    """Interpolate two Euler rotations (degrees) through quaternion slerp."""
    q1 = quat_from_euler(start)
    q2 = quat_from_euler(end)
    return euler_from_quat(qslerp(q1, q2, fraction))
