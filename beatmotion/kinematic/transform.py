"""Composition of static transforms (position, Euler rotation, scale)."""

from __future__ import annotations

from typing import Mapping, Sequence

import numpy

from beatmotion.geombase import Pose
from beatmotion.util import euler_from_quat, qmul, qrot, quat_from_euler

Vec3 = Sequence[float]


def combine_rotations(target: Vec3, rotation: Vec3) -> list:
    """Apply `rotation` on top of `target`. Not commutative."""
    q = qmul(quat_from_euler(rotation), quat_from_euler(target))
    return euler_from_quat(q)


def combine_transforms(target: Mapping, transform: Mapping, anchor: Vec3 = (0, 0, 0)) -> dict:
    """
    Apply `transform` (parent) to `target` (child).

    The child is composed about `anchor`: it is moved by -anchor before the
    parent matrix is applied and by +anchor afterwards.
    """
    anchor = numpy.asarray(anchor, dtype=float)

    child = Pose.from_transform(target)
    child.lin = child.lin - anchor
    parent = Pose.from_transform(transform)

    result = parent * child
    result.lin = result.lin + anchor
    return result.to_transform()


def rotate_point(point: Vec3, rotation: Vec3, anchor: Vec3 = (0, 0, 0)) -> list:
    """Rotate a point by Euler degrees around `anchor`."""
    anchor = numpy.asarray(anchor, dtype=float)
    local = numpy.asarray(point, dtype=float) - anchor
    return [float(v) for v in qrot(quat_from_euler(rotation), local) + anchor]


def apply_anchor(position: Vec3, rotation: Vec3, scale: Vec3, anchor: Vec3) -> list:
    """Position of a local offset `anchor` of an object with the given transform."""
    offset = rotate_point(numpy.multiply(scale, anchor), rotation)
    return [float(p + o) for p, o in zip(position, offset)]


def look_at(eye: Vec3, target: Vec3) -> list:
    """Euler rotation (degrees) that points +Z from `eye` to `target`, +Y up."""
    forward = numpy.asarray(target, dtype=float) - numpy.asarray(eye, dtype=float)
    forward = forward / numpy.linalg.norm(forward)
    up = numpy.array([0.0, 1.0, 0.0])
    right = numpy.cross(up, forward)
    up = numpy.cross(forward, right)

    matrix = numpy.eye(4)
    matrix[:3, 0] = right
    matrix[:3, 1] = up
    matrix[:3, 2] = forward
    return Pose.from_matrix(matrix).to_transform()["rotation"]
