"""Pose - 3D transform with scale: rotation quaternion, translation, scale.

Beatmap transforms are mappings {"position", "rotation", "scale"} with the
rotation given as Euler degrees (YXZ). Pose converts them to and from
4x4 TRS matrices so they can be composed.

Composition:
    parent * child = from_matrix(parent.as_matrix() @ child.as_matrix())
"""

import numpy

from beatmotion.util import euler_from_quat, qrot, quat_from_euler, quat_from_matrix, quat_rotation_matrix


class Pose:
    """A 3D pose with scale, represented by rotation quaternion, translation vector, and scale."""

    __slots__ = ('ang', 'lin', 'scale')

    def __init__(
        self,
        ang: numpy.ndarray = None,
        lin: numpy.ndarray = None,
        scale: numpy.ndarray = None
    ):
        if ang is None:
            ang = numpy.array([0.0, 0.0, 0.0, 1.0])
        if lin is None:
            lin = numpy.array([0.0, 0.0, 0.0])
        if scale is None:
            scale = numpy.array([1.0, 1.0, 1.0])
        self.ang = numpy.asarray(ang, dtype=float)
        self.lin = numpy.asarray(lin, dtype=float)
        self.scale = numpy.asarray(scale, dtype=float)

    @staticmethod
    def identity() -> 'Pose':
        return Pose()

    @staticmethod
    def from_transform(transform) -> 'Pose':
        """Pose from a transform mapping; missing keys take their defaults."""
        return Pose(
            ang=quat_from_euler(transform.get("rotation") or [0, 0, 0]),
            lin=transform.get("position") or [0, 0, 0],
            scale=transform.get("scale") or [1, 1, 1],
        )

    def to_transform(self) -> dict:
        """Transform mapping with plain lists: position, rotation (Euler degrees), scale."""
        return {
            "position": [float(v) for v in self.lin],
            "rotation": euler_from_quat(self.ang),
            "scale": [float(v) for v in self.scale],
        }

    def copy(self) -> 'Pose':
        return Pose(ang=self.ang.copy(), lin=self.lin.copy(), scale=self.scale.copy())

    def rotation_matrix(self) -> numpy.ndarray:
        return quat_rotation_matrix(self.ang)

    def as_matrix(self) -> numpy.ndarray:
        """Get the 4x4 transformation matrix with scale baked in.

        Returns TRS matrix: Translation * Rotation * Scale
        """
        mat = numpy.eye(4)
        mat[:3, :3] = self.rotation_matrix() @ numpy.diag(self.scale)
        mat[:3, 3] = self.lin
        return mat

    @staticmethod
    def from_matrix(matrix: numpy.ndarray) -> 'Pose':
        """Decompose a 4x4 TRS matrix.

        Scale comes from the column norms. A mirrored basis (negative
        determinant) is represented by a negative X scale.
        """
        lin = matrix[:3, 3].copy()

        sx = numpy.linalg.norm(matrix[:3, 0])
        sy = numpy.linalg.norm(matrix[:3, 1])
        sz = numpy.linalg.norm(matrix[:3, 2])
        if numpy.linalg.det(matrix[:3, :3]) < 0:
            sx = -sx
        scale = numpy.array([sx, sy, sz])

        rot_mat = matrix[:3, :3].copy()
        for i, s in enumerate(scale):
            if s != 0:
                rot_mat[:, i] /= s

        return Pose(ang=quat_from_matrix(rot_mat), lin=lin, scale=scale)

    def transform_point(self, point) -> numpy.ndarray:
        """Transform a 3D point using the pose (with scale)."""
        return qrot(self.ang, self.scale * numpy.asarray(point, dtype=float)) + self.lin

    def __mul__(self, other: 'Pose') -> 'Pose':
        """Compose this pose (parent) with another pose (child)."""
        if not isinstance(other, Pose):
            raise TypeError("Can only multiply Pose with Pose")
        return Pose.from_matrix(self.as_matrix() @ other.as_matrix())

    def __repr__(self):
        return f"Pose(ang={self.ang}, lin={self.lin}, scale={self.scale})"
