"""
===============================================================================
QUATKIT - 4x4 Homogeneous Transform
===============================================================================
Immutable 4x4 matrix in the column-vector convention used by rendering and
physics code:

    | R  t |   R : 3x3 rotation (orthonormal, det = +1)
    | 0  1 |   t : translation

A direction vector is transformed with w = 0 (translation ignored), a
point with w = 1. Quaternions convert into this type through
Quaternion.to_mat4(); Matrix4.rotation() builds the same matrix directly
from an angle and axis with the Rodrigues formula, which makes it an
independent check on the quaternion path.
===============================================================================
"""

import numpy as np

from quatkit.core.vector3 import Vector3, as_vector3


class Matrix4:
    """
    Immutable 4x4 homogeneous transformation matrix.

    Parameters
    ----------
    values : array-like
        4x4 matrix entries in row-major order.

    Raises
    ------
    ValueError
        If the input is not 4x4.
    """

    __slots__ = ('_m',)

    def __init__(self, values) -> None:
        m = np.array(values, dtype=np.float64)
        if m.shape != (4, 4):
            raise ValueError(f"Matrix4 must be 4x4, got shape {m.shape}")
        m.flags.writeable = False
        self._m = m

    # =========================================================================
    # FACTORIES
    # =========================================================================

    @staticmethod
    def identity() -> 'Matrix4':
        return Matrix4(np.eye(4))

    @staticmethod
    def from_rotation(rotation) -> 'Matrix4':
        """Embed a 3x3 rotation matrix in a homogeneous transform."""
        r = np.asarray(rotation, dtype=np.float64)
        if r.shape != (3, 3):
            raise ValueError(f"Rotation block must be 3x3, got shape {r.shape}")
        m = np.eye(4)
        m[:3, :3] = r
        return Matrix4(m)

    @staticmethod
    def rotation(angle: float, axis) -> 'Matrix4':
        """
        Rotation by *angle* radians about *axis* (right-hand rule).

        Uses the Rodrigues formula

            R = I + sin(a) K + (1 - cos(a)) K^2

        where K is the skew-symmetric cross-product matrix of the unit axis.
        The axis is normalized; a zero axis raises ZeroLengthError.
        """
        n = as_vector3(axis).normalize().as_array()
        K = np.array([
            [0.0,   -n[2],  n[1]],
            [n[2],   0.0,  -n[0]],
            [-n[1],  n[0],  0.0],
        ], dtype=np.float64)
        R = np.eye(3) + np.sin(angle) * K + (1.0 - np.cos(angle)) * (K @ K)
        return Matrix4.from_rotation(R)

    @staticmethod
    def translation(offset) -> 'Matrix4':
        m = np.eye(4)
        m[:3, 3] = as_vector3(offset).as_array()
        return Matrix4(m)

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    def as_array(self) -> np.ndarray:
        """Return a writable copy of the 4x4 entries."""
        return self._m.copy()

    def rotation_part(self) -> np.ndarray:
        """Upper-left 3x3 block."""
        return self._m[:3, :3].copy()

    def __getitem__(self, index):
        return self._m[index]

    # =========================================================================
    # OPERATIONS
    # =========================================================================

    def transform(self, v) -> Vector3:
        """Transform a direction vector (w = 0)."""
        return Vector3.from_array(self._m[:3, :3] @ as_vector3(v).as_array())

    def transform_point(self, p) -> Vector3:
        """Transform a point (w = 1), applying the translation column."""
        h = np.append(as_vector3(p).as_array(), 1.0)
        out = self._m @ h
        return Vector3.from_array(out[:3] / out[3])

    def transpose(self) -> 'Matrix4':
        return Matrix4(self._m.T)

    def __matmul__(self, other: 'Matrix4') -> 'Matrix4':
        if isinstance(other, Matrix4):
            return Matrix4(self._m @ other._m)
        return NotImplemented

    def is_orthonormal(self, tolerance: float = 1e-9) -> bool:
        """
        True if the rotation block is a proper rotation (R^T R = I, det = +1)
        and the bottom row is [0, 0, 0, 1].
        """
        R = self._m[:3, :3]
        orthogonality_error = np.linalg.norm(R.T @ R - np.eye(3))
        return bool(
            orthogonality_error < tolerance
            and abs(np.linalg.det(R) - 1.0) < tolerance
            and np.allclose(self._m[3], [0.0, 0.0, 0.0, 1.0], atol=tolerance)
        )

    # =========================================================================
    # VALUE SEMANTICS
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    def __hash__(self) -> int:
        return hash(tuple(self._m.ravel().tolist()))

    def __repr__(self) -> str:
        rows = ",\n        ".join(
            "[" + ", ".join(f"{v:+.6f}" for v in row) + "]" for row in self._m
        )
        return f"Matrix4([{rows}])"
