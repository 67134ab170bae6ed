"""
===============================================================================
QUATKIT - Quaternion Algebra
===============================================================================

Quaternion value type for representing and composing 3D rotations, with
conversions to and from angle-axis, yaw-pitch-roll, two-vector (from/to),
rotation-vector, and 4x4 homogeneous matrix form.

Convention
----------
Components are scalar-first:

    q = (s, i, j, k) = s + i*I + j*J + k*K

under the Hamilton basis I*I = J*J = K*K = -1, I*J = K, J*K = I, K*I = J.

A quaternion is a plain value. The constructor stores exactly what it is
given: no implicit normalization and no sign canonicalization, so general
(non-unit) quaternions are first-class and every alternate representation
round-trips exactly. Rotation operations expect a unit quaternion;
normalize() produces one from any non-zero input.

A unit quaternion rotates a vector v as

    v' = q * v * q^{-1}

where v is embedded as the pure quaternion (0, v). q and -q give the same
v', so a rotation has two quaternion encodings (double cover). Use
is_same_rotation() to compare rotations and == / is_close() to compare raw
values.

Yaw-Pitch-Roll Convention
-------------------------
Aerospace 3-2-1 (intrinsic Z-Y'-X'') sequence:

    q = q_z(yaw) * q_y(pitch) * q_x(roll)      R = Rz(yaw) Ry(pitch) Rx(roll)

so a pure yaw equals from_angle_axis(yaw, Z), a pure pitch equals
from_angle_axis(pitch, Y), and a pure roll equals from_angle_axis(roll, X).

Degenerate Inputs
-----------------
    normalize / inverse of zero        -> ZeroLengthError
    axis() of a zero-angle rotation    -> +Z
    from_to(u, -u)                     -> pi about normalize(u x X),
                                          or normalize(u x Y) if u ~ +/-X
    to_yaw_pitch_roll at pitch +/-pi/2 -> roll = 0, coupled angle in yaw

References
----------
    [1] Kuipers, "Quaternions and Rotation Sequences", Princeton, 1999.
    [2] Diebel, "Representing Attitude: Euler Angles, Unit Quaternions, and
        Rotation Vectors", Stanford, 2006.
    [3] Shepperd, "Quaternion from Rotation Matrix", JGCD, 1978.

===============================================================================
"""

import logging
from typing import Dict, Mapping, Tuple, Union

import numpy as np

from quatkit.core.approx import rotation_close, wrap_angle
from quatkit.core.config import DEFAULT_CONFIG, NumericConfig
from quatkit.core.constants import HALF_PI
from quatkit.core.errors import ZeroLengthError
from quatkit.core.matrix4 import Matrix4
from quatkit.core.vector3 import X_AXIS, Y_AXIS, Z_AXIS, Vector3, as_vector3

logger = logging.getLogger(__name__)

_Scalar = (int, float, np.floating, np.integer)

# from_mat4 rejects rotation blocks further than this from SO(3)
_ROTATION_BLOCK_TOLERANCE = 1e-6


class Quaternion:
    """
    Immutable quaternion (s, i, j, k).

    Attributes
    ----------
    s : float
        Scalar (real) part.
    i, j, k : float
        Components of the vector (imaginary) part.

    Examples
    --------
    >>> q = Quaternion.from_angle_axis(np.pi / 2, Z_AXIS)   # 90 deg yaw
    >>> q.rotate(Vector3(1.0, 0.0, 0.0))
    Vector3(x=+0.00000000, y=+1.00000000, z=+0.00000000)
    """

    __slots__ = ('_q',)

    def __init__(self, s: float, i: float, j: float, k: float) -> None:
        q = np.array([s, i, j, k], dtype=np.float64)
        q.flags.writeable = False
        self._q = q

    # =========================================================================
    # ALTERNATE REPRESENTATIONS
    # =========================================================================

    @staticmethod
    def from_tuple(values) -> 'Quaternion':
        """
        Build from a 4-sequence (s, i, j, k).

        Raises
        ------
        ValueError
            If the input does not hold exactly four values.
        """
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (4,):
            raise ValueError(f"Quaternion needs 4 components, got shape {arr.shape}")
        return Quaternion(arr[0], arr[1], arr[2], arr[3])

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.s, self.i, self.j, self.k)

    @staticmethod
    def from_dict(record: Mapping[str, float]) -> 'Quaternion':
        """Build from a labeled record with keys 's', 'i', 'j', 'k'."""
        missing = [key for key in ('s', 'i', 'j', 'k') if key not in record]
        if missing:
            raise ValueError(f"Quaternion record is missing field(s): {missing}")
        return Quaternion(record['s'], record['i'], record['j'], record['k'])

    def to_dict(self) -> Dict[str, float]:
        return {'s': self.s, 'i': self.i, 'j': self.j, 'k': self.k}

    @staticmethod
    def from_scalar_vector(scalar: float, vector) -> 'Quaternion':
        """Build from a (scalar part, vector part) pair."""
        v = as_vector3(vector)
        return Quaternion(scalar, v.x, v.y, v.z)

    def to_scalar_vector(self) -> Tuple[float, Vector3]:
        return (self.s, self.vector)

    @staticmethod
    def from_scalar(value: float) -> 'Quaternion':
        """Embed a real number: (value, 0, 0, 0)."""
        return Quaternion(value, 0.0, 0.0, 0.0)

    @staticmethod
    def from_vector(vector) -> 'Quaternion':
        """Embed a 3-vector as a pure quaternion: (0, x, y, z)."""
        return Quaternion.from_scalar_vector(0.0, vector)

    # =========================================================================
    # PROPERTIES - Read access to quaternion components
    # =========================================================================

    @property
    def s(self) -> float:
        """Scalar (real) part."""
        return float(self._q[0])

    @property
    def i(self) -> float:
        return float(self._q[1])

    @property
    def j(self) -> float:
        return float(self._q[2])

    @property
    def k(self) -> float:
        return float(self._q[3])

    @property
    def scalar(self) -> float:
        """Scalar part of the quaternion (alias for s)."""
        return self.s

    @property
    def vector(self) -> Vector3:
        """Vector (imaginary) part as a Vector3."""
        return Vector3(self._q[1], self._q[2], self._q[3])

    @property
    def components(self) -> np.ndarray:
        """
        Full quaternion as a 4-element numpy array [s, i, j, k].

        Returns
        -------
        np.ndarray
            Copy of the internal component array.
        """
        return self._q.copy()

    # =========================================================================
    # FUNCTIONAL SETTERS - return a copy with one component replaced
    # =========================================================================

    def with_s(self, value: float) -> 'Quaternion':
        return Quaternion(value, self.i, self.j, self.k)

    def with_i(self, value: float) -> 'Quaternion':
        return Quaternion(self.s, value, self.j, self.k)

    def with_j(self, value: float) -> 'Quaternion':
        return Quaternion(self.s, self.i, value, self.k)

    def with_k(self, value: float) -> 'Quaternion':
        return Quaternion(self.s, self.i, self.j, value)

    # =========================================================================
    # MAGNITUDE
    # =========================================================================

    def length_squared(self) -> float:
        """Sum of squared components s^2 + i^2 + j^2 + k^2."""
        return float(np.dot(self._q, self._q))

    def length(self) -> float:
        """Euclidean norm of the 4-tuple."""
        return float(np.linalg.norm(self._q))

    def is_unit(self, tolerance: float = 1e-9) -> bool:
        """True if |q| is within tolerance of 1.0."""
        return abs(self.length() - 1.0) < tolerance

    def _require_nonzero(self, operation: str,
                         config: NumericConfig = DEFAULT_CONFIG) -> float:
        n = self.length()
        if n < config.zero_tol:
            raise ZeroLengthError(
                f"Cannot {operation} near-zero quaternion (norm = {n:.2e})."
            )
        return n

    def normalize(self, config: NumericConfig = DEFAULT_CONFIG) -> 'Quaternion':
        """
        Return the unit quaternion pointing the same way in 4-space.

        Parameters
        ----------
        config : NumericConfig, optional
            Supplies zero_tol, the norm below which q counts as zero.

        Raises
        ------
        ZeroLengthError
            If the quaternion has near-zero norm. The direction of the zero
            quaternion is undefined.
        """
        n = self._require_nonzero("normalize", config)
        return Quaternion.from_tuple(self._q / n)

    # =========================================================================
    # QUATERNION ARITHMETIC
    # =========================================================================

    def negate(self) -> 'Quaternion':
        """
        Flip the sign of every component.

        -q encodes the same rotation as q.
        """
        return Quaternion.from_tuple(-self._q)

    def scale(self, factor: float) -> 'Quaternion':
        """Multiply every component by a real factor."""
        return Quaternion.from_tuple(self._q * float(factor))

    def conjugate(self) -> 'Quaternion':
        """
        Return the quaternion conjugate (s, -i, -j, -k).

        For unit quaternions the conjugate equals the inverse and represents
        the reverse rotation.
        """
        return Quaternion(self.s, -self.i, -self.j, -self.k)

    def inverse(self, config: NumericConfig = DEFAULT_CONFIG) -> 'Quaternion':
        """
        Return the multiplicative inverse q* / |q|^2.

        Raises
        ------
        ZeroLengthError
            If |q| is below config.zero_tol.
        """
        self._require_nonzero("invert", config)
        return self.conjugate().scale(1.0 / self.length_squared())

    def dot(self, other: 'Quaternion') -> float:
        """4D inner product."""
        return float(np.dot(self._q, other._q))

    def hamilton(self, other: 'Quaternion') -> 'Quaternion':
        """
        Hamilton product self * other.

        With q1 = (s1, v1) and q2 = (s2, v2):

            scalar = s1*s2 - v1 . v2
            vector = s1*v2 + s2*v1 + v1 x v2

        Expanded per component below. The product is not commutative; as a
        rotation, self * other applies *other* first and then *self*.
        Scalar quaternions commute with everything and act as plain
        scaling, and the basis elements reproduce the quaternion group
        table exactly since only 0/+-1 products are involved.
        """
        a1, b1, c1, d1 = self._q
        a2, b2, c2, d2 = other._q

        s = a1 * a2 - b1 * b2 - c1 * c2 - d1 * d2
        i = a1 * b2 + b1 * a2 + c1 * d2 - d1 * c2
        j = a1 * c2 - b1 * d2 + c1 * a2 + d1 * b2
        k = a1 * d2 + b1 * c2 - c1 * b2 + d1 * a2

        return Quaternion(s, i, j, k)

    # =========================================================================
    # ANGLE-AXIS
    # =========================================================================

    @staticmethod
    def from_angle_axis(angle: float, axis,
                        config: NumericConfig = DEFAULT_CONFIG) -> 'Quaternion':
        """
        Create the rotation by *angle* radians about *axis*.

            q = (cos(angle/2), sin(angle/2) * axis)

        Parameters
        ----------
        angle : float
            Rotation angle in radians.
        axis : Vector3 or array-like
            Rotation axis. Expected to be unit length; a non-unit axis is
            normalized, so only its direction matters.
        config : NumericConfig, optional
            Supplies zero_tol for the zero-axis check.

        Raises
        ------
        ZeroLengthError
            If axis has near-zero magnitude.
        """
        axis = as_vector3(axis)
        axis_norm = axis.length()

        if axis_norm < config.zero_tol:
            raise ZeroLengthError(
                "Rotation axis has near-zero magnitude. "
                "Cannot define a rotation about a zero vector."
            )
        if abs(axis_norm - 1.0) > config.abs_tol:
            logger.debug("Normalizing non-unit rotation axis (length %.6g)", axis_norm)

        n = axis.as_array() / axis_norm
        half_angle = angle / 2.0
        sin_half = np.sin(half_angle)

        return Quaternion(np.cos(half_angle),
                          sin_half * n[0], sin_half * n[1], sin_half * n[2])

    def angle(self) -> float:
        """
        Rotation angle in radians, in [0, 2*pi].

            angle = 2 * arccos(s / |q|)

        The quaternion is normalized first, so any non-zero q is accepted.
        from_angle_axis(q.angle(), q.axis()) reproduces a unit q without
        any sign flip.
        """
        n = self._require_nonzero("take the angle of")
        # Clamp to [-1, 1] to protect against floating-point overshoot in arccos
        return float(2.0 * np.arccos(np.clip(self.s / n, -1.0, 1.0)))

    def axis(self, config: NumericConfig = DEFAULT_CONFIG) -> Vector3:
        """
        Unit rotation axis: the normalized vector part.

        Returns +Z when the vector part is shorter than config.zero_tol
        (rotation angle 0 or 2*pi), where any axis describes the same
        rotation.
        """
        vec = self.vector
        vec_norm = vec.length()

        if vec_norm < config.zero_tol:
            logger.debug("Rotation axis undefined for zero-angle quaternion; using +Z")
            return Z_AXIS

        return vec / vec_norm

    def to_angle_axis(self) -> Tuple[float, Vector3]:
        """Return (angle, axis); see angle() and axis()."""
        return (self.angle(), self.axis())

    @staticmethod
    def from_rotation_vector(rot_vec,
                             config: NumericConfig = DEFAULT_CONFIG) -> 'Quaternion':
        """
        Create a quaternion from a rotation vector theta * n.

        Returns the identity for a rotation vector shorter than
        config.zero_tol.
        """
        rot_vec = as_vector3(rot_vec)
        angle = rot_vec.length()

        if angle < config.zero_tol:
            return UNIT

        return Quaternion.from_angle_axis(angle, rot_vec / angle, config)

    def to_rotation_vector(self) -> Vector3:
        """
        Rotation vector angle * axis with angle in [0, pi].

        The short-way representative (s >= 0) is used, so q and -q map to
        the same vector.
        """
        q = self if self.s >= 0.0 else self.negate()
        angle, axis = q.to_angle_axis()
        return axis * angle

    # =========================================================================
    # TWO-VECTOR CONSTRUCTION
    # =========================================================================

    @staticmethod
    def from_to(u, v, config: NumericConfig = DEFAULT_CONFIG) -> 'Quaternion':
        """
        Minimal-angle rotation taking direction u onto direction v.

        Uses the half-way construction

            q = normalize(1 + u.v, u x v)

        which yields (cos(theta/2), sin(theta/2) * n) for the angle theta
        between u and v, and exactly the identity when u == v. The scalar
        1 + u.v is evaluated as |u + v|^2 / 2, which keeps its relative
        precision when u and v are nearly opposite.

        Non-unit inputs are normalized. Inputs are antipodal when u.v < 0
        and |u x v| < config.antipodal_tol. Every axis perpendicular to u
        is then valid; the rotation is by pi about normalize(u x X), or
        normalize(u x Y) when u lies close to the X axis (|u.x| > 0.9).

        Raises
        ------
        ZeroLengthError
            If either vector has zero length.
        """
        u = as_vector3(u).normalize(config)
        v = as_vector3(v).normalize(config)

        c = u.cross(v)
        if u.dot(v) < 0.0 and c.length() < config.antipodal_tol:
            reference = Y_AXIS if abs(u.x) > 0.9 else X_AXIS
            axis = u.cross(reference).normalize(config)
            logger.debug("Antipodal from_to input; rotating pi about %r", axis)
            return Quaternion.from_scalar_vector(0.0, axis)

        half_sum = 0.5 * (u + v).length_squared()
        return Quaternion(half_sum, c.x, c.y, c.z).normalize(config)

    # =========================================================================
    # ROTATION OPERATIONS
    # =========================================================================

    def rotate(self, v) -> Vector3:
        """
        Rotate a 3D vector by this quaternion.

        Applies the sandwich product

            v' = q * (0, v) * q^{-1}

        and returns its vector part. With the true inverse (not the
        conjugate) this is a pure rotation for any non-zero q; for a unit q
        it equals to_mat4().transform(v).

        Raises
        ------
        ZeroLengthError
            If the quaternion is zero.
        """
        p = Quaternion.from_vector(v)
        return self.hamilton(p).hamilton(self.inverse()).vector

    # =========================================================================
    # MATRIX CONVERSION
    # =========================================================================

    def to_mat4(self) -> Matrix4:
        """
        Convert to the equivalent 4x4 homogeneous rotation matrix.

        For a unit quaternion the rotation block is

            | 1-2(j^2+k^2)    2(ij-sk)      2(ik+sj)   |
            | 2(ij+sk)      1-2(i^2+k^2)    2(jk-si)   |
            | 2(ik-sj)      2(jk+si)      1-2(i^2+j^2) |

        The factor 2 is replaced by 2/|q|^2 so that the matrix agrees with
        rotate() for any non-zero q.

        Raises
        ------
        ZeroLengthError
            If the quaternion is zero.
        """
        self._require_nonzero("convert to a matrix")
        w, x, y, z = self._q
        f = 2.0 / self.length_squared()

        # Pre-compute products that appear multiple times
        xx = x * x
        yy = y * y
        zz = z * z
        xy = x * y
        xz = x * z
        yz = y * z
        wx = w * x
        wy = w * y
        wz = w * z

        return Matrix4([
            [1.0 - f * (yy + zz), f * (xy - wz),       f * (xz + wy),       0.0],
            [f * (xy + wz),       1.0 - f * (xx + zz), f * (yz - wx),       0.0],
            [f * (xz - wy),       f * (yz + wx),       1.0 - f * (xx + yy), 0.0],
            [0.0,                 0.0,                 0.0,                 1.0],
        ])

    @staticmethod
    def from_mat4(matrix) -> 'Quaternion':
        """
        Create a unit quaternion from a rotation matrix.

        Every pairwise product of components can be read off the rotation
        block R:

            P = 4 q q^T = | 1+t          R21-R12     R02-R20     R10-R01    |
                          | R21-R12      1+2R00-t    R01+R10     R02+R20    |
                          | R02-R20      R01+R10     1+2R11-t    R12+R21    |
                          | R10-R01      R02+R20     R12+R21     1+2R22-t   |

        with t = trace(R). Row n of P divided by 2*sqrt(P[n, n]) is q, for
        any n with P[n, n] > 0. Taking the row with the largest diagonal
        entry (Shepperd's choice) keeps the divisor well away from zero for
        every rotation, including half turns.

        Parameters
        ----------
        matrix : Matrix4 or array-like
            4x4 homogeneous transform or 3x3 rotation matrix. Only the
            rotation block is used.

        Returns
        -------
        Quaternion
            Unit quaternion q with q.to_mat4() equal to the input rotation.
            Of the two encodings, the one whose largest component is
            positive is returned.

        Raises
        ------
        ValueError
            If the input has the wrong shape or its rotation block is not
            a proper rotation.
        """
        if isinstance(matrix, Matrix4):
            rot = matrix.rotation_part()
        else:
            arr = np.asarray(matrix, dtype=np.float64)
            if arr.shape not in ((3, 3), (4, 4)):
                raise ValueError(f"Expected a 3x3 or 4x4 matrix, got shape {arr.shape}")
            rot = arr[:3, :3]

        if not Matrix4.from_rotation(rot).is_orthonormal(_ROTATION_BLOCK_TOLERANCE):
            raise ValueError(
                "Rotation block is not a proper rotation "
                f"(tolerance {_ROTATION_BLOCK_TOLERANCE:.0e} on R^T R = I, det R = 1)."
            )

        t = np.trace(rot)
        diag = 1.0 + 2.0 * np.diag(rot) - t
        si = rot[2, 1] - rot[1, 2]
        sj = rot[0, 2] - rot[2, 0]
        sk = rot[1, 0] - rot[0, 1]
        ij = rot[0, 1] + rot[1, 0]
        ik = rot[0, 2] + rot[2, 0]
        jk = rot[1, 2] + rot[2, 1]

        products = np.array([
            [1.0 + t, si,      sj,      sk],
            [si,      diag[0], ij,      ik],
            [sj,      ij,      diag[1], jk],
            [sk,      ik,      jk,      diag[2]],
        ])

        n = int(np.argmax(np.diag(products)))
        q = products[n] / (2.0 * np.sqrt(products[n, n]))
        return Quaternion.from_tuple(q).normalize()

    # =========================================================================
    # YAW-PITCH-ROLL
    # =========================================================================

    @staticmethod
    def from_yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> 'Quaternion':
        """
        Create a quaternion from 3-2-1 (Z-Y'-X'') yaw-pitch-roll angles.

        The closed form below is the expanded product

            q = q_z(yaw) * q_y(pitch) * q_x(roll)

        where each single-axis quaternion is q_n(a) = from_angle_axis(a, n).

        Parameters
        ----------
        yaw : float
            Rotation about Z (radians).
        pitch : float
            Rotation about the once-rotated Y axis (radians).
        roll : float
            Rotation about the twice-rotated X axis (radians).
        """
        # Half-angles (each trig function called once)
        c_r = np.cos(roll / 2.0)
        s_r = np.sin(roll / 2.0)
        c_p = np.cos(pitch / 2.0)
        s_p = np.sin(pitch / 2.0)
        c_y = np.cos(yaw / 2.0)
        s_y = np.sin(yaw / 2.0)

        s = c_r * c_p * c_y + s_r * s_p * s_y
        i = s_r * c_p * c_y - c_r * s_p * s_y
        j = c_r * s_p * c_y + s_r * c_p * s_y
        k = c_r * c_p * s_y - s_r * s_p * c_y

        return Quaternion(s, i, j, k)

    def to_yaw_pitch_roll(self, config: NumericConfig = DEFAULT_CONFIG
                          ) -> Tuple[float, float, float]:
        """
        Convert to 3-2-1 yaw-pitch-roll angles.

            yaw   = atan2(2(sk + ij), 1 - 2(j^2 + k^2))
            pitch = arcsin(2(sj - ki))
            roll  = atan2(2(si + jk), 1 - 2(i^2 + j^2))

        Returns
        -------
        tuple of (float, float, float)
            (yaw, pitch, roll) in radians; yaw and roll in (-pi, pi],
            pitch in [-pi/2, pi/2].

        Notes
        -----
        Gimbal lock occurs at pitch = +/-pi/2: yaw and roll then rotate
        about the same axis and only their difference (pitch = +pi/2) or
        sum (pitch = -pi/2) is determined. When 1 - |sin(pitch)| is within
        config.gimbal_tol, pitch is reported as exactly +/-pi/2, roll as 0
        and the whole coupled angle as yaw. The resulting triple encodes the
        same rotation but does not in general reproduce the input angles.

        Raises
        ------
        ZeroLengthError
            If the quaternion is zero (it is normalized first).
        """
        w, x, y, z = self.normalize(config)._q

        sinp = 2.0 * (w * y - z * x)

        if 1.0 - abs(sinp) <= config.gimbal_tol:
            pitch = float(np.copysign(HALF_PI, sinp))
            half_coupled = np.arctan2(x, w)
            if sinp > 0.0:
                yaw = wrap_angle(-2.0 * half_coupled)
            else:
                yaw = wrap_angle(2.0 * half_coupled)
            logger.debug("Gimbal lock in yaw-pitch-roll decode (pitch=%+.6f); roll set to 0",
                         pitch)
            return (yaw, pitch, 0.0)

        # Clamp to [-1, 1] to prevent NaN from arcsin due to float rounding
        pitch = float(np.arcsin(np.clip(sinp, -1.0, 1.0)))
        yaw = wrap_angle(np.arctan2(2.0 * (w * z + x * y), 1.0 - 2.0 * (y * y + z * z)))
        roll = wrap_angle(np.arctan2(2.0 * (w * x + y * z), 1.0 - 2.0 * (x * x + y * y)))

        return (yaw, pitch, roll)

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def is_close(self, other: 'Quaternion', tolerance: float = DEFAULT_CONFIG.abs_tol) -> bool:
        """Raw componentwise approximate equality (q and -q differ)."""
        return bool(np.all(np.abs(self._q - other._q) <= tolerance))

    def is_same_rotation(self, other: 'Quaternion',
                         tolerance: float = DEFAULT_CONFIG.abs_tol) -> bool:
        """True if both quaternions encode the same rotation (q ~ q or q ~ -q)."""
        return rotation_close(self._q, other._q, tolerance)

    def canonical(self) -> 'Quaternion':
        """
        Sign representative whose first non-zero component is positive.

        q.canonical() == (-q).canonical() for every q.
        """
        for value in self._q:
            if value != 0.0:
                return self if value > 0.0 else self.negate()
        return self

    def angle_to(self, other: 'Quaternion') -> float:
        """
        Rotation angle between this attitude and another, in [0, pi].

            angle = 2 * arccos(|q1 . q2|)

        computed on the normalized quaternions; this is the geodesic
        distance on SO(3) and is blind to the sign of either operand.
        """
        dot = np.clip(abs(self.normalize().dot(other.normalize())), 0.0, 1.0)
        return float(2.0 * np.arccos(dot))

    # =========================================================================
    # OPERATOR OVERLOADS
    # =========================================================================

    def __mul__(self, other: Union['Quaternion', float, int]) -> 'Quaternion':
        """
        - Quaternion * Quaternion -> Hamilton product
        - Quaternion * scalar -> componentwise scaling
        """
        if isinstance(other, Quaternion):
            return self.hamilton(other)
        if isinstance(other, _Scalar):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: Union[float, int]) -> 'Quaternion':
        if isinstance(other, _Scalar):
            return self.scale(other)
        return NotImplemented

    def __add__(self, other: 'Quaternion') -> 'Quaternion':
        """Componentwise sum. Not a rotation operation."""
        if isinstance(other, Quaternion):
            return Quaternion.from_tuple(self._q + other._q)
        return NotImplemented

    def __sub__(self, other: 'Quaternion') -> 'Quaternion':
        if isinstance(other, Quaternion):
            return Quaternion.from_tuple(self._q - other._q)
        return NotImplemented

    def __neg__(self) -> 'Quaternion':
        return self.negate()

    def __iter__(self):
        return iter(self.to_tuple())

    def __eq__(self, other: object) -> bool:
        """
        Exact componentwise equality.

        Use is_close() for tolerance-based comparison and
        is_same_rotation() when q and -q should compare equal.
        """
        if not isinstance(other, Quaternion):
            return NotImplemented
        return bool(np.array_equal(self._q, other._q))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        return (f"Quaternion(s={self.s:+.8f}, i={self.i:+.8f}, "
                f"j={self.j:+.8f}, k={self.k:+.8f})")

    def __str__(self) -> str:
        return f"[{self.s:+.6f}, {self.i:+.6f}, {self.j:+.6f}, {self.k:+.6f}]"


# =============================================================================
# NAMED QUATERNIONS
# =============================================================================

UNIT = Quaternion(1.0, 0.0, 0.0, 0.0)
ZERO = Quaternion(0.0, 0.0, 0.0, 0.0)
BASIS_I = Quaternion(0.0, 1.0, 0.0, 0.0)
BASIS_J = Quaternion(0.0, 0.0, 1.0, 0.0)
BASIS_K = Quaternion(0.0, 0.0, 0.0, 1.0)


# =============================================================================
# FUNCTIONAL API
# =============================================================================

def hamilton(q1: Quaternion, q2: Quaternion) -> Quaternion:
    """Hamilton product q1 * q2."""
    return q1.hamilton(q2)


def negate(q: Quaternion) -> Quaternion:
    return q.negate()


def scale(factor: float, q: Quaternion) -> Quaternion:
    return q.scale(factor)


def length(q: Quaternion) -> float:
    return q.length()


def length_squared(q: Quaternion) -> float:
    return q.length_squared()


def normalize(q: Quaternion, config: NumericConfig = DEFAULT_CONFIG) -> Quaternion:
    return q.normalize(config)


def from_angle_axis(angle: float, axis,
                    config: NumericConfig = DEFAULT_CONFIG) -> Quaternion:
    return Quaternion.from_angle_axis(angle, axis, config)


def get_angle(q: Quaternion) -> float:
    return q.angle()


def get_axis(q: Quaternion, config: NumericConfig = DEFAULT_CONFIG) -> Vector3:
    return q.axis(config)


def from_to(u, v, config: NumericConfig = DEFAULT_CONFIG) -> Quaternion:
    return Quaternion.from_to(u, v, config)


def vrotate(q: Quaternion, v) -> Vector3:
    """Rotate v by q: vector part of q * (0, v) * q^{-1}."""
    return q.rotate(v)


def to_mat4(q: Quaternion) -> Matrix4:
    return q.to_mat4()


def from_mat4(matrix) -> Quaternion:
    return Quaternion.from_mat4(matrix)


def from_yaw_pitch_roll(yaw: float, pitch: float, roll: float) -> Quaternion:
    return Quaternion.from_yaw_pitch_roll(yaw, pitch, roll)


def to_yaw_pitch_roll(q: Quaternion,
                      config: NumericConfig = DEFAULT_CONFIG) -> Tuple[float, float, float]:
    return q.to_yaw_pitch_roll(config)
