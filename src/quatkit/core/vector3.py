"""
===============================================================================
QUATKIT - Three-Component Vector
===============================================================================
Immutable 3-vector used as the vector part of a quaternion, as a rotation
axis, and as the operand of vector rotation.

Components are stored as a float64 NumPy array. Every operation returns a
new Vector3; the internal array is never handed out without a copy.
===============================================================================
"""

from typing import Iterator, Tuple, Union

import numpy as np

from quatkit.core.config import DEFAULT_CONFIG, NumericConfig
from quatkit.core.errors import ZeroLengthError


class Vector3:
    """
    Immutable 3D vector.

    Attributes
    ----------
    x, y, z : float
        Cartesian components.

    Examples
    --------
    >>> a = Vector3(1.0, 0.0, 0.0)
    >>> b = Vector3(0.0, 1.0, 0.0)
    >>> a.cross(b)
    Vector3(x=+0.00000000, y=+0.00000000, z=+1.00000000)
    """

    __slots__ = ('_v',)

    def __init__(self, x: float, y: float, z: float) -> None:
        self._v = np.array([x, y, z], dtype=np.float64)
        self._v.flags.writeable = False

    @classmethod
    def from_array(cls, values) -> 'Vector3':
        """
        Build a vector from any length-3 array-like.

        Raises
        ------
        ValueError
            If the input does not hold exactly three values.
        """
        arr = np.asarray(values, dtype=np.float64)
        if arr.shape != (3,):
            raise ValueError(f"Vector3 needs 3 components, got shape {arr.shape}")
        return cls(arr[0], arr[1], arr[2])

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    def as_array(self) -> np.ndarray:
        """Return a writable copy of the components as a 3-element array."""
        return self._v.copy()

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __iter__(self) -> Iterator[float]:
        return iter(self.to_tuple())

    def __len__(self) -> int:
        return 3

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return self._v.astype(dtype or np.float64, copy=True)

    # =========================================================================
    # ARITHMETIC
    # =========================================================================

    def __add__(self, other: 'Vector3') -> 'Vector3':
        if isinstance(other, Vector3):
            return Vector3.from_array(self._v + other._v)
        return NotImplemented

    def __sub__(self, other: 'Vector3') -> 'Vector3':
        if isinstance(other, Vector3):
            return Vector3.from_array(self._v - other._v)
        return NotImplemented

    def __neg__(self) -> 'Vector3':
        return Vector3.from_array(-self._v)

    def __mul__(self, other: Union[float, int]) -> 'Vector3':
        if isinstance(other, (int, float, np.floating, np.integer)):
            return Vector3.from_array(self._v * float(other))
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Union[float, int]) -> 'Vector3':
        if isinstance(other, (int, float, np.floating, np.integer)):
            return Vector3.from_array(self._v / float(other))
        return NotImplemented

    def scale(self, factor: float) -> 'Vector3':
        return self * factor

    def dot(self, other: 'Vector3') -> float:
        """Scalar (inner) product."""
        return float(np.dot(self._v, as_vector3(other)._v))

    def cross(self, other: 'Vector3') -> 'Vector3':
        """Right-handed cross product self x other."""
        return Vector3.from_array(np.cross(self._v, as_vector3(other)._v))

    # =========================================================================
    # MAGNITUDE
    # =========================================================================

    def length_squared(self) -> float:
        return float(np.dot(self._v, self._v))

    def length(self) -> float:
        return float(np.linalg.norm(self._v))

    def normalize(self, config: NumericConfig = DEFAULT_CONFIG) -> 'Vector3':
        """
        Return the unit vector with the same direction.

        Parameters
        ----------
        config : NumericConfig, optional
            Supplies zero_tol, the length below which the vector is zero.

        Raises
        ------
        ZeroLengthError
            If the vector has (near-)zero length; there is no direction
            to preserve.
        """
        n = self.length()
        if n < config.zero_tol:
            raise ZeroLengthError(
                f"Cannot normalize near-zero vector (length = {n:.2e})."
            )
        return Vector3.from_array(self._v / n)

    def is_unit(self, tolerance: float = 1e-9) -> bool:
        return abs(self.length() - 1.0) < tolerance

    # =========================================================================
    # VALUE SEMANTICS
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        return f"Vector3(x={self.x:+.8f}, y={self.y:+.8f}, z={self.z:+.8f})"


def as_vector3(value) -> Vector3:
    """Coerce a Vector3 or a length-3 array-like to a Vector3."""
    if isinstance(value, Vector3):
        return value
    return Vector3.from_array(value)


ZERO = Vector3(0.0, 0.0, 0.0)
X_AXIS = Vector3(1.0, 0.0, 0.0)
Y_AXIS = Vector3(0.0, 1.0, 0.0)
Z_AXIS = Vector3(0.0, 0.0, 1.0)
