"""
===============================================================================
QUATKIT - Approximate Equality
===============================================================================
Tolerance-parameterized comparisons for floating-point values.

Three flavours are needed by the rotation algebra:

    scalar / vector   |a - b| <= tol componentwise
    angular           equal modulo 2*pi (wrapped difference <= tol)
    quaternion        raw componentwise, or rotation-equivalent where
                      q and -q count as the same rotation

This module is a leaf: it works on plain floats and array-likes. Vector3
and Quaternion instances are accepted because both expose their components
as arrays.
===============================================================================
"""

import math
from typing import Sequence

import numpy as np

from quatkit.core.config import DEFAULT_CONFIG
from quatkit.core.constants import PI, TWO_PI


def _as_components(value) -> np.ndarray:
    # Quaternion exposes .components; Vector3 supports __array__.
    comps = getattr(value, 'components', value)
    return np.asarray(comps, dtype=np.float64)


# =============================================================================
# SCALARS AND VECTORS
# =============================================================================

def scalar_close(a: float, b: float, tol: float = DEFAULT_CONFIG.abs_tol) -> bool:
    """True if |a - b| <= tol."""
    return bool(abs(float(a) - float(b)) <= tol)


def vector_close(a, b, tol: float = DEFAULT_CONFIG.abs_tol) -> bool:
    """Componentwise approximate equality of two equally-shaped arrays."""
    a_arr = _as_components(a)
    b_arr = _as_components(b)
    if a_arr.shape != b_arr.shape:
        raise ValueError(
            f"Cannot compare arrays of shape {a_arr.shape} and {b_arr.shape}"
        )
    return bool(np.all(np.abs(a_arr - b_arr) <= tol))


# =============================================================================
# ANGLES
# =============================================================================

def wrap_angle(angle: float) -> float:
    """
    Wrap an angle into the half-open interval (-pi, pi].

    Values that differ by a multiple of 2*pi map to the same result. The
    IEEE remainder is exact, so angles already in range come back unchanged.
    """
    wrapped = math.remainder(float(angle), TWO_PI)
    if wrapped <= -PI:
        wrapped += TWO_PI
    return wrapped


def angle_difference(a: float, b: float) -> float:
    """Signed shortest angular difference a - b, in (-pi, pi]."""
    return wrap_angle(float(a) - float(b))


def angle_close(a: float, b: float, tol: float = DEFAULT_CONFIG.angle_tol) -> bool:
    """True if a and b are equal modulo 2*pi within tol."""
    return abs(angle_difference(a, b)) <= tol


def angles_close(a: Sequence[float], b: Sequence[float],
                 tol: float = DEFAULT_CONFIG.angle_tol) -> bool:
    """Elementwise angle_close for equal-length angle tuples."""
    if len(a) != len(b):
        raise ValueError(f"Cannot compare {len(a)} angles with {len(b)}")
    return all(angle_close(x, y, tol) for x, y in zip(a, b))


# =============================================================================
# QUATERNIONS
# =============================================================================

def quaternion_close(p, q, tol: float = DEFAULT_CONFIG.abs_tol) -> bool:
    """Raw componentwise equality: q and -q are different values."""
    return vector_close(p, q, tol)


def rotation_close(p, q, tol: float = DEFAULT_CONFIG.abs_tol) -> bool:
    """
    Rotation-equivalence: true if p ~ q or p ~ -q.

    Quaternions double-cover the rotation group, so both signs encode the
    same spatial rotation.
    """
    p_arr = _as_components(p)
    q_arr = _as_components(q)
    return vector_close(p_arr, q_arr, tol) or vector_close(p_arr, -q_arr, tol)
