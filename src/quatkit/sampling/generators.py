"""
===============================================================================
QUATKIT - Seeded Value Generators
===============================================================================
Reproducible random inputs for property-style checks of the rotation
algebra: scalars, angles, vectors, unit vectors, quaternions, unit
quaternions and yaw-pitch-roll triples.

Every generator is a zero-argument callable bound to one Sampler, so
generators compose: Sampler.map() layers a constraint or transformation on
top of an existing generator, and Sampler.draw() collects a batch.

    >>> sampler = Sampler(seed=42)
    >>> axes = sampler.map(sampler.vector, lambda v: v.normalize())
    >>> batch = sampler.draw(axes, 10)

Uniform rotations come from Shoemake's subgroup algorithm: simply
normalizing a random 4-vector does NOT produce a uniform distribution
over SO(3).

References
----------
    [1] Shoemake, "Uniform Random Rotations", Graphics Gems III, 1992.
    [2] Marsaglia, "Choosing a Point from the Surface of a Sphere",
        Ann. Math. Stat., 1972.
===============================================================================
"""

import logging
from typing import Callable, List, Optional, Tuple, TypeVar

import numpy as np

from quatkit.core.config import DEFAULT_CONFIG
from quatkit.core.constants import HALF_PI, PI, TWO_PI
from quatkit.core.quaternion import Quaternion
from quatkit.core.vector3 import Vector3

logger = logging.getLogger(__name__)

T = TypeVar('T')
U = TypeVar('U')


class Sampler:
    """
    Source of reproducible random rotation-algebra values.

    Parameters
    ----------
    seed : int, optional
        Master random seed for reproducibility. None draws fresh entropy.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = np.random.RandomState(seed)
        logger.debug("Sampler initialized with seed=%s", seed)

    # =========================================================================
    # SCALARS
    # =========================================================================

    def scalar(self, low: float = -10.0, high: float = 10.0) -> float:
        """Uniform float in [low, high)."""
        return float(self._rng.uniform(low, high))

    def angle(self) -> float:
        """Uniform angle in [-pi, pi)."""
        return self.scalar(-PI, PI)

    # =========================================================================
    # VECTORS
    # =========================================================================

    def vector(self, scale: float = 10.0) -> Vector3:
        """Vector with components uniform in [-scale, scale)."""
        return Vector3.from_array(self._rng.uniform(-scale, scale, size=3))

    def unit_vector(self) -> Vector3:
        """Unit vector uniformly distributed on the sphere."""
        while True:
            g = self._rng.normal(0.0, 1.0, size=3)
            n = np.linalg.norm(g)
            if n > DEFAULT_CONFIG.zero_tol:
                return Vector3.from_array(g / n)

    # =========================================================================
    # QUATERNIONS
    # =========================================================================

    def quaternion(self, scale: float = 10.0) -> Quaternion:
        """General quaternion with components uniform in [-scale, scale)."""
        return Quaternion.from_tuple(self._rng.uniform(-scale, scale, size=4))

    def nonzero_quaternion(self, scale: float = 10.0) -> Quaternion:
        """General quaternion guaranteed to be safely normalizable."""
        while True:
            q = self.quaternion(scale)
            if q.length() > 1e-6:
                return q

    def unit_quaternion(self) -> Quaternion:
        """
        Uniformly random unit quaternion (Shoemake's method).

        Both signs are produced, so the result is not canonicalized.
        """
        u1, u2, u3 = self._rng.random_sample(3)

        sqrt_u1 = np.sqrt(u1)
        sqrt_1_minus_u1 = np.sqrt(1.0 - u1)

        s = sqrt_1_minus_u1 * np.sin(TWO_PI * u2)
        i = sqrt_1_minus_u1 * np.cos(TWO_PI * u2)
        j = sqrt_u1 * np.sin(TWO_PI * u3)
        k = sqrt_u1 * np.cos(TWO_PI * u3)

        return Quaternion(s, i, j, k)

    def yaw_pitch_roll(self, margin: float = 1e-3) -> Tuple[float, float, float]:
        """
        (yaw, pitch, roll) with yaw, roll in [-pi, pi) and pitch kept at
        least *margin* radians away from the +/-pi/2 gimbal lock.
        """
        if not 0.0 <= margin < HALF_PI:
            raise ValueError(f"margin must be in [0, pi/2), got {margin}")
        yaw = self.angle()
        pitch = self.scalar(-HALF_PI + margin, HALF_PI - margin)
        roll = self.angle()
        return (yaw, pitch, roll)

    # =========================================================================
    # COMPOSITION
    # =========================================================================

    def map(self, generator: Callable[[], T], fn: Callable[[T], U]) -> Callable[[], U]:
        """Return a generator producing fn(generator())."""
        def mapped() -> U:
            return fn(generator())
        return mapped

    def draw(self, generator: Callable[[], T], n: int) -> List[T]:
        """Collect n samples from a generator."""
        if n < 0:
            raise ValueError(f"Sample count must be non-negative, got {n}")
        return [generator() for _ in range(n)]

    def __repr__(self) -> str:
        return f"Sampler(seed={self.seed!r})"
