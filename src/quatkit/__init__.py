"""
Quatkit - quaternion algebra for representing and composing 3D rotations.

Core Components
---------------
Quaternion : Value type with Hamilton product and rotation conversions
Vector3 : Immutable 3-vector
Matrix4 : Immutable 4x4 homogeneous transform
Sampler : Seeded generators for property-style testing

Examples
--------
>>> from quatkit import Quaternion, Z_AXIS
>>> q = Quaternion.from_angle_axis(1.0, Z_AXIS)
>>> yaw, pitch, roll = q.to_yaw_pitch_roll()
"""

import logging

__version__ = "0.1.0"

from quatkit.core.approx import (
    angle_close,
    angles_close,
    quaternion_close,
    rotation_close,
    scalar_close,
    vector_close,
    wrap_angle,
)
from quatkit.core.config import DEFAULT_CONFIG, NumericConfig, load_config
from quatkit.core.errors import ConfigError, QuatkitError, ZeroLengthError
from quatkit.core.matrix4 import Matrix4
from quatkit.core.quaternion import (
    BASIS_I,
    BASIS_J,
    BASIS_K,
    UNIT,
    Quaternion,
    from_angle_axis,
    from_mat4,
    from_to,
    from_yaw_pitch_roll,
    get_angle,
    get_axis,
    hamilton,
    to_mat4,
    to_yaw_pitch_roll,
    vrotate,
)
from quatkit.core.vector3 import X_AXIS, Y_AXIS, Z_AXIS, Vector3
from quatkit.sampling import Sampler

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core types
    "Quaternion",
    "Vector3",
    "Matrix4",
    # Named values
    "UNIT",
    "BASIS_I",
    "BASIS_J",
    "BASIS_K",
    "X_AXIS",
    "Y_AXIS",
    "Z_AXIS",
    # Functional API
    "hamilton",
    "from_angle_axis",
    "get_angle",
    "get_axis",
    "from_to",
    "vrotate",
    "to_mat4",
    "from_mat4",
    "from_yaw_pitch_roll",
    "to_yaw_pitch_roll",
    # Comparison
    "scalar_close",
    "vector_close",
    "wrap_angle",
    "angle_close",
    "angles_close",
    "quaternion_close",
    "rotation_close",
    # Configuration and errors
    "NumericConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "QuatkitError",
    "ZeroLengthError",
    "ConfigError",
    # Testing support
    "Sampler",
]
