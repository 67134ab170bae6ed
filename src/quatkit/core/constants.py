"""
===============================================================================
QUATKIT - Mathematical Constants and Default Tolerances
===============================================================================
Central repository for the constants shared by the rotation algebra.
Angles are in radians throughout; the degree factors exist only for
display and for callers converting their own inputs.

The tolerances below are the library defaults. They can be overridden
per call (every comparison takes an explicit tolerance) or loaded from a
YAML file via quatkit.core.config.
===============================================================================
"""

import numpy as np


# =============================================================================
# MATHEMATICAL CONSTANTS
# =============================================================================
PI = np.pi
TWO_PI = 2.0 * np.pi
HALF_PI = 0.5 * np.pi
DEG2RAD = PI / 180.0
RAD2DEG = 180.0 / PI

# =============================================================================
# DEFAULT NUMERIC TOLERANCES
# =============================================================================
ABS_TOLERANCE = 1e-9          # Generic approximate equality
ANGLE_TOLERANCE = 1e-9        # Wrapped (mod 2*pi) angular equality
ZERO_TOLERANCE = 1e-12        # Below this length a vector/quaternion is "zero"
ANTIPODAL_TOLERANCE = 1e-12   # from_to: |u x v| below this (with u.v < 0) is antipodal
GIMBAL_TOLERANCE = 1e-12      # YPR decode: 1 - |sin(pitch)| below this is lock
