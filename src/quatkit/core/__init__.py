"""
===============================================================================
QUATKIT - Core Module
===============================================================================
The quaternion algebra and its collaborator value types.

Submodules:
    constants  -- Mathematical constants and default tolerances
    errors     -- Error taxonomy (ZeroLengthError, ConfigError)
    config     -- NumericConfig and YAML loading
    approx     -- Scalar / vector / angle / quaternion approximate equality
    vector3    -- Immutable 3-vector
    matrix4    -- Immutable 4x4 homogeneous transform
    quaternion -- Quaternion type, Hamilton product, rotation conversions
===============================================================================
"""
